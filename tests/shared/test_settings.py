"""
Settings validation and derived properties.
"""

import pytest
from pydantic import ValidationError
from sqlalchemy.pool import StaticPool

from subscription_lifecycle.shared.config.database import DatabaseConfig
from subscription_lifecycle.shared.config.settings import Settings


def test_values_are_normalized():
    settings = Settings(ENVIRONMENT="TEST", LOG_LEVEL="debug", LOG_FORMAT="TEXT")

    assert settings.ENVIRONMENT == "test"
    assert settings.LOG_LEVEL == "DEBUG"
    assert settings.LOG_FORMAT == "text"
    assert settings.is_testing
    assert not settings.is_production


@pytest.mark.parametrize(
    "field, value",
    [("ENVIRONMENT", "qa"), ("LOG_LEVEL", "VERBOSE"), ("LOG_FORMAT", "xml")],
)
def test_invalid_values_are_rejected(field, value):
    with pytest.raises(ValidationError):
        Settings(**{field: value})


def test_sqlite_detection():
    assert Settings(DATABASE_URL="sqlite://").is_sqlite
    assert not Settings(DATABASE_URL="postgresql://localhost/subscriptions").is_sqlite


def test_in_memory_sqlite_uses_a_static_pool():
    engine_kwargs = DatabaseConfig(Settings(DATABASE_URL="sqlite://")).engine_kwargs

    assert engine_kwargs["poolclass"] is StaticPool
    assert engine_kwargs["connect_args"] == {"check_same_thread": False}


def test_server_backends_get_pool_settings():
    settings = Settings(DATABASE_URL="postgresql://localhost/subscriptions", DB_POOL_SIZE=3)

    engine_kwargs = DatabaseConfig(settings).engine_kwargs

    assert engine_kwargs["pool_size"] == 3
    assert engine_kwargs["pool_pre_ping"] is True


@pytest.mark.parametrize(
    "url, expected",
    [
        ("sqlite://", True),
        ("sqlite:///:memory:", True),
        ("sqlite+pysqlite://", True),
        ("sqlite:///./subscriptions.db", False),
        ("postgresql://localhost/subscriptions", False),
    ],
)
def test_in_memory_sqlite_detection(url, expected):
    assert Settings(DATABASE_URL=url).is_in_memory_sqlite is expected


def test_file_sqlite_keeps_the_default_pool():
    engine_kwargs = DatabaseConfig(Settings(DATABASE_URL="sqlite:///./subscriptions.db")).engine_kwargs

    assert "poolclass" not in engine_kwargs


def test_dispose_resets_the_cached_engine():
    config = DatabaseConfig(Settings(DATABASE_URL="sqlite://"))
    engine = config.create_engine()

    config.dispose()

    assert config.create_engine() is not engine
