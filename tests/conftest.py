"""
Shared pytest fixtures: a frozen clock, in-memory SQLite sessions and
factories for subscription requests and records.
"""

from datetime import datetime, timezone

import pytest

from subscription_lifecycle.modules.subscription_management.application.dto.subscription_dto import CreateSubscriptionDTO
from subscription_lifecycle.modules.subscription_management.domain.models.subscription import (
    Provider,
    Subscription,
    SubscriptionStatus,
)
from subscription_lifecycle.modules.subscription_management.infrastructure.database.models import SubscriptionModel  # noqa: F401
from subscription_lifecycle.shared.config.settings import Settings
from subscription_lifecycle.shared.core.clock import FixedClock
from subscription_lifecycle.shared.infrastructure.database.session import DatabaseSessionManager

NOW = datetime(2024, 1, 1, 0, 0, 0, tzinfo=timezone.utc)
FUTURE_EXPIRATION = datetime(2025, 12, 3, 10, 15, 30, tzinfo=timezone.utc)
PAST_EXPIRATION = datetime(2020, 12, 3, 10, 15, 30, tzinfo=timezone.utc)


@pytest.fixture
def fixed_clock() -> FixedClock:
    """Clock pinned before FUTURE_EXPIRATION and after PAST_EXPIRATION."""
    return FixedClock(NOW)


@pytest.fixture
def test_settings() -> Settings:
    return Settings(ENVIRONMENT="test", DATABASE_URL="sqlite://", LOG_FORMAT="text")


@pytest.fixture
def session_manager(test_settings):
    manager = DatabaseSessionManager(test_settings)
    manager.initialize()
    manager.create_tables()
    yield manager
    manager.drop_tables()
    manager.close()


@pytest.fixture
def db_session(session_manager):
    with session_manager.get_session() as session:
        yield session


@pytest.fixture
def make_dto():
    """Build a valid CreateSubscriptionDTO, overriding any field."""
    def _make(**overrides) -> CreateSubscriptionDTO:
        data = {
            "user_id": 1,
            "name": "Alex",
            "provider": "GOOGLE",
            "expiration_date": FUTURE_EXPIRATION,
        }
        data.update(overrides)
        return CreateSubscriptionDTO(**data)
    return _make


@pytest.fixture
def make_subscription():
    """Build a Subscription record, overriding any field."""
    def _make(**overrides) -> Subscription:
        data = {
            "id": None,
            "user_id": 1,
            "name": "Alex",
            "provider": Provider.GOOGLE,
            "expiration_date": FUTURE_EXPIRATION,
            "status": SubscriptionStatus.ACTIVE,
        }
        data.update(overrides)
        return Subscription(**data)
    return _make
