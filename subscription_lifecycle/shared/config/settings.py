# 📄 File: subscription_lifecycle/shared/config/settings.py
#
# 🧭 Purpose (Layman Explanation):
# One place that reads the service's knobs (which database to use, how chatty the logs are,
# which environment we run in) from environment variables or a .env file.
#
# 🧪 Purpose (Technical Summary):
# pydantic-settings model for the subscription lifecycle service. Values are validated and
# normalized on load (lowercase environment/format, uppercase level) and exposed through a
# cached get_settings() accessor.
#
# 🔗 Dependencies:
# - pydantic-settings (BaseSettings, .env loading through python-dotenv)
# - pydantic (Field, field_validator)
#
# 🔄 Connected Modules / Calls From:
# - subscription_lifecycle.shared.config.database (engine and pool options)
# - subscription_lifecycle.shared.utils.logging (log level, format and file)
# - DatabaseSessionManager and test fixtures (explicit Settings instances)

from functools import lru_cache
from typing import Optional, Sequence

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENVIRONMENTS = ("development", "staging", "production", "test")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMATS = ("json", "text")


def _normalize_choice(value: str, choices: Sequence[str], upper: bool = False) -> str:
    normalized = value.upper() if upper else value.lower()
    if normalized not in choices:
        raise ValueError(f"{value!r} is not one of {list(choices)}")
    return normalized


class Settings(BaseSettings):
    """
    Runtime configuration for the subscription lifecycle service.

    Every field can be set through an environment variable of the same
    name or a line in ``.env``; unknown variables are ignored.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Service identity
    APP_NAME: str = Field(default="Subscription Lifecycle", description="Name reported in startup logs")
    APP_VERSION: str = Field(default="1.0.0", description="Service version")
    ENVIRONMENT: str = Field(default="development", description=f"One of {ENVIRONMENTS}")
    DEBUG: bool = Field(default=False, description="Verbose diagnostics")

    # Logging
    LOG_LEVEL: str = Field(default="INFO", description=f"One of {LOG_LEVELS}")
    LOG_FORMAT: str = Field(default="json", description="json for shippers, text for terminals")
    LOG_FILE: Optional[str] = Field(default=None, description="Also write logs to this file")

    # Subscription storage
    DATABASE_URL: str = Field(
        default="sqlite:///./subscriptions.db",
        description="SQLAlchemy URL of the subscription store; sqlite:// keeps it in memory"
    )
    DB_ECHO: bool = Field(default=False, description="Log every SQL statement")

    # Pool sizing, ignored for SQLite
    DB_POOL_SIZE: int = Field(default=10, ge=1, description="Persistent connections kept open")
    DB_MAX_OVERFLOW: int = Field(default=20, ge=0, description="Extra connections allowed under load")
    DB_POOL_TIMEOUT: int = Field(default=30, ge=1, description="Seconds to wait for a free connection")
    DB_POOL_RECYCLE: int = Field(default=3600, description="Seconds before a connection is replaced")

    @field_validator("ENVIRONMENT")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        return _normalize_choice(v, ENVIRONMENTS)

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        return _normalize_choice(v, LOG_LEVELS, upper=True)

    @field_validator("LOG_FORMAT")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        return _normalize_choice(v, LOG_FORMATS)

    @property
    def database_url(self) -> str:
        return self.DATABASE_URL

    @property
    def is_sqlite(self) -> bool:
        return self.DATABASE_URL.startswith("sqlite")

    @property
    def is_in_memory_sqlite(self) -> bool:
        """True for URLs whose database lives on a single in-process connection."""
        url = self.DATABASE_URL
        return self.is_sqlite and (":memory:" in url or url.rstrip("/").endswith(("sqlite:", "sqlite+pysqlite:")))

    @property
    def is_development(self) -> bool:
        return self.ENVIRONMENT == "development"

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT == "production"

    @property
    def is_testing(self) -> bool:
        return self.ENVIRONMENT == "test"


@lru_cache()
def get_settings() -> Settings:
    """Load Settings once per process and reuse them."""
    return Settings()
