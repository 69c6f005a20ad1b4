# 📄 File: subscription_lifecycle/shared/config/database.py
#
# 🧭 Purpose (Layman Explanation):
# Knows how to open the subscription database: which driver options to use, how many
# connections to keep around, and the naming rules every table and constraint follows.
#
# 🧪 Purpose (Technical Summary):
# Synchronous SQLAlchemy engine and sessionmaker built lazily from Settings. SQLite gets
# check_same_thread=False (plus StaticPool when in memory); server backends get a QueuePool
# sized from settings. Declares the shared DeclarativeBase with a constraint naming convention.
#
# 🔗 Dependencies:
# - SQLAlchemy engine, sessionmaker and declarative base
# - subscription_lifecycle.shared.config.settings
#
# 🔄 Connected Modules / Calls From:
# - subscription_lifecycle.shared.infrastructure.database.session
# - SubscriptionModel (DatabaseBase)

from typing import Any, Dict, Optional

from sqlalchemy import MetaData, create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import QueuePool, StaticPool

from .settings import Settings, get_settings


class DatabaseConfig:
    """
    Lazily builds and caches one engine and one session factory.

    ``dispose()`` drops both, so the next call reconnects from scratch.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self._engine: Optional[Engine] = None
        self._session_factory: Optional[sessionmaker[Session]] = None

    @property
    def database_url(self) -> str:
        return self.settings.database_url

    @property
    def engine_kwargs(self) -> Dict[str, Any]:
        kwargs: Dict[str, Any] = {"echo": self.settings.DB_ECHO}

        if self.settings.is_sqlite:
            kwargs["connect_args"] = {"check_same_thread": False}
            # Every session must see the same in-memory database
            if self.settings.is_in_memory_sqlite:
                kwargs["poolclass"] = StaticPool
            return kwargs

        kwargs.update(
            poolclass=QueuePool,
            pool_size=self.settings.DB_POOL_SIZE,
            max_overflow=self.settings.DB_MAX_OVERFLOW,
            pool_timeout=self.settings.DB_POOL_TIMEOUT,
            pool_recycle=self.settings.DB_POOL_RECYCLE,
            pool_pre_ping=True,
        )
        return kwargs

    def create_engine(self) -> Engine:
        if self._engine is None:
            self._engine = create_engine(self.database_url, **self.engine_kwargs)
        return self._engine

    def create_session_factory(self) -> sessionmaker[Session]:
        """Session factory whose sessions keep loaded state after commit and never autoflush."""
        if self._session_factory is None:
            self._session_factory = sessionmaker(
                bind=self.create_engine(),
                expire_on_commit=False,
                autoflush=False,
            )
        return self._session_factory

    def dispose(self) -> None:
        if self._engine is not None:
            self._engine.dispose()
        self._engine = None
        self._session_factory = None


# Stable constraint names, e.g. ck_subscription_status
NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


class DatabaseBase(DeclarativeBase):
    """Declarative base for every ORM model of the service."""
    metadata = MetaData(naming_convention=NAMING_CONVENTION)
