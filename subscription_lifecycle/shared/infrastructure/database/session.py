# 📄 File: subscription_lifecycle/shared/infrastructure/database/session.py
#
# 🧭 Purpose (Layman Explanation):
# Manages database sessions (like conversations with the database) making sure each unit of work
# gets its own clean session and that failed work is rolled back instead of half-saved.
#
# 🧪 Purpose (Technical Summary):
# Implements synchronous SQLAlchemy session management with transaction handling,
# session lifecycle management and schema creation helpers.
#
# 🔗 Dependencies:
# - sqlalchemy.orm (Session, sessionmaker)
# - subscription_lifecycle.shared.config.database (engine and session factory)
# - subscription_lifecycle.shared.core.exceptions (DatabaseError, TransactionError)
#
# 🔄 Connected Modules / Calls From:
# - Composition root (build_subscription_service callers)
# - Integration tests creating in-memory databases

import logging
from contextlib import contextmanager
from typing import Iterator, Optional

from sqlalchemy import exc
from sqlalchemy.orm import Session, sessionmaker

from subscription_lifecycle.shared.config.database import DatabaseBase, DatabaseConfig
from subscription_lifecycle.shared.config.settings import Settings
from subscription_lifecycle.shared.core.exceptions import (
    DatabaseError,
    SubscriptionLifecycleException,
    TransactionError,
)

logger = logging.getLogger(__name__)


class DatabaseSessionManager:
    """
    Manages database sessions with transaction handling and automatic cleanup.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self._config = DatabaseConfig(settings)
        self._session_factory: Optional[sessionmaker[Session]] = None
        self._initialized = False

    def initialize(self) -> None:
        """Initialize the session factory with database engine."""
        try:
            self._session_factory = self._config.create_session_factory()
            self._initialized = True
            logger.info("Database session factory initialized successfully")

        except exc.SQLAlchemyError as e:
            logger.error(f"Failed to initialize database session factory: {e}")
            raise DatabaseError(f"Session initialization failed: {e}", operation="initialize")

    def _require_factory(self) -> sessionmaker[Session]:
        if not self._initialized or self._session_factory is None:
            raise DatabaseError("Session manager not initialized")
        return self._session_factory

    @contextmanager
    def get_session(self) -> Iterator[Session]:
        """
        Get a database session with automatic transaction management.

        Commits when the block exits cleanly. Domain errors raised inside
        the block roll the transaction back and propagate unchanged.

        Yields:
            Session: Database session

        Raises:
            DatabaseError: If the session manager is not initialized or SQLAlchemy fails
            TransactionError: If the commit itself fails
        """
        session: Session = self._require_factory()()

        try:
            logger.debug("Database session created")
            yield session

        except SubscriptionLifecycleException:
            session.rollback()
            logger.debug("Domain error raised, transaction rolled back")
            raise

        except exc.SQLAlchemyError as e:
            session.rollback()
            logger.error(f"Database error occurred, transaction rolled back: {e}")
            raise DatabaseError(f"Database operation failed: {e}")

        except Exception:
            session.rollback()
            logger.error("Unexpected error occurred, transaction rolled back", exc_info=True)
            raise

        else:
            try:
                session.commit()
                logger.debug("Database transaction committed successfully")
            except exc.SQLAlchemyError as e:
                session.rollback()
                logger.error(f"Commit failed, transaction rolled back: {e}")
                raise TransactionError(f"Transaction failed: {e}", operation="commit")

        finally:
            session.close()
            logger.debug("Database session closed")

    def create_tables(self) -> None:
        """Create all tables registered on DatabaseBase."""
        DatabaseBase.metadata.create_all(self._config.create_engine())

    def drop_tables(self) -> None:
        """Drop all tables registered on DatabaseBase."""
        DatabaseBase.metadata.drop_all(self._config.create_engine())

    def close(self) -> None:
        self._config.dispose()
        self._session_factory = None
        self._initialized = False

    def is_initialized(self) -> bool:
        """Check if session manager is initialized."""
        return self._initialized
