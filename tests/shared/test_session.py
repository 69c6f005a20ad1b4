"""
DatabaseSessionManager transaction handling against in-memory SQLite.
"""

from datetime import datetime, timezone

import pytest
from sqlalchemy import func, select

from subscription_lifecycle.modules.subscription_management.infrastructure.database.models import SubscriptionModel
from subscription_lifecycle.shared.core.exceptions import DatabaseError, NotFoundError
from subscription_lifecycle.shared.infrastructure.database.session import DatabaseSessionManager

FUTURE_EXPIRATION = datetime(2025, 12, 3, 10, 15, 30, tzinfo=timezone.utc)


def _row(name="Alex"):
    return SubscriptionModel(
        user_id=1,
        name=name,
        provider="GOOGLE",
        expiration_date=FUTURE_EXPIRATION,
        status="ACTIVE",
    )


def _count(session_manager):
    with session_manager.get_session() as session:
        return session.execute(select(func.count()).select_from(SubscriptionModel)).scalar_one()


def test_clean_exit_commits(session_manager):
    with session_manager.get_session() as session:
        session.add(_row())

    assert _count(session_manager) == 1


def test_domain_error_rolls_back_and_propagates(session_manager):
    with pytest.raises(NotFoundError):
        with session_manager.get_session() as session:
            session.add(_row())
            session.flush()
            raise NotFoundError()

    assert _count(session_manager) == 0


def test_unexpected_error_rolls_back_and_propagates(session_manager):
    with pytest.raises(RuntimeError):
        with session_manager.get_session() as session:
            session.add(_row())
            session.flush()
            raise RuntimeError("boom")

    assert _count(session_manager) == 0


def test_uninitialized_manager_raises(test_settings):
    manager = DatabaseSessionManager(test_settings)

    assert not manager.is_initialized()
    with pytest.raises(DatabaseError):
        with manager.get_session():
            pass


def test_close_resets_state(test_settings):
    manager = DatabaseSessionManager(test_settings)
    manager.initialize()

    manager.close()

    assert not manager.is_initialized()
