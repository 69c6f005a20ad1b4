# 📄 File: subscription_lifecycle/shared/core/clock.py
# 🧭 Purpose (Layman Explanation):
# Gives the service a single place to ask "what time is it now?", so tests can
# freeze time instead of depending on the real wall clock.
# 🧪 Purpose (Technical Summary):
# Injectable time source abstraction with a wall-clock implementation and a fixed
# implementation, always yielding timezone-aware UTC datetimes.
# 🔗 Dependencies:
# abc, datetime
# 🔄 Connected Modules / Calls From:
# CreateSubscriptionValidator (expiration checks), composition root, test fixtures

from abc import ABC, abstractmethod
from datetime import datetime, timezone


def ensure_utc(value: datetime) -> datetime:
    """Interpret naive datetimes as UTC and normalize aware ones to UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class Clock(ABC):
    """Source of the current instant."""

    @abstractmethod
    def now(self) -> datetime:
        """Return the current instant as an aware UTC datetime."""
        pass


class SystemClock(Clock):
    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class FixedClock(Clock):
    """Clock frozen at a given instant."""

    def __init__(self, instant: datetime):
        self._instant = ensure_utc(instant)

    def now(self) -> datetime:
        return self._instant

    def __repr__(self) -> str:
        return f"FixedClock({self._instant.isoformat()})"
