# 📄 File: subscription_lifecycle/modules/subscription_management/domain/models/subscription.py
# 🧭 Purpose (Layman Explanation):
# Defines what a subscription is: who owns it, which payment provider it comes from,
# when it runs out, and whether it is active, canceled or expired.
# 🧪 Purpose (Technical Summary):
# Domain model for the Subscription entity with closed Provider and SubscriptionStatus enums
# and the one-way ACTIVE -> CANCELED / ACTIVE -> EXPIRED lifecycle transitions.
# 🔗 Dependencies:
# pydantic, datetime, typing, enum, subscription_lifecycle.shared.core
# 🔄 Connected Modules / Calls From:
# CreateSubscriptionMapper, SubscriptionService, SubscriptionRepository implementations

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator

from subscription_lifecycle.shared.core.clock import ensure_utc
from subscription_lifecycle.shared.core.exceptions import SubscriptionStateError


class Provider(str, Enum):
    """External payment providers a subscription can originate from."""
    GOOGLE = "GOOGLE"
    APPLE = "APPLE"

    @classmethod
    def find(cls, name: Optional[str]) -> Optional["Provider"]:
        """Return the member whose name matches exactly, or None."""
        if name is None:
            return None
        return cls.__members__.get(name)

    @classmethod
    def get_by_name(cls, name: str) -> "Provider":
        provider = cls.find(name)
        if provider is None:
            raise ValueError(f"Unknown provider: {name!r}")
        return provider


class SubscriptionStatus(str, Enum):
    """Subscription lifecycle states. CANCELED and EXPIRED are terminal."""
    ACTIVE = "ACTIVE"
    CANCELED = "CANCELED"
    EXPIRED = "EXPIRED"

    @property
    def is_terminal(self) -> bool:
        return self is not SubscriptionStatus.ACTIVE


class Subscription(BaseModel):
    """
    Subscription domain model.

    - id (int): Storage-assigned identifier, None until inserted
    - user_id (int): Owning user
    - name (str): Display name
    - provider (Provider): Payment provider
    - expiration_date (datetime): Expiration instant, stored as aware UTC
    - status (SubscriptionStatus): Lifecycle state, ACTIVE on creation
    """

    model_config = ConfigDict(validate_assignment=True)

    id: Optional[int] = None
    user_id: int
    name: str
    provider: Provider
    expiration_date: datetime
    status: SubscriptionStatus = SubscriptionStatus.ACTIVE

    @field_validator('expiration_date')
    @classmethod
    def normalize_expiration_date(cls, v: datetime) -> datetime:
        """Keep every instant timezone-aware in UTC"""
        return ensure_utc(v)

    @property
    def is_active(self) -> bool:
        return self.status == SubscriptionStatus.ACTIVE

    def cancel(self) -> None:
        """Move an active subscription to CANCELED."""
        self._transition_to(SubscriptionStatus.CANCELED)

    def expire(self) -> None:
        """Move an active subscription to EXPIRED."""
        self._transition_to(SubscriptionStatus.EXPIRED)

    def _transition_to(self, target: SubscriptionStatus) -> None:
        if not self.is_active:
            raise SubscriptionStateError(
                current_status=self.status,
                target_status=target,
                subscription_id=self.id,
            )
        self.status = target
