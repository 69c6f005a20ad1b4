# 📄 File: subscription_lifecycle/modules/subscription_management/domain/repositories/subscription_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines what subscription-related database operations the service is allowed to ask for,
# like finding a user's subscriptions or saving a changed one, without saying how they are stored.
# 🧪 Purpose (Technical Summary):
# Abstract repository interface (data-access contract) consumed by SubscriptionService:
# lookups, insert/update/upsert and delete, all synchronous and constraint-enforcing.
# 🔗 Dependencies:
# - abc (Abstract Base Classes)
# - Subscription domain model
# 🔄 Connected Modules / Calls From:
# - SubscriptionService (business logic)
# - SqlAlchemySubscriptionRepository (concrete implementation)

from abc import ABC, abstractmethod
from typing import List, Optional

from subscription_lifecycle.modules.subscription_management.domain.models.subscription import Subscription


class SubscriptionRepository(ABC):
    """
    Abstract repository interface for subscription data access operations.

    Implementations raise ConstraintViolationError when a write breaks a
    uniqueness or integrity rule, and apply their own timeout policy.

    Concurrency: the service performs unsynchronized read-then-write
    sequences. An implementation that needs to rule out lost updates
    between concurrent cancel/expire calls should add a version column
    and make ``update`` conditional on it (raising a conflict when no
    row matched), or take row locks inside ``find_by_id``.
    """

    @abstractmethod
    def find_all(self) -> List[Subscription]:
        """Get every stored subscription."""
        pass

    @abstractmethod
    def find_by_id(self, subscription_id: int) -> Optional[Subscription]:
        """Get subscription by ID, or None."""
        pass

    @abstractmethod
    def find_by_user_id(self, user_id: int) -> List[Subscription]:
        """Get all subscriptions owned by a user, in no particular order."""
        pass

    @abstractmethod
    def insert(self, subscription: Subscription) -> Subscription:
        """Persist a new subscription and return it with its assigned ID."""
        pass

    @abstractmethod
    def update(self, subscription: Subscription) -> Subscription:
        """Overwrite every field of the stored subscription with the same ID."""
        pass

    @abstractmethod
    def delete(self, subscription_id: int) -> bool:
        """Delete subscription. Returns True if a row was removed."""
        pass

    def upsert(self, subscription: Subscription) -> Subscription:
        """Insert when the subscription has no ID yet, otherwise update."""
        if subscription.id is None:
            return self.insert(subscription)
        return self.update(subscription)
