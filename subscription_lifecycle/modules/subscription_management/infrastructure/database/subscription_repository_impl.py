# 📄 File: subscription_lifecycle/modules/subscription_management/infrastructure/database/subscription_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# This file handles the actual database work for subscriptions - saving new ones, changing
# existing ones, looking them up and deleting them.
# 🧪 Purpose (Technical Summary):
# SQLAlchemy-based implementation of the SubscriptionRepository interface over a synchronous Session,
# translating IntegrityError into ConstraintViolationError and other driver failures into DatabaseError.
# 🔗 Dependencies:
# SQLAlchemy, subscription_lifecycle.shared.core.exceptions, logging
# 🔄 Connected Modules / Calls From:
# SubscriptionService (through the repository interface), composition root

import logging
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from subscription_lifecycle.modules.subscription_management.domain.models.subscription import (
    Provider,
    Subscription,
    SubscriptionStatus,
)
from subscription_lifecycle.modules.subscription_management.domain.repositories.subscription_repository import SubscriptionRepository
from subscription_lifecycle.modules.subscription_management.infrastructure.database.models import SubscriptionModel
from subscription_lifecycle.shared.core.exceptions import (
    ConstraintViolationError,
    DatabaseError,
    NotFoundError,
)

logger = logging.getLogger(__name__)


class SqlAlchemySubscriptionRepository(SubscriptionRepository):
    """
    SQLAlchemy implementation of subscription repository.

    Writes are flushed immediately so IDs and constraint violations surface
    inside the call; committing is left to the session owner.
    """

    def __init__(self, session: Session):
        self.session = session

    # =========================================================================
    # QUERIES
    # =========================================================================

    def find_all(self) -> List[Subscription]:
        try:
            result = self.session.execute(select(SubscriptionModel).order_by(SubscriptionModel.id))
            return [self._to_domain(model) for model in result.scalars().all()]
        except SQLAlchemyError as e:
            logger.error(f"Error listing subscriptions: {e}")
            raise DatabaseError(f"Failed to list subscriptions: {e}", operation="find_all")

    def find_by_id(self, subscription_id: int) -> Optional[Subscription]:
        try:
            model = self.session.get(SubscriptionModel, subscription_id)
        except SQLAlchemyError as e:
            logger.error(f"Error getting subscription {subscription_id}: {e}")
            raise DatabaseError(f"Failed to get subscription: {e}", operation="find_by_id")

        return self._to_domain(model) if model is not None else None

    def find_by_user_id(self, user_id: int) -> List[Subscription]:
        try:
            result = self.session.execute(
                select(SubscriptionModel)
                .where(SubscriptionModel.user_id == user_id)
                .order_by(SubscriptionModel.id)
            )
            return [self._to_domain(model) for model in result.scalars().all()]
        except SQLAlchemyError as e:
            logger.error(f"Error getting subscriptions for user {user_id}: {e}")
            raise DatabaseError(f"Failed to get subscriptions for user: {e}", operation="find_by_user_id")

    # =========================================================================
    # WRITES
    # =========================================================================

    def insert(self, subscription: Subscription) -> Subscription:
        model = SubscriptionModel()
        self._apply(model, subscription)
        self.session.add(model)
        self._flush("insert")

        logger.info(f"Created subscription {model.id} for user {model.user_id}")
        return self._to_domain(model)

    def update(self, subscription: Subscription) -> Subscription:
        if subscription.id is None:
            raise NotFoundError("Cannot update a subscription without an id", resource_type="subscription")

        try:
            model = self.session.get(SubscriptionModel, subscription.id)
        except SQLAlchemyError as e:
            logger.error(f"Error loading subscription {subscription.id} for update: {e}")
            raise DatabaseError(f"Failed to update subscription: {e}", operation="update")

        if model is None:
            raise NotFoundError(
                f"Subscription {subscription.id} not found",
                resource_type="subscription",
                resource_id=subscription.id,
            )

        self._apply(model, subscription)
        self._flush("update")

        logger.info(f"Updated subscription {model.id}")
        return self._to_domain(model)

    def delete(self, subscription_id: int) -> bool:
        try:
            model = self.session.get(SubscriptionModel, subscription_id)
        except SQLAlchemyError as e:
            logger.error(f"Error loading subscription {subscription_id} for delete: {e}")
            raise DatabaseError(f"Failed to delete subscription: {e}", operation="delete")

        if model is None:
            return False

        self.session.delete(model)
        self._flush("delete")

        logger.info(f"Deleted subscription {subscription_id}")
        return True

    # =========================================================================
    # HELPERS
    # =========================================================================

    def _flush(self, operation: str) -> None:
        try:
            self.session.flush()
        except IntegrityError as e:
            self.session.rollback()
            logger.warning(f"Constraint violated during subscription {operation}: {e.orig}")
            raise ConstraintViolationError(
                f"Subscription {operation} violates a storage constraint",
                constraint=str(e.orig),
                entity="subscription",
            ) from e
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.error(f"Error during subscription {operation}: {e}")
            raise DatabaseError(f"Failed to {operation} subscription: {e}", operation=operation)

    @staticmethod
    def _apply(model: SubscriptionModel, subscription: Subscription) -> None:
        """Copy every mutable field of the domain object onto the row."""
        model.user_id = subscription.user_id
        model.name = subscription.name
        model.provider = subscription.provider.value
        model.expiration_date = subscription.expiration_date
        model.status = subscription.status.value

    @staticmethod
    def _to_domain(model: SubscriptionModel) -> Subscription:
        return Subscription(
            id=model.id,
            user_id=model.user_id,
            name=model.name,
            provider=Provider(model.provider),
            expiration_date=model.expiration_date,
            status=SubscriptionStatus(model.status),
        )
