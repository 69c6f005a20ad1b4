# 📄 File: subscription_lifecycle/modules/subscription_management/domain/services/subscription_service.py
# 🧭 Purpose (Layman Explanation):
# This file contains the business rules for subscriptions - creating or replacing a user's
# subscription, and canceling or expiring one that is still active.
# 🧪 Purpose (Technical Summary):
# Stateless domain service orchestrating validation -> lookup -> map-or-reuse -> persist for upsert,
# and the ACTIVE -> CANCELED / ACTIVE -> EXPIRED transitions against freshly loaded state.
# 🔗 Dependencies:
# SubscriptionRepository, CreateSubscriptionValidator, CreateSubscriptionMapper,
# shared exceptions, structured logging
# 🔄 Connected Modules / Calls From:
# Composition root (build_subscription_service), HTTP/CLI callers

from typing import List

from subscription_lifecycle.modules.subscription_management.application.dto.subscription_dto import CreateSubscriptionDTO
from subscription_lifecycle.modules.subscription_management.application.mappers.create_subscription_mapper import CreateSubscriptionMapper
from subscription_lifecycle.modules.subscription_management.application.validators.create_subscription_validator import CreateSubscriptionValidator
from subscription_lifecycle.modules.subscription_management.domain.models.subscription import (
    Subscription,
    SubscriptionStatus,
)
from subscription_lifecycle.modules.subscription_management.domain.repositories.subscription_repository import SubscriptionRepository
from subscription_lifecycle.shared.core.exceptions import (
    NotFoundError,
    SubscriptionStateError,
    ValidationError,
)
from subscription_lifecycle.shared.utils.logging import get_logger, log_context

logger = get_logger(__name__)


class SubscriptionService:
    """
    Domain service for the subscription lifecycle.

    Holds no state between calls: every operation reloads what it needs
    from the repository. Read-then-write sequences are not atomic; see
    SubscriptionRepository for the concurrency extension point.
    """

    def __init__(
        self,
        subscription_repository: SubscriptionRepository,
        create_subscription_mapper: CreateSubscriptionMapper,
        create_subscription_validator: CreateSubscriptionValidator,
    ):
        self.subscription_repository = subscription_repository
        self.create_subscription_mapper = create_subscription_mapper
        self.create_subscription_validator = create_subscription_validator

    # =========================================================================
    # UPSERT
    # =========================================================================

    def upsert(self, dto: CreateSubscriptionDTO) -> Subscription:
        """
        Create a subscription for the user, or replace the user's current one in place.

        Args:
            dto: Untrusted create-subscription request

        Returns:
            Subscription: The persisted record, including its storage-assigned ID

        Raises:
            ValidationError: If the request fails validation (nothing is read or written)
            ConstraintViolationError: Propagated from the repository on a uniqueness breach
        """
        validation_result = self.create_subscription_validator.validate(dto)
        if validation_result.has_errors():
            logger.info(
                "Rejected subscription request",
                codes=[error.code for error in validation_result.errors],
            )
            raise ValidationError(validation_result.errors)

        mapped = self.create_subscription_mapper.map(dto)
        existing = self.subscription_repository.find_by_user_id(dto.user_id)

        if existing:
            subscription = existing[0]
            subscription.name = mapped.name
            subscription.provider = mapped.provider
            subscription.expiration_date = mapped.expiration_date
            subscription.status = mapped.status
        else:
            subscription = mapped

        saved = self.subscription_repository.upsert(subscription)

        logger.log_lifecycle_event(
            "subscription_upserted",
            f"Subscription {saved.id} upserted for user {saved.user_id}",
            subscription_id=saved.id,
            user_id=saved.user_id,
            replaced_existing=bool(existing),
        )
        return saved

    # =========================================================================
    # LIFECYCLE TRANSITIONS
    # =========================================================================

    def cancel(self, subscription_id: int) -> None:
        """
        Cancel an active subscription.

        Raises:
            NotFoundError: If no subscription has this ID
            SubscriptionStateError: If the subscription is already CANCELED or EXPIRED
        """
        self._transition(subscription_id, SubscriptionStatus.CANCELED)

    def expire(self, subscription_id: int) -> None:
        """
        Expire an active subscription.

        Raises:
            NotFoundError: If no subscription has this ID
            SubscriptionStateError: If the subscription is already CANCELED or EXPIRED
        """
        self._transition(subscription_id, SubscriptionStatus.EXPIRED)

    def _transition(self, subscription_id: int, target: SubscriptionStatus) -> None:
        with log_context(subscription_id=subscription_id):
            subscription = self.get_subscription(subscription_id)

            try:
                if target == SubscriptionStatus.CANCELED:
                    subscription.cancel()
                else:
                    subscription.expire()
            except SubscriptionStateError:
                logger.warning(
                    f"Illegal transition from {subscription.status.value} to {target.value}",
                    subscription_id=subscription_id,
                )
                raise

            self.subscription_repository.update(subscription)

            logger.log_lifecycle_event(
                f"subscription_{target.value.lower()}",
                f"Subscription {subscription_id} is now {target.value}",
                subscription_id=subscription_id,
                user_id=subscription.user_id,
            )

    # =========================================================================
    # QUERIES
    # =========================================================================

    def get_subscription(self, subscription_id: int) -> Subscription:
        subscription = self.subscription_repository.find_by_id(subscription_id)
        if subscription is None:
            raise NotFoundError(
                f"Subscription {subscription_id} not found",
                resource_type="subscription",
                resource_id=subscription_id,
            )
        return subscription

    def list_subscriptions(self) -> List[Subscription]:
        return self.subscription_repository.find_all()
