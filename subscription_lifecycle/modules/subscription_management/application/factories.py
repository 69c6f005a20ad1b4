# 📄 File: subscription_lifecycle/modules/subscription_management/application/factories.py
# 🧭 Purpose (Layman Explanation):
# Puts the subscription service together from its parts (storage, checker, converter, clock)
# so callers get a ready-to-use service for one database session.
# 🧪 Purpose (Technical Summary):
# Composition root with explicit dependency injection: builds stateless collaborators once
# and passes them by reference to SubscriptionService. No module-level singletons.
# 🔗 Dependencies:
# SQLAlchemy Session, subscription module components, shared clock
# 🔄 Connected Modules / Calls From:
# HTTP/CLI callers, integration tests

from typing import Optional

from sqlalchemy.orm import Session

from subscription_lifecycle.modules.subscription_management.application.mappers.create_subscription_mapper import CreateSubscriptionMapper
from subscription_lifecycle.modules.subscription_management.application.validators.create_subscription_validator import CreateSubscriptionValidator
from subscription_lifecycle.modules.subscription_management.domain.services.subscription_service import SubscriptionService
from subscription_lifecycle.modules.subscription_management.infrastructure.database.subscription_repository_impl import SqlAlchemySubscriptionRepository
from subscription_lifecycle.shared.core.clock import Clock, SystemClock


def build_subscription_service(session: Session, clock: Optional[Clock] = None) -> SubscriptionService:
    """
    Wire a SubscriptionService bound to one database session.

    Args:
        session: Session the repository reads and writes through
        clock: Time source for expiration checks, wall clock when omitted
    """
    return SubscriptionService(
        subscription_repository=SqlAlchemySubscriptionRepository(session),
        create_subscription_mapper=CreateSubscriptionMapper(),
        create_subscription_validator=CreateSubscriptionValidator(clock or SystemClock()),
    )
