# 📄 File: subscription_lifecycle/modules/subscription_management/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the subscription management system that creates, replaces, cancels and expires
# subscriptions coming from external payment providers.
# 🧪 Purpose (Technical Summary):
# Package initialization for the subscription management module, laid out with domain-driven design:
# domain (entities, repository contract, service), application (DTO, validator, mapper, factory)
# and infrastructure (SQLAlchemy persistence).
# 🔗 Dependencies:
# SQLAlchemy, pydantic, subscription_lifecycle.shared
# 🔄 Connected Modules / Calls From:
# HTTP/CLI callers, integration tests

"""
Subscription Management Module

Architecture follows Domain-Driven Design:
- Domain: Subscription entity, lifecycle rules, repository contract, service
- Application: Request DTO, validator, mapper, composition root
- Infrastructure: Data persistence
"""

from .application.dto.subscription_dto import CreateSubscriptionDTO
from .application.factories import build_subscription_service
from .domain.models.subscription import Provider, Subscription, SubscriptionStatus
from .domain.services.subscription_service import SubscriptionService

__all__ = [
    "CreateSubscriptionDTO",
    "Provider",
    "Subscription",
    "SubscriptionService",
    "SubscriptionStatus",
    "build_subscription_service",
]
