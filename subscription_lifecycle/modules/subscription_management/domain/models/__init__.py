# 📄 File: subscription_lifecycle/modules/subscription_management/domain/models/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the core subscription data model and the fixed lists of providers and statuses
# 🧪 Purpose (Technical Summary):
# Package initialization for domain models containing the Subscription entity and its enums
# 🔗 Dependencies:
# Domain model classes, enums, pydantic base models
# 🔄 Connected Modules / Calls From:
# Domain services, repositories, application layer, infrastructure layer

from .subscription import (
    Provider,
    Subscription,
    SubscriptionStatus,
)

__all__ = [
    "Provider",
    "Subscription",
    "SubscriptionStatus",
]
