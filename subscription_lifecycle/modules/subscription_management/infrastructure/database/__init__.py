from .models import SubscriptionModel
from .subscription_repository_impl import SqlAlchemySubscriptionRepository

__all__ = [
    "SubscriptionModel",
    "SqlAlchemySubscriptionRepository",
]
