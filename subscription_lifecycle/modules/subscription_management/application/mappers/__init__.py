from .create_subscription_mapper import CreateSubscriptionMapper

__all__ = ["CreateSubscriptionMapper"]
