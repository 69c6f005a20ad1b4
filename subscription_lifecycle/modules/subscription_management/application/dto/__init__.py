from .subscription_dto import CreateSubscriptionDTO

__all__ = ["CreateSubscriptionDTO"]
