from .create_subscription_validator import (
    CreateSubscriptionValidator,
    Error,
    ValidationResult,
)

__all__ = [
    "CreateSubscriptionValidator",
    "Error",
    "ValidationResult",
]
