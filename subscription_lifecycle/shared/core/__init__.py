"""
Core utilities package for the subscription lifecycle service.
Provides the exception hierarchy and the injectable clock.
"""

from .clock import Clock, FixedClock, SystemClock, ensure_utc

from .exceptions import (
    SubscriptionLifecycleException,
    ValidationError,
    NotFoundError,
    SubscriptionStateError,
    ConstraintViolationError,
    DatabaseError,
    TransactionError,
    exception_to_dict,
    is_client_error,
    is_server_error,
)

__all__ = [
    # Clock
    "Clock",
    "FixedClock",
    "SystemClock",
    "ensure_utc",

    # Exceptions
    "SubscriptionLifecycleException",
    "ValidationError",
    "NotFoundError",
    "SubscriptionStateError",
    "ConstraintViolationError",
    "DatabaseError",
    "TransactionError",
    "exception_to_dict",
    "is_client_error",
    "is_server_error",
]
