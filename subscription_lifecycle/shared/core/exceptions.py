# 📄 File: subscription_lifecycle/shared/core/exceptions.py
# 🧭 Purpose (Layman Explanation):
# Names every way a subscription call can fail (bad input, unknown subscription, wrong status,
# duplicate record, broken database) so callers can react to each one and show a clear message.
# 🧪 Purpose (Technical Summary):
# Exception hierarchy rooted at SubscriptionLifecycleException. Each subclass fixes its HTTP status
# (400/404/409/500) and machine-readable error code and carries structured details, with
# serialization to a response body or a FastAPI HTTPException.
# 🔗 Dependencies:
# FastAPI HTTPException and status constants, typing
# 🔄 Connected Modules / Calls From:
# Subscription domain model and service, repository implementation, session manager,
# any HTTP or CLI caller translating failures into responses

from typing import TYPE_CHECKING, Any, Dict, List, Optional, Sequence

from fastapi import HTTPException, status

if TYPE_CHECKING:
    from subscription_lifecycle.modules.subscription_management.application.validators.create_subscription_validator import Error


def _with_fields(details: Optional[Dict[str, Any]], **fields: Any) -> Dict[str, Any]:
    """Merge the non-None ``fields`` into a copy of ``details``."""
    merged = dict(details or {})
    merged.update({key: value for key, value in fields.items() if value is not None})
    return merged


def _enum_value(value: Any) -> Any:
    return getattr(value, "value", value)


class SubscriptionLifecycleException(Exception):
    """
    Root of every error raised by the subscription lifecycle service.

    Subclasses pin ``status_code`` and ``error_code``; ``details`` holds
    whatever a caller needs to act on the failure.
    """

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    error_code: str = "INTERNAL_ERROR"

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
        error_code: Optional[str] = None
    ):
        super().__init__(message)
        self.message = message
        self.details = dict(details or {})
        if status_code is not None:
            self.status_code = status_code
        if error_code is not None:
            self.error_code = error_code

    def to_dict(self) -> Dict[str, Any]:
        """Response body shape: {"error": {code, message, details, status_code}}."""
        return {
            "error": {
                "code": self.error_code,
                "message": self.message,
                "details": self.details,
                "status_code": self.status_code,
            }
        }

    def to_http_exception(self) -> HTTPException:
        return HTTPException(status_code=self.status_code, detail=self.to_dict()["error"])

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, status_code={self.status_code})"


# =============================================================================
# REQUEST ERRORS
# =============================================================================

class ValidationError(SubscriptionLifecycleException):
    """
    A create-subscription request failed validation.

    ``errors`` keeps every coded error in check order (100, 101, 102, 103).
    """

    status_code = status.HTTP_400_BAD_REQUEST
    error_code = "VALIDATION_ERROR"

    def __init__(
        self,
        errors: Sequence["Error"],
        message: str = "Validation failed",
        details: Optional[Dict[str, Any]] = None
    ):
        self.errors: List["Error"] = list(errors)
        super().__init__(
            message,
            details=_with_fields(
                details,
                errors=[{"code": error.code, "message": error.message} for error in self.errors],
            ),
        )


class NotFoundError(SubscriptionLifecycleException):
    """No subscription exists with the requested id."""

    status_code = status.HTTP_404_NOT_FOUND
    error_code = "NOT_FOUND"

    def __init__(
        self,
        message: str = "Resource not found",
        resource_type: Optional[str] = None,
        resource_id: Optional[Any] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message,
            details=_with_fields(
                details,
                resource_type=resource_type,
                resource_id=None if resource_id is None else str(resource_id),
            ),
        )


# =============================================================================
# LIFECYCLE ERRORS
# =============================================================================

class SubscriptionStateError(SubscriptionLifecycleException):
    """
    The subscription's status forbids the requested transition.

    Only ACTIVE subscriptions can be canceled or expired; ``current_status``
    is the status found when the transition was attempted.
    """

    status_code = status.HTTP_409_CONFLICT
    error_code = "SUBSCRIPTION_STATE_ERROR"

    def __init__(
        self,
        current_status: Any,
        target_status: Optional[Any] = None,
        subscription_id: Optional[Any] = None,
        message: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        self.current_status = current_status
        self.target_status = target_status
        current = _enum_value(current_status)

        super().__init__(
            message or f"Only active subscription can be changed, current status is {current}",
            details=_with_fields(
                details,
                current_status=current,
                target_status=_enum_value(target_status),
                subscription_id=None if subscription_id is None else str(subscription_id),
            ),
        )


# =============================================================================
# STORAGE ERRORS
# =============================================================================

class ConstraintViolationError(SubscriptionLifecycleException):
    """Storage rejected a write that would break a uniqueness or integrity rule."""

    status_code = status.HTTP_409_CONFLICT
    error_code = "CONSTRAINT_VIOLATION"

    def __init__(
        self,
        message: str = "Storage constraint violated",
        constraint: Optional[str] = None,
        entity: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, details=_with_fields(details, constraint=constraint, entity=entity))


class DatabaseError(SubscriptionLifecycleException):
    """A database operation failed for a reason other than a constraint."""

    error_code = "DATABASE_ERROR"

    def __init__(
        self,
        message: str = "Database operation failed",
        operation: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, details=_with_fields(details, operation=operation))


class TransactionError(DatabaseError):
    """Committing or rolling back a session transaction failed."""

    error_code = "TRANSACTION_ERROR"

    def __init__(
        self,
        message: str = "Database transaction failed",
        operation: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, operation=operation, details=details)


# =============================================================================
# HELPERS
# =============================================================================

def exception_to_dict(exception: Exception) -> Dict[str, Any]:
    """Serialize any exception; unknown ones are reported as 500 with their class name."""
    if isinstance(exception, SubscriptionLifecycleException):
        return exception.to_dict()

    return {
        "error": {
            "code": exception.__class__.__name__.upper(),
            "message": str(exception),
            "details": {},
            "status_code": status.HTTP_500_INTERNAL_SERVER_ERROR,
        }
    }


def _status_of(exception: Exception) -> int:
    if isinstance(exception, (SubscriptionLifecycleException, HTTPException)):
        return exception.status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def is_client_error(exception: Exception) -> bool:
    """True for 4xx failures: the caller can fix the request."""
    return 400 <= _status_of(exception) < 500


def is_server_error(exception: Exception) -> bool:
    """True for 5xx failures, including exceptions outside this hierarchy."""
    return 500 <= _status_of(exception) < 600
