"""
Exception hierarchy tests: status codes, serialization and classification helpers.
"""

import pytest
from fastapi import HTTPException

from subscription_lifecycle.modules.subscription_management.application.validators.create_subscription_validator import Error
from subscription_lifecycle.modules.subscription_management.domain.models.subscription import SubscriptionStatus
from subscription_lifecycle.shared.core.exceptions import (
    ConstraintViolationError,
    DatabaseError,
    NotFoundError,
    SubscriptionLifecycleException,
    SubscriptionStateError,
    TransactionError,
    ValidationError,
    exception_to_dict,
    is_client_error,
    is_server_error,
)


@pytest.mark.parametrize(
    "exception, expected_status, expected_code",
    [
        (ValidationError([Error.of(100, "userId is invalid")]), 400, "VALIDATION_ERROR"),
        (NotFoundError(resource_type="subscription", resource_id=1), 404, "NOT_FOUND"),
        (SubscriptionStateError(SubscriptionStatus.CANCELED), 409, "SUBSCRIPTION_STATE_ERROR"),
        (ConstraintViolationError(), 409, "CONSTRAINT_VIOLATION"),
        (DatabaseError(), 500, "DATABASE_ERROR"),
        (TransactionError(), 500, "TRANSACTION_ERROR"),
    ],
)
def test_status_and_error_codes(exception, expected_status, expected_code):
    assert isinstance(exception, SubscriptionLifecycleException)
    assert exception.status_code == expected_status
    assert exception.error_code == expected_code


def test_base_exception_defaults():
    exception = SubscriptionLifecycleException("boom")

    assert exception.error_code == "INTERNAL_ERROR"
    assert exception.status_code == 500
    assert str(exception) == "boom"


def test_validation_error_keeps_errors_in_order():
    errors = [Error.of(101, "name is invalid"), Error.of(103, "expirationDate is invalid")]

    exception = ValidationError(errors)

    assert exception.errors == errors
    assert exception.details["errors"] == [
        {"code": 101, "message": "name is invalid"},
        {"code": 103, "message": "expirationDate is invalid"},
    ]


def test_subscription_state_error_message_names_current_status():
    exception = SubscriptionStateError(
        SubscriptionStatus.EXPIRED,
        target_status=SubscriptionStatus.CANCELED,
        subscription_id=3,
    )

    assert exception.message == "Only active subscription can be changed, current status is EXPIRED"
    assert exception.current_status is SubscriptionStatus.EXPIRED
    assert exception.details == {
        "current_status": "EXPIRED",
        "target_status": "CANCELED",
        "subscription_id": "3",
    }


def test_to_dict():
    exception = NotFoundError("Subscription 9 not found", resource_type="subscription", resource_id=9)

    assert exception.to_dict() == {
        "error": {
            "code": "NOT_FOUND",
            "message": "Subscription 9 not found",
            "details": {"resource_type": "subscription", "resource_id": "9"},
            "status_code": 404,
        }
    }


def test_to_http_exception():
    http_exception = ConstraintViolationError(constraint="uq_subscription_user_id_name").to_http_exception()

    assert isinstance(http_exception, HTTPException)
    assert http_exception.status_code == 409
    assert http_exception.detail["details"] == {"constraint": "uq_subscription_user_id_name"}


def test_exception_to_dict_for_foreign_exceptions():
    assert exception_to_dict(RuntimeError("oops")) == {
        "error": {
            "code": "RUNTIMEERROR",
            "message": "oops",
            "details": {},
            "status_code": 500,
        }
    }


def test_error_classification():
    assert is_client_error(NotFoundError())
    assert not is_server_error(NotFoundError())
    assert is_server_error(DatabaseError())
    assert not is_client_error(DatabaseError())
    assert is_server_error(RuntimeError())
    assert not is_client_error(RuntimeError())


def test_transaction_error_is_a_database_error():
    exception = TransactionError(operation="commit")

    assert isinstance(exception, DatabaseError)
    assert exception.details == {"operation": "commit"}


def test_caller_details_are_not_mutated():
    details = {"request": "abc"}

    exception = ConstraintViolationError(constraint="uq_subscription_user_id_name", details=details)

    assert details == {"request": "abc"}
    assert exception.details == {"request": "abc", "constraint": "uq_subscription_user_id_name"}
