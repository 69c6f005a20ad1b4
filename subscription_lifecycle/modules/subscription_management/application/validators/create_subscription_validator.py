# 📄 File: subscription_lifecycle/modules/subscription_management/application/validators/create_subscription_validator.py
# 🧭 Purpose (Layman Explanation):
# Checks a subscription request before anything is saved: is there a user, a name,
# a provider we know about, and an expiration date that is still in the future?
# 🧪 Purpose (Technical Summary):
# Pure, clock-injected validator that runs every check and accumulates coded errors
# (100 userId, 101 name, 102 provider, 103 expirationDate) in a fixed order.
# 🔗 Dependencies:
# dataclasses, typing, subscription_lifecycle.shared.core.clock, Provider enum
# 🔄 Connected Modules / Calls From:
# SubscriptionService.upsert, composition root

from dataclasses import dataclass
from typing import List

from subscription_lifecycle.modules.subscription_management.application.dto.subscription_dto import CreateSubscriptionDTO
from subscription_lifecycle.modules.subscription_management.domain.models.subscription import Provider
from subscription_lifecycle.shared.core.clock import Clock, ensure_utc

# Error codes and messages reported to callers
INVALID_USER_ID = (100, "userId is invalid")
INVALID_NAME = (101, "name is invalid")
INVALID_PROVIDER = (102, "provider is invalid")
INVALID_EXPIRATION_DATE = (103, "expirationDate is invalid")


@dataclass(frozen=True)
class Error:
    """A single validation failure"""
    code: int
    message: str

    @classmethod
    def of(cls, code: int, message: str) -> "Error":
        return cls(code=code, message=message)


class ValidationResult:
    """Ordered collection of validation errors"""

    def __init__(self):
        self._errors: List[Error] = []

    def add(self, error: Error) -> None:
        self._errors.append(error)

    @property
    def errors(self) -> List[Error]:
        return list(self._errors)

    def has_errors(self) -> bool:
        return bool(self._errors)

    def __repr__(self) -> str:
        return f"ValidationResult(errors={self._errors!r})"


class CreateSubscriptionValidator:
    """
    Validates CreateSubscriptionDTO instances.

    All four checks always run; a request missing everything yields
    four errors ordered 100, 101, 102, 103.
    """

    def __init__(self, clock: Clock):
        self.clock = clock

    def validate(self, dto: CreateSubscriptionDTO) -> ValidationResult:
        result = ValidationResult()

        if dto.user_id is None:
            result.add(Error.of(*INVALID_USER_ID))

        if not dto.name:
            result.add(Error.of(*INVALID_NAME))

        if Provider.find(dto.provider) is None:
            result.add(Error.of(*INVALID_PROVIDER))

        if dto.expiration_date is None or not ensure_utc(dto.expiration_date) > self.clock.now():
            result.add(Error.of(*INVALID_EXPIRATION_DATE))

        return result
