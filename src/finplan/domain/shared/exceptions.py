"""Shared domain exceptions and error codes.

This module defines the base exception hierarchy and error codes for the
entire domain layer. All domain exceptions inherit from DomainException so
the presentation layer can translate them in one place.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from finplan.domain.shared.value_objects.money import Money


class ErrorCode(str, Enum):
    """Stable error codes for API clients.

    These codes are part of the public API contract. Should not be changed.
    """

    # Validation Errors (400)
    VALIDATION_ERROR = "VALIDATION_ERROR"
    REQUIRED_FIELD = "REQUIRED_FIELD"
    INVALID_AMOUNT = "INVALID_AMOUNT"
    INVALID_CURRENCY = "INVALID_CURRENCY"
    INVALID_DATE = "INVALID_DATE"
    INVALID_BUDGET_AMOUNT = "INVALID_BUDGET_AMOUNT"
    INVALID_BUDGET_PERIOD = "INVALID_BUDGET_PERIOD"
    GOAL_INVALID_TARGET_AMOUNT = "GOAL_INVALID_TARGET_AMOUNT"
    GOAL_INVALID_DUE_DATE = "GOAL_INVALID_DUE_DATE"
    INVALID_INCOME_PERIOD = "INVALID_INCOME_PERIOD"

    # Not Found Errors (404)
    ENTITY_NOT_FOUND = "ENTITY_NOT_FOUND"
    BUDGET_NOT_FOUND = "BUDGET_NOT_FOUND"
    SPENDING_NOT_FOUND = "SPENDING_NOT_FOUND"
    DEBT_NOT_FOUND = "DEBT_NOT_FOUND"
    DEBT_PAYMENT_NOT_FOUND = "DEBT_PAYMENT_NOT_FOUND"
    GOAL_NOT_FOUND = "GOAL_NOT_FOUND"
    GOAL_TRANSACTION_NOT_FOUND = "GOAL_TRANSACTION_NOT_FOUND"
    INCOME_NOT_FOUND = "INCOME_NOT_FOUND"
    INCOME_TRANSACTION_NOT_FOUND = "INCOME_TRANSACTION_NOT_FOUND"

    # Conflict Errors (409)
    CONFLICT = "CONFLICT"
    BUDGET_ALREADY_EXISTS = "BUDGET_ALREADY_EXISTS"
    GOAL_TITLE_ALREADY_EXISTS = "GOAL_TITLE_ALREADY_EXISTS"

    # Business Rule Violations (422)
    BUSINESS_RULE_VIOLATION = "BUSINESS_RULE_VIOLATION"
    CURRENCY_MISMATCH = "CURRENCY_MISMATCH"
    INSUFFICIENT_BALANCE = "INSUFFICIENT_BALANCE"

    # General Errors
    INTERNAL_ERROR = "INTERNAL_ERROR"


class DomainException(Exception):  # NOQA: N818
    """Root of the domain error hierarchy.

    Subclasses pick a category through ``default_code``; concrete errors
    narrow it further by passing an explicit ``code``.

    Attributes
    ----------
    message
        Text shown to the API client
    code
        Machine readable identifier, see ``ErrorCode``
    details
        Extra context for logs; never returned to the client
    """

    default_code: ErrorCode = ErrorCode.INTERNAL_ERROR

    def __init__(
        self,
        message: str,
        code: ErrorCode | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.details = dict(details) if details else {}

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self.message!r}, "
            f"code={self.code.value}, details={self.details!r})"
        )


class ValidationError(DomainException):
    """Input was rejected before any state changed."""

    default_code = ErrorCode.VALIDATION_ERROR


class BusinessRuleViolation(DomainException):
    """An aggregate invariant would be broken."""

    default_code = ErrorCode.BUSINESS_RULE_VIOLATION


class EntityNotFoundError(DomainException):
    default_code = ErrorCode.ENTITY_NOT_FOUND


class ConflictError(DomainException):
    """The change clashes with something already stored."""

    default_code = ErrorCode.CONFLICT


# Errors shared by every aggregate family


class RequiredFieldError(ValidationError):
    """Raised when a mandatory entity field is empty."""

    def __init__(self, entity: str, field: str) -> None:
        super().__init__(
            message=f"{entity} {field} is required",
            code=ErrorCode.REQUIRED_FIELD,
            details={"entity": entity, "field": field},
        )


class InvalidAmountError(ValidationError):
    """Raised when a monetary amount is zero, negative or otherwise unusable."""

    def __init__(self, amount: Any, reason: str = "Amount must be greater than 0"):
        super().__init__(
            message=reason,
            code=ErrorCode.INVALID_AMOUNT,
            details={"amount": str(amount)},
        )


class CurrencyMismatchError(BusinessRuleViolation):
    """Raised when arithmetic mixes two different currencies."""

    def __init__(self, left: Any, right: Any, operation: str = "combine") -> None:
        super().__init__(
            message=f"Cannot {operation} different currencies: {left} and {right}",
            code=ErrorCode.CURRENCY_MISMATCH,
            details={"left": str(left), "right": str(right), "operation": operation},
        )


class InsufficientBalanceError(BusinessRuleViolation):
    """Raised when a withdrawal exceeds the available balance."""

    def __init__(self, requested: Money, available: Money) -> None:
        self.requested = requested
        self.available = available
        super().__init__(
            message=(
                f"Insufficient balance: requested {requested}, "
                f"available {available}"
            ),
            code=ErrorCode.INSUFFICIENT_BALANCE,
            details={
                "requested": str(requested.amount),
                "available": str(available.amount),
                "currency": str(requested.currency),
            },
        )
