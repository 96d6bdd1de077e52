"""Debt domain exceptions."""

from decimal import Decimal
from uuid import UUID

from finplan.domain.shared.exceptions import (
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)


class DebtNotFoundError(EntityNotFoundError):
    """Raised when a debt does not exist or belongs to another user."""

    def __init__(self, debt_id: UUID | str) -> None:
        super().__init__(
            message=f"Debt '{debt_id}' not found",
            code=ErrorCode.DEBT_NOT_FOUND,
            details={"debt_id": str(debt_id)},
        )


class DebtPaymentNotFoundError(EntityNotFoundError):
    """Raised when removing a payment that is not part of the debt."""

    def __init__(self, debt_id: UUID, payment_id: UUID | str) -> None:
        super().__init__(
            message=f"Payment '{payment_id}' not found for debt '{debt_id}'",
            code=ErrorCode.DEBT_PAYMENT_NOT_FOUND,
            details={"debt_id": str(debt_id), "payment_id": str(payment_id)},
        )


class InvalidDebtRateError(ValidationError):
    def __init__(self, rate: Decimal) -> None:
        super().__init__(
            message="Debt interest rate must not be negative",
            code=ErrorCode.VALIDATION_ERROR,
            details={"rate": str(rate)},
        )
