"""Income domain exceptions."""

from uuid import UUID

from finplan.domain.shared.exceptions import (
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)


class IncomeNotFoundError(EntityNotFoundError):
    """Raised when an income month does not exist or belongs to another user."""

    def __init__(self, income_id: UUID | str) -> None:
        super().__init__(
            message=f"Income '{income_id}' not found",
            code=ErrorCode.INCOME_NOT_FOUND,
            details={"income_id": str(income_id)},
        )


class IncomeTransactionNotFoundError(EntityNotFoundError):
    def __init__(self, income_id: UUID, transaction_id: UUID | str) -> None:
        super().__init__(
            message=f"Income entry '{transaction_id}' not found in '{income_id}'",
            code=ErrorCode.INCOME_TRANSACTION_NOT_FOUND,
            details={
                "income_id": str(income_id),
                "transaction_id": str(transaction_id),
            },
        )


class InvalidIncomePeriodError(ValidationError):
    def __init__(self, month: int, year: int) -> None:
        super().__init__(
            message=f"Invalid income period {month}/{year}",
            code=ErrorCode.INVALID_INCOME_PERIOD,
            details={"month": month, "year": year},
        )
