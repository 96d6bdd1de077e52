"""Budgeting domain exceptions."""

from decimal import Decimal
from uuid import UUID

from finplan.domain.shared.exceptions import (
    ConflictError,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)


class BudgetNotFoundError(EntityNotFoundError):
    """Raised when a budget does not exist or belongs to another user."""

    def __init__(self, budget_id: UUID | str) -> None:
        super().__init__(
            message=f"Budget '{budget_id}' not found",
            code=ErrorCode.BUDGET_NOT_FOUND,
            details={"budget_id": str(budget_id)},
        )


class SpendingNotFoundError(EntityNotFoundError):
    """Raised when a spending transaction is not part of the budget."""

    def __init__(self, budget_id: UUID, transaction_id: UUID | str) -> None:
        super().__init__(
            message=f"Spending '{transaction_id}' not found in budget '{budget_id}'",
            code=ErrorCode.SPENDING_NOT_FOUND,
            details={
                "budget_id": str(budget_id),
                "transaction_id": str(transaction_id),
            },
        )


class BudgetAlreadyExistsError(ConflictError):
    """Raised when the user already has a budget with that name for the period."""

    def __init__(self, name: str, month: int, year: int) -> None:
        super().__init__(
            message=f"Budget '{name}' already exists for {month:02d}/{year}",
            code=ErrorCode.BUDGET_ALREADY_EXISTS,
            details={"name": name, "month": month, "year": year},
        )


class InvalidBudgetAmountError(ValidationError):
    def __init__(self, amount: Decimal) -> None:
        super().__init__(
            message="Budget amount must be greater than 0",
            code=ErrorCode.INVALID_BUDGET_AMOUNT,
            details={"amount": str(amount)},
        )


class InvalidBudgetPeriodError(ValidationError):
    def __init__(self, month: int, year: int) -> None:
        super().__init__(
            message=f"Invalid budget period {month}/{year}",
            code=ErrorCode.INVALID_BUDGET_PERIOD,
            details={"month": month, "year": year},
        )
