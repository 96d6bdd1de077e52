"""Goal domain exceptions."""

from datetime import date
from typing import Any
from uuid import UUID

from finplan.domain.shared.exceptions import (
    ConflictError,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)


class GoalNotFoundError(EntityNotFoundError):
    """Raised when a goal does not exist or belongs to another user."""

    def __init__(self, goal_id: UUID | str) -> None:
        super().__init__(
            message=f"Goal '{goal_id}' not found",
            code=ErrorCode.GOAL_NOT_FOUND,
            details={"goal_id": str(goal_id)},
        )


class GoalTransactionNotFoundError(EntityNotFoundError):
    def __init__(self, goal_id: UUID, transaction_id: UUID | str) -> None:
        super().__init__(
            message=f"Transaction '{transaction_id}' not found for goal '{goal_id}'",
            code=ErrorCode.GOAL_TRANSACTION_NOT_FOUND,
            details={"goal_id": str(goal_id), "transaction_id": str(transaction_id)},
        )


class GoalTitleAlreadyExistsError(ConflictError):
    """Raised when the user already has a goal with the same title."""

    def __init__(self, title: str) -> None:
        super().__init__(
            message=f"Goal with title '{title}' already exists",
            code=ErrorCode.GOAL_TITLE_ALREADY_EXISTS,
            details={"title": title},
        )


class GoalInvalidTargetAmountError(ValidationError):
    def __init__(self, amount: Any) -> None:
        super().__init__(
            message="Goal target amount must be greater than 0",
            code=ErrorCode.GOAL_INVALID_TARGET_AMOUNT,
            details={"target_amount": str(amount)},
        )


class GoalInvalidDueDateError(ValidationError):
    def __init__(self, due_date: date) -> None:
        super().__init__(
            message="Goal due date must be in the future",
            code=ErrorCode.GOAL_INVALID_DUE_DATE,
            details={"due_date": due_date.isoformat()},
        )
