"""Goal domain layer exports."""

from finplan.domain.goals.aggregates import GoalAggregate
from finplan.domain.goals.entities import Goal, GoalProps
from finplan.domain.goals.exceptions import (
    GoalInvalidDueDateError,
    GoalInvalidTargetAmountError,
    GoalNotFoundError,
    GoalTitleAlreadyExistsError,
    GoalTransactionNotFoundError,
)
from finplan.domain.goals.repositories import GoalAggregateRepository

__all__ = [
    # Entities
    "Goal",
    "GoalProps",
    # Aggregates
    "GoalAggregate",
    # Repository Interfaces
    "GoalAggregateRepository",
    # Exceptions
    "GoalInvalidDueDateError",
    "GoalInvalidTargetAmountError",
    "GoalNotFoundError",
    "GoalTitleAlreadyExistsError",
    "GoalTransactionNotFoundError",
]
