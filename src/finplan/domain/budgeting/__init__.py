"""Budgeting domain layer exports."""

from finplan.domain.budgeting.aggregates import BudgetAggregate
from finplan.domain.budgeting.entities import Budget, BudgetCategory, BudgetProps
from finplan.domain.budgeting.exceptions import (
    BudgetAlreadyExistsError,
    BudgetNotFoundError,
    InvalidBudgetAmountError,
    InvalidBudgetPeriodError,
    SpendingNotFoundError,
)
from finplan.domain.budgeting.repositories import BudgetAggregateRepository

__all__ = [
    # Entities
    "Budget",
    "BudgetCategory",
    "BudgetProps",
    # Aggregates
    "BudgetAggregate",
    # Repository Interfaces
    "BudgetAggregateRepository",
    # Exceptions
    "BudgetAlreadyExistsError",
    "BudgetNotFoundError",
    "InvalidBudgetAmountError",
    "InvalidBudgetPeriodError",
    "SpendingNotFoundError",
]
