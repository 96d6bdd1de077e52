"""Income domain layer exports."""

from finplan.domain.income.aggregates import IncomeAggregate
from finplan.domain.income.entities import Income, IncomeProps
from finplan.domain.income.exceptions import (
    IncomeNotFoundError,
    IncomeTransactionNotFoundError,
    InvalidIncomePeriodError,
)
from finplan.domain.income.repositories import IncomeAggregateRepository

__all__ = [
    # Entities
    "Income",
    "IncomeProps",
    # Aggregates
    "IncomeAggregate",
    # Repository Interfaces
    "IncomeAggregateRepository",
    # Exceptions
    "IncomeNotFoundError",
    "IncomeTransactionNotFoundError",
    "InvalidIncomePeriodError",
]
