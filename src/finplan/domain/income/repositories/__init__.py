from finplan.domain.income.repositories.income_aggregate_repository import (
    IncomeAggregateRepository,
)

__all__ = ["IncomeAggregateRepository"]
