from finplan.domain.debt.repositories.debt_aggregate_repository import (
    DebtAggregateRepository,
)

__all__ = ["DebtAggregateRepository"]
