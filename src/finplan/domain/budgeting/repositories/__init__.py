from finplan.domain.budgeting.repositories.budget_aggregate_repository import (
    BudgetAggregateRepository,
)

__all__ = ["BudgetAggregateRepository"]
