from finplan.domain.budgeting.aggregates.budget_aggregate import BudgetAggregate

__all__ = ["BudgetAggregate"]
