"""Budget queries."""

from finplan.application.queries.budgeting.get_budget_query import (
    BudgetListResult,
    GetBudgetDetailQuery,
    GetMonthlySpendingQuery,
    ListBudgetsQuery,
)

__all__ = [
    "BudgetListResult",
    "GetBudgetDetailQuery",
    "GetMonthlySpendingQuery",
    "ListBudgetsQuery",
]
