from finplan.domain.budgeting.entities.budget import Budget, BudgetCategory, BudgetProps

__all__ = ["Budget", "BudgetCategory", "BudgetProps"]
