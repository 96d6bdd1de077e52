"""Income queries."""

from finplan.application.queries.income.income_queries import GetIncomeByMonthQuery

__all__ = ["GetIncomeByMonthQuery"]
