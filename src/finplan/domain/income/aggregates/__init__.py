from finplan.domain.income.aggregates.income_aggregate import IncomeAggregate

__all__ = ["IncomeAggregate"]
