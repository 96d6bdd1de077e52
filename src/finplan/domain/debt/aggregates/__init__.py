from finplan.domain.debt.aggregates.debt_aggregate import DebtAggregate

__all__ = ["DebtAggregate"]
