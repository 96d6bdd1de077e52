from finplan.domain.income.entities.income import Income, IncomeProps

__all__ = ["Income", "IncomeProps"]
