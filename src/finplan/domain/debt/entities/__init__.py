from finplan.domain.debt.entities.debt import Debt, DebtProps, DebtType
from finplan.domain.debt.entities.debt_payment import DebtPayment

__all__ = ["Debt", "DebtPayment", "DebtProps", "DebtType"]
