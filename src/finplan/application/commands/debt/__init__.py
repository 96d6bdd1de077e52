"""Debt commands."""

from finplan.application.commands.debt.create_debt_command import CreateDebtCommand
from finplan.application.commands.debt.delete_debt_command import DeleteDebtCommand
from finplan.application.commands.debt.pay_debt_command import (
    PayDebtCommand,
    RemoveDebtPaymentCommand,
)
from finplan.application.commands.debt.update_debt_command import UpdateDebtCommand

__all__ = [
    "CreateDebtCommand",
    "DeleteDebtCommand",
    "PayDebtCommand",
    "RemoveDebtPaymentCommand",
    "UpdateDebtCommand",
]
