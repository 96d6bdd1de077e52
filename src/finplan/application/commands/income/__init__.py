"""Income commands."""

from finplan.application.commands.income.income_commands import (
    AddIncomeCommand,
    RemoveIncomeCommand,
    UpdateIncomeCommand,
)

__all__ = ["AddIncomeCommand", "RemoveIncomeCommand", "UpdateIncomeCommand"]
