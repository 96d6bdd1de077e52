"""Budgeting commands."""

from finplan.application.commands.budgeting.create_budget_command import (
    CreateBudgetCommand,
)
from finplan.application.commands.budgeting.delete_budget_command import (
    DeleteBudgetCommand,
)
from finplan.application.commands.budgeting.spend_command import (
    RemoveSpendingCommand,
    SpendCommand,
)
from finplan.application.commands.budgeting.update_budget_command import (
    UpdateBudgetCommand,
)

__all__ = [
    "CreateBudgetCommand",
    "DeleteBudgetCommand",
    "RemoveSpendingCommand",
    "SpendCommand",
    "UpdateBudgetCommand",
]
