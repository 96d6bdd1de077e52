"""Goal commands."""

from finplan.application.commands.goals.create_goal_command import CreateGoalCommand
from finplan.application.commands.goals.delete_goal_command import DeleteGoalCommand
from finplan.application.commands.goals.goal_transaction_commands import (
    ContributeGoalCommand,
    RemoveGoalTransactionCommand,
    UpdateGoalTransactionCommand,
    WithdrawGoalCommand,
)
from finplan.application.commands.goals.update_goal_command import UpdateGoalCommand

__all__ = [
    "ContributeGoalCommand",
    "CreateGoalCommand",
    "DeleteGoalCommand",
    "RemoveGoalTransactionCommand",
    "UpdateGoalCommand",
    "UpdateGoalTransactionCommand",
    "WithdrawGoalCommand",
]
