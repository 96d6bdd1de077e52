"""Goal queries."""

from finplan.application.queries.goals.goal_queries import GetGoalQuery, ListGoalsQuery

__all__ = ["GetGoalQuery", "ListGoalsQuery"]
