from finplan.domain.goals.aggregates.goal_aggregate import GoalAggregate

__all__ = ["GoalAggregate"]
