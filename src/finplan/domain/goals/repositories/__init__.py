from finplan.domain.goals.repositories.goal_aggregate_repository import (
    GoalAggregateRepository,
)

__all__ = ["GoalAggregateRepository"]
