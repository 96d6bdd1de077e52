from finplan.domain.goals.entities.goal import Goal, GoalProps

__all__ = ["Goal", "GoalProps"]
