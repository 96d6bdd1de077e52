"""SQLAlchemy implementation of GoalAggregateRepository."""

from __future__ import annotations

from typing import Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from finplan.domain.goals import GoalAggregate, GoalAggregateRepository
from finplan.infrastructure.persistence.sqlalchemy.repositories.aggregate_repository import (  # NOQA: E501
    SQLAlchemyAggregateRepository,
)
from finplan.infrastructure.persistence.sqlalchemy.repositories.mappings import (
    GOAL_MAPPING,
)


class GoalAggregateRepositorySQLAlchemy(
    SQLAlchemyAggregateRepository[GoalAggregate],
    GoalAggregateRepository,
):
    def __init__(self, session: AsyncSession, autocommit: bool = True):
        super().__init__(session, GOAL_MAPPING, autocommit=autocommit)

    async def find_by_title(
        self,
        user_id: UUID,
        title: str,
    ) -> Optional[GoalAggregate]:
        return await self.find_one(user_id=user_id, title=title)
