"""SQLAlchemy implementation of BudgetAggregateRepository."""

from __future__ import annotations

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from finplan.domain.budgeting import BudgetAggregate, BudgetAggregateRepository
from finplan.domain.shared.query import FindManyOptions, SortField
from finplan.infrastructure.persistence.sqlalchemy.repositories.aggregate_repository import (  # NOQA: E501
    SQLAlchemyAggregateRepository,
)
from finplan.infrastructure.persistence.sqlalchemy.repositories.mappings import (
    BUDGET_MAPPING,
)


class BudgetAggregateRepositorySQLAlchemy(
    SQLAlchemyAggregateRepository[BudgetAggregate],
    BudgetAggregateRepository,
):
    def __init__(self, session: AsyncSession, autocommit: bool = True):
        super().__init__(session, BUDGET_MAPPING, autocommit=autocommit)

    async def find_by_period(
        self,
        user_id: UUID,
        month: int,
        year: int,
    ) -> list[BudgetAggregate]:
        return await self.find_many(
            {"user_id": user_id, "month": month, "year": year},
            FindManyOptions(sort=(SortField("name"),)),
        )
