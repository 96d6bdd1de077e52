"""SQLAlchemy implementation of IncomeAggregateRepository."""

from __future__ import annotations

from typing import Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from finplan.domain.income import IncomeAggregate, IncomeAggregateRepository
from finplan.infrastructure.persistence.sqlalchemy.repositories.aggregate_repository import (  # NOQA: E501
    SQLAlchemyAggregateRepository,
)
from finplan.infrastructure.persistence.sqlalchemy.repositories.mappings import (
    INCOME_MAPPING,
)


class IncomeAggregateRepositorySQLAlchemy(
    SQLAlchemyAggregateRepository[IncomeAggregate],
    IncomeAggregateRepository,
):
    def __init__(self, session: AsyncSession, autocommit: bool = True):
        super().__init__(session, INCOME_MAPPING, autocommit=autocommit)

    async def find_by_month(
        self,
        user_id: UUID,
        month: int,
        year: int,
    ) -> Optional[IncomeAggregate]:
        return await self.find_one(user_id=user_id, month=month, year=year)
