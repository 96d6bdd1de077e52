"""SQLAlchemy implementation of DebtAggregateRepository."""

from __future__ import annotations

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from finplan.domain.debt import DebtAggregate, DebtAggregateRepository
from finplan.domain.shared.query import FindManyOptions, SortField
from finplan.infrastructure.persistence.sqlalchemy.repositories.aggregate_repository import (  # NOQA: E501
    SQLAlchemyAggregateRepository,
)
from finplan.infrastructure.persistence.sqlalchemy.repositories.mappings import (
    DEBT_MAPPING,
)


class DebtAggregateRepositorySQLAlchemy(
    SQLAlchemyAggregateRepository[DebtAggregate],
    DebtAggregateRepository,
):
    def __init__(self, session: AsyncSession, autocommit: bool = True):
        super().__init__(session, DEBT_MAPPING, autocommit=autocommit)

    async def find_by_user(self, user_id: UUID) -> list[DebtAggregate]:
        return await self.find_many(
            {"user_id": user_id},
            FindManyOptions(sort=(SortField("due_date"),)),
        )
