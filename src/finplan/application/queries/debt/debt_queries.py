"""Debt queries."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import TYPE_CHECKING, Optional
from uuid import UUID

from finplan.application.dtos import DebtSummaryDTO, MonthlyPaymentDTO
from finplan.application.ownership import load_owned
from finplan.domain.debt import DebtAggregateRepository, DebtNotFoundError
from finplan.domain.shared.time import today_utc

if TYPE_CHECKING:
    from finplan.application.factories import RepositoryFactory
    from finplan.application.ports.identity import CurrentUser


class _DebtQuery:
    def __init__(
        self,
        debt_repository: DebtAggregateRepository,
        current_user: CurrentUser,
    ):
        self._debt_repo = debt_repository
        self._current_user = current_user

    @classmethod
    def from_factory(cls, factory: RepositoryFactory):
        return cls(
            debt_repository=factory.debt_repository(),
            current_user=factory.current_user,
        )


class GetDebtQuery(_DebtQuery):
    async def execute(
        self,
        debt_id: UUID,
        today: Optional[date] = None,
    ) -> DebtSummaryDTO:
        aggregate = await load_owned(
            self._debt_repo,
            debt_id,
            self._current_user,
            DebtNotFoundError,
        )
        return DebtSummaryDTO.from_aggregate(
            aggregate,
            today=today or today_utc(),
            include_payments=True,
        )


class ListDebtsQuery(_DebtQuery):
    """List debts ordered by due date, soonest first."""

    async def execute(
        self,
        include_paid_off: bool = True,
        today: Optional[date] = None,
    ) -> list[DebtSummaryDTO]:
        today = today or today_utc()
        aggregates = await self._debt_repo.find_by_user(self._current_user.user_id)
        return [
            DebtSummaryDTO.from_aggregate(a, today=today)
            for a in aggregates
            if include_paid_off or not a.is_paid_off
        ]


class GetMonthlyPaymentQuery(_DebtQuery):
    """
    Total monthly instalment over the user's open debts.

    Debts in different currencies are never added together; one result is
    returned per currency, ordered by currency code.
    """

    async def execute(self, today: Optional[date] = None) -> list[MonthlyPaymentDTO]:
        today = today or today_utc()
        aggregates = await self._debt_repo.find_by_user(self._current_user.user_id)

        per_currency: dict[str, dict[UUID, Decimal]] = {}
        for aggregate in aggregates:
            if aggregate.is_paid_off:
                continue
            payment = aggregate.monthly_payment(today)
            per_currency.setdefault(payment.currency.code, {})[aggregate.id] = (
                payment.amount
            )

        return [
            MonthlyPaymentDTO(
                currency=code,
                total=sum(per_debt.values(), Decimal(0)),
                debt_count=len(per_debt),
                per_debt=per_debt,
            )
            for code, per_debt in sorted(per_currency.items())
        ]
