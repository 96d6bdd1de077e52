"""Record and revert debt payments."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional
from uuid import UUID

from finplan.application.ownership import load_owned
from finplan.domain.debt import DebtAggregateRepository, DebtNotFoundError, DebtPayment
from finplan.domain.shared.value_objects import Money

if TYPE_CHECKING:
    from finplan.application.factories import RepositoryFactory
    from finplan.application.ports.identity import CurrentUser

logger = logging.getLogger(__name__)


class PayDebtCommand:
    def __init__(
        self,
        debt_repository: DebtAggregateRepository,
        current_user: CurrentUser,
    ):
        self._debt_repo = debt_repository
        self._current_user = current_user

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> PayDebtCommand:
        return cls(
            debt_repository=factory.debt_repository(),
            current_user=factory.current_user,
        )

    async def execute(
        self,
        debt_id: UUID,
        amount: Money,
        name: Optional[str] = None,
        description: Optional[str] = None,
    ) -> DebtPayment:
        aggregate = await load_owned(
            self._debt_repo,
            debt_id,
            self._current_user,
            DebtNotFoundError,
        )

        payment = aggregate.pay(amount, name=name, description=description)
        # pay() records without checking; amount and currency are checked here
        aggregate.validate()

        await self._debt_repo.save(aggregate)
        logger.info(
            "Paid %s on debt %s (paid %s of %s)",
            amount,
            debt_id,
            aggregate.current_paid_amount,
            aggregate.amount,
        )
        return payment


class RemoveDebtPaymentCommand:
    def __init__(
        self,
        debt_repository: DebtAggregateRepository,
        current_user: CurrentUser,
    ):
        self._debt_repo = debt_repository
        self._current_user = current_user

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> RemoveDebtPaymentCommand:
        return cls(
            debt_repository=factory.debt_repository(),
            current_user=factory.current_user,
        )

    async def execute(self, debt_id: UUID, payment_id: UUID) -> None:
        aggregate = await load_owned(
            self._debt_repo,
            debt_id,
            self._current_user,
            DebtNotFoundError,
        )
        aggregate.remove_payment(payment_id)
        aggregate.validate()
        await self._debt_repo.save(aggregate)
