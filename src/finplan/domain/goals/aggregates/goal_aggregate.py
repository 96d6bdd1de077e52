"""Goal aggregate: a savings goal and the money moved in and out of it."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Optional
from uuid import UUID

from finplan.domain.goals.entities.goal import Goal
from finplan.domain.goals.exceptions import GoalTransactionNotFoundError
from finplan.domain.shared.aggregate import Aggregate
from finplan.domain.shared.exceptions import (
    CurrencyMismatchError,
    InsufficientBalanceError,
    InvalidAmountError,
)
from finplan.domain.shared.value_objects import Money
from finplan.domain.transactions import Transaction, TransactionType

DEFAULT_CONTRIBUTION_NAME = "Goal Contribution"
DEFAULT_WITHDRAWAL_NAME = "Goal Withdrawal"

INFLOW_TYPES = frozenset({TransactionType.GOAL_CONTRIBUTION, TransactionType.INCOME})
OUTFLOW_TYPES = frozenset({TransactionType.GOAL_WITHDRAWAL, TransactionType.OUTCOME})


class GoalAggregate(Aggregate[Goal, Transaction]):
    """Goal root with its contribution and withdrawal transactions.

    Invariant: the net balance (``total_contributed``) never drops below
    zero. Withdrawing exactly the available balance is allowed.
    """

    @property
    def goal(self) -> Goal:
        return self._root

    @property
    def transactions(self) -> list[Transaction]:
        return self._children.items

    @property
    def total_contributed(self) -> Money:
        total = Money.zero(self.goal.currency)
        for transaction in self._children.items:
            if transaction.type in INFLOW_TYPES:
                total = total.add(transaction.amount)
            elif transaction.type in OUTFLOW_TYPES:
                total = total.subtract(transaction.amount)
        return total

    @property
    def remaining_amount(self) -> Money:
        """Amount still missing to reach the target, never negative."""
        target = self.goal.target_amount
        if target is None:
            return Money.zero(self.goal.currency)
        remaining = target.subtract(self.total_contributed)
        if remaining.is_negative():
            return Money.zero(target.currency)
        return remaining

    @property
    def progress_ratio(self) -> Decimal:
        target = self.goal.target_amount
        if target is None or not target.is_positive():
            return Decimal(0)
        return (self.total_contributed.amount / target.amount).quantize(
            Decimal("0.0001"),
        )

    def contribute(
        self,
        amount: Money,
        name: Optional[str] = None,
        description: Optional[str] = None,
        recurring: int = 0,
    ) -> Transaction:
        self._ensure_usable_amount(amount)
        transaction = Transaction.new(
            user_id=self.user_id,
            amount=amount,
            transaction_type=TransactionType.GOAL_CONTRIBUTION,
            name=name or DEFAULT_CONTRIBUTION_NAME,
            description=description or f"Contribution to {self.goal.title}",
            recurring=recurring,
        )
        self._children.add(transaction)
        self._sync_progress()
        return transaction

    def withdraw(
        self,
        amount: Money,
        name: Optional[str] = None,
        description: Optional[str] = None,
        recurring: int = 0,
    ) -> Transaction:
        self._ensure_usable_amount(amount)
        available = self.total_contributed
        if amount.amount > available.amount:
            raise InsufficientBalanceError(requested=amount, available=available)

        transaction = Transaction.new(
            user_id=self.user_id,
            amount=amount,
            transaction_type=TransactionType.GOAL_WITHDRAWAL,
            name=name or DEFAULT_WITHDRAWAL_NAME,
            description=description or f"Withdrawal from {self.goal.title}",
            recurring=recurring,
        )
        self._children.add(transaction)
        self._sync_progress()
        return transaction

    def remove_transaction(self, transaction_id: UUID) -> Transaction:
        """Drop a contribution or withdrawal, keeping the balance non-negative."""
        transaction = self._children.find(transaction_id)
        if transaction is None:
            raise GoalTransactionNotFoundError(self.id, transaction_id)

        if transaction.type in INFLOW_TYPES:
            available = self.total_contributed
            if transaction.amount.amount > available.amount:
                raise InsufficientBalanceError(
                    requested=transaction.amount,
                    available=available,
                )

        self._children.remove(transaction)
        self._sync_progress()
        return transaction

    def update_transaction(  # NOQA: PLR0913
        self,
        transaction_id: UUID,
        amount: Optional[Money] = None,
        name: Optional[str] = None,
        description: Optional[str] = None,
        recurring: Optional[int] = None,
    ) -> Transaction:
        """Edit a contribution or withdrawal; progress follows the new amount.

        The edit is refused when it would leave the balance below zero.
        """
        transaction = self._children.find(transaction_id)
        if transaction is None:
            raise GoalTransactionNotFoundError(self.id, transaction_id)

        if amount is not None:
            self._ensure_usable_amount(amount)
            delta = amount.subtract(transaction.amount)
            if transaction.type in OUTFLOW_TYPES:
                delta = Money.zero(delta.currency).subtract(delta)
            available = self.total_contributed
            if available.add(delta).is_negative():
                raise InsufficientBalanceError(
                    requested=delta.abs(),
                    available=available,
                )

        transaction.update(
            name=name,
            description=description,
            amount=amount,
            recurring=recurring,
        )
        self._children.update(transaction)
        self._sync_progress()
        return transaction

    def update_goal_details(
        self,
        title: Optional[str] = None,
        description: Optional[str] = None,
        target_amount: Optional[Money] = None,
        due_date: Optional[date] = None,
    ) -> None:
        self.goal.update(
            title=title,
            description=description,
            target_amount=target_amount,
            due_date=due_date,
        )
        self.validate()

    def _ensure_usable_amount(self, amount: Money) -> None:
        if amount.amount <= 0:
            raise InvalidAmountError(amount.amount)
        if amount.currency != self.goal.currency:
            raise CurrencyMismatchError(self.goal.currency, amount.currency)

    def _sync_progress(self) -> None:
        self.goal.update_progress(self.total_contributed)
