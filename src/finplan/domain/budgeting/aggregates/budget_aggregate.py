"""Budget aggregate: a budget and the spending recorded against it."""

from __future__ import annotations

from typing import Optional
from uuid import UUID

from finplan.domain.budgeting.entities.budget import Budget
from finplan.domain.budgeting.exceptions import SpendingNotFoundError
from finplan.domain.shared.aggregate import Aggregate
from finplan.domain.shared.change_tracking import ChangeTrackingCollection
from finplan.domain.shared.exceptions import CurrencyMismatchError
from finplan.domain.shared.value_objects import Money
from finplan.domain.transactions import Transaction, TransactionType

DEFAULT_SPENDING_NAME = "Spending"


class BudgetAggregate(Aggregate[Budget, Transaction]):
    """Budget root with its outcome transactions.

    Spending can be recorded through ``spend`` or by manipulating
    ``children`` directly; either way ``spent`` and ``remaining_budget``
    follow the live collection. Every spending is in the currency of the
    budget amount.
    """

    @property
    def budget(self) -> Budget:
        return self._root

    @property
    def spending(self) -> list[Transaction]:
        return self._children.items

    @property
    def spending_collection(self) -> ChangeTrackingCollection[Transaction]:
        return self._children

    @property
    def spent(self) -> Money:
        total = Money.zero(self.budget.amount.currency)
        for transaction in self._children.items:
            total = total.add(transaction.amount)
        return total

    @property
    def remaining_budget(self) -> Money:
        """Budget minus spending; negative once the budget is exceeded."""
        return self.budget.amount.subtract(self.spent)

    @property
    def is_over_budget(self) -> bool:
        return self.remaining_budget.is_negative()

    def spend(
        self,
        amount: Money,
        name: Optional[str] = None,
        description: Optional[str] = None,
        recurring: int = 0,
    ) -> Transaction:
        self._ensure_budget_currency(amount)
        transaction = Transaction.new(
            user_id=self.user_id,
            amount=amount,
            transaction_type=TransactionType.OUTCOME,
            name=name or DEFAULT_SPENDING_NAME,
            description=description or f"Spending for {self.budget.name}",
            recurring=recurring,
        )
        self._children.add(transaction)
        return transaction

    def remove_spending(self, transaction_id: UUID) -> Transaction:
        transaction = self._children.find(transaction_id)
        if transaction is None:
            raise SpendingNotFoundError(self.id, transaction_id)
        self._children.remove(transaction)
        return transaction

    def update_spending(  # NOQA: PLR0913
        self,
        transaction_id: UUID,
        name: Optional[str] = None,
        description: Optional[str] = None,
        amount: Optional[Money] = None,
        recurring: Optional[int] = None,
    ) -> Transaction:
        transaction = self._children.find(transaction_id)
        if transaction is None:
            raise SpendingNotFoundError(self.id, transaction_id)
        if amount is not None:
            self._ensure_budget_currency(amount)
        transaction.update(
            name=name,
            description=description,
            amount=amount,
            recurring=recurring,
        )
        self._children.update(transaction)
        return transaction

    def update_budget(self, **changes) -> None:
        amount = changes.get("amount")
        if amount is not None:
            for transaction in self._children.items:
                if transaction.amount.currency != amount.currency:
                    raise CurrencyMismatchError(
                        amount.currency,
                        transaction.amount.currency,
                        "budget",
                    )
        self.budget.update(**changes)
        self.validate()

    def validate(self) -> None:
        super().validate()
        for transaction in self._children.items:
            self._ensure_budget_currency(transaction.amount)

    def _ensure_budget_currency(self, amount: Money) -> None:
        currency = self.budget.amount.currency
        if amount.currency != currency:
            raise CurrencyMismatchError(currency, amount.currency, "spend")
