"""Income aggregate: one month of income entries."""

from __future__ import annotations

from typing import Optional
from uuid import UUID

from finplan.domain.income.entities.income import Income
from finplan.domain.income.exceptions import IncomeTransactionNotFoundError
from finplan.domain.shared.aggregate import Aggregate
from finplan.domain.shared.exceptions import CurrencyMismatchError
from finplan.domain.shared.value_objects import Currency, Money
from finplan.domain.transactions import Transaction, TransactionType

DEFAULT_INCOME_DESCRIPTION = "Income"


class IncomeAggregate(Aggregate[Income, Transaction]):
    """Income root with its ``income`` transactions.

    ``total`` is folded from the live entries, all of which are in the
    currency of the root.
    """

    @classmethod
    def for_month(
        cls,
        user_id: UUID,
        month: int,
        year: int,
        currency: Currency | str | None = None,
    ) -> IncomeAggregate:
        return cls.create(Income.new(user_id, month, year, currency))

    @property
    def income(self) -> Income:
        return self._root

    @property
    def entries(self) -> list[Transaction]:
        return self._children.items

    @property
    def total(self) -> Money:
        total = Money.zero(self.income.currency)
        for transaction in self._children.items:
            total = total.add(transaction.amount)
        return total

    def add_income(
        self,
        amount: Money,
        name: str,
        description: Optional[str] = None,
        recurring: int = 0,
    ) -> Transaction:
        self._ensure_income_currency(amount)
        transaction = Transaction.new(
            user_id=self.user_id,
            amount=amount,
            transaction_type=TransactionType.INCOME,
            name=name,
            description=description or DEFAULT_INCOME_DESCRIPTION,
            recurring=recurring,
        )
        self._children.add(transaction)
        return transaction

    def update_income(  # NOQA: PLR0913
        self,
        transaction_id: UUID,
        amount: Optional[Money] = None,
        name: Optional[str] = None,
        description: Optional[str] = None,
        recurring: Optional[int] = None,
    ) -> Transaction:
        transaction = self._find_entry(transaction_id)
        if amount is not None:
            self._ensure_income_currency(amount)
        transaction.update(
            name=name,
            description=description,
            amount=amount,
            recurring=recurring,
        )
        self._children.update(transaction)
        return transaction

    def remove_income(self, transaction_id: UUID) -> Transaction:
        transaction = self._find_entry(transaction_id)
        self._children.remove(transaction)
        return transaction

    def validate(self) -> None:
        super().validate()
        for transaction in self._children.items:
            self._ensure_income_currency(transaction.amount)

    def _find_entry(self, transaction_id: UUID) -> Transaction:
        transaction = self._children.find(transaction_id)
        if transaction is None:
            raise IncomeTransactionNotFoundError(self.id, transaction_id)
        return transaction

    def _ensure_income_currency(self, amount: Money) -> None:
        if amount.currency != self.income.currency:
            raise CurrencyMismatchError(self.income.currency, amount.currency, "earn")
