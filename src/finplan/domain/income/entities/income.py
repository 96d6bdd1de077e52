"""Monthly income entity."""

from __future__ import annotations

from uuid import UUID

from finplan.domain.income.exceptions import InvalidIncomePeriodError
from finplan.domain.shared.entity import Entity, EntityProps
from finplan.domain.shared.value_objects import Currency

MIN_MONTH = 1
MAX_MONTH = 12


class IncomeProps(EntityProps):
    month: int
    year: int
    currency: Currency


class Income(Entity[IncomeProps]):
    """Everything a user earned in one calendar month, in one currency.

    The entries themselves are the ``income`` transactions held by
    ``IncomeAggregate``; the root only fixes the period and currency.
    """

    @classmethod
    def new(
        cls,
        user_id: UUID,
        month: int,
        year: int,
        currency: Currency | str | None = None,
    ) -> Income:
        if currency is None:
            currency = Currency.default()
        elif isinstance(currency, str):
            currency = Currency(currency)
        return cls(
            IncomeProps(user_id=user_id, month=month, year=year, currency=currency),
        )

    @property
    def month(self) -> int:
        return self._props.month

    @property
    def year(self) -> int:
        return self._props.year

    @property
    def currency(self) -> Currency:
        return self._props.currency

    def validate(self) -> None:
        if not MIN_MONTH <= self.month <= MAX_MONTH or self.year <= 0:
            raise InvalidIncomePeriodError(self.month, self.year)
