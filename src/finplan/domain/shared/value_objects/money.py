"""Value object for monetary amounts."""

from __future__ import annotations

from decimal import ROUND_HALF_EVEN, Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from finplan.domain.shared.exceptions import CurrencyMismatchError, InvalidAmountError
from finplan.domain.shared.value_objects.currency import Currency

# Constants for validation
DECIMAL_PLACES_LIMIT = -2
CENT = Decimal("0.01")

Scalar = Decimal | int | float | str


def _to_decimal(value: Scalar) -> Decimal:
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        msg = f"Money can only be scaled by numeric values, got {type(value)}"
        raise TypeError(msg)
    # str() first so floats keep their shortest repr instead of binary noise
    return Decimal(str(value))


class Money(BaseModel):
    """Immutable amount tagged with a currency.

    All arithmetic returns a new instance. Addition, subtraction and
    ordering between two values require the same currency and raise
    CurrencyMismatchError otherwise.
    """

    amount: Decimal
    currency: Currency = Currency.default()

    model_config = ConfigDict(frozen=True)

    def __init__(
        self,
        amount: Scalar | None = None,
        currency: Currency | str | None = None,
        **data: Any,
    ):
        if currency is None and "currency" not in data:
            currency = Currency.default()
        if "amount" not in data:
            data["amount"] = amount
        if currency is not None:
            data["currency"] = currency
        super().__init__(**data)

    @field_validator("amount", mode="before")
    @classmethod
    def validate_amount(cls, v: Any) -> Decimal:
        if v is None:
            msg = "Money amount is required"
            raise ValueError(msg)
        if not isinstance(v, Decimal):
            v = Decimal(str(v))

        if not v.is_finite():
            msg = "Money amount must be a finite number"
            raise ValueError(msg)

        decimal_places = v.as_tuple().exponent
        if not isinstance(decimal_places, int):
            msg = "Money amount must have a valid decimal exponent"
            raise ValueError(msg)

        # Trailing zeros beyond the cent are harmless: 1.500 -> 1.50
        normalized = v.quantize(CENT)
        if decimal_places < DECIMAL_PLACES_LIMIT and normalized != v:
            msg = "Money cannot have more than 2 decimal places"
            raise ValueError(msg)

        # Stored with exactly two places
        return normalized

    @field_validator("currency", mode="before")
    @classmethod
    def validate_currency(cls, v: Any) -> Currency:
        if isinstance(v, Currency):
            return v
        if isinstance(v, str):
            return Currency(v)
        msg = f"Currency must be Currency instance or string, got {type(v)}"
        raise TypeError(msg)

    @classmethod
    def zero(cls, currency: Currency | str | None = None) -> Money:
        return cls(Decimal(0), currency)

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def add(self, other: Money) -> Money:
        self._ensure_same_currency(other, "add")
        return Money(self.amount + other.amount, self.currency)

    def subtract(self, other: Money) -> Money:
        self._ensure_same_currency(other, "subtract")
        return Money(self.amount - other.amount, self.currency)

    def multiply(self, factor: Scalar) -> Money:
        result = self.amount * _to_decimal(factor)
        return Money(result.quantize(CENT, rounding=ROUND_HALF_EVEN), self.currency)

    def divide(self, divisor: Scalar) -> Money:
        value = _to_decimal(divisor)
        if value == 0:
            raise InvalidAmountError(divisor, "Cannot divide money by zero")
        result = self.amount / value
        return Money(result.quantize(CENT, rounding=ROUND_HALF_EVEN), self.currency)

    def equals(self, other: Money) -> bool:
        return self.amount == other.amount and self.currency == other.currency

    def max(self, other: Money) -> Money:
        self._ensure_same_currency(other, "compare")
        return self if self.amount >= other.amount else other

    def __add__(self, other: Money) -> Money:
        return self.add(other)

    def __sub__(self, other: Money) -> Money:
        return self.subtract(other)

    def __mul__(self, factor: Scalar) -> Money:
        return self.multiply(factor)

    def __truediv__(self, divisor: Scalar) -> Money:
        return self.divide(divisor)

    # -------------------------------------------------------------------------
    # Comparison
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Money):
            return False
        return self.equals(other)

    def __hash__(self) -> int:
        return hash((self.amount, self.currency))

    def __lt__(self, other: Money) -> bool:
        self._ensure_same_currency(other, "compare")
        return self.amount < other.amount

    def __le__(self, other: Money) -> bool:
        self._ensure_same_currency(other, "compare")
        return self.amount <= other.amount

    def __gt__(self, other: Money) -> bool:
        self._ensure_same_currency(other, "compare")
        return self.amount > other.amount

    def __ge__(self, other: Money) -> bool:
        self._ensure_same_currency(other, "compare")
        return self.amount >= other.amount

    def __str__(self) -> str:
        return f"{self.amount:.2f} {self.currency}"

    def is_zero(self) -> bool:
        return self.amount == Decimal(0)

    def is_positive(self) -> bool:
        return self.amount > Decimal(0)

    def is_negative(self) -> bool:
        return self.amount < Decimal(0)

    def abs(self) -> Money:
        return Money(abs(self.amount), self.currency)

    def _ensure_same_currency(self, other: Money, operation: str) -> None:
        if self.currency != other.currency:
            raise CurrencyMismatchError(self.currency, other.currency, operation)
