"""Tests for the Money value object."""

from decimal import Decimal

import pytest
from pydantic import ValidationError as PydanticValidationError

from finplan.domain.shared.exceptions import CurrencyMismatchError, InvalidAmountError
from finplan.domain.shared.value_objects import Currency, Money


class TestMoneyCreation:
    def test_amount_and_currency_positional(self):
        money = Money(Decimal("12.50"), "USD")

        assert money.amount == Decimal("12.50")
        assert money.currency == Currency("USD")

    def test_default_currency_is_vnd(self):
        assert Money(100).currency.code == "VND"

    def test_accepts_int_float_and_str(self):
        assert Money(5, "USD").amount == Decimal(5)
        assert Money(0.1, "USD").amount == Decimal("0.1")
        assert Money("7.25", "USD").amount == Decimal("7.25")

    def test_trailing_zeros_beyond_cent_are_normalized(self):
        assert Money(Decimal("1.500"), "USD").amount == Decimal("1.50")

    @pytest.mark.parametrize(
        ("value", "expected"),
        [(500, "500.00"), ("1.5", "1.50"), (Decimal("-20"), "-20.00"), (0.1, "0.10")],
    )
    def test_amount_always_has_two_places(self, value, expected):
        assert str(Money(value, "USD").amount) == expected

    def test_derived_amounts_keep_two_places(self):
        assert str(Money.zero("USD").amount) == "0.00"
        assert str(Money(500, "USD").subtract(Money(520, "USD")).amount) == "-20.00"

    def test_more_than_two_decimal_places_rejected(self):
        with pytest.raises(PydanticValidationError, match="2 decimal places"):
            Money(Decimal("1.005"), "USD")

    def test_non_finite_amount_rejected(self):
        with pytest.raises(PydanticValidationError, match="finite"):
            Money(Decimal("NaN"), "USD")

    def test_is_immutable(self):
        money = Money(10, "USD")
        with pytest.raises(PydanticValidationError):
            money.amount = Decimal(20)

    def test_str(self):
        assert str(Money(Decimal("100"), "USD")) == "100.00 USD"


class TestMoneyArithmetic:
    """Arithmetic only combines values of the same currency."""

    def test_add_and_subtract_same_currency(self):
        a = Money(Decimal("10.25"), "USD")
        b = Money(Decimal("4.75"), "USD")

        assert a.add(b) == Money(Decimal("15.00"), "USD")
        assert a.subtract(b) == Money(Decimal("5.50"), "USD")
        assert a + b == a.add(b)
        assert a - b == a.subtract(b)

    @pytest.mark.parametrize(
        ("left", "right"),
        [
            (Decimal("0"), Decimal("0")),
            (Decimal("100.10"), Decimal("0.01")),
            (Decimal("-5"), Decimal("12.34")),
            (Decimal("999999.99"), Decimal("123.45")),
        ],
    )
    def test_add_then_subtract_is_identity(self, left, right):
        a = Money(left, "EUR")
        b = Money(right, "EUR")

        assert a.add(b).subtract(b) == a

    @pytest.mark.parametrize("operation", ["add", "subtract"])
    def test_mixed_currencies_raise(self, operation):
        usd = Money(10, "USD")
        eur = Money(10, "EUR")

        with pytest.raises(CurrencyMismatchError) as exc_info:
            getattr(usd, operation)(eur)

        assert exc_info.value.code.value == "CURRENCY_MISMATCH"
        assert exc_info.value.details["operation"] == operation

    def test_comparison_across_currencies_raises(self):
        with pytest.raises(CurrencyMismatchError):
            _ = Money(1, "USD") < Money(2, "EUR")

    def test_multiply_rounds_half_even_to_cent(self):
        assert Money(Decimal("0.25"), "USD").multiply("0.5") == Money(
            Decimal("0.12"),
            "USD",
        )
        assert Money(Decimal("10"), "USD") * 3 == Money(Decimal("30"), "USD")

    def test_divide(self):
        assert Money(Decimal("100"), "USD").divide(3) == Money(Decimal("33.33"), "USD")

    def test_divide_by_zero_raises(self):
        with pytest.raises(InvalidAmountError):
            Money(10, "USD") / 0

    def test_scaling_by_non_number_raises(self):
        with pytest.raises(TypeError):
            Money(10, "USD").multiply(True)


class TestMoneyComparison:
    def test_equality_requires_same_currency(self):
        assert Money(10, "USD") == Money(Decimal("10.00"), "USD")
        assert Money(10, "USD") != Money(10, "EUR")
        assert Money(10, "USD") != 10

    def test_hash_matches_equality(self):
        assert hash(Money(10, "USD")) == hash(Money(Decimal("10.00"), "USD"))

    def test_ordering(self):
        small = Money(1, "USD")
        big = Money(2, "USD")

        assert small < big
        assert small <= big
        assert big > small
        assert big >= small
        assert small.max(big) is big

    def test_sign_helpers(self):
        assert Money.zero("USD").is_zero()
        assert Money(1, "USD").is_positive()
        assert Money(-1, "USD").is_negative()
        assert Money(-1, "USD").abs() == Money(1, "USD")
