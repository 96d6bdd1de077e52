"""Tests for the monthly payment calculation."""

from datetime import date, timedelta
from decimal import Decimal

import pytest

from finplan.domain.debt.services.monthly_payment import (
    calculate_monthly_payment,
    months_until,
)
from tests.shared.fixtures.factories import usd

TODAY = date(2025, 6, 1)


class TestMonthsUntil:
    @pytest.mark.parametrize(
        ("days", "expected"),
        [(-10, 0), (0, 0), (1, 1), (30, 1), (31, 2), (365, 13)],
    )
    def test_rounds_up_to_whole_months(self, days, expected):
        assert months_until(TODAY + timedelta(days=days), TODAY) == expected


class TestCalculateMonthlyPayment:
    def test_without_interest_splits_evenly(self):
        payment = calculate_monthly_payment(
            usd(1000),
            Decimal(0),
            TODAY + timedelta(days=300),
            TODAY,
        )

        assert payment == usd(100)

    def test_with_interest_uses_annuity_formula(self):
        # 1% per month over 12 months on 1200: 1200 * 0.01 / (1 - 1.01^-12)
        payment = calculate_monthly_payment(
            usd(1200),
            Decimal(1),
            TODAY + timedelta(days=360),
            TODAY,
        )

        assert payment == usd("106.62")

    def test_due_or_overdue_requires_full_amount(self):
        payment = calculate_monthly_payment(usd(800), Decimal(2), TODAY, TODAY)

        assert payment == usd(800)

    def test_nothing_remaining(self):
        payment = calculate_monthly_payment(
            usd(0),
            Decimal(1),
            TODAY + timedelta(days=90),
            TODAY,
        )

        assert payment.is_zero()
