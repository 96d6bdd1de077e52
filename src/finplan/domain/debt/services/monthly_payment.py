"""Monthly repayment estimate for a debt."""

from __future__ import annotations

import math
from datetime import date
from decimal import ROUND_HALF_EVEN, Decimal

from finplan.domain.shared.value_objects import Money

DAYS_PER_MONTH = 30
CENT = Decimal("0.01")


def months_until(due_date: date, today: date) -> int:
    """Whole months left until ``due_date``, rounded up; 0 when due or overdue."""
    days = (due_date - today).days
    if days <= 0:
        return 0
    return math.ceil(days / DAYS_PER_MONTH)


def calculate_monthly_payment(
    remaining: Money,
    rate: Decimal,
    due_date: date,
    today: date,
) -> Money:
    """Annuity payment that clears ``remaining`` by ``due_date``.

    ``rate`` is the monthly interest rate in percent. Without interest the
    remaining amount is split evenly. A debt that is due now or overdue
    must be paid in full.
    """
    if not remaining.is_positive():
        return Money.zero(remaining.currency)

    months = months_until(due_date, today)
    if months == 0:
        return remaining

    if rate == 0:
        return remaining.divide(months)

    monthly_rate = Decimal(rate) / Decimal(100)
    factor = monthly_rate / (1 - (1 + monthly_rate) ** -months)
    payment = (remaining.amount * factor).quantize(CENT, rounding=ROUND_HALF_EVEN)
    return Money(payment, remaining.currency)
