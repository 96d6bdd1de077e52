from finplan.domain.debt.services.monthly_payment import (
    calculate_monthly_payment,
    months_until,
)

__all__ = ["calculate_monthly_payment", "months_until"]
