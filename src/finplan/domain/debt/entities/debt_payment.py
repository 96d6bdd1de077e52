"""Payment made against a debt."""

from __future__ import annotations

from uuid import UUID

from finplan.domain.shared.exceptions import ValidationError
from finplan.domain.shared.value_objects import Money
from finplan.domain.transactions import Transaction, TransactionType


class DebtPayment(Transaction):
    """A transaction of type ``debt_payment``."""

    entity_name = "Debt payment"

    @classmethod
    def new_payment(
        cls,
        user_id: UUID,
        amount: Money,
        name: str,
        description: str = "",
    ) -> DebtPayment:
        return cls.new(
            user_id=user_id,
            amount=amount,
            transaction_type=TransactionType.DEBT_PAYMENT,
            name=name,
            description=description,
        )

    def validate(self) -> None:
        super().validate()
        if self.type != TransactionType.DEBT_PAYMENT:
            msg = f"Debt payment must have type '{TransactionType.DEBT_PAYMENT.value}'"
            raise ValidationError(msg, details={"type": self.type.value})
