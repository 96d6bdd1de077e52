"""SQLAlchemy model for transactions owned by budgets, debts and goals."""

from decimal import Decimal
from uuid import UUID

from sqlalchemy import CheckConstraint, Index, Integer, Numeric, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from finplan.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    SoftDeleteMixin,
    TimestampMixin,
)


class TransactionModel(Base, TimestampMixin, SoftDeleteMixin):
    """Child row shared by all three aggregate families.

    Which aggregate owns a transaction is recorded in the link tables
    (budget_transactions, debt_transactions, goal_transactions).
    """

    __tablename__ = "transactions"

    __table_args__ = (
        CheckConstraint("amount > 0", name="ck_transactions_amount_positive"),
        CheckConstraint("recurring >= 0", name="ck_transactions_recurring"),
        Index("ix_transactions_user_id", "user_id"),
        Index("ix_transactions_user_type", "user_id", "type"),
    )

    # Primary key (UUID from domain)
    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    user_id: Mapped[UUID] = mapped_column(Uuid, nullable=False)

    amount: Mapped[Decimal] = mapped_column(Numeric(15, 2), nullable=False)
    currency: Mapped[str] = mapped_column(String(3), nullable=False)
    type: Mapped[str] = mapped_column(
        String(32),
        nullable=False,
        comment="income, outcome, goal_contribution, goal_withdrawal, debt_payment",
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    recurring: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    def __repr__(self) -> str:
        return (
            f"<TransactionModel(id={self.id}, type={self.type}, "
            f"amount={self.amount} {self.currency})>"
        )
