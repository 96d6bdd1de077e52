"""SQLAlchemy models for debts and their payment links."""

from datetime import date, datetime
from decimal import Decimal
from uuid import UUID

from sqlalchemy import (
    CheckConstraint,
    Date,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    Numeric,
    String,
    Text,
    UniqueConstraint,
    Uuid,
)
from sqlalchemy.orm import Mapped, mapped_column

from finplan.domain.shared.time import utc_now
from finplan.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    SoftDeleteMixin,
    TimestampMixin,
)


class DebtModel(Base, TimestampMixin, SoftDeleteMixin):
    """Database model for debts."""

    __tablename__ = "debts"

    __table_args__ = (
        CheckConstraint("amount > 0", name="ck_debts_amount_positive"),
        CheckConstraint("rate >= 0", name="ck_debts_rate"),
        Index("ix_debts_user_id", "user_id"),
    )

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    user_id: Mapped[UUID] = mapped_column(Uuid, nullable=False)

    lender: Mapped[str] = mapped_column(String(255), nullable=False)
    purpose: Mapped[str] = mapped_column(Text, nullable=False, default="")
    amount: Mapped[Decimal] = mapped_column(Numeric(15, 2), nullable=False)
    currency: Mapped[str] = mapped_column(String(3), nullable=False)
    rate: Mapped[Decimal] = mapped_column(
        Numeric(7, 4),
        nullable=False,
        default=Decimal(0),
        comment="Monthly interest rate in percent",
    )
    due_date: Mapped[date] = mapped_column(Date, nullable=False)
    type: Mapped[str] = mapped_column(String(20), nullable=False)

    def __repr__(self) -> str:
        return f"<DebtModel(id={self.id}, lender={self.lender}, amount={self.amount})>"


class DebtTransactionModel(Base):
    """Link row attaching a payment transaction to a debt."""

    __tablename__ = "debt_transactions"

    __table_args__ = (
        UniqueConstraint("transaction_id", name="uq_debt_transactions_transaction"),
        Index("ix_debt_transactions_debt_id", "debt_id"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    debt_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("debts.id"),
        nullable=False,
    )
    transaction_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("transactions.id"),
        nullable=False,
    )
    user_id: Mapped[UUID] = mapped_column(Uuid, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        nullable=False,
    )
