"""SQLAlchemy models for monthly income and its entry links."""

from datetime import datetime
from uuid import UUID

from sqlalchemy import (
    CheckConstraint,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    String,
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


class IncomeModel(Base, TimestampMixin, SoftDeleteMixin):
    """One row per user and calendar month; the amounts live in the entries."""

    __tablename__ = "incomes"

    __table_args__ = (
        CheckConstraint("month BETWEEN 1 AND 12", name="ck_incomes_month"),
        Index("ix_incomes_user_period", "user_id", "year", "month"),
    )

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    user_id: Mapped[UUID] = mapped_column(Uuid, nullable=False)

    month: Mapped[int] = mapped_column(Integer, nullable=False)
    year: Mapped[int] = mapped_column(Integer, nullable=False)
    currency: Mapped[str] = mapped_column(String(3), nullable=False)

    def __repr__(self) -> str:
        return f"<IncomeModel(id={self.id}, {self.month}/{self.year})>"


class IncomeTransactionModel(Base):
    """Link row attaching an income transaction to its month."""

    __tablename__ = "income_transactions"

    __table_args__ = (
        UniqueConstraint("transaction_id", name="uq_income_transactions_transaction"),
        Index("ix_income_transactions_income_id", "income_id"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    income_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("incomes.id"),
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
