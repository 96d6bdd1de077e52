"""SQLAlchemy models for goals and their transaction links."""

from datetime import date, datetime
from decimal import Decimal
from typing import Optional
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


class GoalModel(Base, TimestampMixin, SoftDeleteMixin):
    """Database model for savings goals.

    Target and current amounts share the ``currency`` column.
    """

    __tablename__ = "goals"

    __table_args__ = (
        CheckConstraint(
            "target_amount IS NULL OR target_amount > 0",
            name="ck_goals_target_positive",
        ),
        Index("ix_goals_user_id", "user_id"),
        Index("ix_goals_user_title", "user_id", "title"),
    )

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    user_id: Mapped[UUID] = mapped_column(Uuid, nullable=False)

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    target_amount: Mapped[Optional[Decimal]] = mapped_column(
        Numeric(15, 2),
        nullable=True,
    )
    current_amount: Mapped[Optional[Decimal]] = mapped_column(
        Numeric(15, 2),
        nullable=True,
    )
    currency: Mapped[str] = mapped_column(String(3), nullable=False)
    due_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)

    def __repr__(self) -> str:
        return f"<GoalModel(id={self.id}, title={self.title})>"


class GoalTransactionModel(Base):
    """Link row attaching a contribution or withdrawal to a goal."""

    __tablename__ = "goal_transactions"

    __table_args__ = (
        UniqueConstraint("transaction_id", name="uq_goal_transactions_transaction"),
        Index("ix_goal_transactions_goal_id", "goal_id"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    goal_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("goals.id"),
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
