from datetime import datetime
from sqlalchemy import String, Float, DateTime, Index
from sqlalchemy.orm import Mapped, mapped_column

from expense_tracker.core.db.base import Base
from expense_tracker.utils.datetime import utc_now


class Expense(Base):
    __tablename__ = "expenses"
    __table_args__ = (
        # Indexes for query performance
        Index('idx_expenses_created_at', 'created_at'),
        Index('idx_expenses_category', 'category'),
        # Deleted ids must never come back
        {"sqlite_autoincrement": True},
    )

    id: Mapped[int] = mapped_column(
        primary_key=True, autoincrement=True
    )

    amount: Mapped[float] = mapped_column(Float, nullable=False)

    description: Mapped[str] = mapped_column(String, nullable=False)

    category: Mapped[str] = mapped_column(String(32), nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utc_now, nullable=False
    )

    def __repr__(self) -> str:
        return f"<Expense(id={self.id}, amount={self.amount}, category='{self.category}')>"
