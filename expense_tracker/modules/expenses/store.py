"""
Persistence for expense records.

``ExpenseStore`` is the contract the service depends on; the
SQLAlchemy implementation is what the app wires in at startup.
Tests can substitute any other implementation.
"""

import logging
from abc import ABC, abstractmethod
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from expense_tracker.core.db.engine import DatabaseSessionManager
from expense_tracker.core.exceptions import DatabaseError, ExpenseNotFoundError
from expense_tracker.modules.expenses.models import Expense
from expense_tracker.modules.expenses.types import ExpenseCategory, ExpenseFields

logger = logging.getLogger(__name__)


class ExpenseStore(ABC):
    """
    Abstract interface for expense storage operations.

    Implementations raise ``ExpenseNotFoundError`` for unknown ids and
    ``DatabaseError`` for any other persistence failure.
    """

    async def open(self) -> None:
        """Acquire resources. Called once at application startup."""

    async def close(self) -> None:
        """Release resources. Called once at application shutdown."""

    @abstractmethod
    async def list(self, category: Optional[ExpenseCategory] = None) -> List[Expense]:
        """Return expenses newest first, optionally restricted to one category."""

    @abstractmethod
    async def create(self, amount: float, description: str, category: ExpenseCategory) -> Expense:
        """Insert an expense; the store assigns ``id`` and ``created_at``."""

    @abstractmethod
    async def update(self, expense_id: int, fields: ExpenseFields) -> Expense:
        """Write only the given fields and return the updated record."""

    @abstractmethod
    async def delete(self, expense_id: int) -> None:
        """Remove the record permanently."""


class SQLAlchemyExpenseStore(ExpenseStore):
    def __init__(self, sessions: DatabaseSessionManager, create_tables: bool = False):
        self.sessions = sessions
        self.create_tables = create_tables
        self.logger = logger

    async def open(self) -> None:
        self.sessions.open()
        if self.create_tables:
            await self.sessions.create_all()

    async def close(self) -> None:
        if self.sessions.is_open:
            await self.sessions.close()

    async def list(self, category: Optional[ExpenseCategory] = None) -> List[Expense]:
        query = select(Expense).order_by(Expense.created_at.desc(), Expense.id.desc())
        if category is not None:
            query = query.where(Expense.category == category.value)

        self.logger.debug(f"Executing query: {query}")
        try:
            async with self.sessions.session() as session:
                result = await session.execute(query)
                return list(result.scalars().all())
        except SQLAlchemyError as e:
            self.logger.error(f"Database error during expense listing: {str(e)}")
            raise DatabaseError("Failed to fetch expenses")

    async def create(self, amount: float, description: str, category: ExpenseCategory) -> Expense:
        try:
            async with self.sessions.session() as session:
                expense = Expense(
                    amount=amount,
                    description=description,
                    category=category.value,
                )
                session.add(expense)
                await session.commit()
                await session.refresh(expense)
        except SQLAlchemyError as e:
            self.logger.error(f"Database error during expense creation: {str(e)}")
            raise DatabaseError("Failed to create expense")

        self.logger.info(f"Created expense {expense.id}")
        return expense

    async def update(self, expense_id: int, fields: ExpenseFields) -> Expense:
        try:
            async with self.sessions.session() as session:
                expense = await session.get(Expense, expense_id)
                if expense is None:
                    self.logger.warning(f"Expense with ID {expense_id} not found")
                    raise ExpenseNotFoundError(expense_id)

                for key, value in fields.items():
                    if isinstance(value, ExpenseCategory):
                        value = value.value
                    setattr(expense, key, value)

                await session.commit()
                await session.refresh(expense)
        except SQLAlchemyError as e:
            self.logger.error(f"Database error during expense update: {str(e)}")
            raise DatabaseError("Failed to update expense")

        self.logger.info(f"Updated expense {expense_id}: {sorted(fields)}")
        return expense

    async def delete(self, expense_id: int) -> None:
        try:
            async with self.sessions.session() as session:
                expense = await session.get(Expense, expense_id)
                if expense is None:
                    self.logger.warning(f"Expense with ID {expense_id} not found")
                    raise ExpenseNotFoundError(expense_id)

                await session.delete(expense)
                await session.commit()
        except SQLAlchemyError as e:
            self.logger.error(f"Database error during expense deletion: {str(e)}")
            raise DatabaseError("Failed to delete expense")

        self.logger.info(f"Deleted expense {expense_id}")
