import logging
import math
import re
from decimal import Decimal, InvalidOperation
from typing import Any, List, Optional

from expense_tracker.core.exceptions import ExpenseNotFoundError, ValidationError
from expense_tracker.modules.expenses.dto import (
    CreateExpenseModel,
    DeleteExpenseResponse,
    ExpenseResponse,
    UpdateExpenseModel,
)
from expense_tracker.modules.expenses.store import ExpenseStore
from expense_tracker.modules.expenses.types import (
    ALL_CATEGORIES,
    ExpenseCategory,
    ExpenseFields,
)

logger = logging.getLogger(__name__)

_EXPENSE_ID_RE = re.compile(r"[+-]?\d+")

# Largest id SQLite can hold
_MAX_EXPENSE_ID = 2**63 - 1


def parse_expense_id(raw_id: Any) -> int:
    """Accept only a plain integer; ``"12abc"`` and ``"1.5"`` are rejected."""
    if isinstance(raw_id, bool):
        raise ValidationError("Invalid expense ID")
    if isinstance(raw_id, int):
        return raw_id
    if not isinstance(raw_id, str) or not _EXPENSE_ID_RE.fullmatch(raw_id.strip()):
        raise ValidationError("Invalid expense ID")
    return int(raw_id.strip())


def parse_amount(value: Any) -> float:
    """Explicitly parse an amount from a JSON number or numeric string."""
    # bool is an int subclass, but true is not an amount
    if isinstance(value, bool):
        raise ValidationError("Amount must be a valid number")

    if isinstance(value, (int, float)):
        text = str(value)
    elif isinstance(value, str):
        text = value.strip()
    else:
        raise ValidationError("Amount must be a valid number")

    try:
        amount = Decimal(text)
    except InvalidOperation:
        raise ValidationError("Amount must be a valid number")

    if not amount.is_finite():
        raise ValidationError("Amount must be a valid number")

    # checked after conversion: 1e400 overflows to inf, 1e-400 underflows to 0.0
    parsed = float(amount)
    if math.isinf(parsed):
        raise ValidationError("Amount must be a valid number")
    if parsed <= 0:
        raise ValidationError("Amount must be greater than 0")
    return parsed


def parse_description(value: Any) -> str:
    if not isinstance(value, str):
        raise ValidationError("Description must be a string")
    description = value.strip()
    if not description:
        raise ValidationError("Description cannot be empty")
    return description


def parse_category(value: Any) -> ExpenseCategory:
    if not isinstance(value, str):
        raise ValidationError("Invalid category")
    try:
        return ExpenseCategory(value)
    except ValueError:
        raise ValidationError("Invalid category")


def resolve_category_filter(raw: Optional[str]) -> Optional[ExpenseCategory]:
    """Map the ``category`` query parameter to a store filter.

    Unknown values are ignored rather than rejected, so the list is
    returned unfiltered.
    """
    if raw is None or raw == "" or raw == ALL_CATEGORIES:
        return None
    try:
        return ExpenseCategory(raw)
    except ValueError:
        logger.debug(f"Ignoring unrecognised category filter: {raw!r}")
        return None


_FIELD_PARSERS = {
    "amount": parse_amount,
    "description": parse_description,
    "category": parse_category,
}


class ExpensesService:
    def __init__(self, store: ExpenseStore):
        self.store = store
        self.logger = logger

    async def get_expenses(self, category: Optional[str] = None) -> List[ExpenseResponse]:
        self.logger.debug(f"ExpensesService.get_expenses called with category: {category!r}")
        category_filter = resolve_category_filter(category)
        expenses = await self.store.list(category_filter)
        return [ExpenseResponse.model_validate(expense) for expense in expenses]

    async def create_expense(self, data: CreateExpenseModel) -> ExpenseResponse:
        if data.amount is None or data.description is None or data.category is None:
            raise ValidationError("Missing required fields")

        amount = parse_amount(data.amount)
        description = parse_description(data.description)
        category = parse_category(data.category)

        self.logger.info(f"Creating new expense in category: {category.value}")
        expense = await self.store.create(amount, description, category)
        return ExpenseResponse.model_validate(expense)

    async def update_expense(self, raw_id: Any, data: UpdateExpenseModel) -> ExpenseResponse:
        expense_id = parse_expense_id(raw_id)

        fields: ExpenseFields = {}
        for key, value in data.provided_fields().items():
            # an explicit null is a provided value and fails its parser
            fields[key] = _FIELD_PARSERS[key](value)

        if not 0 < expense_id <= _MAX_EXPENSE_ID:
            raise ExpenseNotFoundError(expense_id)

        self.logger.info(f"Updating expense with ID: {expense_id}")
        expense = await self.store.update(expense_id, fields)
        return ExpenseResponse.model_validate(expense)

    async def delete_expense(self, raw_id: Any) -> DeleteExpenseResponse:
        expense_id = parse_expense_id(raw_id)
        if not 0 < expense_id <= _MAX_EXPENSE_ID:
            raise ExpenseNotFoundError(expense_id)

        self.logger.info(f"Deleting expense with ID: {expense_id}")
        await self.store.delete(expense_id)
        return DeleteExpenseResponse(message="Expense deleted successfully")
