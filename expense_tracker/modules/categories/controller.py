from fastapi import APIRouter
from typing import List

from expense_tracker.modules.expenses.types import ExpenseCategory

router = APIRouter(prefix="/api/categories", tags=["categories"])


@router.get("", response_model=List[str])
async def get_all_categories() -> List[str]:
    """API endpoint listing the categories the expense form should offer"""
    return ExpenseCategory.values()
