from fastapi import APIRouter, Query, status
from typing import List, Optional

from expense_tracker.core.dependencies import ExpenseServiceDep
from expense_tracker.modules.expenses.dto import (
    CreateExpenseModel,
    DeleteExpenseResponse,
    ExpenseResponse,
    UpdateExpenseModel,
)

router = APIRouter(prefix="/api/expenses", tags=["expenses"])


@router.get("", response_model=List[ExpenseResponse])
async def get_all_expenses(
    expenses_service: ExpenseServiceDep,
    category: Optional[str] = Query(
        None, description="Category to filter by; 'all' or omitted returns everything"
    ),
) -> List[ExpenseResponse]:
    """API endpoint to fetch expenses, newest first"""
    return await expenses_service.get_expenses(category)


@router.post("", response_model=ExpenseResponse, status_code=status.HTTP_201_CREATED)
async def create_expense(
    expense_data: CreateExpenseModel,
    expenses_service: ExpenseServiceDep,
) -> ExpenseResponse:
    """API endpoint to create a new expense"""
    return await expenses_service.create_expense(expense_data)


# The id is taken as a string so a malformed id is a 400, not a 422
@router.put("/{expense_id}", response_model=ExpenseResponse)
async def update_expense(
    expense_id: str,
    update_data: UpdateExpenseModel,
    expenses_service: ExpenseServiceDep,
) -> ExpenseResponse:
    """API endpoint to update any subset of an expense's fields"""
    return await expenses_service.update_expense(expense_id, update_data)


@router.delete("/{expense_id}", response_model=DeleteExpenseResponse)
async def delete_expense(
    expense_id: str,
    expenses_service: ExpenseServiceDep,
) -> DeleteExpenseResponse:
    """API endpoint to delete an expense"""
    return await expenses_service.delete_expense(expense_id)
