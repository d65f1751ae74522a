"""
Centralized dependency management
The store lives on app state for the lifetime of the process; services are per-request
"""

from typing import Annotated
from fastapi import Depends, Request

from expense_tracker.modules.expenses.service import ExpensesService
from expense_tracker.modules.expenses.store import ExpenseStore


# ============================================================================
# APPLICATION-SCOPED DEPENDENCIES (created in the lifespan)
# ============================================================================


def get_expense_store(request: Request) -> ExpenseStore:
    """
    Expense store - opened at startup, closed at shutdown
    """
    return request.app.state.expense_store


ExpenseStoreDep = Annotated[ExpenseStore, Depends(get_expense_store)]


# ============================================================================
# SERVICE LAYER (new instance per request, wrapping the shared store)
# ============================================================================


def get_expense_service(store: ExpenseStoreDep) -> ExpensesService:
    """Expense service - stateless, so construction is cheap"""
    return ExpensesService(store)


ExpenseServiceDep = Annotated[ExpensesService, Depends(get_expense_service)]
