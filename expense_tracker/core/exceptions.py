"""
Simple exception classes for the application.
"""

from fastapi import HTTPException, status


class ValidationError(HTTPException):
    """Raised when request data is malformed or breaks an expense rule."""

    def __init__(self, message: str):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=message
        )


class NotFoundError(HTTPException):
    """Raised when a requested resource is not found."""

    def __init__(self, resource_type: str, resource_id):
        self.resource_id = resource_id
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"{resource_type} not found"
        )


class DatabaseError(HTTPException):
    """Raised when database operations fail.

    The message is shown to the caller as-is, so it must never carry
    driver or SQL details.
    """

    def __init__(self, message: str = "Database operation failed"):
        super().__init__(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=message
        )


# Specific domain exceptions
class ExpenseNotFoundError(NotFoundError):
    """Raised when an expense is not found."""

    def __init__(self, expense_id: int):
        super().__init__("Expense", expense_id)
