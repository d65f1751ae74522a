from datetime import datetime
from pydantic import AliasChoices, BaseModel, Field, field_serializer
from typing import Any

from expense_tracker.modules.expenses.types import ExpenseCategory
from expense_tracker.utils.datetime import as_utc


# Fields are untyped; the service parses each value and raises a 400
class CreateExpenseModel(BaseModel):
    amount: Any = Field(None, description="Amount spent, a positive number")
    description: Any = Field(None, description="What the money was spent on")
    category: Any = Field(None, description="One of Food, Transport, Shopping, Other")


class UpdateExpenseModel(BaseModel):
    amount: Any = Field(None, description="New amount, a positive number")
    description: Any = Field(None, description="New description")
    category: Any = Field(None, description="New category")

    def provided_fields(self) -> dict[str, Any]:
        """Fields present in the request body, including explicit nulls."""
        return self.model_dump(exclude_unset=True)


class ExpenseResponse(BaseModel):
    id: int = Field(..., description="Unique identifier for the expense")
    amount: float = Field(..., description="Amount of the expense")
    description: str = Field(..., description="Trimmed description of the expense")
    category: ExpenseCategory = Field(..., description="Category of the expense")
    created_at: datetime = Field(
        ...,
        validation_alias=AliasChoices("created_at", "createdAt"),
        serialization_alias="createdAt",
        description="When the expense record was created",
    )

    @field_serializer("created_at")
    def serialize_created_at(self, value: datetime) -> str:
        return as_utc(value).isoformat()

    class Config:
        from_attributes = True


class DeleteExpenseResponse(BaseModel):
    message: str = Field(..., description="Confirmation message")
