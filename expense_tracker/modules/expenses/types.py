from enum import Enum
from typing import List, TypedDict


class ExpenseCategory(str, Enum):
    """The closed set of labels an expense can carry.

    Declaration order is the order a UI should present them in.
    """

    FOOD = "Food"
    TRANSPORT = "Transport"
    SHOPPING = "Shopping"
    OTHER = "Other"

    @classmethod
    def values(cls) -> List[str]:
        return [category.value for category in cls]


# Sentinel accepted by the list filter meaning "every category"
ALL_CATEGORIES = "all"


class ExpenseFields(TypedDict, total=False):
    """Validated column values for a partial update."""
    amount: float
    description: str
    category: ExpenseCategory
