"""
Unit tests for the expense input parsers.

These run without a database: every rule is checked before the store
is ever called.
"""

import pytest

from expense_tracker.core.exceptions import ValidationError
from expense_tracker.modules.expenses.service import (
    parse_amount,
    parse_category,
    parse_description,
    parse_expense_id,
    resolve_category_filter,
)
from expense_tracker.modules.expenses.types import ExpenseCategory


class TestParseAmount:
    """Tests for amount parsing."""

    def test_accepts_numbers(self):
        assert parse_amount(12) == 12.0
        assert parse_amount(0.01) == 0.01

    def test_parses_numeric_strings(self):
        assert parse_amount("42.50") == 42.5
        assert parse_amount("  7 ") == 7.0

    @pytest.mark.parametrize("value", [0, -5, "0", "-0.01"])
    def test_rejects_non_positive(self, value):
        with pytest.raises(ValidationError, match="greater than 0") as exc_info:
            parse_amount(value)
        assert exc_info.value.status_code == 400

    @pytest.mark.parametrize("value", ["abc", "", "12abc", True, None, [1], {"v": 1}, float("nan"), "Infinity"])
    def test_rejects_non_numeric(self, value):
        with pytest.raises(ValidationError, match="valid number"):
            parse_amount(value)

    @pytest.mark.parametrize("value", ["1e-400", "-1e-400", "0.0000"])
    def test_rejects_amounts_that_round_to_zero(self, value):
        with pytest.raises(ValidationError, match="greater than 0"):
            parse_amount(value)

    @pytest.mark.parametrize("value", ["1e400", 10**400, "-1e400"])
    def test_rejects_amounts_too_large_for_float(self, value):
        with pytest.raises(ValidationError, match="valid number"):
            parse_amount(value)

    def test_smallest_positive_float_is_kept(self):
        assert parse_amount("5e-324") > 0


class TestParseDescription:
    """Tests for description parsing."""

    def test_trims_whitespace(self):
        assert parse_description("  Coffee with Sam  ") == "Coffee with Sam"

    @pytest.mark.parametrize("value", ["", "   ", "\t\n"])
    def test_rejects_blank(self, value):
        with pytest.raises(ValidationError, match="cannot be empty"):
            parse_description(value)

    def test_rejects_non_string(self):
        with pytest.raises(ValidationError, match="must be a string"):
            parse_description(123)


class TestParseCategory:
    """Tests for category parsing."""

    @pytest.mark.parametrize("value", ["Food", "Transport", "Shopping", "Other"])
    def test_accepts_every_category(self, value):
        assert parse_category(value) == ExpenseCategory(value)

    @pytest.mark.parametrize("value", ["Vacation", "food", "", None, 3])
    def test_rejects_unknown(self, value):
        with pytest.raises(ValidationError, match="Invalid category"):
            parse_category(value)


class TestParseExpenseId:
    """Tests for path id parsing."""

    def test_parses_integer_strings(self):
        assert parse_expense_id("17") == 17
        assert parse_expense_id(" 3 ") == 3

    @pytest.mark.parametrize("value", ["abc", "12abc", "1.5", "", "0x10", None])
    def test_rejects_malformed(self, value):
        with pytest.raises(ValidationError, match="Invalid expense ID"):
            parse_expense_id(value)


class TestCategoryFilter:
    """Tests for the list filter."""

    @pytest.mark.parametrize("value", [None, "", "all"])
    def test_no_filter(self, value):
        assert resolve_category_filter(value) is None

    def test_known_category(self):
        assert resolve_category_filter("Food") is ExpenseCategory.FOOD

    def test_unknown_category_is_ignored(self):
        assert resolve_category_filter("Vacation") is None


class TestExpenseCategory:
    def test_values_in_display_order(self):
        assert ExpenseCategory.values() == ["Food", "Transport", "Shopping", "Other"]
