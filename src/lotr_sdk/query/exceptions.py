"""
Filter serialization errors.

Every error here is raised by ``generate_raw_query`` and never by a filter
constructor. All inherit from ``FilterError`` and provide ``to_dict()``.
"""

from __future__ import annotations

from difflib import get_close_matches
from typing import Any

from ..exceptions import ValidationError


class FilterError(ValidationError):
    """Base exception for all filter errors."""


class InvalidOperatorError(FilterError):
    """
    Comparison operator outside the ``Operator`` enumeration.

    Provides fuzzy-matched suggestions for likely intended operators.
    """

    def __init__(self, operator: object, valid_operators: list[str]) -> None:
        self.operator = operator
        self.valid_operators = valid_operators
        self.suggestions = get_close_matches(
            str(operator), valid_operators, n=3, cutoff=0.5
        )

        message = f"invalid compare operator: {operator!r}."
        if self.suggestions:
            message += f" Did you mean: {', '.join(self.suggestions)}?"
        message += f" Valid operators: {', '.join(valid_operators)}"
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "INVALID_OPERATOR",
            "operator": str(self.operator),
            "suggestions": self.suggestions,
            "valid_operators": self.valid_operators,
        }


class InvalidSortOrderError(FilterError):
    """Sort direction outside the ``SortOrder`` enumeration."""

    def __init__(self, order: object, valid_orders: list[str]) -> None:
        self.order = order
        self.valid_orders = valid_orders
        self.suggestions = get_close_matches(str(order), valid_orders, n=2, cutoff=0.5)

        message = f"invalid sort order: {order!r}."
        if self.suggestions:
            message += f" Did you mean: {', '.join(self.suggestions)}?"
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "INVALID_SORT_ORDER",
            "order": str(self.order),
            "suggestions": self.suggestions,
            "valid_orders": self.valid_orders,
        }


class EmptyValueListError(FilterError):
    """A binary filter was serialized without any value."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"cannot filter on {field!r} without a value")

    def to_dict(self) -> dict[str, Any]:
        return {"error": "EMPTY_VALUE_LIST", "field": self.field}


class MultiValueOnInequalityError(FilterError):
    """
    A relational operator was given more than one value.

    The API has no syntax for chaining inequalities
    (``budgetInMillions<300,250`` is rejected remotely).
    """

    def __init__(self, field: str, operator: str, values: tuple[str, ...]) -> None:
        self.field = field
        self.operator = operator
        self.values = values
        super().__init__(
            f"cannot filter with operator {operator} on more than one value "
            f"(field {field!r} got {len(values)})"
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "MULTI_VALUE_ON_INEQUALITY",
            "field": self.field,
            "operator": self.operator,
            "values": list(self.values),
        }


class InvalidPaginationError(FilterError):
    """Pagination key is unknown or its value is not a non-negative integer."""

    def __init__(
        self,
        key: str,
        value: object,
        reason: str = "must be a non-negative integer",
    ) -> None:
        self.key = key
        self.value = value
        super().__init__(f"{key} {reason}, got {value!r}")

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "INVALID_PAGINATION",
            "key": self.key,
            "value": repr(self.value),
        }
