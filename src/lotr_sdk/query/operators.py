"""Comparison operators, sort directions and pagination keys with their wire tokens."""

from __future__ import annotations

from enum import Enum

from .exceptions import InvalidOperatorError, InvalidSortOrderError


class Operator(str, Enum):
    """Comparison operators understood by the API."""

    EQUAL = "="
    NOT_EQUAL = "!="
    LESS_THAN = "<"
    GREATER_THAN = ">"
    LESS_THAN_OR_EQUAL = "<="
    GREATER_THAN_OR_EQUAL = ">="


class SortOrder(str, Enum):
    """Sort directions for ``sort=field:order``."""

    ASCENDING = "asc"
    DESCENDING = "desc"


class PaginationKey(str, Enum):
    LIMIT = "limit"
    PAGE = "page"
    OFFSET = "offset"


# Only these may carry a comma-separated (OR) value list
MULTI_VALUE_OPERATORS: frozenset[Operator] = frozenset(
    {Operator.EQUAL, Operator.NOT_EQUAL}
)

_OPERATOR_TOKENS: list[str] = [m.value for m in Operator]
_SORT_ORDER_TOKENS: list[str] = [m.value for m in SortOrder]

_OP_ALIASES: dict[str, Operator] = {
    "eq": Operator.EQUAL,
    "=": Operator.EQUAL,
    "==": Operator.EQUAL,
    "ne": Operator.NOT_EQUAL,
    "neq": Operator.NOT_EQUAL,
    "!=": Operator.NOT_EQUAL,
    "lt": Operator.LESS_THAN,
    "<": Operator.LESS_THAN,
    "gt": Operator.GREATER_THAN,
    ">": Operator.GREATER_THAN,
    "lte": Operator.LESS_THAN_OR_EQUAL,
    "le": Operator.LESS_THAN_OR_EQUAL,
    "<=": Operator.LESS_THAN_OR_EQUAL,
    "gte": Operator.GREATER_THAN_OR_EQUAL,
    "ge": Operator.GREATER_THAN_OR_EQUAL,
    ">=": Operator.GREATER_THAN_OR_EQUAL,
}


def operator_token(operator: Operator | str) -> str:
    """
    Return the wire token for *operator*.

    Raises:
        InvalidOperatorError: If *operator* is not an ``Operator`` member
            (or one of their tokens).
    """
    try:
        return Operator(operator).value
    except (ValueError, TypeError) as exc:
        raise InvalidOperatorError(operator, _OPERATOR_TOKENS) from exc


def sort_order_token(order: SortOrder | str) -> str:
    """
    Return the wire token for *order*.

    Raises:
        InvalidSortOrderError: If *order* is not a ``SortOrder`` member.
    """
    try:
        return SortOrder(order).value
    except (ValueError, TypeError) as exc:
        raise InvalidSortOrderError(order, _SORT_ORDER_TOKENS) from exc


def parse_operator(text: Operator | str) -> Operator | str:
    """
    Resolve a common alias (``eq``, ``gte``, ``<=`` ...) to an ``Operator``.

    Unknown text is returned unchanged; it is rejected later, when the
    filter is serialized.
    """
    if isinstance(text, Operator) or not isinstance(text, str):
        return text
    return _OP_ALIASES.get(text.strip().lower(), text)
