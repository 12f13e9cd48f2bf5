"""
Filter -> raw query string.

``generate_raw_query`` is the only entry point the transport needs; its
result is used verbatim as the query component of the request URL.

Values are escaped with ``quote_plus(value, safe="")``: every reserved
character is percent-encoded and a space becomes ``+``. Field names and the
comma between OR-ed values are written as-is.
"""

from __future__ import annotations

from urllib.parse import quote_plus

from .exceptions import (
    EmptyValueListError,
    InvalidPaginationError,
    MultiValueOnInequalityError,
)
from .filters import (
    BinaryFilter,
    ExistFilter,
    Filter,
    FilterGroup,
    NotExistFilter,
    PaginationFilter,
    SortFilter,
)
from .operators import (
    MULTI_VALUE_OPERATORS,
    Operator,
    PaginationKey,
    operator_token,
    sort_order_token,
)

FRAGMENT_SEPARATOR = "&"
VALUE_SEPARATOR = ","


def escape_value(value: str) -> str:
    """Percent-encode a single filter value for a query component."""
    return quote_plus(value, safe="")


def generate_raw_query(query: Filter) -> str:
    """
    Render *query* (a single filter or a ``FilterGroup``) as a raw query string.

    An empty group renders as ``""``, meaning "no query component".

    Raises:
        FilterError: The first invalid filter encountered, unchanged.
        TypeError: If *query* is not a filter.
    """
    match query:
        case FilterGroup(filters=members):
            fragments = (generate_raw_query(member) for member in members)
            return FRAGMENT_SEPARATOR.join(f for f in fragments if f)
        case BinaryFilter():
            return _render_binary(query)
        case ExistFilter(field=field):
            return field
        case NotExistFilter(field=field):
            return f"!{field}"
        case SortFilter(field=field, order=order):
            return f"sort={field}:{sort_order_token(order)}"
        case PaginationFilter(key=key, value=value):
            return _render_pagination(key, value)
        case _:
            raise TypeError(
                f"Cannot build a query from {type(query).__name__}; "
                "expected one of the lotr_sdk.query filter types"
            )


def _render_binary(bf: BinaryFilter) -> str:
    token = operator_token(bf.operator)

    # inequalities cannot be chained (budgetInMillions<300,250 is invalid)
    if Operator(token) not in MULTI_VALUE_OPERATORS and len(bf.values) > 1:
        raise MultiValueOnInequalityError(bf.field, token, bf.values)

    if not bf.values:
        raise EmptyValueListError(bf.field)

    encoded = VALUE_SEPARATOR.join(escape_value(v) for v in bf.values)
    return f"{bf.field}{token}{encoded}"


def _render_pagination(key: object, value: object) -> str:
    try:
        token = PaginationKey(key).value
    except (ValueError, TypeError) as exc:
        valid = ", ".join(k.value for k in PaginationKey)
        raise InvalidPaginationError(
            str(key), value, f"is not a pagination key (expected one of: {valid})"
        ) from exc
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise InvalidPaginationError(token, value)
    return f"{token}={value:d}"
