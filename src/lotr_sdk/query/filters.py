"""
Filter value objects and their constructors.

A filter is one directive that renders to one query-string fragment::

    name=Gandalf            binary_filter("name", Operator.EQUAL, "Gandalf")
    wikiUrl                 exist_filter("wikiUrl")
    !hair                   not_exist_filter("hair")
    sort=name:asc           sort("name", SortOrder.ASCENDING)
    limit=10                limit(10)

Sort and pagination are not filters strictly speaking, but they travel the
same way and are modelled the same way.

Construction never validates anything; ``generate_raw_query`` does.
Filters are immutable and can be combined freely::

    query = merge_filters(exist_filter("wikiUrl"), sort("name"), limit(5))
    query = exist_filter("wikiUrl") & sort("name") & limit(5)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

from .operators import Operator, PaginationKey, SortOrder

if TYPE_CHECKING:
    from collections.abc import Iterator


class _Combinable:
    """Adds ``&`` / ``merge()`` to every filter type."""

    def __and__(self, other: Filter) -> FilterGroup:
        return merge_filters(self, other)  # type: ignore[arg-type]

    def merge(self, other: Filter) -> FilterGroup:
        """Combine with another filter; ``self`` is serialized first."""
        return merge_filters(self, other)  # type: ignore[arg-type]


@dataclass(frozen=True)
class BinaryFilter(_Combinable):
    """``field`` compared against one or more values (``budgetInMillions<100``).

    Several values mean "any of these" and are only valid for ``EQUAL`` and
    ``NOT_EQUAL``.
    """

    field: str
    operator: Operator
    values: tuple[str, ...]


@dataclass(frozen=True)
class ExistFilter(_Combinable):
    """Selects documents that have ``field``."""

    field: str


@dataclass(frozen=True)
class NotExistFilter(_Combinable):
    """Selects documents that do not have ``field``."""

    field: str


@dataclass(frozen=True)
class SortFilter(_Combinable):
    field: str
    order: SortOrder


@dataclass(frozen=True)
class PaginationFilter(_Combinable):
    """Backs ``limit``, ``page`` and ``offset``."""

    key: PaginationKey
    value: int


@dataclass(frozen=True)
class FilterGroup(_Combinable):
    """Ordered group of filters that is itself a filter.

    Member order is the serialized order; nested groups are kept as-is and
    flatten naturally when serialized.
    """

    filters: tuple[Filter, ...] = ()

    def __len__(self) -> int:
        return len(self.filters)

    def __iter__(self) -> Iterator[Filter]:
        return iter(self.filters)


Filter = Union[
    BinaryFilter,
    ExistFilter,
    NotExistFilter,
    SortFilter,
    PaginationFilter,
    FilterGroup,
]


# -- constructors -------------------------------------------------------------


def binary_filter(
    field: str,
    operator: Operator,
    value: object,
    *values: object,
) -> BinaryFilter:
    """
    Compare ``field`` against one or more values.

    Args:
        field: The field to filter by (passed through unencoded).
        operator: The comparison operator (``=``, ``<``, ...).
        value: The value to compare against.
        values: Additional values, OR-ed with ``value`` on the remote side.

    Values are converted with ``str()``; percent-encoding happens at
    serialization time.
    """
    return BinaryFilter(
        field=field,
        operator=operator,
        values=tuple(str(v) for v in (value, *values)),
    )


def exist_filter(field: str) -> ExistFilter:
    return ExistFilter(field=field)


def not_exist_filter(field: str) -> NotExistFilter:
    return NotExistFilter(field=field)


def sort(field: str, order: SortOrder = SortOrder.ASCENDING) -> SortFilter:
    """Sort results by ``field`` (``sort=field:asc``)."""
    return SortFilter(field=field, order=order)


def limit(value: int) -> PaginationFilter:
    """Add ``limit=<value>`` to the query."""
    return PaginationFilter(key=PaginationKey.LIMIT, value=value)


def page(value: int) -> PaginationFilter:
    """Add ``page=<value>`` to the query."""
    return PaginationFilter(key=PaginationKey.PAGE, value=value)


def offset(value: int) -> PaginationFilter:
    """Add ``offset=<value>`` to the query."""
    return PaginationFilter(key=PaginationKey.OFFSET, value=value)


def merge_filters(*filters: Filter) -> FilterGroup:
    """Combine filters into a single ``FilterGroup``, preserving argument order."""
    return FilterGroup(filters=tuple(filters))
