"""
Fluent builder for composing a query.

Example::

    query = (
        FilterBuilder()
        .where("race", "=", "Hobbit", "Maia")
        .where("budgetInMillions", "lt", 100)
        .exists("wikiUrl")
        .missing("hair")
        .sort_by("name", "desc")
        .limit(10)
        .build()
    )
    # → race=Hobbit,Maia&budgetInMillions<100&wikiUrl&!hair&sort=name:desc&limit=10

Directives are serialized in the order they were added.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .filters import (
    FilterGroup,
    binary_filter,
    exist_filter,
    merge_filters,
    not_exist_filter,
)
from .filters import limit as _limit
from .filters import offset as _offset
from .filters import page as _page
from .filters import sort as _sort
from .operators import SortOrder, parse_operator

if TYPE_CHECKING:
    from .filters import Filter
    from .operators import Operator


class FilterBuilder:
    """
    Fluent builder producing a ``FilterGroup``.

    Like the filter constructors, the builder never validates: an unknown
    operator or a bad pagination value surfaces when the query is serialized.
    """

    def __init__(self) -> None:
        self._filters: list[Filter] = []

    # -- conditions ------------------------------------------------------------

    def where(
        self,
        field: str,
        op: Operator | str,
        value: object,
        *values: object,
    ) -> FilterBuilder:
        """Add a comparison; ``op`` may be an alias such as ``"eq"`` or ``"gte"``."""
        self._filters.append(
            binary_filter(field, parse_operator(op), value, *values)  # type: ignore[arg-type]
        )
        return self

    def exists(self, field: str) -> FilterBuilder:
        self._filters.append(exist_filter(field))
        return self

    def missing(self, field: str) -> FilterBuilder:
        self._filters.append(not_exist_filter(field))
        return self

    def add(self, query: Filter) -> FilterBuilder:
        """Add an already-constructed filter (or group)."""
        self._filters.append(query)
        return self

    # -- ordering & pagination -------------------------------------------------

    def sort_by(
        self,
        field: str,
        order: SortOrder | str = SortOrder.ASCENDING,
    ) -> FilterBuilder:
        self._filters.append(_sort(field, order))  # type: ignore[arg-type]
        return self

    def limit(self, value: int) -> FilterBuilder:
        self._filters.append(_limit(value))
        return self

    def page(self, value: int) -> FilterBuilder:
        self._filters.append(_page(value))
        return self

    def offset(self, value: int) -> FilterBuilder:
        self._filters.append(_offset(value))
        return self

    # -- build -----------------------------------------------------------------

    def build(self) -> FilterGroup:
        """Return the composed query. An empty builder yields an empty group."""
        return merge_filters(*self._filters)

    def reset(self) -> FilterBuilder:
        """Clear all directives and return ``self`` for reuse."""
        self._filters.clear()
        return self
