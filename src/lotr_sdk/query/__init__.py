"""Query-filter composition: typed filters and their raw query-string serialization."""

from .builder import FilterBuilder
from .exceptions import (
    EmptyValueListError,
    FilterError,
    InvalidOperatorError,
    InvalidPaginationError,
    InvalidSortOrderError,
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
    binary_filter,
    exist_filter,
    limit,
    merge_filters,
    not_exist_filter,
    offset,
    page,
    sort,
)
from .operators import (
    Operator,
    PaginationKey,
    SortOrder,
    operator_token,
    parse_operator,
    sort_order_token,
)
from .serializer import escape_value, generate_raw_query

__all__ = [
    # Enumerations
    "Operator",
    "SortOrder",
    "PaginationKey",
    "operator_token",
    "sort_order_token",
    "parse_operator",
    # Filter types
    "Filter",
    "BinaryFilter",
    "ExistFilter",
    "NotExistFilter",
    "SortFilter",
    "PaginationFilter",
    "FilterGroup",
    # Constructors
    "binary_filter",
    "exist_filter",
    "not_exist_filter",
    "sort",
    "limit",
    "page",
    "offset",
    "merge_filters",
    # Builder
    "FilterBuilder",
    # Serialization
    "generate_raw_query",
    "escape_value",
    # Exceptions
    "FilterError",
    "InvalidOperatorError",
    "InvalidSortOrderError",
    "EmptyValueListError",
    "MultiValueOnInequalityError",
    "InvalidPaginationError",
]
