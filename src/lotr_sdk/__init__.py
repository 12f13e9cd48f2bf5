from .client import OneRingClient
from .config import ClientConfig
from .exceptions import (
    APIRequestError,
    APIResponseError,
    APIStatusError,
    ClientError,
    LotrSDKError,
    ValidationError,
)
from .models import Book, Chapter, Character, Document, Movie, Quote, Status
from .query import (
    BinaryFilter,
    EmptyValueListError,
    ExistFilter,
    Filter,
    FilterBuilder,
    FilterError,
    FilterGroup,
    InvalidOperatorError,
    InvalidPaginationError,
    InvalidSortOrderError,
    MultiValueOnInequalityError,
    NotExistFilter,
    Operator,
    PaginationFilter,
    PaginationKey,
    SortFilter,
    SortOrder,
    binary_filter,
    exist_filter,
    generate_raw_query,
    limit,
    merge_filters,
    not_exist_filter,
    offset,
    page,
    sort,
)

__all__ = [
    # Client
    "OneRingClient",
    "ClientConfig",
    # Models
    "Document",
    "Book",
    "Movie",
    "Character",
    "Quote",
    "Chapter",
    "Status",
    # Query
    "Operator",
    "SortOrder",
    "PaginationKey",
    "Filter",
    "BinaryFilter",
    "ExistFilter",
    "NotExistFilter",
    "SortFilter",
    "PaginationFilter",
    "FilterGroup",
    "FilterBuilder",
    "binary_filter",
    "exist_filter",
    "not_exist_filter",
    "sort",
    "limit",
    "page",
    "offset",
    "merge_filters",
    "generate_raw_query",
    # Exceptions
    "LotrSDKError",
    "ValidationError",
    "FilterError",
    "InvalidOperatorError",
    "InvalidSortOrderError",
    "EmptyValueListError",
    "MultiValueOnInequalityError",
    "InvalidPaginationError",
    "ClientError",
    "APIRequestError",
    "APIStatusError",
    "APIResponseError",
]
