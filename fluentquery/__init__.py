from fluentquery.query_builder import (
    FilterBuilder,
    PaginationMode,
    PaginationParams,
    QueryBuilder,
    SelectAnchorError,
    select,
    select_count,
)

__all__ = [
    "QueryBuilder",
    "FilterBuilder",
    "PaginationMode",
    "PaginationParams",
    "SelectAnchorError",
    "select",
    "select_count",
]
