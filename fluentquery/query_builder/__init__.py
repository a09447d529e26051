"""
Fluent SQL SELECT builder.

This module provides a chainable interface that assembles T-SQL style
SELECT statements as plain text.
"""

from fluentquery.query_builder.builder import QueryBuilder, select, select_count
from fluentquery.query_builder.where import FilterBuilder
from fluentquery.query_builder.types import (
    PaginationMode,
    PaginationParams,
    QueryBuffer,
    SelectAnchorError,
)

__all__ = [
    "QueryBuilder",
    "select",
    "select_count",
    "FilterBuilder",
    "PaginationMode",
    "PaginationParams",
    "QueryBuffer",
    "SelectAnchorError",
]
