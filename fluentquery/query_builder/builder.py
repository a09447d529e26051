"""
Main QueryBuilder class for assembling SQL SELECT statements.

The builder appends text fragments to a shared buffer in call order and
never parses or validates what it is given. Filters are composed by the
paired FilterBuilder returned from ``where``.
"""

from typing import Iterable, Optional, Union

from fluentquery.logging_config import get_logger

from .types import (
    SELECT_ANCHOR,
    WHERE_TOKEN,
    PaginationMode,
    PaginationParams,
    QueryBuffer,
    SelectAnchorError,
)
from .where import FilterBuilder

logger = get_logger(__name__)

Fields = Union[str, Iterable[str]]


def _join_fields(fields: Fields) -> str:
    """Join a field list with commas, passing strings through untouched."""
    if isinstance(fields, str):
        return fields
    return ",".join(fields)


def _hint(clause: str, hints: Iterable[str]) -> str:
    return f" {clause}({','.join(hints)})"


def _join(kind: str, table: str, on: str) -> str:
    return f" {kind} JOIN {table} ON {on}"


def select(fields: Fields) -> "QueryBuilder":
    """
    Create a new QueryBuilder with a SELECT clause.

    Args:
        fields: Comma separated fields, or an iterable of field names

    Returns:
        QueryBuilder: New QueryBuilder holding the SELECT clause
    """
    return QueryBuilder().select(fields)


def select_count(field: str = "*") -> "QueryBuilder":
    """
    Create a new QueryBuilder with a SELECT COUNT(field) clause.

    Args:
        field: Field to count, COUNT(*) when omitted

    Returns:
        QueryBuilder: New QueryBuilder holding the SELECT COUNT clause
    """
    return QueryBuilder().select_count(field)


class QueryBuilder:
    """
    Fluent builder for T-SQL style SELECT statements.

    Every clause method appends its fragment and returns the builder, so a
    statement reads in the order it was called::

        sql = (
            QueryBuilder()
            .select("Id,Name")
            .from_("Users U")
            .where("U.Active = 1")
            .order_by("Name")
            .paginated(20, 1)
            .build()
        )
    """

    def __init__(self):
        self._buffer = QueryBuffer()
        self._where_builder = FilterBuilder(self, self._buffer)

    def select(self, fields: Fields) -> "QueryBuilder":
        """
        Add the SELECT clause.

        Args:
            fields: Comma separated fields, or an iterable of field names

        Returns:
            QueryBuilder: Self for method chaining
        """
        self._buffer.append(f"SELECT {_join_fields(fields)}")
        return self

    def select_count(self, field: str) -> "QueryBuilder":
        """Add a SELECT COUNT(field) clause."""
        self._buffer.append(f"SELECT COUNT({field})")
        return self

    def select_count_all(self) -> "QueryBuilder":
        """Add a SELECT COUNT(*) clause."""
        return self.select_count("*")

    def prepend_select(self, fields: Fields) -> "QueryBuilder":
        """
        Insert fields at the front of the existing SELECT list.

        Everything after the original select list (FROM, joins, filters) is
        kept as is.

        Args:
            fields: Comma separated fields, or an iterable of field names

        Returns:
            QueryBuilder: Self for method chaining

        Raises:
            SelectAnchorError: If the query does not start with SELECT
        """
        sql = self._require_select_anchor("prepend_select")
        rest = sql[len(SELECT_ANCHOR):]
        self._buffer.replace_all(f"{SELECT_ANCHOR}{_join_fields(fields)},{rest}")
        logger.debug("Prepended select fields: %s", fields)
        return self

    def from_(self, table: str) -> "QueryBuilder":
        """
        Add the FROM clause.

        Args:
            table: Table expression, optionally with an alias ("Table1 T1")

        Returns:
            QueryBuilder: Self for method chaining
        """
        self._buffer.append(f" FROM {table}")
        return self

    def inner_join(self, table: str, on: str) -> "QueryBuilder":
        """Add an INNER JOIN with its ON condition."""
        self._buffer.append(_join("INNER", table, on))
        return self

    def left_join(self, table: str, on: str) -> "QueryBuilder":
        """Add a LEFT JOIN with its ON condition."""
        self._buffer.append(_join("LEFT", table, on))
        return self

    def right_join(self, table: str, on: str) -> "QueryBuilder":
        """Add a RIGHT JOIN with its ON condition."""
        self._buffer.append(_join("RIGHT", table, on))
        return self

    def full_outer_join(self, table: str, on: str) -> "QueryBuilder":
        """Add a FULL OUTER JOIN with its ON condition."""
        self._buffer.append(_join("FULL OUTER", table, on))
        return self

    def where(self, condition: str) -> FilterBuilder:
        """
        Add the WHERE clause with its first condition.

        Args:
            condition: Root predicate of the filter

        Returns:
            FilterBuilder: Builder for the remaining AND/OR predicates
        """
        return self._where_builder._add_root_clause(condition)

    def group_by(self, fields: Fields) -> "QueryBuilder":
        """Add the GROUP BY clause."""
        self._buffer.append(f" GROUP BY {_join_fields(fields)}")
        return self

    def order_by(self, fields: Fields) -> "QueryBuilder":
        """Add the ORDER BY clause."""
        self._buffer.append(f" ORDER BY {_join_fields(fields)}")
        return self

    def paginated(
        self,
        page_size: int,
        current_page: int,
        mode: PaginationMode = PaginationMode.OFFSET_FETCH,
        rank_field: Optional[str] = None,
    ) -> "QueryBuilder":
        """
        Add pagination using OFFSET/FETCH or DENSE_RANK.

        Args:
            page_size: Number of rows per page
            current_page: Page to return, starting at 1
            mode: Pagination strategy
            rank_field: Field ranked by DENSE_RANK pagination

        Returns:
            QueryBuilder: Self for method chaining
        """
        if mode == PaginationMode.DENSE_RANK:
            return self.paginated_by_dense_rank(page_size, current_page, rank_field)

        offset = page_size * (current_page - 1)
        self._buffer.append(f" OFFSET {offset} ROWS FETCH NEXT {page_size} ROWS ONLY")
        return self

    def paginated_by_dense_rank(
        self, page_size: int, current_page: int, rank_field: Optional[str]
    ) -> "QueryBuilder":
        """
        Wrap the query in a derived table filtered by DENSE_RANK position.

        Everything after the SELECT keyword (select list, source, joins and
        any WHERE clause) moves inside the derived table; the outer query
        keeps the rows whose rank falls in the requested page.

        Args:
            page_size: Number of rows per page
            current_page: Page to return, starting at 1
            rank_field: Field the rows are ranked by. It is not checked;
                None renders as an empty ORDER BY, like any other bad input

        Returns:
            QueryBuilder: Self for method chaining

        Raises:
            SelectAnchorError: If the query does not start with SELECT
        """
        sql = self._require_select_anchor("paginated_by_dense_rank")
        rest = sql[len(SELECT_ANCHOR):]
        lower_bound = page_size * (current_page - 1) + 1
        upper_bound = page_size * current_page
        self._buffer.replace_all(
            f"SELECT * FROM (SELECT DENSE_RANK() OVER (ORDER BY {rank_field or ''})"
            f" AS RowPosition,{rest}) DerivedTable"
            f" WHERE RowPosition BETWEEN {lower_bound} AND {upper_bound}"
        )
        logger.debug(
            "Wrapped query for dense rank page %s (rows %s-%s, filter moved inside: %s)",
            current_page,
            lower_bound,
            upper_bound,
            WHERE_TOKEN in rest,
        )
        return self

    def paginate(self, params: PaginationParams) -> "QueryBuilder":
        """Add pagination described by a PaginationParams model."""
        return self.paginated(
            params.page_size, params.current_page, params.mode, params.rank_field
        )

    def with_(self, *hints: str) -> "QueryBuilder":
        """
        Add a WITH(...) table hint.

        Args:
            *hints: Table hints, e.g. "NOLOCK", "INDEX(ix_name)"

        Returns:
            QueryBuilder: Self for method chaining
        """
        self._buffer.append(_hint("WITH", hints))
        return self

    def option(self, *hints: str) -> "QueryBuilder":
        """
        Add an OPTION(...) query hint.

        Args:
            *hints: Query hints, e.g. "RECOMPILE"

        Returns:
            QueryBuilder: Self for method chaining
        """
        self._buffer.append(_hint("OPTION", hints))
        return self

    def build(self) -> str:
        """
        Return the SQL assembled so far.

        Reading does not change the builder, so it can be called repeatedly.
        """
        sql = self._buffer.getvalue()
        logger.debug("Built query: %s", sql)
        return sql

    def _require_select_anchor(self, operation: str) -> str:
        sql = self._buffer.getvalue()
        if not sql.startswith(SELECT_ANCHOR):
            logger.error("%s called before select: %r", operation, sql)
            raise SelectAnchorError(operation, sql)
        return sql

    def __str__(self) -> str:
        """Return the SQL string representation."""
        return self._buffer.getvalue()

    def __repr__(self) -> str:
        """Return a detailed string representation."""
        return f"QueryBuilder(sql='{self._buffer.getvalue()}')"
