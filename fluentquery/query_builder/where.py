"""
FilterBuilder for composing WHERE predicates.

Predicates are appended to the same buffer as the owning QueryBuilder.
Grouped predicates open a parenthesis, run a callback that adds the inner
predicates, then close it, so groups nest as deep as the callbacks do.
"""

from typing import TYPE_CHECKING, Any, Callable, Optional

from .types import PaginationMode, PaginationParams, QueryBuffer

if TYPE_CHECKING:
    from .builder import Fields, QueryBuilder

Group = Callable[["FilterBuilder"], Any]


class FilterBuilder:
    """
    Fluent builder for the predicates following WHERE.

    Statement level clauses (GROUP BY, ORDER BY, pagination, OPTION) are
    forwarded to the owning QueryBuilder and return it, so a chain can leave
    the filter without holding on to the query builder.
    """

    def __init__(self, select_builder: "QueryBuilder", buffer: QueryBuffer):
        self._select_builder = select_builder
        self._buffer = buffer

    def _add_root_clause(self, condition: str) -> "FilterBuilder":
        self._buffer.append(f" WHERE {condition}")
        return self

    def and_(self, predicate: str, group: Optional[Group] = None) -> "FilterBuilder":
        """
        Add an AND predicate.

        Args:
            predicate: Predicate text
            group: Optional callback receiving this builder; predicates it
                adds are placed inside parentheses together with ``predicate``

        Returns:
            FilterBuilder: Self for method chaining
        """
        if group is None:
            return self._append_clause("AND", predicate)
        return self._append_group_clause("AND", predicate, group)

    def and_if(
        self, predicate: str, condition: bool, group: Optional[Group] = None
    ) -> "FilterBuilder":
        """Add an AND predicate only when ``condition`` holds."""
        return self.and_(predicate, group) if condition else self

    def or_(self, predicate: str, group: Optional[Group] = None) -> "FilterBuilder":
        """
        Add an OR predicate.

        Args:
            predicate: Predicate text
            group: Optional callback receiving this builder; predicates it
                adds are placed inside parentheses together with ``predicate``

        Returns:
            FilterBuilder: Self for method chaining
        """
        if group is None:
            return self._append_clause("OR", predicate)
        return self._append_group_clause("OR", predicate, group)

    def or_if(
        self, predicate: str, condition: bool, group: Optional[Group] = None
    ) -> "FilterBuilder":
        """Add an OR predicate only when ``condition`` holds."""
        return self.or_(predicate, group) if condition else self

    def group_by(self, fields: "Fields") -> "QueryBuilder":
        return self._select_builder.group_by(fields)

    def order_by(self, fields: "Fields") -> "QueryBuilder":
        return self._select_builder.order_by(fields)

    def paginated(
        self,
        page_size: int,
        current_page: int,
        mode: PaginationMode = PaginationMode.OFFSET_FETCH,
        rank_field: Optional[str] = None,
    ) -> "QueryBuilder":
        return self._select_builder.paginated(page_size, current_page, mode, rank_field)

    def paginated_by_dense_rank(
        self, page_size: int, current_page: int, rank_field: Optional[str]
    ) -> "QueryBuilder":
        return self._select_builder.paginated_by_dense_rank(
            page_size, current_page, rank_field
        )

    def paginate(self, params: PaginationParams) -> "QueryBuilder":
        return self._select_builder.paginate(params)

    def option(self, *hints: str) -> "QueryBuilder":
        return self._select_builder.option(*hints)

    def prepend_select(self, fields: "Fields") -> "QueryBuilder":
        return self._select_builder.prepend_select(fields)

    def build(self) -> str:
        return self._select_builder.build()

    def to_select_builder(self) -> "QueryBuilder":
        """Return the QueryBuilder this filter belongs to."""
        return self._select_builder

    def _append_clause(self, op: str, predicate: str) -> "FilterBuilder":
        self._buffer.append(f" {op} {predicate}")
        return self

    def _append_group_clause(self, op: str, predicate: str, group: Group) -> "FilterBuilder":
        self._buffer.append(f" {op} ({predicate}")
        group(self)
        self._buffer.append(")")
        return self

    def __str__(self) -> str:
        return str(self._select_builder)

    def __repr__(self) -> str:
        return f"FilterBuilder(sql='{self._buffer.getvalue()}')"
