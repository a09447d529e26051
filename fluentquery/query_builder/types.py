"""
Type definitions for the query builder module.
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field, model_validator

SELECT_ANCHOR = "SELECT "
WHERE_TOKEN = " WHERE "


class PaginationMode(str, Enum):
    """Supported pagination strategies."""

    OFFSET_FETCH = "offset_fetch"
    DENSE_RANK = "dense_rank"


class PaginationParams(BaseModel):
    """Pagination parameters."""

    page_size: int = Field(..., ge=1, description="Number of rows per page")
    current_page: int = Field(..., ge=1, description="1-indexed page number")
    mode: PaginationMode = Field(
        PaginationMode.OFFSET_FETCH, description="Pagination strategy"
    )
    rank_field: Optional[str] = Field(
        None, description="Field ranked by DENSE_RANK pagination"
    )

    @model_validator(mode="after")
    def check_rank_field(self) -> "PaginationParams":
        if self.mode == PaginationMode.DENSE_RANK and not self.rank_field:
            raise ValueError("rank_field is required for dense_rank pagination")
        return self


class SelectAnchorError(ValueError):
    """Raised when a rewrite operation finds no leading SELECT in the query."""

    def __init__(self, operation: str, sql: str):
        self.operation = operation
        self.sql = sql
        super().__init__(
            f"{operation} requires the query to start with '{SELECT_ANCHOR}', got {sql!r}"
        )


class QueryBuffer:
    """
    Append-only text accumulator shared by a query builder and its filter builder.

    Fragments are only ever appended. ``replace_all`` exists for the two
    operations that rewrite the statement head (prepending select fields and
    wrapping the query in a dense-rank derived table).
    """

    def __init__(self):
        self._parts: List[str] = []

    def append(self, fragment: str) -> None:
        self._parts.append(fragment)

    def getvalue(self) -> str:
        """Return the accumulated text."""
        if len(self._parts) > 1:
            # Collapse so repeated reads stay cheap
            self._parts = ["".join(self._parts)]
        return self._parts[0] if self._parts else ""

    def startswith(self, prefix: str) -> bool:
        return self.getvalue().startswith(prefix)

    def replace_all(self, text: str) -> None:
        self._parts = [text]

    def __len__(self) -> int:
        return sum(len(part) for part in self._parts)

    def __str__(self) -> str:
        return self.getvalue()

    def __repr__(self) -> str:
        return f"QueryBuffer({self.getvalue()!r})"
