"""
Test configuration and fixtures for the fluentquery test suite.
Provides fresh builders and a PostgreSQL syntax check.
"""

from typing import Callable

import pytest
from pglast import ast, parse_sql

from fluentquery.query_builder import QueryBuilder


@pytest.fixture
def qb() -> QueryBuilder:
    """Provide a fresh QueryBuilder for each test."""
    return QueryBuilder()


@pytest.fixture
def table1_query(qb: QueryBuilder) -> QueryBuilder:
    """Provide a builder already holding SELECT Field1,Field2,Field3 FROM Table1."""
    return qb.select("Field1,Field2,Field3").from_("Table1")


@pytest.fixture
def parse_select() -> Callable[[str], ast.SelectStmt]:
    """Parse SQL with the PostgreSQL parser and return its single SELECT statement."""

    def _parse(sql: str) -> ast.SelectStmt:
        statements = parse_sql(sql)
        assert len(statements) == 1
        stmt = statements[0].stmt
        assert isinstance(stmt, ast.SelectStmt)
        return stmt

    return _parse
