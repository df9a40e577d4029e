"""pyinsertsql - Render INSERT statements for SQLite, MySQL and PostgreSQL."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pyinsertsql")
except PackageNotFoundError:  # running from a source checkout
    __version__ = "0.0.0.dev0"

from collections.abc import Sequence

from pyinsertsql._errors import (
    InvalidIdentifierError,
    InvalidValueError,
    RowArityError,
    SQLBuildError,
    StatementConsumedError,
    UnsupportedDialectFeatureError,
)
from pyinsertsql.aggregation import SelectAggregator
from pyinsertsql.dialect import MYSQL, POSTGRES, SQLITE, Dialect, DialectName, get_dialect
from pyinsertsql.insert import Insert, InsertData, Result
from pyinsertsql.on_conflict import OnConflict
from pyinsertsql.value import NullType, Value

__all__ = [
    "insert",
    "Insert",
    "InsertData",
    "Result",
    "OnConflict",
    "SelectAggregator",
    "NullType",
    "Value",
    "Dialect",
    "DialectName",
    "MYSQL",
    "POSTGRES",
    "SQLITE",
    "get_dialect",
    "SQLBuildError",
    "InvalidIdentifierError",
    "InvalidValueError",
    "RowArityError",
    "StatementConsumedError",
    "UnsupportedDialectFeatureError",
]


def insert(
    into: str,
    columns: Sequence[str] = (),
    rows: Sequence[Sequence[Value]] = (),
    *,
    dialect: Dialect | str | None = None,
    returning: Sequence[str] | None = None,
    validate: bool = False,
) -> Insert:
    """Describe an INSERT statement.

    Args:
        into: Target table name. Not escaped; the caller vouches for it.
        columns: Column names. Empty inserts a single row of defaults.
        rows: Rows of values, each aligned with ``columns``.
        dialect: Dialect or dialect name. Defaults to PostgreSQL.
        returning: Optional columns to return from the inserted rows.
        validate: If True, ``build()`` checks identifiers and row lengths
            and raises SQLBuildError instead of rendering malformed SQL.

    Returns:
        An Insert; call ``rollback_transaction()`` and/or ``build()`` on it.

    Raises:
        ValueError: If the dialect name is unknown.
    """
    if dialect is None:
        dialect = POSTGRES
    elif isinstance(dialect, str):
        dialect = get_dialect(dialect)

    data = InsertData(
        into_clause=into,
        columns=columns,
        row_values=rows,
        returning_clause=returning,
    )
    return Insert(dialect, data, validate=validate)
