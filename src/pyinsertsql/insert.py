"""INSERT statement rendering."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from io import StringIO
from typing import Any

from pyinsertsql._errors import (
    ERR_MSG_ROW_ARITY,
    ERR_MSG_STATEMENT_CONSUMED,
    ERR_MSG_UNSUPPORTED_VALUE,
    RowArityError,
    StatementConsumedError,
    UnsupportedDialectFeatureError,
)
from pyinsertsql.dialect._base import Dialect
from pyinsertsql.on_conflict import OnConflict
from pyinsertsql.value import Choice, Ident, Null, NullType, Value

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Result:
    """A rendered statement and the values to bind to its placeholders."""

    sql: str
    parameters: list[Value] = field(default_factory=list)

    def __iter__(self) -> Iterator[Any]:
        return iter((self.sql, self.parameters))

    @property
    def placeholder_count(self) -> int:
        return len(self.parameters)

    def driver_parameters(self) -> list[Any]:
        """Parameters converted to plain Python objects for a DB-API driver."""
        return [p.to_python() for p in self.parameters]


@dataclass
class InsertData:
    """Description of a single INSERT.

    ``columns`` may be empty, which inserts one row of column defaults.
    Every row in ``row_values`` holds one value per column, in column order.
    ``lookup`` collects the values to bind while the statement is rendered.
    """

    into_clause: str
    columns: Sequence[str]
    row_values: Sequence[Sequence[Value]]
    lookup: list[Value] = field(default_factory=list)
    on_conflict: OnConflict = OnConflict.ABORT
    returning_clause: Sequence[str] | None = None

    def __post_init__(self) -> None:
        self.columns = tuple(self.columns)
        self.row_values = tuple(tuple(row) for row in self.row_values)
        if self.returning_clause is not None:
            self.returning_clause = tuple(self.returning_clause)


class Insert:
    """An INSERT statement for one dialect.

    Built once: ``build()`` drains the parameter list and any further call
    raises ``StatementConsumedError``.
    """

    def __init__(
        self, dialect: Dialect, data: InsertData, *, validate: bool = False
    ) -> None:
        self._dialect = dialect
        self._data = data
        self._validate = validate
        self._consumed = False

    def __repr__(self) -> str:
        return (
            f"Insert(dialect={self._dialect.name!s}, "
            f"into={self._data.into_clause!r}, consumed={self._consumed})"
        )

    @property
    def dialect(self) -> Dialect:
        return self._dialect

    @property
    def on_conflict(self) -> OnConflict:
        return self._data.on_conflict

    @property
    def consumed(self) -> bool:
        return self._consumed

    def rollback_transaction(self) -> Insert:
        """Roll back the whole transaction if the insert fails.

        Only useful inside an active transaction. By default a failing insert
        aborts itself but keeps earlier statements of the transaction.
        """
        self._check_not_consumed()
        self._data.on_conflict = OnConflict.ROLLBACK
        return self

    def build(self) -> Result:
        """Render the statement.

        Returns:
            Result with the SQL text and the values for its placeholders,
            in placeholder order.

        Raises:
            StatementConsumedError: If the statement was already built.
            UnsupportedDialectFeatureError: If a PostgreSQL-only value is
                rendered for another dialect.
            SQLBuildError: If validation is enabled and the description is
                malformed.
        """
        self._check_not_consumed()
        self._consumed = True

        if self._validate:
            self._validate_data()

        d = self._data
        dialect = self._dialect
        w = StringIO()

        w.write("INSERT ")
        if not d.columns:
            dialect.write_conflict_clause(w, d.on_conflict, default_values=True)
            w.write(f"INTO {dialect.quote_table(d.into_clause)} DEFAULT VALUES")
            self._write_returning(w)
            w.write(";")
            return self._finish(w)

        dialect.write_conflict_clause(w, d.on_conflict, default_values=False)
        w.write(f"INTO {dialect.quote_table(d.into_clause)} (")
        w.write(", ".join(dialect.quote_column(c) for c in d.columns))
        w.write(") VALUES ")

        for row_idx, row in enumerate(d.row_values):
            if row_idx:
                w.write(", ")
            w.write("(")
            for cell_idx, value in enumerate(row):
                if cell_idx:
                    w.write(", ")
                self._write_value(w, value)
            w.write(")")

        self._write_returning(w)
        w.write(";")
        return self._finish(w)

    # --- Rendering ---

    def _write_value(self, w: StringIO, value: Value) -> None:
        dialect = self._dialect
        if isinstance(value, Ident):
            w.write(dialect.quote_ident(value.value))
        elif isinstance(value, Choice):
            w.write(dialect.escape(value.value))
        elif isinstance(value, Null) and value.null_type is NullType.CHOICE:
            w.write("NULL")
        else:
            if value.is_postgres_only() and not dialect.supports_postgres_types:
                raise UnsupportedDialectFeatureError(
                    ERR_MSG_UNSUPPORTED_VALUE,
                    f"{type(value).__name__} cannot be bound for {dialect.name}",
                )
            lookup = self._data.lookup
            lookup.append(value)
            dialect.write_param_placeholder(w, len(lookup))

    def _write_returning(self, w: StringIO) -> None:
        returning = self._data.returning_clause
        if returning is None:
            return
        w.write(" RETURNING ")
        w.write(", ".join(self._dialect.quote_returning(c) for c in returning))

    def _finish(self, w: StringIO) -> Result:
        parameters = self._data.lookup
        self._data.lookup = []
        logger.debug(
            "rendered %s insert: %d rows, %d parameters",
            self._dialect.name,
            len(self._data.row_values) if self._data.columns else 1,
            len(parameters),
        )
        return Result(sql=w.getvalue(), parameters=parameters)

    # --- Validation ---

    def _check_not_consumed(self) -> None:
        if self._consumed:
            raise StatementConsumedError(
                ERR_MSG_STATEMENT_CONSUMED,
                f"insert into '{self._data.into_clause}' was already built",
            )

    def _validate_data(self) -> None:
        d = self._data
        dialect = self._dialect

        dialect.validate_identifier(d.into_clause, quoted=bool(dialect.table_quote))
        for column in d.columns:
            dialect.validate_identifier(column, quoted=bool(dialect.column_quote))
        for column in d.returning_clause or ():
            dialect.validate_identifier(
                column, quoted=bool(dialect.returning_quote)
            )

        if not d.columns:
            return
        if not d.row_values:
            raise RowArityError(
                ERR_MSG_ROW_ARITY,
                f"insert into '{d.into_clause}' has columns but no rows",
            )
        for row_idx, row in enumerate(d.row_values):
            if len(row) != len(d.columns):
                raise RowArityError(
                    ERR_MSG_ROW_ARITY,
                    f"row {row_idx} has {len(row)} values, "
                    f"expected {len(d.columns)}",
                )
