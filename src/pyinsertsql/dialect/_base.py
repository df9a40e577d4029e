"""Per-dialect syntax table."""

from __future__ import annotations

import enum
from collections.abc import Callable
from dataclasses import dataclass
from io import StringIO

from pyinsertsql._utils import validate_identifier
from pyinsertsql.on_conflict import OnConflict


class DialectName(enum.StrEnum):
    POSTGRESQL = "postgresql"
    MYSQL = "mysql"
    SQLITE = "sqlite"


EscapeFunc = Callable[[str], str]
"""Turns raw text into a quoted, escaped string literal."""


@dataclass(frozen=True)
class Dialect:
    """Everything an insert statement does differently per dialect.

    The renderer walks rows and columns once and asks this table how to
    quote identifiers, write placeholders and prefix the conflict clause.
    An empty quote string leaves the identifier unquoted.
    """

    name: DialectName
    escape: EscapeFunc
    table_quote: str = ""
    column_quote: str = ""
    returning_quote: str = '"'
    ident_quote: str = ""
    conflict_on_default_values: bool = True
    conflict_on_column_list: bool = True
    numbered_placeholders: bool = False
    supports_postgres_types: bool = False
    max_identifier_length: int = 0  # 0 means no limit
    reserved_keywords: frozenset[str] = frozenset()

    # --- Identifiers ---

    def quote_table(self, name: str) -> str:
        return f"{self.table_quote}{name}{self.table_quote}"

    def quote_column(self, name: str) -> str:
        return f"{self.column_quote}{name}{self.column_quote}"

    def quote_returning(self, name: str) -> str:
        return f"{self.returning_quote}{name}{self.returning_quote}"

    def quote_ident(self, name: str) -> str:
        return f"{self.ident_quote}{name}{self.ident_quote}"

    # --- Clauses ---

    def write_conflict_clause(
        self, w: StringIO, on_conflict: OnConflict, *, default_values: bool
    ) -> None:
        applies = (
            self.conflict_on_default_values
            if default_values
            else self.conflict_on_column_list
        )
        if applies:
            w.write(on_conflict.clause)

    def write_param_placeholder(self, w: StringIO, param_index: int) -> None:
        if self.numbered_placeholders:
            w.write(f"${param_index}")
        else:
            w.write("?")

    # --- Validation ---

    def validate_identifier(self, name: str, *, quoted: bool) -> None:
        validate_identifier(
            name,
            max_length=self.max_identifier_length,
            reserved=frozenset() if quoted else self.reserved_keywords,
            dialect_label=str(self.name),
        )
