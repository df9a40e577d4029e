"""PostgreSQL dialect."""

from __future__ import annotations

from pyinsertsql._utils import MAX_POSTGRESQL_IDENTIFIER_LENGTH
from pyinsertsql.dialect._base import Dialect, DialectName


def escape(value: str) -> str:
    """Quote ``value`` as a PostgreSQL string literal."""
    escaped = value.replace("'", "''")
    return f"'{escaped}'"


POSTGRES = Dialect(
    name=DialectName.POSTGRESQL,
    escape=escape,
    table_quote='"',
    column_quote='"',
    returning_quote='"',
    ident_quote='"',
    conflict_on_default_values=False,
    conflict_on_column_list=False,
    numbered_placeholders=True,
    supports_postgres_types=True,
    max_identifier_length=MAX_POSTGRESQL_IDENTIFIER_LENGTH,
)
