"""MySQL / MariaDB dialect."""

from __future__ import annotations

from pyinsertsql._utils import MAX_MYSQL_IDENTIFIER_LENGTH
from pyinsertsql.dialect._base import Dialect, DialectName


def escape(value: str) -> str:
    """Quote ``value`` as a MariaDB string literal."""
    if "'" in value:
        escaped = value.replace("'", "\\'")
        return f"'{escaped}'"
    return f"'{value}'"


# The conflict prefix is only written on the DEFAULT VALUES form.
MYSQL = Dialect(
    name=DialectName.MYSQL,
    escape=escape,
    table_quote="`",
    column_quote="`",
    returning_quote="`",
    conflict_on_column_list=False,
    max_identifier_length=MAX_MYSQL_IDENTIFIER_LENGTH,
)
