"""Identifier validation helpers."""

from __future__ import annotations

import re

from pyinsertsql._errors import (
    ERR_MSG_EMPTY_IDENTIFIER,
    ERR_MSG_IDENTIFIER_TOO_LONG,
    ERR_MSG_INVALID_IDENTIFIER,
    ERR_MSG_RESERVED_IDENTIFIER,
    InvalidIdentifierError,
)

MAX_POSTGRESQL_IDENTIFIER_LENGTH = 63
MAX_MYSQL_IDENTIFIER_LENGTH = 64

IDENTIFIER_RE = re.compile(r"^[a-zA-Z_][a-zA-Z0-9_]*$")


def validate_identifier(
    name: str,
    *,
    max_length: int = 0,
    reserved: frozenset[str] = frozenset(),
    dialect_label: str = "SQL",
) -> None:
    """Validate a table or column name.

    Args:
        name: The identifier to check.
        max_length: Maximum length, 0 for no limit.
        reserved: Keywords that cannot be used unquoted.
        dialect_label: Dialect name used in the internal error details.

    Raises:
        InvalidIdentifierError: If the name is empty, too long, contains
            characters outside ``[a-zA-Z0-9_]`` or is a reserved keyword.
    """
    if not name:
        raise InvalidIdentifierError(
            ERR_MSG_EMPTY_IDENTIFIER,
            "empty identifier provided",
        )
    if max_length and len(name) > max_length:
        raise InvalidIdentifierError(
            ERR_MSG_IDENTIFIER_TOO_LONG,
            f"identifier '{name}' exceeds {max_length} characters for {dialect_label}",
        )
    if not IDENTIFIER_RE.match(name):
        raise InvalidIdentifierError(
            ERR_MSG_INVALID_IDENTIFIER,
            f"identifier '{name}' contains invalid characters",
        )
    if name.lower() in reserved:
        raise InvalidIdentifierError(
            ERR_MSG_RESERVED_IDENTIFIER,
            f"identifier '{name}' is a reserved {dialect_label} keyword",
        )
