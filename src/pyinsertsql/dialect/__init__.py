"""SQL dialect tables for statement rendering."""

from pyinsertsql.dialect._base import Dialect, DialectName
from pyinsertsql.dialect.mysql import MYSQL
from pyinsertsql.dialect.postgres import POSTGRES
from pyinsertsql.dialect.sqlite import SQLITE

__all__ = [
    "Dialect",
    "DialectName",
    "MYSQL",
    "POSTGRES",
    "SQLITE",
    "get_dialect",
]

_REGISTRY: dict[str, Dialect] = {
    DialectName.POSTGRESQL: POSTGRES,
    DialectName.MYSQL: MYSQL,
    DialectName.SQLITE: SQLITE,
}


def get_dialect(name: str) -> Dialect:
    """Get a dialect by name.

    Args:
        name: Dialect name ("postgresql", "mysql" or "sqlite").

    Returns:
        The dialect's syntax table.

    Raises:
        ValueError: If the dialect name is unknown.
    """
    dialect = _REGISTRY.get(name)
    if dialect is None:
        raise ValueError(
            f"unknown dialect: {name!r}. "
            f"Available: {', '.join(sorted(_REGISTRY))}"
        )
    return dialect
