"""Behaviour of an INSERT that violates a constraint."""

from __future__ import annotations

import enum


class OnConflict(enum.Enum):
    """Conflict policy of an insert.

    ``ROLLBACK`` is only useful inside an active transaction: a failing
    insert rolls back the whole transaction instead of only aborting the
    failed statement.
    """

    ABORT = "ABORT"
    ROLLBACK = "ROLLBACK"

    @property
    def clause(self) -> str:
        """Text inserted between ``INSERT`` and ``INTO``."""
        return f"OR {self.value} "
