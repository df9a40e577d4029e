"""Aggregate functions understood by select builders."""

from __future__ import annotations

import enum


class SelectAggregator(enum.Enum):
    """An aggregate function applied to a selected column."""

    AVG = "avg"
    """Average of all non-null values.

    The result is a floating point value, or null when every input is null.
    """

    COUNT = "count"
    """Number of rows in which the column is not null."""

    SUM = "sum"
    """Sum of all non-null values, or null when every input is null."""

    MAX = "max"
    """Maximum of all non-null values, or null when every input is null."""

    MIN = "min"
    """Minimum of all non-null values, or null when every input is null."""

    @property
    def sql_name(self) -> str:
        return self.value.upper()
