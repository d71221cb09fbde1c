"""Classification enums for parsed date-time values."""

from __future__ import annotations

from enum import StrEnum


class Direction(StrEnum):
    """Sign of a numeric UTC offset."""

    PLUS = "+"
    MINUS = "-"
