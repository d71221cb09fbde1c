"""rfc3339kit — validating RFC 3339 date-time parser.

Usage::

    from rfc3339kit import parse_datetime

    result = parse_datetime("2021-01-01T12:30:45.123+05:30")
    if result.ok:
        print(result.value.time.millisecond)
    else:
        print(result.error.message, result.error.position)
"""

from __future__ import annotations

from rfc3339kit.domain.calendar import days_in_month, is_leap_year, is_valid_date
from rfc3339kit.domain.models import (
    Date,
    FullDateTime,
    LocalDateTime,
    NumericOffset,
    Offset,
    Time,
    ZuluOffset,
)
from rfc3339kit.domain.types import Direction
from rfc3339kit.services.parse import parse_datetime
from rfc3339kit.services.result import ParseError, ParseResult

__version__ = "0.1.0"

__all__ = [
    "Date",
    "Direction",
    "FullDateTime",
    "LocalDateTime",
    "NumericOffset",
    "Offset",
    "ParseError",
    "ParseResult",
    "Time",
    "ZuluOffset",
    "__version__",
    "days_in_month",
    "is_leap_year",
    "is_valid_date",
    "parse_datetime",
]
