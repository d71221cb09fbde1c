"""Value models for parsed date-time components.

All models are frozen pydantic models: immutable once constructed and
compared by value. Construction is the only place validation happens:

- ``Date`` checks each field's range, then that the triple is a real
  proleptic Gregorian date.
- ``Time`` checks each field's range independently.
- ``Offset`` is a discriminated union of ``ZuluOffset`` and
  ``NumericOffset``. A Zulu offset equals UTC but stays distinct from a
  numeric ``+00:00``. Numeric offsets are not capped at 14:00.
"""

from __future__ import annotations

import datetime as _dt
from typing import Annotated, Literal

from pydantic import BaseModel, Field, model_validator

from rfc3339kit.domain.calendar import is_valid_date
from rfc3339kit.domain.fields import Day, Hour, Millisecond, Minute, Month, Second, Year
from rfc3339kit.domain.types import Direction


class Date(BaseModel):
    """A calendar date."""

    model_config = {"frozen": True}

    year: Year
    month: Month
    day: Day

    @model_validator(mode="after")
    def _check_calendar(self) -> Date:
        if not is_valid_date(self.year, self.month, self.day):
            msg = f"{self.year:04d}-{self.month:02d}-{self.day:02d} is not a calendar date"
            raise ValueError(msg)
        return self


class Time(BaseModel):
    """A time of day with millisecond precision. No leap seconds."""

    model_config = {"frozen": True}

    hour: Hour
    minute: Minute
    second: Second
    millisecond: Millisecond = 0


class ZuluOffset(BaseModel):
    """The ``Z`` designator: UTC, written without a numeric offset."""

    model_config = {"frozen": True}

    kind: Literal["zulu"] = "zulu"

    @property
    def total_minutes(self) -> int:
        return 0

    def utcoffset(self) -> _dt.timedelta:
        return _dt.timedelta(0)


class NumericOffset(BaseModel):
    """A signed ``HH:MM`` offset from UTC."""

    model_config = {"frozen": True}

    kind: Literal["numeric"] = "numeric"
    direction: Direction
    hours: Hour
    minutes: Minute

    @property
    def total_minutes(self) -> int:
        """Signed offset in minutes (negative west of UTC)."""
        magnitude = self.hours * 60 + self.minutes
        return -magnitude if self.direction is Direction.MINUS else magnitude

    def utcoffset(self) -> _dt.timedelta:
        return _dt.timedelta(minutes=self.total_minutes)


Offset = Annotated[ZuluOffset | NumericOffset, Field(discriminator="kind")]


class LocalDateTime(BaseModel):
    """A date paired with a time of day, without an offset."""

    model_config = {"frozen": True}

    date: Date
    time: Time


class FullDateTime(BaseModel):
    """A complete RFC 3339 timestamp: local date-time plus UTC offset.

    Attributes:
        date_time: The date and time-of-day pair.
        offset: Either ``ZuluOffset`` or ``NumericOffset``.
    """

    model_config = {"frozen": True}

    date_time: LocalDateTime
    offset: Offset

    @property
    def date(self) -> Date:
        return self.date_time.date

    @property
    def time(self) -> Time:
        return self.date_time.time

    def to_datetime(self) -> _dt.datetime:
        """Convert to an aware ``datetime.datetime``.

        Raises:
            ValueError: For year 0000, which ``datetime`` cannot represent.
        """
        if isinstance(self.offset, ZuluOffset):
            tz = _dt.timezone.utc
        else:
            tz = _dt.timezone(self.offset.utcoffset())
        d, t = self.date, self.time
        return _dt.datetime(
            d.year,
            d.month,
            d.day,
            t.hour,
            t.minute,
            t.second,
            t.millisecond * 1000,
            tzinfo=tz,
        )
