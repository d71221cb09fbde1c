"""Bounded integer fields and their smart constructors.

Each field is a constrained ``int`` alias. The matching ``TypeAdapter``
validates a raw integer into the field's range and raises
``pydantic.ValidationError`` otherwise. Adapters are built once at import
and hold no mutable state, so they are safe to share across threads.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import Field, TypeAdapter

Year = Annotated[int, Field(ge=0, le=9999)]
Month = Annotated[int, Field(ge=1, le=12)]
Day = Annotated[int, Field(ge=1, le=31)]
Hour = Annotated[int, Field(ge=0, le=23)]
Minute = Annotated[int, Field(ge=0, le=59)]
Second = Annotated[int, Field(ge=0, le=59)]
Millisecond = Annotated[int, Field(ge=0, le=999)]

YEAR_ADAPTER: TypeAdapter[int] = TypeAdapter(Year)
MONTH_ADAPTER: TypeAdapter[int] = TypeAdapter(Month)
DAY_ADAPTER: TypeAdapter[int] = TypeAdapter(Day)
HOUR_ADAPTER: TypeAdapter[int] = TypeAdapter(Hour)
MINUTE_ADAPTER: TypeAdapter[int] = TypeAdapter(Minute)
SECOND_ADAPTER: TypeAdapter[int] = TypeAdapter(Second)
MILLISECOND_ADAPTER: TypeAdapter[int] = TypeAdapter(Millisecond)
