"""Fixed-width numeric fields: digit-run rule plus range check.

Each :class:`FieldSpec` names its grammar rule, diagnostic label, digit
width, and the bounded-type adapter that does the range check. The grammar
rules are generated from the specs, and :func:`validate_field` is the one
check every field goes through.
"""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import TypeAdapter, ValidationError

from rfc3339kit.domain.fields import (
    DAY_ADAPTER,
    HOUR_ADAPTER,
    MINUTE_ADAPTER,
    MONTH_ADAPTER,
    SECOND_ADAPTER,
    YEAR_ADAPTER,
)
from rfc3339kit.parsing.errors import ParseFailure


@dataclass(frozen=True)
class FieldSpec:
    """Parameters for one fixed-width field."""

    rule: str
    label: str
    width: int
    adapter: TypeAdapter[int]

    @property
    def grammar_rule(self) -> str:
        """The parsimonious rule reading exactly ``width`` ASCII digits."""
        return f'{self.rule} = ~"[0-9]{{{self.width}}}"'


YEAR = FieldSpec("date_fullyear", "bad year", 4, YEAR_ADAPTER)
MONTH = FieldSpec("date_month", "bad month", 2, MONTH_ADAPTER)
DAY = FieldSpec("date_mday", "bad day", 2, DAY_ADAPTER)
HOUR = FieldSpec("time_hour", "bad hour", 2, HOUR_ADAPTER)
MINUTE = FieldSpec("time_minute", "bad minute", 2, MINUTE_ADAPTER)
SECOND = FieldSpec("time_second", "bad second", 2, SECOND_ADAPTER)

FIELDS: tuple[FieldSpec, ...] = (YEAR, MONTH, DAY, HOUR, MINUTE, SECOND)


def validate_field(spec: FieldSpec, digits: str, position: int) -> int:
    """Convert a matched digit run into the field's bounded range.

    Raises:
        ParseFailure: ``"bad number"`` if *digits* is not exactly
            ``spec.width`` ASCII digits, or ``spec.label`` if the value is
            outside the field's range.
    """
    if len(digits) != spec.width or not digits.isascii() or not digits.isdigit():
        raise ParseFailure("bad number", position)
    try:
        return spec.adapter.validate_python(int(digits))
    except ValidationError as exc:
        raise ParseFailure(spec.label, position) from exc
