"""RFC 3339 date-time grammar and the visitor that builds domain values.

The grammar only decides shape. Range, calendar and fraction rules run in
:class:`DateTimeVisitor`, which raises ``ParseFailure`` at the start of the
offending node. Children are visited before their parent, so fields are
checked left to right and the calendar check runs after all three date
fields pass.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from parsimonious import Grammar, NodeVisitor
from parsimonious.exceptions import ParseError as GrammarError
from parsimonious.nodes import Node
from pydantic import ValidationError

from rfc3339kit.domain.fields import MILLISECOND_ADAPTER
from rfc3339kit.domain.models import (
    Date,
    FullDateTime,
    LocalDateTime,
    NumericOffset,
    Time,
    ZuluOffset,
)
from rfc3339kit.domain.types import Direction
from rfc3339kit.parsing.errors import ParseFailure, syntax_failure
from rfc3339kit.parsing.fields import (
    DAY,
    FIELDS,
    HOUR,
    MINUTE,
    MONTH,
    SECOND,
    YEAR,
    FieldSpec,
    validate_field,
)

# Every rule is named so parsimonious reports the rule that got furthest.
_STRUCTURE = r"""
    date_time      = full_date date_sep partial_time time_offset
    full_date      = date_fullyear dash date_month dash date_mday
    partial_time   = time_hour colon time_minute colon time_second time_secfrac?
    time_secfrac   = dot secfrac_digits
    time_offset    = zulu / time_numoffset
    time_numoffset = sign time_hour colon time_minute
    date_sep       = ~"[Tt]"
    zulu           = ~"[Zz]"
    sign           = ~"[+-]"
    dash           = "-"
    colon          = ":"
    dot            = "."
    secfrac_digits = ~"[0-9]+"
"""

rfc3339_grammar = Grammar(_STRUCTURE + "\n".join(f"    {spec.grammar_rule}" for spec in FIELDS))

_DIRECTIONS: dict[str, Direction] = {"+": Direction.PLUS, "-": Direction.MINUS}

# Fraction digits past this many are discarded, not rounded.
_FRACTION_DIGITS = 3


def fraction_to_millisecond(fraction: str) -> int:
    """Truncate a fractional-second digit string to whole milliseconds.

    ``"5"`` -> 500, ``"123456789"`` -> 123, ``"0009"`` -> 0.
    """
    return int(fraction[:_FRACTION_DIGITS].ljust(_FRACTION_DIGITS, "0"))


def _field_visitor(spec: FieldSpec) -> Callable[[Any, Node, list[Any]], int]:
    def visit(self: Any, node: Node, visited_children: list[Any]) -> int:
        return validate_field(spec, node.text, node.start)

    return visit


class DateTimeVisitor(NodeVisitor):
    """Fold a parse tree into ``FullDateTime`` (or any sub-rule's value)."""

    unwrapped_exceptions = (ParseFailure,)

    def generic_visit(self, node: Node, visited_children: list[Any]) -> list[Any]:
        return visited_children

    visit_date_fullyear = _field_visitor(YEAR)
    visit_date_month = _field_visitor(MONTH)
    visit_date_mday = _field_visitor(DAY)
    visit_time_hour = _field_visitor(HOUR)
    visit_time_minute = _field_visitor(MINUTE)
    visit_time_second = _field_visitor(SECOND)

    def visit_full_date(self, node: Node, visited_children: list[Any]) -> Date:
        year, _, month, _, day = visited_children
        try:
            return Date(year=year, month=month, day=day)
        except ValidationError as exc:
            raise ParseFailure("bad date", node.start) from exc

    def visit_secfrac_digits(self, node: Node, visited_children: list[Any]) -> str:
        return node.text

    def visit_time_secfrac(self, node: Node, visited_children: list[Any]) -> int:
        _, fraction = visited_children
        try:
            return MILLISECOND_ADAPTER.validate_python(fraction_to_millisecond(fraction))
        except ValidationError as exc:
            raise ParseFailure("bad millisecond", node.start) from exc

    def visit_partial_time(self, node: Node, visited_children: list[Any]) -> Time:
        hour, _, minute, _, second, fraction = visited_children
        if fraction:
            [millisecond] = fraction
        else:
            try:
                millisecond = MILLISECOND_ADAPTER.validate_python(0)
            except ValidationError as exc:
                raise ParseFailure("bad default millisecond", node.end) from exc
        return Time(hour=hour, minute=minute, second=second, millisecond=millisecond)

    def visit_zulu(self, node: Node, visited_children: list[Any]) -> ZuluOffset:
        return ZuluOffset()

    def visit_sign(self, node: Node, visited_children: list[Any]) -> Direction:
        direction = _DIRECTIONS.get(node.text)
        if direction is None:
            raise ParseFailure("Bad direction", node.start)
        return direction

    def visit_time_numoffset(self, node: Node, visited_children: list[Any]) -> NumericOffset:
        direction, hours, _, minutes = visited_children
        return NumericOffset(direction=direction, hours=hours, minutes=minutes)

    def visit_time_offset(
        self, node: Node, visited_children: list[Any]
    ) -> ZuluOffset | NumericOffset:
        [offset] = visited_children
        return offset

    def visit_date_time(self, node: Node, visited_children: list[Any]) -> FullDateTime:
        date, _, time, offset = visited_children
        return FullDateTime(date_time=LocalDateTime(date=date, time=time), offset=offset)


date_time_visitor = DateTimeVisitor()


def parse_rule(rule: str, text: str) -> Any:
    """Match all of *text* against grammar *rule* and build its value.

    Raises:
        ParseFailure: On a grammar mismatch, trailing input, or a field,
            calendar or fraction check.
    """
    try:
        tree = rfc3339_grammar[rule].parse(text)
    except GrammarError as exc:
        raise syntax_failure(exc) from exc
    return date_time_visitor.visit(tree)


def parse_full(text: str) -> FullDateTime:
    return parse_rule("date_time", text)
