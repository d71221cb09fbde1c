"""Tests for Rich renderers."""

from rfc3339kit.domain.models import NumericOffset, ZuluOffset
from rfc3339kit.domain.types import Direction
from rfc3339kit.output.renderers import describe_offset, render_quiet, render_result
from rfc3339kit.services.parse import parse_datetime
from rfc3339kit.services.result import ParseError, ParseResult


class TestDescribeOffset:
    def test_zulu(self) -> None:
        assert describe_offset(ZuluOffset()) == "Z"

    def test_numeric(self) -> None:
        offset = NumericOffset(direction=Direction.MINUS, hours=3, minutes=5)
        assert describe_offset(offset) == "-03:05"


class TestRenderResult:
    def test_success_fields(self) -> None:
        output = render_result(parse_datetime("2021-06-15T08:09:10.5+05:30"))
        lines = output.splitlines()
        assert lines[0] == "OK  parse"
        assert "  date: 2021-06-15" in lines
        assert "  time: 08:09:10.500" in lines
        assert "  offset: +05:30" in lines

    def test_zulu_displayed_distinctly(self) -> None:
        output = render_result(parse_datetime("2021-06-15T08:09:10Z"))
        assert "  offset: Z" in output.splitlines()

    def test_error_with_caret(self) -> None:
        output = render_result(parse_datetime("2021-13-01T00:00:00Z"))
        lines = output.splitlines()
        assert lines[0] == "ERROR  parse  bad month (position 5)"
        assert lines[1] == "  input: 2021-13-01T00:00:00Z"
        assert lines[2].index("^") == len("  input: ") + 5

    def test_caret_counts_terminal_cells(self) -> None:
        result = ParseResult(
            ok=False,
            input="年2021-01-01",
            error=ParseError(position=1, message="bad number"),
        )
        lines = render_result(result).splitlines()
        assert lines[2].index("^") == len("  input: ") + 2

    def test_no_ansi_when_not_a_terminal(self) -> None:
        output = render_result(parse_datetime("2021-06-15T08:09:10Z"))
        assert "\x1b[" not in output


class TestRenderQuiet:
    def test_ok(self) -> None:
        assert render_quiet(parse_datetime("2021-06-15T08:09:10Z")) == "OK"

    def test_error(self) -> None:
        assert render_quiet(parse_datetime("2021-02-29T00:00:00Z")) == (
            "ERROR: bad date (position 0)"
        )
