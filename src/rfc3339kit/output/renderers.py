"""Rich renderers for ParseResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.cells import cell_len
from rich.text import Text

from rfc3339kit.domain.models import ZuluOffset
from rfc3339kit.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from rfc3339kit.domain.models import FullDateTime, NumericOffset
    from rfc3339kit.services.result import ParseResult


def render_result(result: ParseResult) -> str:
    """Render a ParseResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()
    if result.ok and result.value is not None:
        _render_value(result, result.value, console)
    else:
        _render_error(result, console)
    return get_output(console).rstrip("\n")


def render_quiet(result: ParseResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if result.ok:
        return "OK"
    return f"ERROR: {_error_text(result)}"


def describe_offset(offset: ZuluOffset | NumericOffset) -> str:
    """Describe an offset for display: ``Z`` or ``+05:30``."""
    if isinstance(offset, ZuluOffset):
        return "Z"
    return f"{offset.direction.value}{offset.hours:02d}:{offset.minutes:02d}"


def _error_text(result: ParseResult) -> str:
    if result.error is None:
        return "Unknown error"
    return f"{result.error.message} (position {result.error.position})"


def _field(console: Console, key: str, value: str, style: str = "") -> None:
    console.print(Text.assemble((f"  {key}: ", "kit.key"), (value, style)))


def _render_value(result: ParseResult, value: FullDateTime, console: Console) -> None:
    console.print(Text.assemble(("OK", "kit.ok"), (f"  {result.op}", "kit.op")))
    d, t = value.date, value.time
    _field(console, "date", f"{d.year:04d}-{d.month:02d}-{d.day:02d}")
    _field(
        console,
        "time",
        f"{t.hour:02d}:{t.minute:02d}:{t.second:02d}.{t.millisecond:03d}",
    )
    _field(
        console,
        "offset",
        describe_offset(value.offset),
        style=f"kit.offset.{value.offset.kind}",
    )


def _render_error(result: ParseResult, console: Console) -> None:
    console.print(
        Text.assemble(
            ("ERROR", "kit.error"),
            (f"  {result.op}", "kit.op"),
            f"  {_error_text(result)}",
        )
    )
    if result.error is not None:
        # Caret under the failing position.
        _field(console, "input", result.input)
        prefix = result.input[: result.error.position]
        console.print(" " * (len("  input: ") + cell_len(prefix)) + "^")
