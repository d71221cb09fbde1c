"""Rich/JSON output helpers.

The CLI renders ParseResult for humans (Rich output) or machines
(--json). The formatter layer picks the mode.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

from rfc3339kit.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from rfc3339kit.services.result import ParseResult


class OutputSettings(BaseModel):
    """Output mode flags, frozen after construction."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False


def format_result(result: ParseResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ParseResult for display.

    JSON wins over quiet; quiet wins over the full human rendering.
    """
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_result(result)
