"""ParseResult and ParseError — the parser's outward contract.

INVARIANT: The entry point returns ParseResult for every ``str`` input.
Failures are values; no exception crosses this boundary.
"""

from __future__ import annotations

from pydantic import BaseModel

from rfc3339kit.domain.models import FullDateTime


class ParseError(BaseModel):
    """Where parsing stopped and why.

    Attributes:
        position: Zero-based index into the input where the failing rule began.
        message: Diagnostic text, e.g. ``"bad month"`` or ``"expected end of input"``.
    """

    model_config = {"frozen": True}

    position: int
    message: str


class ParseResult(BaseModel):
    """Two-armed outcome of a parse.

    Attributes:
        ok: Whether the input parsed and validated completely.
        op: Name of the operation, used by output renderers.
        input: The text that was parsed.
        value: The parsed timestamp when ``ok`` is True.
        error: The failure when ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str = "parse"
    input: str
    value: FullDateTime | None = None
    error: ParseError | None = None
