"""Parse failures and their translation from grammar errors.

``ParseFailure`` is raised inside the parsing package, either by the
visitor's field and calendar checks or by :func:`syntax_failure` when the
grammar itself does not match. The entry point in
:mod:`rfc3339kit.services.parse` turns it into a ``ParseError`` value.
"""

from __future__ import annotations

from parsimonious.exceptions import IncompleteParseError
from parsimonious.exceptions import ParseError as GrammarError

EXPECTED_OFFSET = "expected 'Z' or 'z' or '+' or '-'"

# Keyed by the grammar rule that stopped furthest into the input. A sequence
# rule is only reported when its first element failed, so digit-led
# sequences fall through to "bad number".
_SYNTAX_MESSAGES: dict[str, str] = {
    "dash": "expected '-'",
    "colon": "expected ':'",
    "dot": "expected '.'",
    "date_sep": "expected 'T' or 't'",
    "zulu": EXPECTED_OFFSET,
    "sign": EXPECTED_OFFSET,
    "time_numoffset": EXPECTED_OFFSET,
    "time_offset": EXPECTED_OFFSET,
}


class ParseFailure(Exception):
    """Input rejected at *position* with diagnostic *message*."""

    def __init__(self, message: str, position: int) -> None:
        super().__init__(message)
        self.message = message
        self.position = position

    def __repr__(self) -> str:
        return f"ParseFailure({self.message!r}, {self.position})"


def syntax_failure(exc: GrammarError) -> ParseFailure:
    """Translate a parsimonious error into a positioned ``ParseFailure``."""
    if isinstance(exc, IncompleteParseError):
        return ParseFailure("expected end of input", exc.pos)
    rule = getattr(exc.expr, "name", "")
    return ParseFailure(_SYNTAX_MESSAGES.get(rule, "bad number"), exc.pos)
