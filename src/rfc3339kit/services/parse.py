"""Entry point: parse a complete RFC 3339 date-time string.

Pure function over its argument. Safe to call from any number of threads
at once; nothing is shared between calls.
"""

from __future__ import annotations

import logging

from rfc3339kit.parsing.errors import ParseFailure
from rfc3339kit.parsing.grammar import parse_full
from rfc3339kit.services.result import ParseError, ParseResult

logger = logging.getLogger(__name__)


def parse_datetime(text: str) -> ParseResult:
    """Parse *text* as ``date "T" time offset``, consuming all of it.

    Returns:
        ``ParseResult(ok=True, value=...)`` on success, otherwise
        ``ParseResult(ok=False, error=ParseError(position, message))``.
    """
    try:
        value = parse_full(text)
    except ParseFailure as exc:
        logger.debug(
            "rejected input",
            extra={"input": text, "position": exc.position, "reason": exc.message},
        )
        return ParseResult(
            ok=False,
            input=text,
            error=ParseError(position=exc.position, message=exc.message),
        )
    return ParseResult(ok=True, input=text, value=value)
