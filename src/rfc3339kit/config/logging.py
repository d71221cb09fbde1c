"""Log output for the ``rfc3339kit`` logger tree.

Library modules log through stdlib ``logging``; this attaches one
structlog-formatted stderr handler to the package logger, rendering
console lines by default or JSON lines under ``--log-json``.
"""

from __future__ import annotations

import logging
import sys

import structlog

KIT_LOGGER = "rfc3339kit"

# Keys passed via ``extra=`` that become fields on the rendered event.
_EVENT_FIELDS = ("input", "position", "reason")


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Route ``rfc3339kit`` records to stderr; DEBUG when *verbose*, else WARNING."""
    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.stdlib.ExtraAdder(allow=_EVENT_FIELDS),
        ],
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    kit_logger = logging.getLogger(KIT_LOGGER)
    kit_logger.handlers = [handler]
    kit_logger.propagate = False
    kit_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
