"""Shared pytest fixtures and test helpers for rfc3339kit tests."""

from __future__ import annotations

import logging
from collections.abc import Generator

import pytest
from click.testing import CliRunner

from rfc3339kit.domain.models import FullDateTime
from rfc3339kit.services.parse import parse_datetime
from rfc3339kit.services.result import ParseError


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore the package logger after each test.

    The CLI reconfigures logging on every invocation; without this, a
    handler bound to a finished CliRunner stream would leak into later tests.
    """
    kit = logging.getLogger("rfc3339kit")
    original_handlers = kit.handlers[:]
    original_level = kit.level
    original_propagate = kit.propagate
    yield
    kit.handlers = original_handlers
    kit.setLevel(original_level)
    kit.propagate = original_propagate


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def parse_ok(text: str) -> FullDateTime:
    """Parse *text*, asserting success."""
    result = parse_datetime(text)
    assert result.ok, result.error
    assert result.value is not None
    return result.value


def parse_err(text: str) -> ParseError:
    """Parse *text*, asserting failure."""
    result = parse_datetime(text)
    assert not result.ok, result.value
    assert result.error is not None
    return result.error
