"""Subcommand modules for rfc3339kit.

Provides register_commands() which uses deferred imports to keep
``rfc3339kit --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register standalone commands on the root CLI group."""
    from rfc3339kit.commands.parse import parse

    cli.add_command(parse)
