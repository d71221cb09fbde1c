"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to subcommands via
``@click.pass_obj``.  Configures logging and centralizes result
emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from rfc3339kit.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from rfc3339kit.config.settings import KitSettings
    from rfc3339kit.services.result import ParseResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: KitSettings) -> None:
        self.settings = settings

        from rfc3339kit.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    def emit(self, result: ParseResult) -> None:
        """Format and output a ParseResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
