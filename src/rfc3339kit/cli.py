"""Root CLI group for rfc3339kit with global flags and command registration."""

from __future__ import annotations

import click

from rfc3339kit import __version__
from rfc3339kit.commands import register_commands
from rfc3339kit.commands._context import AppContext
from rfc3339kit.config.settings import KitSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="rfc3339kit")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging to stderr.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
) -> None:
    """rfc3339kit — validating RFC 3339 date-time parser."""
    settings = KitSettings.from_cli(
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
