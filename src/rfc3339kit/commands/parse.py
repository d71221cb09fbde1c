"""Command: parse and validate one RFC 3339 timestamp."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

if TYPE_CHECKING:
    from rfc3339kit.commands._context import AppContext

PARSE_EXAMPLES = """\
  rfc3339kit parse 2021-01-01T12:30:45Z
  rfc3339kit parse 2021-01-01T12:30:45.123456789+05:30
  rfc3339kit --json parse 2020-02-29t00:00:00z
  rfc3339kit -q parse 2021-02-29T00:00:00Z"""


def _show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
    if not value:
        return
    click.echo(f"Examples for '{ctx.command_path}':\n")
    click.echo(PARSE_EXAMPLES)
    ctx.exit(0)


@click.command()
@click.argument("text")
@click.option(
    "--examples",
    is_flag=True,
    expose_value=False,
    is_eager=True,
    callback=_show_examples,
    help="Show usage examples.",
)
@click.pass_obj
def parse(app: AppContext, text: str) -> None:
    """Parse TEXT as an RFC 3339 date-time and report its fields."""
    from rfc3339kit.services.parse import parse_datetime

    app.emit(parse_datetime(text))
