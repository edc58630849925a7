"""Palette command listing the available element types."""

from typing import Annotated

import typer


def palette_command(
    ctx: typer.Context,
    json_output: Annotated[
        bool, typer.Option("--json", help="Output in JSON format")
    ] = False,
):
    """List element types grouped by palette category."""
    cli_ctx = ctx.obj
    cli_ctx.set_json_mode(json_output)
    cli_ctx.printer.print_palette()
