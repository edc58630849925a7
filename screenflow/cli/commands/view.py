"""View command for displaying a draft's screens and elements."""

from typing import Annotated

import typer


def view_command(
    ctx: typer.Context,
    source: Annotated[str, typer.Argument(help="Draft file path")],
    json_output: Annotated[
        bool, typer.Option("--json", help="Output the draft in JSON format")
    ] = False,
):
    """View flow details including screens, elements and properties."""
    cli_ctx = ctx.obj
    cli_ctx.set_json_mode(json_output)

    editor = cli_ctx.open_editor_or_exit(source)

    if json_output:
        cli_ctx.print_json(editor.to_draft())
        return

    cli_ctx.printer.print_flow(editor.document, editor.selection)
