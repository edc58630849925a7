"""Export command for producing the wire document of a draft."""

from pathlib import Path
from typing import Annotated

import typer

from screenflow.serialization import dumps_wire


def export_command(
    ctx: typer.Context,
    source: Annotated[str, typer.Argument(help="Draft file path")],
    output: Annotated[
        Path | None, typer.Option("--output", "-o", help="Write the wire document to this file")
    ] = None,
    include_position: Annotated[
        bool | None,
        typer.Option(
            "--include-position/--no-include-position",
            help="Emit element positions (defaults to SCREENFLOW_INCLUDE_POSITION)",
        ),
    ] = None,
    compact: Annotated[
        bool, typer.Option("--compact", help="Single-line JSON output")
    ] = False,
):
    """Export the wire document consumed by the delivery platform."""
    cli_ctx = ctx.obj
    editor = cli_ctx.open_editor_or_exit(source)

    if include_position is None:
        include_position = cli_ctx.config.include_position
    content = dumps_wire(editor.document, include_position=include_position, indent=None if compact else 2)

    if output is None:
        typer.echo(content)
        return

    try:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(content + "\n", encoding="utf-8")
    except OSError as e:
        cli_ctx.print_error(f"Failed to write {output}: {e}")
        raise typer.Exit(1) from e
    cli_ctx.print_success(f"Wire document written to {output}")
