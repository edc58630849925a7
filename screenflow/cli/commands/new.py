"""New command for creating draft files."""

from pathlib import Path
from typing import Annotated

import typer

from screenflow.loaders import SUFFIX_FORMATS
from screenflow.manager import FlowEditor


def new_command(
    ctx: typer.Context,
    file_path: Annotated[str, typer.Argument(help="File path for the new draft")],
    name: Annotated[
        str | None, typer.Option("--name", "-n", help="Flow name")
    ] = None,
    json_output: Annotated[
        bool, typer.Option("--json", help="Output in JSON format")
    ] = False,
):
    """Create a new draft holding a single empty screen."""
    cli_ctx = ctx.obj
    cli_ctx.set_json_mode(json_output)

    target_path = Path(file_path)
    # Files without a known extension get the configured draft format
    if target_path.suffix.lower() not in SUFFIX_FORMATS:
        target_path = target_path.with_name(target_path.name + cli_ctx.config.draft_suffix)

    if target_path.exists():
        cli_ctx.print_error(f"File '{target_path}' already exists")
        raise typer.Exit(1)

    editor = FlowEditor(config=cli_ctx.config)
    if name:
        editor.rename(name)

    cli_ctx.print_progress(f"Creating flow '{editor.document.name}'...")
    path = cli_ctx.save_or_exit(editor, target_path)

    if json_output:
        cli_ctx.print_json({"file": str(path), "flow_name": editor.document.name})
    else:
        cli_ctx.print_success(f"Flow '{editor.document.name}' created at {path}")
