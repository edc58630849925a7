"""Screen command group: add, remove and update screens of a draft."""

from typing import Annotated

import typer

from screenflow.core.flow import find_screen

screen_app = typer.Typer(
    name="screen",
    help="Screen editing commands",
    no_args_is_help=True,
)


@screen_app.command("add")
def add_screen_command(
    ctx: typer.Context,
    source: Annotated[str, typer.Argument(help="Draft file path")],
    title: Annotated[
        str | None, typer.Option("--title", "-t", help="Title instead of the generated one")
    ] = None,
    json_output: Annotated[
        bool, typer.Option("--json", help="Output in JSON format")
    ] = False,
):
    """Append a new empty screen."""
    cli_ctx = ctx.obj
    cli_ctx.set_json_mode(json_output)
    editor = cli_ctx.open_editor_or_exit(source)

    result = editor.add_screen()
    if result.changed and title:
        editor.set_screen_title(result.target_id, title)
    cli_ctx.finish_command(editor, source, result)


@screen_app.command("remove")
def remove_screen_command(
    ctx: typer.Context,
    source: Annotated[str, typer.Argument(help="Draft file path")],
    screen_id: Annotated[str, typer.Argument(help="Id of the screen to remove")],
    json_output: Annotated[
        bool, typer.Option("--json", help="Output in JSON format")
    ] = False,
):
    """Remove a screen and all of its elements."""
    cli_ctx = ctx.obj
    cli_ctx.set_json_mode(json_output)
    editor = cli_ctx.open_editor_or_exit(source)
    cli_ctx.finish_command(editor, source, editor.remove_screen(screen_id))


@screen_app.command("update")
def update_screen_command(
    ctx: typer.Context,
    source: Annotated[str, typer.Argument(help="Draft file path")],
    screen_id: Annotated[str, typer.Argument(help="Id of the screen to update")],
    title: Annotated[
        str | None, typer.Option("--title", "-t", help="New screen title")
    ] = None,
    terminal: Annotated[
        bool | None,
        typer.Option("--terminal/--no-terminal", help="Mark the screen as ending the flow"),
    ] = None,
    json_output: Annotated[
        bool, typer.Option("--json", help="Output in JSON format")
    ] = False,
):
    """Change the title or terminal flag of a screen."""
    cli_ctx = ctx.obj
    cli_ctx.set_json_mode(json_output)
    editor = cli_ctx.open_editor_or_exit(source)

    screen = find_screen(editor.document, screen_id)
    if screen is None:
        cli_ctx.print_error(f"Screen '{screen_id}' not found")
        raise typer.Exit(1)

    if title is not None:
        screen = screen.with_title(title)
    if terminal is not None:
        screen = screen.with_terminal(terminal)
    cli_ctx.finish_command(editor, source, editor.update_screen(screen))
