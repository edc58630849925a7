"""Element command group: add, remove, move elements and set their properties."""

from typing import Annotated

import typer

from screenflow.cli.utils import parse_value
from screenflow.core.element import Position

element_app = typer.Typer(
    name="element",
    help="Element editing commands",
    no_args_is_help=True,
)


@element_app.command("add")
def add_element_command(
    ctx: typer.Context,
    source: Annotated[str, typer.Argument(help="Draft file path")],
    screen_id: Annotated[str, typer.Argument(help="Screen receiving the element")],
    element_type: Annotated[str, typer.Argument(help="Element type, e.g. text-heading")],
    x: Annotated[float, typer.Option("--x", help="Horizontal drop coordinate")] = 0.0,
    y: Annotated[float, typer.Option("--y", help="Vertical drop coordinate")] = 0.0,
    json_output: Annotated[
        bool, typer.Option("--json", help="Output in JSON format")
    ] = False,
):
    """Append an element to the end of a screen."""
    cli_ctx = ctx.obj
    cli_ctx.set_json_mode(json_output)
    editor = cli_ctx.open_editor_or_exit(source)
    result = editor.add_element(screen_id, element_type, Position(x=x, y=y))
    cli_ctx.finish_command(editor, source, result)


@element_app.command("remove")
def remove_element_command(
    ctx: typer.Context,
    source: Annotated[str, typer.Argument(help="Draft file path")],
    screen_id: Annotated[str, typer.Argument(help="Screen owning the element")],
    element_id: Annotated[str, typer.Argument(help="Id of the element to remove")],
    json_output: Annotated[
        bool, typer.Option("--json", help="Output in JSON format")
    ] = False,
):
    """Remove an element from a screen. Removing a missing element is not an error."""
    cli_ctx = ctx.obj
    cli_ctx.set_json_mode(json_output)
    editor = cli_ctx.open_editor_or_exit(source)
    cli_ctx.finish_command(editor, source, editor.remove_element(screen_id, element_id))


@element_app.command("move")
def move_element_command(
    ctx: typer.Context,
    source: Annotated[str, typer.Argument(help="Draft file path")],
    screen_id: Annotated[str, typer.Argument(help="Screen owning the element")],
    element_id: Annotated[str, typer.Argument(help="Id of the element to move")],
    x: Annotated[float, typer.Option("--x", help="New horizontal coordinate")],
    y: Annotated[float, typer.Option("--y", help="New vertical coordinate")],
    json_output: Annotated[
        bool, typer.Option("--json", help="Output in JSON format")
    ] = False,
):
    """Move an element on its screen surface."""
    cli_ctx = ctx.obj
    cli_ctx.set_json_mode(json_output)
    editor = cli_ctx.open_editor_or_exit(source)
    result = editor.move_element(screen_id, element_id, Position(x=x, y=y))
    cli_ctx.finish_command(editor, source, result)


@element_app.command("set")
def set_property_command(
    ctx: typer.Context,
    source: Annotated[str, typer.Argument(help="Draft file path")],
    element_id: Annotated[str, typer.Argument(help="Id of the element to update")],
    key: Annotated[str, typer.Argument(help="Property key")],
    value: Annotated[str, typer.Argument(help="Property value")],
    json_value: Annotated[
        bool, typer.Option("--json-value", help="Decode VALUE as JSON")
    ] = False,
    json_output: Annotated[
        bool, typer.Option("--json", help="Output in JSON format")
    ] = False,
):
    """Set one property of an element, keeping its other properties."""
    cli_ctx = ctx.obj
    cli_ctx.set_json_mode(json_output)

    try:
        parsed = parse_value(value, as_json=json_value)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="VALUE") from e

    editor = cli_ctx.open_editor_or_exit(source)
    result = editor.update_element_property(element_id, key, parsed)
    cli_ctx.finish_command(editor, source, result)
