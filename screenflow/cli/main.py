"""ScreenFlow CLI - Typer-based command line interface."""

from typing import Annotated

import typer
from rich.console import Console

from screenflow.cli.commands import (
    element_app,
    export_command,
    new_command,
    palette_command,
    screen_app,
    view_command,
)
from screenflow.cli.utils import CLIContext, configure_logging

# Create main app and console
app = typer.Typer(
    name="screenflow",
    help="ScreenFlow: build multi-screen form flows from the command line",
    no_args_is_help=True,
)
console = Console()


@app.callback()
def main_callback(
    ctx: typer.Context,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Enable verbose output")
    ] = False,
):
    """Configure logging and attach a CLIContext for the invoked command."""
    configure_logging(verbose)
    ctx.obj = CLIContext(console=console, verbose=verbose)


# Register top-level commands
app.command(name="new")(new_command)
app.command(name="view")(view_command)
app.command(name="export")(export_command)
app.command(name="palette")(palette_command)

# Register editing command groups
app.add_typer(screen_app, name="screen")
app.add_typer(element_app, name="element")


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
