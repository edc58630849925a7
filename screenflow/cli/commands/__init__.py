"""CLI commands module for ScreenFlow."""

from screenflow.cli.commands.element import element_app
from screenflow.cli.commands.export import export_command
from screenflow.cli.commands.new import new_command
from screenflow.cli.commands.palette import palette_command
from screenflow.cli.commands.screen import screen_app
from screenflow.cli.commands.view import view_command

__all__ = [
    "element_app",
    "export_command",
    "new_command",
    "palette_command",
    "screen_app",
    "view_command",
]
