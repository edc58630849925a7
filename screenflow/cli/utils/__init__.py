"""CLI utilities package.

This package provides utilities for CLI commands including:
- CLIContext: Context management for commands
- CliPrinter: Rich-based output formatting
- Helper functions: logging setup and command-line value parsing
"""

import json
import logging
from typing import Any

from rich.console import Console
from rich.logging import RichHandler

from screenflow.cli.utils.context import CLIContext
from screenflow.cli.utils.printer import CliPrinter

__all__ = [
    # Context
    "CLIContext",
    # Printer
    "CliPrinter",
    # Helper functions
    "configure_logging",
    "parse_value",
]


def configure_logging(verbose: bool = False) -> None:
    """Route ScreenFlow logs to stderr, at DEBUG level in verbose mode."""
    level = logging.DEBUG if verbose else logging.WARNING
    logger = logging.getLogger("screenflow")
    logger.setLevel(level)
    if not any(isinstance(handler, RichHandler) for handler in logger.handlers):
        logger.addHandler(RichHandler(console=Console(stderr=True), show_path=False))


def parse_value(raw: str, as_json: bool = False) -> Any:
    """
    Parse a property value given on the command line.

    Args:
        raw: Value as typed
        as_json: Decode the value as JSON (numbers, booleans, lists, objects)

    Raises:
        ValueError: If ``as_json`` is set and the value is not valid JSON
    """
    if not as_json:
        return raw
    try:
        return json.loads(raw)
    except json.JSONDecodeError as e:
        raise ValueError(f"Value is not valid JSON: {e}") from e
