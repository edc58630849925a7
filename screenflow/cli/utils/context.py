"""
CLI Context for ScreenFlow.

Provides centralized draft loading, saving and output management for all
CLI commands.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import typer
from rich.console import Console

from screenflow.cli.utils.printer import CliPrinter
from screenflow.common.exceptions import DraftFormatError, LoaderError
from screenflow.core.result import MutationResult
from screenflow.loaders import read_draft, write_draft
from screenflow.manager import EditorConfig, FlowEditor
from screenflow.models.enums import MutationStatus


@dataclass
class CLIContext:
    """
    Shared state handed to every command through ``ctx.obj``.

    Editing commands follow the same cycle: open the draft into a
    FlowEditor, run one command, report the MutationResult and write the
    draft back when the document changed. Load and save failures end the
    command with exit code 1.

    Attributes:
        console: Rich console receiving command output
        verbose: Show progress lines (never shown in JSON mode)
        printer: Formatter for results, flows and the palette
        config: Editor settings read from SCREENFLOW_* variables
        json_mode: Emit machine-readable JSON only; switched on by ``--json``
    """

    console: Console
    verbose: bool = False
    printer: CliPrinter = field(init=False)
    config: EditorConfig = field(default_factory=EditorConfig.from_env)
    json_mode: bool = False

    def __post_init__(self):
        """Initialize printer."""
        self.printer = CliPrinter(console=self.console, verbose=self.verbose)

    def set_json_mode(self, json_mode: bool) -> None:
        self.json_mode = json_mode
        self.printer.json_mode = json_mode

    def _should_print_verbose(self) -> bool:
        """Check if verbose output should be printed (not in JSON mode)."""
        return self.verbose and not self.json_mode

    def print_progress(self, message: str) -> None:
        """Print a progress message (only in verbose mode, not in JSON mode)."""
        if self._should_print_verbose():
            self.printer.show_progress(message)

    def print_error(self, message: str) -> None:
        """Print an error message; in JSON mode the error is emitted as JSON."""
        if self.json_mode:
            self.printer.print_json({"error": message})
        else:
            self.printer.print_error(message)

    def print_success(self, message: str) -> None:
        """Print a success message (always prints unless in JSON mode)."""
        if not self.json_mode:
            self.printer.show_success(message)

    def print_json(self, data: Any) -> None:
        """Print data as JSON (always prints, even in JSON mode)."""
        self.printer.print_json(data=data)

    def open_editor_or_exit(self, source: str | Path) -> FlowEditor:
        """
        Load a draft file into a FlowEditor, exiting with code 1 on failure.

        Args:
            source: Draft file path

        Returns:
            Editor over the loaded document
        """
        self.print_progress(f"Loading draft from {source}...")
        try:
            data = read_draft(source)
            return FlowEditor.from_draft(data, config=self.config)
        except (LoaderError, DraftFormatError) as e:
            self.print_error(str(e))
            raise typer.Exit(1) from e

    def save_or_exit(self, editor: FlowEditor, target: str | Path) -> Path:
        """Write the editor's draft back to disk, exiting with code 1 on failure."""
        self.print_progress(f"Writing draft to {target}...")
        try:
            path = write_draft(editor.to_draft(), target)
        except (LoaderError, OSError) as e:
            self.print_error(f"Failed to write draft: {e}")
            raise typer.Exit(1) from e
        editor.mark_clean()
        return path

    def finish_command(self, editor: FlowEditor, source: str | Path, result: MutationResult) -> None:
        """
        Report a command outcome and persist applied changes.

        REJECTED and NOT_FOUND outcomes exit with code 1 without writing.
        """
        self.printer.print_mutation(result)
        if result.status in (MutationStatus.REJECTED, MutationStatus.NOT_FOUND):
            raise typer.Exit(1)
        if editor.is_dirty:
            self.save_or_exit(editor, source)
