"""CLI Printer for consistent output formatting."""

from typing import Any

from rich.console import Console
from rich.table import Table

from screenflow.core.flow import FlowDocument
from screenflow.core.result import MutationResult
from screenflow.core.selection import Selection
from screenflow.models.enums import MutationStatus
from screenflow.taxonomy import ElementRegistry, default_registry


class CliPrinter:
    """Centralized printer for CLI output.

    This class handles all printing operations for the CLI, ensuring consistent
    formatting across commands and proper handling of verbose/JSON modes.
    """

    def __init__(
        self, console: Console, verbose: bool = False, json_mode: bool = False
    ):
        """Initialize printer with console and mode settings.

        Args:
            console: Rich console for output
            verbose: Whether to show detailed output
            json_mode: Whether to output in JSON format (can be set later)
        """
        self.console = console
        self.verbose = verbose
        self.json_mode = json_mode

    def print_json(self, data: Any) -> None:
        self.console.print_json(data=data)

    def print_error(self, message: str) -> None:
        self.console.print(f"[red]❌ {message}[/red]")

    def show_success(self, message: str) -> None:
        self.console.print(f"[green]✅ {message}[/green]")

    def show_warning(self, message: str) -> None:
        self.console.print(f"[yellow]⚠️  {message}[/yellow]")

    def show_progress(self, message: str) -> None:
        self.console.print(f"[dim]🔄 {message}[/dim]")

    def print_mutation(self, result: MutationResult) -> None:
        """Print the outcome of one editing command."""
        if self.json_mode:
            self.print_json(
                {
                    "operation": result.operation,
                    "status": result.status.value,
                    "target_id": result.target_id,
                    "message": result.message,
                }
            )
            return

        if result.status == MutationStatus.APPLIED:
            self.show_success(f"{result.operation}: {result.target_id}")
        elif result.status == MutationStatus.NOOP:
            self.show_warning(f"{result.operation}: nothing to do ({result.message})")
        else:
            self.print_error(f"{result.operation}: {result.message}")

    def print_flow(
        self,
        document: FlowDocument,
        selection: Selection | None = None,
        registry: ElementRegistry | None = None,
    ) -> None:
        """Print screens and their elements as tables."""
        registry = registry or default_registry
        active_screen = selection.screen_id if selection else None
        active_element = selection.element_id if selection else None

        self.console.print(f"\n[bold cyan]{document.name}[/bold cyan]")
        self.console.print(
            f"[dim]{document.screen_count} screen(s), {document.element_count} element(s)[/dim]\n"
        )

        for index, screen in enumerate(document.screens, start=1):
            marker = " [bold magenta]●[/bold magenta]" if screen.id == active_screen else ""
            terminal = " [yellow](terminal)[/yellow]" if screen.terminal else ""
            table = Table(
                title=f"Screen {index} • {screen.title} [dim]({screen.id})[/dim]{terminal}{marker}",
                title_justify="left",
                show_lines=False,
            )
            table.add_column("#", justify="right", style="dim")
            table.add_column("Element", style="cyan", no_wrap=True)
            table.add_column("Type")
            table.add_column("Name")
            table.add_column("Properties", style="dim")

            if not screen.elements:
                table.add_row("", "[dim]No elements[/dim]", "", "", "")
            for position, element in enumerate(screen.elements, start=1):
                element_marker = " ●" if element.id == active_element else ""
                properties = ", ".join(f"{key}={value!r}" for key, value in element.properties.items())
                table.add_row(
                    str(position),
                    f"{element.id}{element_marker}",
                    registry.get_label(element.type),
                    element.name,
                    properties or "-",
                )
            self.console.print(table)

    def print_palette(self, registry: ElementRegistry | None = None) -> None:
        """Print element types grouped by palette category."""
        registry = registry or default_registry
        if self.json_mode:
            self.print_json(
                {
                    category: [
                        {
                            "type": str(spec.type),
                            "label": spec.label,
                            "description": spec.description,
                        }
                        for spec in specs
                    ]
                    for category, specs in registry.categories().items()
                }
            )
            return

        table = Table(title="Element palette", title_justify="left")
        table.add_column("Category", style="bold")
        table.add_column("Type", style="cyan", no_wrap=True)
        table.add_column("Label")
        table.add_column("Description", style="dim")
        for category, specs in registry.categories().items():
            for index, spec in enumerate(specs):
                table.add_row(category if index == 0 else "", str(spec.type), spec.label, spec.description)
        self.console.print(table)
