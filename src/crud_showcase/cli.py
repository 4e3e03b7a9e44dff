"""Command Line Interface for crud-showcase.

This module exposes the five programs as Typer commands:

    crud-showcase finance      Process sample transactions on a savings account
    crud-showcase health       Print patients and their prescriptions
    crud-showcase warehouse    Run the warehouse stock demo
    crud-showcase grades       Turn a student results file into a grade report
    crud-showcase inventory    Interactive JSON-backed inventory manager
    crud-showcase info         Show the active configuration

Errors reaching a command are printed once and turned into exit code 1.
"""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from crud_showcase.apps import FinanceApp, GradingApp, HealthSystemApp, InventoryApp, WarehouseManager
from crud_showcase.domain.ports import (
    IngestionError,
    ShowcaseError,
    SourceNotFoundError,
    StorageError,
)
from crud_showcase.infrastructure.logging_config import setup_logging
from crud_showcase.infrastructure.settings import APP_VERSION, settings

# Initialize Typer app and Rich console
app = typer.Typer(
    name="crud-showcase",
    help="Five small record-keeping console programs",
    add_completion=False
)
console = Console()


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"{settings.app_name} v{APP_VERSION}")
        raise typer.Exit()


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging"),
    version: bool = typer.Option(
        False, "--version", help="Show version information",
        callback=_version_callback, is_eager=True
    ),
) -> None:
    """Five small record-keeping console programs."""
    setup_logging(
        use_json=settings.log_json,
        log_level="DEBUG" if verbose else settings.log_level
    )
    if verbose:
        console.print("[dim]Verbose logging enabled[/dim]")


def _unexpected(error: Exception) -> typer.Exit:
    console.print(f"\n[red]✗[/red] An unexpected error occurred: {escape(str(error))}")
    return typer.Exit(code=1)


@app.command()
def finance() -> None:
    """Process four sample transactions against a savings account."""
    try:
        FinanceApp(
            console=console,
            opening_balance=settings.opening_balance,
            currency_symbol=settings.currency_symbol
        ).run()
    except Exception as e:
        raise _unexpected(e)


@app.command()
def health() -> None:
    """Print every patient and their prescriptions."""
    try:
        HealthSystemApp(console=console).run()
    except Exception as e:
        raise _unexpected(e)


@app.command()
def warehouse() -> None:
    """Run the warehouse inventory demo."""
    try:
        WarehouseManager(console=console).run()
    except Exception as e:
        raise _unexpected(e)


@app.command()
def grades(
    input_file: Optional[Path] = typer.Option(None, "--input", "-i", help="Student results file (ID, Name, Score per line)"),
    output_file: Optional[Path] = typer.Option(None, "--output", "-o", help="Grade report file to write"),
    skip_invalid: bool = typer.Option(False, "--skip-invalid", help="Skip malformed lines and list them in the report"),
) -> None:
    """Read student results and write the grade report."""
    input_path = input_file or settings.resolve(settings.students_file)
    output_path = output_file or settings.resolve(settings.report_file)

    try:
        GradingApp(console=console).run(
            input_path,
            output_path,
            skip_invalid=skip_invalid,
            preview_lines=settings.report_preview_lines
        )
    except SourceNotFoundError as e:
        console.print(f"[red]✗[/red] {escape(str(e))}")
        console.print("[dim]Create the file with one 'ID, Name, Score' record per line, or pass --input.[/dim]")
        raise typer.Exit(code=1)
    except IngestionError as e:
        console.print(f"[red]✗[/red] {escape(str(e))}")
        console.print("[dim]Fix the line above or rerun with --skip-invalid.[/dim]")
        raise typer.Exit(code=1)
    except StorageError as e:
        console.print(f"[red]✗[/red] {escape(str(e))}")
        raise typer.Exit(code=1)
    except Exception as e:
        raise _unexpected(e)

    console.print("\n[green]✓[/green] Grade report complete")


@app.command()
def inventory(
    file: Optional[Path] = typer.Option(None, "--file", "-f", help="Inventory JSON file"),
) -> None:
    """Interactive inventory manager backed by a JSON file."""
    file_path = file or settings.resolve(settings.inventory_file)

    try:
        InventoryApp(file_path, console=console).run()
    except ShowcaseError as e:
        console.print(f"\n[red]✗[/red] A critical error occurred: {escape(str(e))}")
        raise typer.Exit(code=1)
    except (KeyboardInterrupt, EOFError):
        console.print("\n[yellow]⚠[/yellow] Inventory session interrupted")
        raise typer.Exit(code=130)
    except Exception as e:
        raise _unexpected(e)


@app.command()
def info() -> None:
    """Display the active configuration."""
    console.print("[bold blue]System Information[/bold blue]\n")

    info_table = Table(show_header=False, box=None, padding=(0, 2))
    info_table.add_row("Application:", settings.app_name)
    info_table.add_row("Version:", APP_VERSION)
    info_table.add_row("Log Level:", settings.log_level)
    info_table.add_row("JSON Logs:", "Enabled" if settings.log_json else "Disabled")
    info_table.add_row("Students File:", str(settings.resolve(settings.students_file)))
    info_table.add_row("Report File:", str(settings.resolve(settings.report_file)))
    info_table.add_row("Inventory File:", str(settings.resolve(settings.inventory_file)))
    info_table.add_row("Currency Symbol:", settings.currency_symbol)
    info_table.add_row("Opening Balance:", str(settings.opening_balance))
    info_table.add_row("Report Preview Lines:", str(settings.report_preview_lines))

    console.print(info_table)


if __name__ == "__main__":
    app()
