"""CLI for the refactoring example harness.

Usage:
    python -m refactoring_catalog                                # Every bundled example
    python -m refactoring_catalog examples/extract_function      # A directory under cwd
    python -m refactoring_catalog examples/split_phase.py        # A single file
    python -m refactoring_catalog --list                         # Show examples
    python -m refactoring_catalog --json examples                # Machine-readable outcome
"""

from __future__ import annotations

import io
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from refactoring_catalog.errors import HarnessError
from refactoring_catalog.models import HarnessConfig
from refactoring_catalog.runner import list_examples, select_and_run

app = typer.Typer(
    name="refactoring-catalog",
    help="Run the Before/RefactorN refactoring examples",
    add_completion=False,
)
console = Console()
err_console = Console(stderr=True)


def _fail(error: object) -> None:
    err_console.print(f"\n[red]Error:[/red] {escape(str(error))}")
    raise typer.Exit(1)


def _show_list(config: HarnessConfig, selector: Optional[str]) -> None:
    try:
        examples = list_examples(config, selector)
    except HarnessError as e:
        _fail(e)
    if not examples:
        console.print("[yellow]No examples found.[/yellow]")
        return

    table = Table(title="Examples", show_header=True, header_style="bold")
    table.add_column("Namespace", style="green", min_width=30)
    table.add_column("Path")
    for example in examples:
        table.add_row(example.namespace, example.path)

    console.print()
    console.print(table)
    console.print()


@app.command()
def main(
    selector: Optional[str] = typer.Argument(
        None, help="Directory to run, or a single file (final segment contains '.')"
    ),
    base: Optional[Path] = typer.Option(
        None,
        "--base",
        "-b",
        envvar="REFACTORING_CATALOG_BASE",
        help="Directory selectors are resolved against (default: the working directory)",
    ),
    list_only: bool = typer.Option(False, "--list", "-l", help="List examples instead of running them"),
    json_output: bool = typer.Option(False, "--json", help="Print the run outcome as JSON instead of example output"),
) -> None:
    """Run every example, one directory of examples, or a single example file."""
    config = HarnessConfig(base_dir=(base or Path.cwd()).resolve())

    if list_only:
        _show_list(config, selector)
        return

    run_console = Console(file=io.StringIO()) if json_output else console
    outcome = select_and_run(config, run_console, selector)
    if json_output:
        console.print_json(data=outcome.to_dict())
    if not outcome.ok:
        _fail(outcome.error)


if __name__ == "__main__":
    app()
