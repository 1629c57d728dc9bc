"""Example runner — selector → discovery pass → execution pass.

Data flow per run:
1. Parse the selector (none / directory / single file)
2. Enumerate example paths, sorted by path string
3. Discovery pass: load each file into a fresh Registry and resolve its
   '<Namespace>::Tests' entry point; the registry is closed afterwards
4. Execution pass: construct each entry point and call run(), in order
5. Print each result; the first failure aborts everything after it

There is no isolation between examples and no retry. A failing example is a
bug in the catalog, and the run stops there.
"""

from __future__ import annotations

from typing import Optional

from rich.console import Console

from refactoring_catalog.base import printing_to
from refactoring_catalog.discovery import discover_paths, load_examples
from refactoring_catalog.errors import ExampleExecutionFailure, HarnessError
from refactoring_catalog.models import (
    ExampleModule,
    ExampleResult,
    HarnessConfig,
    RunOutcome,
    RunSelection,
    SelectionKind,
)
from refactoring_catalog.registry import Registry


def normalize_directory(directory: str) -> str:
    """'./a//b/' → 'a/b'. Absolute paths keep their leading '/'."""
    segments = [s for s in directory.split("/") if s]
    if segments and segments[0] == ".":
        segments = segments[1:]
    joined = "/".join(segments)
    return f"/{joined}" if directory.startswith("/") else joined


def normalize_file(path: str) -> str:
    """'a/b.py' → './a/b.py'. Already rooted paths are left alone."""
    if path.startswith(("./", "/")):
        return path
    return f"./{path}"


# Path segments that name a directory even though they contain a dot
_DIRECTORY_MARKERS = (".", "..")


def parse_selector(selector: Optional[str]) -> RunSelection:
    """Decide what a selector means without touching the filesystem.

    None → everything under the default root. A final path segment containing
    a '.' → a single file, unless it is '.' or '..'. Anything else → a
    directory.
    """
    if selector is None:
        return RunSelection(SelectionKind.ALL)
    directory = normalize_directory(selector)
    last = directory.rsplit("/", 1)[-1]
    if "." in last and last not in _DIRECTORY_MARKERS:
        return RunSelection(SelectionKind.FILE, normalize_file(selector))
    return RunSelection(SelectionKind.DIRECTORY, directory)


def _paths_for(config: HarnessConfig, selection: RunSelection) -> tuple[HarnessConfig, list[str]]:
    """The config to load with, and the example paths a selection covers."""
    if selection.kind == SelectionKind.FILE:
        return config, [selection.path]
    if selection.kind == SelectionKind.DIRECTORY:
        return config, discover_paths(config, selection.path or ".")
    config = config.for_default_run()
    return config, discover_paths(config, config.default_root)


def run_example(example: ExampleModule, console: Console) -> ExampleResult:
    """Construct the entry point, call run() and print what it returned.

    Variant banners printed while the example runs go to ``console`` too, so
    they stay in order with the results.

    Raises:
        ExampleExecutionFailure: The example raised; the original is chained.
    """
    console.print(f"\n[bold]Running:[/bold] {example.namespace} [dim]({example.path})[/dim]")
    try:
        with printing_to(console):
            value = example.factory().run()
    except Exception as e:
        raise ExampleExecutionFailure(example.namespace, e) from e

    result = ExampleResult(namespace=example.namespace, path=example.path, value=value)
    for line in result.lines:
        console.print(line, markup=False, highlight=False)
    return result


def _run_paths(
    config: HarnessConfig,
    console: Console,
    paths: list[str],
    results: Optional[list[ExampleResult]] = None,
) -> list[ExampleResult]:
    results = [] if results is None else results
    if not paths:
        console.print("[yellow]No examples found.[/yellow]")
        return results

    examples = load_examples(config, paths, Registry())
    for example in examples:
        results.append(run_example(example, console))
    return results


def run_all(config: HarnessConfig, console: Console, root: Optional[str] = None) -> list[ExampleResult]:
    """Run every example under ``root``, relative to config.base_dir.

    Without ``root`` this is the default run: config.default_root under
    config.catalog_dir.
    """
    if root is None:
        config, paths = _paths_for(config, RunSelection(SelectionKind.ALL))
        return _run_paths(config, console, paths)
    return _run_paths(config, console, discover_paths(config, root))


def run_directory(config: HarnessConfig, console: Console, directory: str) -> list[ExampleResult]:
    """Run every example under ``directory``, relative to config.base_dir."""
    return run_all(config, console, normalize_directory(directory) or ".")


def run_file(config: HarnessConfig, console: Console, path: str) -> list[ExampleResult]:
    """Run the single example at ``path`` and nothing else."""
    return _run_paths(config, console, [normalize_file(path)])


def list_examples(config: HarnessConfig, selector: Optional[str] = None) -> list[ExampleModule]:
    """Discovery pass only: the examples a selector would run, in run order."""
    config, paths = _paths_for(config, parse_selector(selector))
    if not paths:
        return []
    return load_examples(config, paths, Registry())


def select_and_run(
    config: HarnessConfig,
    console: Console,
    selector: Optional[str] = None,
) -> RunOutcome:
    """Top-level policy: pick what to run from ``selector`` and run it.

    Harness errors do not escape; they end the run and are returned in the
    outcome alongside whatever completed before them.
    """
    selection = parse_selector(selector)
    outcome = RunOutcome(selection=selection)
    try:
        config, paths = _paths_for(config, selection)
        _run_paths(config, console, paths, outcome.results)
    except HarnessError as e:
        outcome.error = e
    return outcome
