"""Data models for the example harness.

HarnessConfig, SelectionKind, RunSelection, ExampleModule, ExampleResult,
RunOutcome — the typed structures that flow through discovery → runner → CLI.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from pathlib import Path
from typing import Any, Optional

from refactoring_catalog.errors import HarnessError
from refactoring_catalog.registry import Factory

DEFAULT_ROOT = "first_set_of_refactorings"
EXAMPLE_EXTENSION = ".py"


def bundled_catalog_dir() -> Path:
    """Absolute path to the catalog shipped with the package."""
    return Path(__file__).parent / "catalog"


@dataclass
class HarnessConfig:
    """Where examples live and how they are recognised.

    Selectors resolve against ``base_dir`` (the working directory). A run
    without a selector uses ``default_root`` under ``catalog_dir`` instead.
    """

    base_dir: Path = field(default_factory=Path.cwd)
    catalog_dir: Path = field(default_factory=bundled_catalog_dir)
    default_root: str = DEFAULT_ROOT
    extension: str = EXAMPLE_EXTENSION

    def for_default_run(self) -> HarnessConfig:
        """Same config, with paths resolved against the catalog directory."""
        return replace(self, base_dir=self.catalog_dir)


class SelectionKind(str, Enum):
    """What a run selector picked."""

    ALL = "all"
    DIRECTORY = "directory"
    FILE = "file"


@dataclass
class RunSelection:
    """A parsed run selector. ``path`` is None for SelectionKind.ALL."""

    kind: SelectionKind
    path: Optional[str] = None


@dataclass
class ExampleModule:
    """A loaded example file and the entry point its namespace resolved to."""

    path: str
    namespace: str
    factory: Factory


@dataclass
class ExampleResult:
    """What one entry point returned."""

    namespace: str
    path: str
    value: Any = None

    @property
    def lines(self) -> list[str]:
        """Printable lines: one per returned item, booleans as true/false."""
        if self.value is None:
            return []
        values = self.value if isinstance(self.value, (list, tuple)) else [self.value]
        return [str(v).lower() if isinstance(v, bool) else str(v) for v in values]


@dataclass
class RunOutcome:
    """Result of a run: the examples that completed, and the error that stopped it."""

    selection: RunSelection
    results: list[ExampleResult] = field(default_factory=list)
    error: Optional[HarnessError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def namespaces(self) -> list[str]:
        return [r.namespace for r in self.results]

    def to_dict(self) -> dict:
        """Serialize to a JSON-compatible dict."""
        return {
            "selection": {"kind": self.selection.kind.value, "path": self.selection.path},
            "results": [
                {"namespace": r.namespace, "path": r.path, "lines": r.lines}
                for r in self.results
            ],
            "ok": self.ok,
            "error": str(self.error) if self.error else None,
        }
