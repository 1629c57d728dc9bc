"""Base class for the Before/RefactorN variants in catalog examples."""

from __future__ import annotations

import inspect
from contextlib import contextmanager
from typing import Iterator

from rich.console import Console

# Where variants print. The runner points this at its own console while an
# example runs.
_console = Console(highlight=False)


@contextmanager
def printing_to(console: Console) -> Iterator[Console]:
    """Send variant output to ``console`` for the duration of the block."""
    global _console
    previous, _console = _console, console
    try:
        yield console
    finally:
        _console = previous


class RefactorBase:
    """Announces each variant as it is built, so interleaved output stays readable."""

    def __init__(self) -> None:
        _console.print()
        _console.print("##", markup=False, highlight=False)
        _console.print(f"# {type(self).__qualname__}", markup=False, highlight=False)
        _console.print("##", markup=False, highlight=False)
        _console.print()

    def check(self, condition: object) -> bool:
        """Print a NOTICE naming the calling method when ``condition`` is falsy."""
        if condition:
            return True
        caller = inspect.stack()[1].function
        _console.print("##", markup=False, highlight=False)
        _console.print(
            f"# NOTICE: call to `{caller}` without appropriate parameters",
            markup=False,
            highlight=False,
        )
        _console.print("##", markup=False, highlight=False)
        return False
