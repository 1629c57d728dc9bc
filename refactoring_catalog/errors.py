"""Error hierarchy for the example harness.

Every failure aborts the run. Nothing here is retried or recovered locally;
the CLI turns a HarnessError into a red message and a non-zero exit.
"""

from __future__ import annotations


class HarnessError(Exception):
    """Base class for all harness failures."""


class InvalidIdentifierFragment(HarnessError):
    """A path fragment outside the lower_snake_case alphabet reached the resolver."""

    def __init__(self, fragment: str, reason: str = "not a lower_snake_case identifier path") -> None:
        self.fragment = fragment
        self.reason = reason
        super().__init__(f"Invalid identifier fragment {fragment!r}: {reason}")


class EntryPointNotFound(HarnessError):
    """A loaded example module registered no entry point for its namespace."""

    def __init__(self, key: str, path: str | None = None) -> None:
        self.key = key
        self.path = path
        where = f" (loaded from {path})" if path else ""
        super().__init__(f"No entry point registered as {key}{where}")


class ExampleLoadFailure(HarnessError):
    """An example file is missing or raised while being loaded."""

    def __init__(self, path: str, cause: BaseException | None = None) -> None:
        self.path = path
        detail = f": {type(cause).__name__}: {cause}" if cause else ""
        super().__init__(f"Could not load example {path}{detail}")


class ExampleExecutionFailure(HarnessError):
    """An example's own logic raised. The original exception is the __cause__."""

    def __init__(self, namespace: str, cause: BaseException) -> None:
        self.namespace = namespace
        super().__init__(f"Example {namespace} failed: {type(cause).__name__}: {cause}")


class RegistryClosed(HarnessError):
    """An entry point was registered after the discovery pass finished."""
