"""Explicit entry point registry.

Example modules declare their entry point with one registration line:

    @entry_point("FirstSetOfRefactorings::SplitPhase")
    class Tests:
        def run(self): ...

The runner opens a Registry for a discovery pass, loads every example file
(loading a file is what registers it), then closes the registry and reads it
during the execution pass.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Callable, Iterator, Optional

from refactoring_catalog.errors import EntryPointNotFound, RegistryClosed
from refactoring_catalog.naming import NAMESPACE_SEPARATOR

ENTRY_POINT_NAME = "Tests"

Factory = Callable[[], object]

# Registry whose discovery pass is in progress, if any.
_active: Optional[Registry] = None


def entry_point_key(namespace: str, name: str = ENTRY_POINT_NAME) -> str:
    return f"{namespace}{NAMESPACE_SEPARATOR}{name}"


class Registry:
    """Entry point key → zero-argument factory."""

    def __init__(self) -> None:
        self._entries: dict[str, Factory] = {}
        self._closed = False

    def __contains__(self, key: str) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def closed(self) -> bool:
        return self._closed

    def keys(self) -> list[str]:
        return sorted(self._entries)

    def add(self, key: str, factory: Factory) -> None:
        if self._closed:
            raise RegistryClosed(f"Cannot register {key}: discovery has finished")
        self._entries[key] = factory

    def lookup(self, key: str, path: Optional[str] = None) -> Factory:
        try:
            return self._entries[key]
        except KeyError:
            raise EntryPointNotFound(key, path) from None

    def close(self) -> None:
        self._closed = True

    @contextmanager
    def discovering(self) -> Iterator[Registry]:
        """Make this registry the registration target, and close it on exit."""
        global _active
        if self._closed:
            raise RegistryClosed("Registry has already completed a discovery pass")
        previous, _active = _active, self
        try:
            yield self
        finally:
            _active = previous
            self.close()


def active_registry() -> Optional[Registry]:
    return _active


def entry_point(namespace: str, name: str = ENTRY_POINT_NAME) -> Callable[[type], type]:
    """Class decorator registering ``cls`` as ``<namespace>::<name>``.

    Outside a discovery pass (e.g. a plain import) nothing is registered.
    """

    def decorator(cls: type) -> type:
        if _active is not None:
            _active.add(entry_point_key(namespace, name), cls)
        return cls

    return decorator
