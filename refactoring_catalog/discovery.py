"""Example discovery and loading.

An example is any ``*.py`` file below a root directory. Paths are handled as
'./'-rooted posix strings relative to the harness base directory, e.g.
'./first_set_of_refactorings/split_phase.py'. That string alone decides the
namespace; file contents are never inspected.

Loading a file executes it, which is what registers its entry point.
"""

from __future__ import annotations

import importlib.util
import re
import sys
from pathlib import Path
from types import ModuleType

from refactoring_catalog.errors import ExampleLoadFailure, HarnessError
from refactoring_catalog.models import ExampleModule, HarnessConfig
from refactoring_catalog.naming import namespace_for_path
from refactoring_catalog.registry import Registry, entry_point_key

# Loaded examples live under this prefix in sys.modules.
LOADED_PREFIX = "refactoring_catalog.loaded"


def _filesystem_path(config: HarnessConfig, path: str) -> Path:
    if path.startswith("/"):
        return Path(path)
    return config.base_dir / path


def _path_string(config: HarnessConfig, file: Path) -> str:
    """'./'-rooted posix string for a file found on disk."""
    try:
        return "./" + file.relative_to(config.base_dir).as_posix()
    except ValueError:
        return file.as_posix()


def _module_name(path: str) -> str:
    """'./a/b_c/one.py' → 'refactoring_catalog.loaded.a.b_c.one'"""
    stem = path[2:] if path.startswith("./") else path.lstrip("/")
    stem = stem.rsplit(".", 1)[0]
    dotted = ".".join(re.sub(r"\W", "_", part) for part in stem.split("/") if part)
    return f"{LOADED_PREFIX}.{dotted}"


def discover_paths(config: HarnessConfig, root: str) -> list[str]:
    """Every example file under ``root``, sorted by full path string.

    Sorting is on the path string, not on filesystem enumeration order, so
    output is reproducible across platforms. A missing root yields nothing.
    """
    directory = _filesystem_path(config, root) if root not in ("", ".") else config.base_dir
    if not directory.is_dir():
        return []
    pattern = f"*{config.extension}"
    return sorted(_path_string(config, f) for f in directory.rglob(pattern) if f.is_file())


def load_module(config: HarnessConfig, path: str) -> ModuleType:
    """Execute the example file at ``path`` as a fresh module.

    Raises:
        ExampleLoadFailure: The file is missing or raised during execution.
    """
    file = _filesystem_path(config, path)
    if not file.is_file():
        raise ExampleLoadFailure(path, FileNotFoundError(f"No such file: {file}"))

    name = _module_name(path)
    spec = importlib.util.spec_from_file_location(name, file)
    if spec is None or spec.loader is None:
        raise ExampleLoadFailure(path)
    module = importlib.util.module_from_spec(spec)
    # Registered before execution so dataclasses and friends can find it
    sys.modules[name] = module
    try:
        spec.loader.exec_module(module)
    except HarnessError:
        sys.modules.pop(name, None)
        raise
    except Exception as e:
        sys.modules.pop(name, None)
        raise ExampleLoadFailure(path, e) from e
    return module


def load_example(config: HarnessConfig, path: str, registry: Registry) -> ExampleModule:
    """Load one example and resolve its entry point.

    Must run inside ``registry.discovering()`` so the file's registration
    lands in ``registry``.

    Raises:
        ExampleLoadFailure: see load_module.
        InvalidIdentifierFragment: The path does not map to a namespace.
        EntryPointNotFound: The file registered no '<namespace>::Tests'.
    """
    load_module(config, path)
    namespace = namespace_for_path(path)
    factory = registry.lookup(entry_point_key(namespace), path)
    return ExampleModule(path=path, namespace=namespace, factory=factory)


def load_examples(config: HarnessConfig, paths: list[str], registry: Registry) -> list[ExampleModule]:
    """Discovery pass: load every path in order, then close the registry.

    The first failure propagates; later paths are never loaded.
    """
    with registry.discovering():
        return [load_example(config, path, registry) for path in paths]
