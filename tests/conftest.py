import io
import textwrap
from pathlib import Path

import pytest
from rich.console import Console

from refactoring_catalog.models import HarnessConfig


def example_source(namespace, body="return True", register=True):
    """Source of a minimal example module registering ``namespace``::Tests."""
    decorator = f"@entry_point({namespace!r})\n" if register else ""
    return textwrap.dedent(
        """\
        from refactoring_catalog.registry import entry_point


        {decorator}class Tests:
            def run(self):
                {body}
        """
    ).format(decorator=decorator, body=body)


def write_example(base: Path, relative: str, namespace: str, **kwargs) -> Path:
    path = base / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(example_source(namespace, **kwargs), encoding="utf-8")
    return path


@pytest.fixture
def console():
    return Console(file=io.StringIO(), width=200, highlight=False)


@pytest.fixture
def output(console):
    """Everything printed to the test console so far."""
    return lambda: console.file.getvalue()


@pytest.fixture
def config(tmp_path):
    return HarnessConfig(base_dir=tmp_path, catalog_dir=tmp_path, default_root="a")


@pytest.fixture
def abc_tree(tmp_path):
    """a/b_c/one.py, a/b_c/two.py, a/zz/three.py — written out of order."""
    write_example(tmp_path, "a/zz/three.py", "A::Zz::Three", body="return 'three'")
    write_example(tmp_path, "a/b_c/two.py", "A::BC::Two", body="return 'two'")
    write_example(tmp_path, "a/b_c/one.py", "A::BC::One", body="return 'one'")
    return tmp_path


@pytest.fixture
def write(tmp_path):
    """write(relative, namespace, body=..., register=...) under tmp_path."""
    return lambda relative, namespace, **kwargs: write_example(tmp_path, relative, namespace, **kwargs)
