"""Tests for the typer CLI."""

import json

from typer.testing import CliRunner

from refactoring_catalog.__main__ import app

runner = CliRunner()


def test_runs_bundled_catalog_by_default():
    result = runner.invoke(app, [])
    assert result.exit_code == 0, result.output
    assert "FirstSetOfRefactorings::SplitPhase" in result.output


def test_single_file_selector(abc_tree):
    result = runner.invoke(app, ["--base", str(abc_tree), "a/b_c/two.py"])
    assert result.exit_code == 0, result.output
    assert "A::BC::Two" in result.output
    assert "A::BC::One" not in result.output
    assert "A::Zz::Three" not in result.output


def test_directory_selector(abc_tree):
    result = runner.invoke(app, ["--base", str(abc_tree), "a/b_c"])
    assert result.exit_code == 0, result.output
    assert result.output.index("A::BC::One") < result.output.index("A::BC::Two")
    assert "A::Zz::Three" not in result.output


def test_base_from_environment(abc_tree):
    result = runner.invoke(app, ["a/zz"], env={"REFACTORING_CATALOG_BASE": str(abc_tree)})
    assert result.exit_code == 0, result.output
    assert "A::Zz::Three" in result.output


def test_failure_exits_non_zero(write, tmp_path):
    write("a/boom.py", "A::Boom", body="raise ValueError('kaboom')")
    result = runner.invoke(app, ["--base", str(tmp_path), "a"])
    assert result.exit_code == 1
    assert "Error:" in result.output
    assert "kaboom" in result.output


def test_missing_entry_point_exits_non_zero(write, tmp_path):
    write("a/quiet.py", "A::Elsewhere")
    result = runner.invoke(app, ["--base", str(tmp_path), "a"])
    assert result.exit_code == 1
    assert "A::Quiet::Tests" in result.output


def test_list(abc_tree):
    result = runner.invoke(app, ["--base", str(abc_tree), "--list", "a"])
    assert result.exit_code == 0, result.output
    for namespace in ("A::BC::One", "A::BC::Two", "A::Zz::Three"):
        assert namespace in result.output
    # Listing only loads; nothing runs
    assert "Running:" not in result.output


def test_list_empty_matches_run_exit_status(tmp_path):
    result = runner.invoke(app, ["--base", str(tmp_path), "--list", "nothing_here"])
    assert result.exit_code == 0
    assert "No examples found" in result.output


def test_empty_run_exits_zero(tmp_path):
    result = runner.invoke(app, ["--base", str(tmp_path), "nothing_here"])
    assert result.exit_code == 0, result.output
    assert "No examples found" in result.output


def test_selectors_resolve_against_working_directory(tmp_path, write, monkeypatch):
    write("examples/foo/one.py", "Examples::Foo::One", body="return 'ran one'")
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("REFACTORING_CATALOG_BASE", raising=False)

    result = runner.invoke(app, ["examples/foo"])
    assert result.exit_code == 0, result.output
    assert "Examples::Foo::One" in result.output
    assert "ran one" in result.output


def test_file_selector_resolves_against_working_directory(tmp_path, write, monkeypatch):
    write("examples/foo/one.py", "Examples::Foo::One", body="return 'ran one'")
    write("examples/foo/two.py", "Examples::Foo::Two", body="return 'ran two'")
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("REFACTORING_CATALOG_BASE", raising=False)

    result = runner.invoke(app, ["examples/foo/two.py"])
    assert result.exit_code == 0, result.output
    assert "ran two" in result.output
    assert "ran one" not in result.output


def test_json_outcome(abc_tree):
    result = runner.invoke(app, ["--base", str(abc_tree), "--json", "a"])
    assert result.exit_code == 0, result.output
    data = json.loads(result.output)
    assert data["ok"] is True
    assert [r["namespace"] for r in data["results"]] == ["A::BC::One", "A::BC::Two", "A::Zz::Three"]
    assert data["results"][0]["lines"] == ["one"]


def test_json_outcome_on_failure(write, tmp_path):
    write("a/boom.py", "A::Boom", body="raise ValueError('kaboom')")
    result = runner.invoke(app, ["--base", str(tmp_path), "--json", "a/boom.py"])
    assert result.exit_code == 1
    assert '"ok": false' in result.output
    assert "kaboom" in result.output
