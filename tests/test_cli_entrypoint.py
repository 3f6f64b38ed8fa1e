from __future__ import annotations

import importlib
from pathlib import Path

import pytest


def test_console_entrypoint_exposes_app() -> None:
    pytest.importorskip("typer")

    module = importlib.import_module("aoc2023.main")

    assert hasattr(module, "app")
    assert module.app is not None


def test_run_prints_both_parts() -> None:
    testing = pytest.importorskip("typer.testing")
    from aoc2023.main import app

    result = testing.CliRunner().invoke(app, ["run", "--day", "05"])

    assert result.exit_code == 0, result.output
    assert "First part: 35" in result.output
    assert "Second part: 46" in result.output
    assert "Second part took" in result.output


def test_run_prompts_for_day() -> None:
    testing = pytest.importorskip("typer.testing")
    from aoc2023.main import app

    result = testing.CliRunner().invoke(app, ["run"], input="8\n")

    assert result.exit_code == 0, result.output
    assert "First part: 6" in result.output


def test_run_rejects_unknown_day() -> None:
    testing = pytest.importorskip("typer.testing")
    from aoc2023.main import app

    result = testing.CliRunner().invoke(app, ["run", "--day", "25"])

    assert result.exit_code == 2


def test_run_aborts_on_malformed_input(tmp_path: Path) -> None:
    testing = pytest.importorskip("typer.testing")
    from aoc2023.main import app

    path = tmp_path / "input.txt"
    path.write_text("LR\n\nAAA = BBB\n", encoding="utf-8")

    result = testing.CliRunner().invoke(app, ["run", "--day", "8", "--input-path", str(path)])

    assert result.exit_code == 1
    assert "InputParseError" in result.output


def test_list_days() -> None:
    testing = pytest.importorskip("typer.testing")
    from aoc2023.main import app

    result = testing.CliRunner().invoke(app, ["list-days"])

    assert result.exit_code == 0, result.output
    assert "Haunted Wasteland" in result.output
