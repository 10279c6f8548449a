"""Tests for the typer CLI."""

import pytest
from typer.testing import CliRunner

from aoc2022.__main__ import app
from aoc2022.days import INPUT_DIR_ENV


@pytest.fixture
def runner():
    return CliRunner()


def test_list(runner):
    result = runner.invoke(app, ["list"])
    assert result.exit_code == 0
    assert "day_01" in result.output
    assert "day_02" in result.output


def test_run_example_prints_answers(runner):
    result = runner.invoke(app, ["run", "1", "--example"])
    assert result.exit_code == 0
    assert "24000" in result.output
    assert "45000" in result.output


def test_run_single_part(runner):
    result = runner.invoke(app, ["run", "day_02", "-e", "-p", "2"])
    assert result.exit_code == 0
    assert "12" in result.output


def test_run_explicit_input(runner, tmp_path):
    path = tmp_path / "calories.txt"
    path.write_text("1000\n2000\n3000\n\n4000\n\n5000\n6000\n", encoding="utf-8")
    result = runner.invoke(app, ["run", "1", "--input", str(path), "--part", "1"])
    assert result.exit_code == 0
    assert "11000" in result.output


def test_run_uses_input_dir_env(runner, tmp_path, monkeypatch):
    (tmp_path / "day_02.txt").write_text("A Y\n", encoding="utf-8")
    monkeypatch.setenv(INPUT_DIR_ENV, str(tmp_path))
    result = runner.invoke(app, ["run", "2", "-p", "1"])
    assert result.exit_code == 0
    assert "8" in result.output


def test_run_unknown_day(runner):
    result = runner.invoke(app, ["run", "99"])
    assert result.exit_code == 1
    assert "Unknown day" in result.output


def test_run_missing_input(runner, tmp_path):
    result = runner.invoke(app, ["run", "1", "-i", str(tmp_path / "nope.txt")])
    assert result.exit_code == 1
    assert "Input not found" in result.output


def test_run_bad_token_exits_nonzero(runner, tmp_path):
    path = tmp_path / "bad.txt"
    path.write_text("A W\n", encoding="utf-8")
    result = runner.invoke(app, ["run", "2", "-i", str(path)])
    assert result.exit_code == 1
    assert "Error" in result.output


def test_run_directory_input(runner, tmp_path):
    result = runner.invoke(app, ["run", "1", "-i", str(tmp_path)])
    assert result.exit_code == 1
    assert not isinstance(result.exception, OSError)
    assert "Cannot read input" in result.output


def test_run_bad_part(runner):
    result = runner.invoke(app, ["run", "1", "-e", "-p", "5"])
    assert result.exit_code == 1


def test_all_example(runner):
    result = runner.invoke(app, ["all", "--example"])
    assert result.exit_code == 0
    assert "All Days" in result.output


def test_all_reports_failing_day_and_runs_the_rest(runner, tmp_path, monkeypatch):
    (tmp_path / "day_01.txt").write_text("1\n\n2\n\n3\n", encoding="utf-8")
    (tmp_path / "day_02.txt").write_text("Q Q\n", encoding="utf-8")
    monkeypatch.setenv(INPUT_DIR_ENV, str(tmp_path))
    result = runner.invoke(app, ["all"])
    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)
    assert "day_01" in result.output
    assert "day_02" in result.output
    assert "error" in result.output


def test_check_all(runner):
    result = runner.invoke(app, ["check"])
    assert result.exit_code == 0
    assert "pass" in result.output
    assert "fail" not in result.output


def test_check_single_day(runner):
    result = runner.invoke(app, ["check", "2"])
    assert result.exit_code == 0


def test_check_unknown_day(runner):
    result = runner.invoke(app, ["check", "day_77"])
    assert result.exit_code == 1
