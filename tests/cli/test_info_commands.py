"""Tests for the formatters, demo and env CLI commands."""

import os
import subprocess
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]


def run_cli(*args: str, **env: str):
    return subprocess.run(
        [sys.executable, ".", *args],
        capture_output=True,
        text=True,
        cwd=ROOT,
        env={**os.environ, **env},
        timeout=30,
    )


def test_no_command_shows_help():
    """Running without a command prints usage and fails."""
    result = run_cli()
    assert result.returncode == 1
    assert "Usage: python . {command}" in result.stdout


def test_help_flag():
    """--help prints usage and succeeds."""
    result = run_cli("--help")
    assert result.returncode == 0
    assert "render" in result.stdout


def test_unknown_command():
    """An unknown command is reported and fails."""
    result = run_cli("frobnicate")
    assert result.returncode == 1
    assert "Unknown command: frobnicate" in result.stderr


def test_formatters_lists_builtins():
    """formatters lists every bundled formatter with its description."""
    result = run_cli("formatters")
    assert result.returncode == 0
    lines = result.stdout.splitlines()
    assert lines[0] == "Available formatters:"
    names = [line.split()[0] for line in lines[1:]]
    assert names == ["c", "sexpr", "tree"]


def test_demo_single_formatter():
    """demo renders the sample at each requested width."""
    result = run_cli("demo", "tree", "--widths", "80,45")
    assert result.returncode == 0, result.stderr
    blocks = result.stdout.rstrip("\n").split("\n---\n")
    assert blocks == [
        "# tree @ width 80\naaa [ bbbbb [ ccc dd ] eee ffff [ gg hhh ii ] ]",
        "# tree @ width 45\naaa [\n    bbbbb [ ccc dd ] eee ffff [ gg hhh ii ]\n]",
    ]


def test_demo_all_formatters():
    """Without a formatter, demo covers all of them."""
    result = run_cli("demo", "--widths", "60")
    assert result.returncode == 0, result.stderr
    for name in ("c", "sexpr", "tree"):
        assert f"# {name} @ width 60" in result.stdout


def test_demo_rejects_bad_widths():
    """A malformed width list is an argument error."""
    result = run_cli("demo", "--widths", "wide")
    assert result.returncode == 2
    assert "invalid width list" in result.stderr


def test_env_report():
    """env shows every variable with its current value."""
    result = run_cli("env", PRETTYFIT_WIDTH="100")
    assert result.returncode == 0
    assert "Environment Report" in result.stdout
    assert "PRETTYFIT_WIDTH = 100" in result.stdout
    assert "PRETTYFIT_VERIFY_CHOICES = False" in result.stdout


def test_env_category_filter():
    """--category limits the report."""
    result = run_cli("env", "--category", "debug")
    assert result.returncode == 0
    assert "PRETTYFIT_LOG_LEVEL" in result.stdout
    assert "PRETTYFIT_WIDTH" not in result.stdout
