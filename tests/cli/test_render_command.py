"""Tests for the render CLI command."""

import os
import subprocess
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]


def run_cli(*args: str, stdin: str | None = None, **env: str):
    return subprocess.run(
        [sys.executable, ".", *args],
        input=stdin,
        capture_output=True,
        text=True,
        cwd=ROOT,
        env={**os.environ, **env},
        timeout=30,
    )


def test_render_file(sexpr_document, write_document):
    """render formats a document file for the requested width."""
    path = write_document("expr.json", sexpr_document)
    result = run_cli("render", "sexpr", str(path), "--width", "12")
    assert result.returncode == 0, result.stderr
    assert result.stdout == "(add\n  (mul 2 6)\n  3\n)\n"


def test_render_stdin(tree_document):
    """A missing path or '-' reads the document from stdin."""
    result = run_cli("render", "tree", "-", stdin=tree_document)
    assert result.returncode == 0, result.stderr
    assert result.stdout == "root [ a b [ c ] ]\n"


def test_render_width_from_environment(sexpr_document):
    """PRETTYFIT_WIDTH sets the default width."""
    result = run_cli("render", "sexpr", stdin=sexpr_document, PRETTYFIT_WIDTH="12")
    assert result.returncode == 0, result.stderr
    assert result.stdout == "(add\n  (mul 2 6)\n  3\n)\n"


def test_render_column(tree_document):
    """--column reserves space on the first line."""
    result = run_cli("render", "tree", "-w", "20", "-c", "5", stdin=tree_document)
    assert result.returncode == 0, result.stderr
    assert result.stdout == "root [\n    a b [ c ]\n]\n"


def test_render_output_file(sexpr_document, write_document, tmp_path):
    """--output writes the text to a file instead of stdout."""
    path = write_document("expr.json", sexpr_document)
    target = tmp_path / "out.txt"
    result = run_cli("render", "sexpr", str(path), "-o", str(target))
    assert result.returncode == 0, result.stderr
    assert result.stdout == ""
    assert target.read_text(encoding="utf-8") == "(add (mul 2 6) 3)\n"


def test_render_verify_choices(sexpr_document):
    """Bundled formatters pass Choice verification."""
    result = run_cli("render", "sexpr", "--verify-choices", stdin=sexpr_document)
    assert result.returncode == 0, result.stderr


def test_render_unknown_formatter(sexpr_document):
    """An unknown formatter is a user error."""
    result = run_cli("render", "nope", stdin=sexpr_document)
    assert result.returncode == 1
    assert "Unknown formatter 'nope'" in result.stderr


def test_render_invalid_document():
    """A document that does not match the model is a user error."""
    result = run_cli("render", "tree", stdin='{"children": []}')
    assert result.returncode == 1
    assert "Invalid tree document" in result.stderr


def test_render_missing_file(tmp_path):
    """An unreadable file is a user error."""
    result = run_cli("render", "tree", str(tmp_path / "missing.json"))
    assert result.returncode == 1
    assert "Cannot read" in result.stderr
