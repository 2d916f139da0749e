"""Root pytest configuration and fixtures.

This module provides:
- Environment setup (loads .env, then isolates PRETTYFIT_* variables)
- Choice verification reset between tests
- Sample document fixtures for formatter and CLI tests
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Callable, Generator

import pytest
from dotenv import load_dotenv

from prettyfit.doc import set_choice_verification

# Load environment variables from .env file
load_dotenv()


# =============================================================================
# Isolation
# =============================================================================


@pytest.fixture(autouse=True)
def _isolate_environment(
    monkeypatch: pytest.MonkeyPatch,
) -> Generator[None, None, None]:
    """Run every test with default configuration.

    Variables from the developer's shell or .env file would otherwise
    change widths and indentation under the tests.
    """
    for name in list(os.environ):
        if name.startswith("PRETTYFIT_"):
            monkeypatch.delenv(name)
    yield
    set_choice_verification(None)


# =============================================================================
# Common Test Fixtures
# =============================================================================


@pytest.fixture
def sexpr_document() -> str:
    """A small S-expression document in list form."""
    return json.dumps(["add", ["mul", 2, 6], 3])


@pytest.fixture
def tree_document() -> str:
    """A labelled tree with two levels."""
    return json.dumps(
        {"label": "root", "children": ["a", {"label": "b", "children": ["c"]}]}
    )


@pytest.fixture
def write_document(tmp_path: Path) -> Callable[[str, str], Path]:
    """Factory writing a document to a temporary file.

    Returns:
        A function taking a file name and its contents, returning the path.
    """

    def _write(name: str, text: str) -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write
