"""Rendering of resolved token streams into text.

`pretty()` is the main entry point: it resolves a layout for a width and
folds the resulting tokens into a string. `write()` streams the same text
to any text sink while the document is still being resolved.
"""

from __future__ import annotations

import io
from typing import Iterable, TextIO

from prettyfit.doc import Formattable
from prettyfit.resolve import LineToken, TextToken, Token, resolve

__all__ = ["render", "write", "pretty", "best"]


def _emit(tokens: Iterable[Token], out: TextIO) -> int:
    written = 0
    for token in tokens:
        match token:
            case TextToken(text):
                written += out.write(text)
            case LineToken(indent):
                # Negative indentation is clamped rather than rejected.
                written += out.write("\n" + " " * max(indent, 0))
    return written


def render(tokens: Iterable[Token]) -> str:
    """Fold a token stream into text.

    Text tokens are emitted as-is; a line token becomes a newline followed
    by its indentation in spaces.
    """
    out = io.StringIO()
    _emit(tokens, out)
    return out.getvalue()


def write(
    node: Formattable | str, width: int, stream: TextIO, column: int = 0
) -> int:
    """Resolve `node` and stream its text to `stream` line by line.

    Args:
        node: Layout to render.
        width: Target line width.
        stream: Text sink (file, sys.stdout, StringIO...).
        column: Columns already used on the first line.

    Returns:
        int: Number of characters written.
    """
    return _emit(resolve(node, width, column), stream)


def pretty(node: Formattable | str, width: int, column: int = 0) -> str:
    """Render the best layout of `node` for `width` columns.

    Pure function of its inputs: the same node and width always give the
    same text.

    Example:
        >>> from prettyfit.doc import break_join, group, literal
        >>> pretty(group(break_join(literal("a"), literal("b"))), 2)
        'a\\nb'
    """
    return render(resolve(node, width, column))


def best(node: Formattable | str, width: int, column: int) -> str:
    """Render `node` when `column` columns of the first line are used."""
    return pretty(node, width, column)
