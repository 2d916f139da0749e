"""Layout resolver: commits to one branch of every Choice.

`resolve()` walks a layout with a work queue of (indent, node) items and
produces a lazy stream of tokens describing exactly one concrete layout:

    TextToken(text)     literal text
    LineToken(indent)   newline followed by `indent` spaces

The queue is a persistent linked list. Forking it at a Choice costs one
cell per branch; the tail is shared and never mutated.

At a Choice the primary branch is resolved only to the end of its first
line (or until it runs past the width) and kept if that line `fits`.
Otherwise the secondary branch takes its place in the queue. The decision
is greedy: a branch is never revisited once chosen.
"""

from __future__ import annotations

import itertools
from dataclasses import dataclass
from typing import Iterable, Iterator, TypeAlias

from prettyfit.core.log import get_logger
from prettyfit.doc import (
    Break,
    Choice,
    Concat,
    Empty,
    Formattable,
    Indent,
    Layout,
    Literal,
    as_layout,
)
from prettyfit.errors import LayoutTypeError

logger = get_logger("resolve")

__all__ = [
    "TextToken",
    "LineToken",
    "Token",
    "WorkItem",
    "resolve",
    "fits",
    "better",
]


# =============================================================================
# Tokens
# =============================================================================


@dataclass(frozen=True, slots=True)
class TextToken:
    """Literal text on the current line."""

    text: str


@dataclass(frozen=True, slots=True)
class LineToken:
    """Line break followed by `indent` spaces (clamped to zero on render)."""

    indent: int


Token: TypeAlias = TextToken | LineToken


# =============================================================================
# Work Queue
# =============================================================================


@dataclass(frozen=True, slots=True)
class WorkItem:
    """One cell of the persistent work queue.

    Attributes:
        indent: Ambient indentation for breaks inside `node`.
        node: Layout still to be resolved.
        rest: Remaining queue, shared between forks.
    """

    indent: int
    node: Layout
    rest: WorkItem | None = None


@dataclass(slots=True)
class _Line:
    """Tokens of one line and the resolver state right after it."""

    tokens: list[Token]
    column: int
    rest: WorkItem | None


# =============================================================================
# Fits Predicate
# =============================================================================


def fits(tokens: Iterable[Token], remaining: int) -> bool:
    """Check whether the first line of `tokens` fits in `remaining` columns.

    Only tokens up to the first LineToken are consumed. A line break or
    the end of the stream always fits; nothing fits a negative width.

    Example:
        >>> fits([TextToken("ab"), LineToken(0), TextToken("long")], 2)
        True
        >>> fits([TextToken("abc")], 2)
        False
    """
    if remaining < 0:
        return False
    for token in tokens:
        match token:
            case LineToken():
                return True
            case TextToken(text):
                remaining -= len(text)
                if remaining < 0:
                    return False
    return True


def better(
    first: Iterable[Token], second: Iterable[Token], remaining: int
) -> Iterable[Token]:
    """Return `first` if its first line fits in `remaining`, else `second`.

    `first` is only consumed up to the end of its first line; the
    returned stream still starts at its first token.
    """
    first, probe = itertools.tee(first)
    return first if fits(probe, remaining) else second


# =============================================================================
# Resolver
# =============================================================================


@dataclass(slots=True)
class _Fork:
    """A Choice whose primary branch is being tried on the current line.

    Attributes:
        column: Column where the Choice was reached.
        indent: Ambient indentation of the Choice.
        secondary: Branch to fall back on.
        rest: Queue following the Choice.
        mark: Number of line tokens produced before the Choice.
    """

    column: int
    indent: int
    secondary: Layout
    rest: WorkItem | None
    mark: int


def _resolve_line(width: int, column: int, queue: WorkItem | None) -> _Line:
    """Resolve the queue up to the end of the current line.

    A Choice pushes a fork and continues with its primary branch. While
    any fork is pending the line is only a candidate: it is cut short as
    soon as it runs past `width`. At the end of the candidate the
    innermost fork is settled. If the line fits from there, it fits from
    every enclosing fork too, and the line is final. Otherwise the tokens
    produced since that fork are dropped and its secondary branch takes
    its place.

    Args:
        width: Target line width.
        column: Current column.
        queue: Work still to do.

    Returns:
        The line's tokens with the column and queue that follow them.
    """
    tokens: list[Token] = []
    forks: list[_Fork] = []
    while True:
        line_done = queue is None or (len(forks) > 0 and column > width)
        if not line_done:
            item = queue
            queue = item.rest
            match item.node:
                case Empty():
                    pass
                case Concat(left, right):
                    queue = WorkItem(
                        item.indent, left, WorkItem(item.indent, right, queue)
                    )
                case Indent(amount, child):
                    queue = WorkItem(item.indent + amount, child, queue)
                case Literal(text):
                    tokens.append(TextToken(text))
                    column += len(text)
                case Break():
                    tokens.append(LineToken(item.indent))
                    column = item.indent
                    line_done = True
                case Choice(primary, secondary):
                    forks.append(
                        _Fork(column, item.indent, secondary, queue, len(tokens))
                    )
                    queue = WorkItem(item.indent, primary, queue)
                case node:
                    raise LayoutTypeError(node)
        if not line_done:
            continue

        if not forks:
            return _Line(tokens, column, queue)
        fork = forks.pop()
        if fits(tokens[fork.mark :], width - fork.column):
            return _Line(tokens, column, queue)
        del tokens[fork.mark :]
        column = fork.column
        queue = WorkItem(fork.indent, fork.secondary, fork.rest)


def resolve(node: Formattable | str, width: int, column: int = 0) -> Iterator[Token]:
    """Resolve a layout into a lazy stream of tokens.

    Lines are produced one at a time: Choices further down the document
    are only decided when the consumer asks for the tokens after them.
    The input tree is never modified and may be resolved again at any
    other width.

    Args:
        node: Layout (or anything Formattable) to resolve.
        width: Target line width.
        column: Columns already used on the first line.

    Yields:
        TextToken and LineToken instances.
    """
    logger.debug("Resolving layout: width=%d column=%d", width, column)
    queue: WorkItem | None = WorkItem(0, as_layout(node))
    while queue is not None:
        line = _resolve_line(width, column, queue)
        yield from line.tokens
        column, queue = line.column, line.rest
