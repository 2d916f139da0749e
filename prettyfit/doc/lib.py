"""Layout algebra: the immutable description of possible renderings.

A layout is a tree built bottom-up from six node kinds:

    Empty                   renders nothing
    Break                   mandatory line break (a separator once flattened)
    Literal(text)           opaque text, costs len(text) columns
    Indent(amount, child)   child with extra ambient indentation for its breaks
    Concat(left, right)     left followed by right
    Choice(primary, secondary)
                            two renderings of the same content; both must
                            flatten to the same text

Nodes are frozen dataclasses. A tree may be shared between any number of
resolutions at different widths; nothing in the library ever mutates it.

See "A prettier printer" (Wadler) for the algebra this module follows:
https://homepages.inf.ed.ac.uk/wadler/papers/prettier/prettier.pdf
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator

from prettyfit.config import is_choice_verification_enabled
from prettyfit.core.log import get_logger
from prettyfit.errors import ChoiceInvariantError, LayoutTypeError

logger = get_logger("doc")

__all__ = [
    # Capability
    "Formattable",
    "as_layout",
    # Node kinds
    "Layout",
    "Empty",
    "Break",
    "Literal",
    "Indent",
    "Concat",
    "Choice",
    "EMPTY",
    "BREAK",
    # Builders
    "empty",
    "break_",
    "literal",
    "indent",
    "concat",
    "choice",
    "space_join",
    "break_join",
    "soft_join",
    # Flattening
    "flatten",
    "flatten_with",
    "flat_text",
    "group",
    "group_with",
    # Verification
    "set_choice_verification",
    "verify_choices",
]


# =============================================================================
# Formattable Capability
# =============================================================================


class Formattable(ABC):
    """Anything that can describe itself as a layout.

    Subclasses implement `layout()`; `pretty()` then picks the best
    rendering for a given width.

    Example:
        >>> class Point(Formattable):
        ...     def __init__(self, x, y):
        ...         self.x, self.y = x, y
        ...     def layout(self) -> Layout:
        ...         return literal(f"({self.x}, {self.y})")
        >>> Point(1, 2).pretty(80)
        '(1, 2)'
    """

    @abstractmethod
    def layout(self) -> Layout:
        """Describe this value as a layout node."""
        ...

    def pretty(self, width: int, column: int = 0) -> str:
        """Render the best layout fitting in `width` columns.

        Args:
            width: Target line width.
            column: Columns already used on the first line.

        Returns:
            str: The rendered text.
        """
        from prettyfit.render import pretty

        return pretty(self, width, column)


def as_layout(item: Formattable | str) -> Layout:
    """Convert a Formattable or a plain string into a layout node.

    Raises:
        LayoutTypeError: If `item` is neither.
    """
    if isinstance(item, Layout):
        return item
    if isinstance(item, Formattable):
        return item.layout()
    if isinstance(item, str):
        return Literal(item)
    raise LayoutTypeError(item)


# =============================================================================
# Node Kinds
# =============================================================================


class Layout(Formattable):
    """Base class of every layout node.

    The fluent methods are notation only: `a.space_join(b)` is exactly
    `space_join(a, b)`.
    """

    __slots__ = ()

    def layout(self) -> Layout:
        return self

    def concat(self, other: Formattable | str) -> Layout:
        return concat(self, as_layout(other))

    def space_join(self, other: Formattable | str) -> Layout:
        return space_join(self, as_layout(other))

    def break_join(self, other: Formattable | str) -> Layout:
        return break_join(self, as_layout(other))

    def soft_join(self, other: Formattable | str) -> Layout:
        return soft_join(self, as_layout(other))

    def indent(self, amount: int) -> Layout:
        return indent(amount, self)

    def group(self) -> Layout:
        return group(self)

    def flatten(self, separator: str = " ") -> Layout:
        return flatten_with(separator, self)


@dataclass(frozen=True)
class Empty(Layout):
    """Renders nothing."""


@dataclass(frozen=True)
class Break(Layout):
    """Mandatory line break at the ambient indentation."""


@dataclass(frozen=True)
class Literal(Layout):
    """Opaque text. Must not contain newlines."""

    text: str


@dataclass(frozen=True)
class Indent(Layout):
    """Adds `amount` columns to the indentation of breaks inside `child`."""

    amount: int
    child: Layout


@dataclass(frozen=True)
class Concat(Layout):
    """Sequential composition of two layouts."""

    left: Layout
    right: Layout


@dataclass(frozen=True)
class Choice(Layout):
    """Two candidate renderings; `primary` is preferred when it fits.

    Both branches must flatten to the same text. The resolver relies on
    it without checking; see `verify_choices()` for an opt-in check.
    """

    primary: Layout
    secondary: Layout


EMPTY = Empty()
BREAK = Break()
_SPACE = Literal(" ")


# =============================================================================
# Builders
# =============================================================================


def empty() -> Layout:
    """The layout that renders nothing."""
    return EMPTY


def break_() -> Layout:
    """A mandatory line break."""
    return BREAK


def literal(text: str) -> Layout:
    """Turn a string into a layout. Its column cost is `len(text)`."""
    return Literal(text)


def indent(amount: int, node: Layout) -> Layout:
    """Indent the breaks of `node` by `amount` extra columns.

    Negative amounts are accepted; the rendered indentation is clamped
    to zero.
    """
    return Indent(amount, node)


def concat(left: Layout, right: Layout) -> Layout:
    """Concatenate two layouts."""
    return Concat(left, right)


def space_join(left: Layout, right: Layout) -> Layout:
    """`left`, a single space, then `right`."""
    return Concat(left, Concat(_SPACE, right))


def break_join(left: Layout, right: Layout) -> Layout:
    """`left`, a line break, then `right`."""
    return Concat(left, Concat(BREAK, right))


def soft_join(left: Layout, right: Layout) -> Layout:
    """`left`, then a space if the rest of the line fits, else a break."""
    return Concat(left, Concat(choice(_SPACE, BREAK), right))


def choice(primary: Layout, secondary: Layout) -> Layout:
    """Offer two alternative renderings, `primary` taking precedence.

    Both arguments must flatten to the same text. When Choice
    verification is enabled the texts are compared here; a Choice built
    by `group_with` is compared using its own separator.

    Raises:
        ChoiceInvariantError: Verification is enabled and the branches
            flatten differently.
    """
    return _choice(primary, secondary, " ")


def _choice(primary: Layout, secondary: Layout, separator: str) -> Layout:
    if _verification_enabled():
        _check_choice(primary, secondary, separator)
    return Choice(primary, secondary)


# =============================================================================
# Flattening
# =============================================================================


def flatten_with(separator: str, node: Layout) -> Layout:
    """Collapse `node` to its single-line form.

    Breaks become `Literal(separator)`, indentation is dropped and a
    Choice keeps only its primary branch. Sub-trees without breaks or
    choices are shared with the input.

    The walk uses an explicit stack, so left-deep trees produced by long
    folds do not hit the recursion limit. A sub-tree shared several times
    in `node` is flattened once.
    """
    separator_node = Literal(separator)
    done: dict[int, Layout] = {}
    pending: list[Layout] = [node]

    while pending:
        current = pending[-1]
        key = id(current)
        if key in done:
            pending.pop()
            continue

        match current:
            case Break():
                done[key] = separator_node
            case Empty() | Literal():
                done[key] = current
            case Indent(_, child) | Choice(child, _):
                flat = done.get(id(child))
                if flat is None:
                    pending.append(child)
                    continue
                done[key] = flat
            case Concat(left, right):
                flat_left = done.get(id(left))
                flat_right = done.get(id(right))
                if flat_left is None or flat_right is None:
                    if flat_right is None:
                        pending.append(right)
                    if flat_left is None:
                        pending.append(left)
                    continue
                if flat_left is left and flat_right is right:
                    done[key] = current
                else:
                    done[key] = Concat(flat_left, flat_right)
            case _:
                raise LayoutTypeError(current)
        pending.pop()

    return done[id(node)]


def flatten(node: Layout) -> Layout:
    """Collapse `node` to one line, breaks becoming single spaces."""
    return flatten_with(" ", node)


def flat_text(node: Layout, separator: str = " ") -> str:
    """Text of the single-line form of `node`, without resolving it."""
    parts: list[str] = []
    pending: list[Layout] = [node]
    while pending:
        match pending.pop():
            case Literal(text):
                parts.append(text)
            case Break():
                parts.append(separator)
            case Indent(_, child) | Choice(child, _):
                pending.append(child)
            case Concat(left, right):
                pending.append(right)
                pending.append(left)
            case Empty():
                pass
            case other:
                raise LayoutTypeError(other)
    return "".join(parts)


def group(node: Layout) -> Layout:
    """Offer the compact one-line form of `node` as a preferred alternative."""
    return _choice(flatten(node), node, " ")


def group_with(separator: str, node: Layout) -> Layout:
    """Like `group`, but breaks collapse to `separator` instead of a space."""
    return _choice(flatten_with(separator, node), node, separator)


# =============================================================================
# Choice Verification (opt-in)
# =============================================================================

_verification: bool | None = None


def _verification_enabled() -> bool:
    if _verification is not None:
        return _verification
    return is_choice_verification_enabled()


def _check_choice(primary: Layout, secondary: Layout, separator: str) -> None:
    primary_text = flat_text(primary, separator)
    secondary_text = flat_text(secondary, separator)
    if primary_text != secondary_text:
        logger.warning(
            "Choice branches flatten differently: %r != %r",
            primary_text,
            secondary_text,
        )
        raise ChoiceInvariantError(primary_text, secondary_text)


def set_choice_verification(enabled: bool | None) -> None:
    """Force Choice verification on or off.

    Args:
        enabled: True or False to force, None to defer to the
            PRETTYFIT_VERIFY_CHOICES environment variable.
    """
    global _verification
    _verification = enabled


@contextmanager
def verify_choices(enabled: bool | None = True) -> Iterator[None]:
    """Temporarily enable (or disable) Choice verification.

    Passing None defers to PRETTYFIT_VERIFY_CHOICES for the duration.

    Example:
        >>> with verify_choices():
        ...     group(break_join(literal("a"), literal("b")))
    """
    previous = _verification
    set_choice_verification(enabled)
    try:
        yield
    finally:
        set_choice_verification(previous)
