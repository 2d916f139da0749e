"""Combinators derived from the layout algebra.

Everything here is expressed with the primitive builders of
`prettyfit.doc`; nothing reaches into the resolver.
"""

from __future__ import annotations

from typing import Callable, Iterable, Sequence

from prettyfit.doc import (
    Formattable,
    Layout,
    as_layout,
    break_,
    break_join,
    choice,
    concat,
    empty,
    flatten,
    group,
    group_with,
    indent,
    literal,
    space_join,
)

__all__ = [
    "fold",
    "spread",
    "stack",
    "separated",
    "bracket",
    "parenthesized",
    "fill",
]

Item = Formattable | str


def fold(items: Iterable[Item], op: Callable[[Layout, Layout], Layout]) -> Layout:
    """Left-reduce `items` with `op`.

    Args:
        items: Layouts, Formattables or strings.
        op: Binary combinator, e.g. `space_join`.

    Returns:
        Layout: `op(op(a, b), c)...`, or `empty()` for no items.
    """
    result: Layout | None = None
    for item in items:
        layout = as_layout(item)
        result = layout if result is None else op(result, layout)
    return empty() if result is None else result


def spread(items: Iterable[Item]) -> Layout:
    """Join items with single spaces."""
    return fold(items, space_join)


def stack(items: Iterable[Item]) -> Layout:
    """Join items with line breaks at the current indentation."""
    return fold(items, break_join)


def separated(items: Iterable[Item], separator: str) -> Layout:
    """Join items with `separator` followed by a space (`a, b, c`)."""
    return fold(items, lambda left, right: space_join(concat(left, literal(separator)), right))


def bracket(amount: int, left: str, body: Item, right: str) -> Layout:
    """Enclose `body` in delimiters, collapsing to one line when it fits.

    Flat: `left body right` separated by spaces. Expanded: `left`, the
    body on its own lines indented by `amount`, then `right` back at the
    enclosing indentation.

    Example:
        >>> bracket(2, "[", spread(["a", "b"]), "]").pretty(5)
        '[\\n  a b\\n]'
    """
    return group(
        concat(
            literal(left),
            concat(
                indent(amount, concat(break_(), as_layout(body))),
                concat(break_(), literal(right)),
            ),
        )
    )


def parenthesized(body: Item) -> Layout:
    """Wrap `body` in parentheses that hug it when kept on one line.

    Collapsed: `(body)`. Expanded: `(body` then `)` on the next line.
    """
    return group_with("", concat(literal("("), break_join(as_layout(body), literal(")"))))


def fill(items: Sequence[Item]) -> Layout:
    """Pack items greedily onto lines, breaking only when the next one overflows.

    For `[x, y, *rest]` the layout is

        Choice(flatten(x) + fill([flatten(y), *rest]),
               x / fill([y, *rest]))

    where `+` joins with a space and `/` with a break. Each step has only
    two possible tails (the next item flattened or as given), so they are
    built once from the end and shared: the result has two nodes per
    item instead of doubling at every step.
    """
    layouts = [as_layout(item) for item in items]
    if not layouts:
        return empty()

    last = layouts[-1]
    # (tail starting with the item as given, tail starting with it flattened)
    tail, flat_tail = last, flatten(last)
    for item in reversed(layouts[:-1]):
        flat_item = flatten(item)
        tail, flat_tail = (
            choice(space_join(flat_item, flat_tail), break_join(item, tail)),
            choice(space_join(flat_item, flat_tail), break_join(flat_item, tail)),
        )
    return tail
