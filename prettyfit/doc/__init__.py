"""Layout algebra: node kinds, builders and the flattening transform.

Example usage:
    >>> from prettyfit.doc import break_join, group, literal
    >>> doc = group(break_join(literal("a"), literal("b")))
    >>> doc.pretty(3)
    'a b'
"""

from .lib import (
    BREAK,
    EMPTY,
    Break,
    Choice,
    Concat,
    Empty,
    Formattable,
    Indent,
    Layout,
    Literal,
    as_layout,
    break_,
    break_join,
    choice,
    concat,
    empty,
    flat_text,
    flatten,
    flatten_with,
    group,
    group_with,
    indent,
    literal,
    set_choice_verification,
    soft_join,
    space_join,
    verify_choices,
)

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
