"""prettyfit: width-aware pretty printing with a Wadler-style layout algebra."""

from prettyfit.combinators import (
    bracket,
    fill,
    fold,
    parenthesized,
    separated,
    spread,
    stack,
)
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
    break_,
    break_join,
    choice,
    concat,
    empty,
    flatten,
    flatten_with,
    group,
    group_with,
    indent,
    literal,
    soft_join,
    space_join,
    verify_choices,
)
from prettyfit.errors import ChoiceInvariantError, LayoutTypeError, PrettyFitError
from prettyfit.formatters import DocumentFormatter, get_formatter, list_formatters
from prettyfit.render import best, pretty, render, write
from prettyfit.resolve import better, fits, resolve

__version__ = "0.1.0"

__all__ = [
    # Algebra
    "Formattable",
    "Layout",
    "Empty",
    "Break",
    "Literal",
    "Indent",
    "Concat",
    "Choice",
    "as_layout",
    "empty",
    "break_",
    "literal",
    "indent",
    "concat",
    "choice",
    "space_join",
    "break_join",
    "soft_join",
    "flatten",
    "flatten_with",
    "group",
    "group_with",
    "verify_choices",
    # Combinators
    "fold",
    "spread",
    "stack",
    "separated",
    "bracket",
    "parenthesized",
    "fill",
    # Resolution and rendering
    "resolve",
    "fits",
    "better",
    "render",
    "pretty",
    "best",
    "write",
    # Formatters
    "DocumentFormatter",
    "get_formatter",
    "list_formatters",
    # Errors
    "PrettyFitError",
    "LayoutTypeError",
    "ChoiceInvariantError",
]
