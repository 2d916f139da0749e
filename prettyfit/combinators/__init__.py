"""Combinator library: list joining, bracketing and greedy line filling."""

from .lib import bracket, fill, fold, parenthesized, separated, spread, stack

__all__ = [
    "fold",
    "spread",
    "stack",
    "separated",
    "bracket",
    "parenthesized",
    "fill",
]
