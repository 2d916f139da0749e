"""Layout resolver: width-driven choice resolution into a token stream."""

from .lib import (
    LineToken,
    TextToken,
    Token,
    WorkItem,
    better,
    fits,
    resolve,
)

__all__ = [
    "TextToken",
    "LineToken",
    "Token",
    "WorkItem",
    "resolve",
    "fits",
    "better",
]
