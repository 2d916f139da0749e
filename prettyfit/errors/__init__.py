"""Exception hierarchy for prettyfit."""

from .lib import ChoiceInvariantError, LayoutTypeError, PrettyFitError

__all__ = ["PrettyFitError", "LayoutTypeError", "ChoiceInvariantError"]
