"""Exceptions raised at the edges of the layout library.

Building and resolving layouts cannot fail. The exceptions below are
raised only when a caller hands the library something it cannot turn
into a layout, or when opt-in Choice verification catches a branch pair
that collapses to different text.
"""


class PrettyFitError(Exception):
    """Base class for all prettyfit errors."""


class LayoutTypeError(PrettyFitError, TypeError):
    """Raised when a value cannot be converted into a layout node.

    Attributes:
        value: The offending value.
    """

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(
            f"Expected a Formattable or str, got {type(value).__name__}: {value!r}"
        )


class ChoiceInvariantError(PrettyFitError, ValueError):
    """Raised when both branches of a Choice flatten to different text.

    Only raised while Choice verification is enabled.

    Attributes:
        primary: Flattened text of the primary branch.
        secondary: Flattened text of the secondary branch.
    """

    def __init__(self, primary: str, secondary: str) -> None:
        self.primary = primary
        self.secondary = secondary
        super().__init__(
            "Choice branches flatten differently: "
            f"primary={primary!r}, secondary={secondary!r}"
        )
