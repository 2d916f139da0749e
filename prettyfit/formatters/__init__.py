"""Document formatters: domain models mapped onto the layout algebra."""

from prettyfit.formatters.lib import (
    DocumentFormatter,
    FormatResult,
    get_formatter,
    list_formatters,
    register_formatter,
)

__all__ = [
    "DocumentFormatter",
    "FormatResult",
    "get_formatter",
    "list_formatters",
    "register_formatter",
]
