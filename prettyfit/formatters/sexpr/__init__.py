"""S-expression formatter."""

from prettyfit.formatters.sexpr.lib import Call, SExpr, SExprFormatter, sexpr_layout

__all__ = ["Call", "SExpr", "SExprFormatter", "sexpr_layout"]
