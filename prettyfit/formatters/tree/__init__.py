"""Labelled tree formatter."""

from prettyfit.formatters.tree.lib import TreeFormatter, TreeNode

__all__ = ["TreeFormatter", "TreeNode"]
