"""Labelled tree formatter.

A node prints as its label followed by its children in square brackets,
`aaa [ bbb ccc ]`. Children stay on the label's line when they fit and
move to an indented block otherwise.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from prettyfit.combinators import bracket, spread
from prettyfit.doc import Formattable, Layout, literal, space_join
from prettyfit.formatters.lib import DocumentFormatter, register_formatter

CHILD_INDENT = 4


class TreeNode(BaseModel, Formattable):
    """A labelled node with ordered children.

    A bare JSON string is accepted as a leaf.

    Attributes:
        label: Text printed for the node.
        children: Child nodes; a node without children is a leaf.
    """

    model_config = ConfigDict(frozen=True)

    label: str = Field(..., min_length=1, description="Node label")
    children: list[TreeNode] = Field(
        default_factory=list,
        description="Ordered child nodes",
    )

    @model_validator(mode="before")
    @classmethod
    def _from_label(cls, data: Any) -> Any:
        if isinstance(data, str):
            return {"label": data}
        return data

    @property
    def is_leaf(self) -> bool:
        return not self.children

    def layout(self) -> Layout:
        if self.is_leaf:
            return literal(self.label)
        return space_join(
            literal(self.label),
            bracket(CHILD_INDENT, "[", spread(self.children), "]"),
        )


@register_formatter
class TreeFormatter(DocumentFormatter):
    """Formats labelled trees."""

    @property
    def name(self) -> str:
        return "tree"

    @property
    def description(self) -> str:
        return "Labelled trees, children bracketed on one line or in a block"

    @property
    def model(self) -> type[BaseModel]:
        return TreeNode

    def layout(self, document: BaseModel) -> Layout:
        return document.layout()

    def sample(self) -> TreeNode:
        return TreeNode.model_validate(
            {
                "label": "aaa",
                "children": [
                    {"label": "bbbbb", "children": ["ccc", "dd"]},
                    "eee",
                    {"label": "ffff", "children": ["gg", "hhh", "ii"]},
                ],
            }
        )
