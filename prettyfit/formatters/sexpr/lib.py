"""S-expression formatter.

Prints arithmetic S-expressions such as `(add 1 (mul 2 3))`. A call
collapses onto one line when it fits; otherwise its arguments are
stacked under the operator and the closing parenthesis goes on its own
line.

Input JSON is either the object form or the compact list form:

    {"name": "add", "args": [1, {"name": "mul", "args": [2, 3]}]}
    ["add", 1, ["mul", 2, 3]]
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from prettyfit.combinators import stack
from prettyfit.config import get_default_indent
from prettyfit.doc import (
    Formattable,
    Layout,
    break_,
    break_join,
    concat,
    group,
    group_with,
    indent,
    literal,
)
from prettyfit.formatters.lib import DocumentFormatter, register_formatter


class Call(BaseModel, Formattable):
    """An operator applied to integer atoms and nested calls.

    Attributes:
        name: Operator name, printed right after the opening parenthesis.
        args: Integer atoms or nested calls.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Operator name")
    args: list[int | Call] = Field(
        default_factory=list,
        description="Integer atoms or nested calls",
    )

    @model_validator(mode="before")
    @classmethod
    def _from_list(cls, data: Any) -> Any:
        """Accept `["name", arg, ...]` as well as the object form."""
        if isinstance(data, list):
            if not data or not isinstance(data[0], str):
                raise ValueError("list form must start with the operator name")
            return {"name": data[0], "args": data[1:]}
        return data

    def layout(self) -> Layout:
        """Lay out with the PRETTYFIT_INDENT argument step."""
        return sexpr_layout(self, get_default_indent())


SExpr = int | Call
"""An S-expression: an integer atom or a call."""


def sexpr_layout(expr: SExpr, step: int = 2) -> Layout:
    """Describe an S-expression as a layout.

    Args:
        expr: An integer atom or a call.
        step: Indentation of stacked arguments.

    Returns:
        Layout: The call on one line, or the operator followed by one
        argument per line.

    Example:
        >>> pretty(sexpr_layout(Call(name="add", args=[1, 2])), 5)
        '(add\\n  1\\n  2\\n)'
    """
    if isinstance(expr, int):
        return literal(str(expr))
    if not expr.args:
        return literal(f"({expr.name})")

    head = literal(f"({expr.name}")
    args = stack(sexpr_layout(arg, step) for arg in expr.args)
    body = indent(step, concat(break_(), args))
    return group_with("", break_join(group(concat(head, body)), literal(")")))


@register_formatter
class SExprFormatter(DocumentFormatter):
    """Formats arithmetic S-expressions.

    The argument indentation defaults to PRETTYFIT_INDENT.
    """

    def __init__(self, step: int | None = None):
        self.step = get_default_indent(step)

    @property
    def name(self) -> str:
        return "sexpr"

    @property
    def description(self) -> str:
        return "Arithmetic S-expressions, arguments stacked when too wide"

    @property
    def model(self) -> type[BaseModel]:
        return Call

    def layout(self, document: BaseModel) -> Layout:
        return sexpr_layout(document, self.step)

    def sample(self) -> Call:
        return Call.model_validate(
            [
                "add",
                ["mul", 2, 6],
                [
                    "div",
                    ["mul", 4, ["mul", 3, 2, 1]],
                    ["add", 1, ["sub", 3, ["add", 1, 1]]],
                ],
            ]
        )
