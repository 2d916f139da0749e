"""Formatter for a small subset of C.

Covers struct, enum and variable declarations, and function definitions
whose bodies hold declarations, assignments, expression statements and
returns. Expressions are integer and string literals, identifiers and
calls. Every model carries a `kind` discriminator in its JSON form:

    {"kind": "var", "type": {"kind": "int"}, "name": "n"}

Bodies and member lists are bracketed: one line when they fit, an
indented block otherwise.
"""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from prettyfit.combinators import bracket, parenthesized, separated, stack
from prettyfit.doc import Formattable, Layout, concat, group, literal, space_join
from prettyfit.formatters.lib import DocumentFormatter, register_formatter

BLOCK_INDENT = 4


class CNode(BaseModel, Formattable):
    """Base class for C syntax models; each one lays itself out."""

    model_config = ConfigDict(frozen=True)


# =============================================================================
# Types
# =============================================================================


class IntType(CNode):
    kind: Literal["int"] = "int"

    def layout(self) -> Layout:
        return literal("int")


class CharType(CNode):
    kind: Literal["char"] = "char"

    def layout(self) -> Layout:
        return literal("char")


class StructType(CNode):
    """Reference to a struct declared elsewhere: `struct point`."""

    kind: Literal["struct"] = "struct"
    name: str = Field(..., min_length=1)

    def layout(self) -> Layout:
        return space_join(literal("struct"), literal(self.name))


class EnumType(CNode):
    """Reference to an enum declared elsewhere: `enum state`."""

    kind: Literal["enum"] = "enum"
    name: str = Field(..., min_length=1)

    def layout(self) -> Layout:
        return space_join(literal("enum"), literal(self.name))


class PointerType(CNode):
    """Pointer to `target`, printed with the star on the type: `char*`."""

    kind: Literal["pointer"] = "pointer"
    target: CType

    def layout(self) -> Layout:
        return concat(self.target.layout(), literal("*"))


CType = Annotated[
    Union[IntType, CharType, StructType, EnumType, PointerType],
    Field(discriminator="kind"),
]


# =============================================================================
# Expressions
# =============================================================================


class IntLiteral(CNode):
    kind: Literal["int"] = "int"
    value: int

    def layout(self) -> Layout:
        return literal(str(self.value))


class StringLiteral(CNode):
    """Double-quoted string; backslashes and quotes are escaped."""

    kind: Literal["str"] = "str"
    value: str

    def layout(self) -> Layout:
        escaped = self.value.replace("\\", "\\\\").replace('"', '\\"')
        return literal(f'"{escaped}"')


class Identifier(CNode):
    kind: Literal["ident"] = "ident"
    name: str = Field(..., min_length=1)

    def layout(self) -> Layout:
        return literal(self.name)


class CallExpr(CNode):
    """Function call: `printf(fmt, n)`."""

    kind: Literal["call"] = "call"
    function: str = Field(..., min_length=1)
    args: list[CExpr] = Field(default_factory=list)

    def layout(self) -> Layout:
        args = separated(self.args, ",")
        return concat(literal(self.function), parenthesized(args))


CExpr = Annotated[
    Union[IntLiteral, StringLiteral, Identifier, CallExpr],
    Field(discriminator="kind"),
]


# =============================================================================
# Declarations
# =============================================================================


class Member(CNode):
    """Typed name, used for struct members and function parameters."""

    type: CType
    name: str = Field(..., min_length=1)

    def layout(self) -> Layout:
        return space_join(self.type.layout(), literal(self.name))


class StructDecl(CNode):
    """`struct point { int x; int y; };`"""

    kind: Literal["struct"] = "struct"
    name: str = Field(..., min_length=1)
    members: list[Member] = Field(default_factory=list)

    def layout(self) -> Layout:
        members = stack(
            concat(member.layout(), literal(";")) for member in self.members
        )
        head = space_join(literal("struct"), literal(self.name))
        body = space_join(head, bracket(BLOCK_INDENT, "{", members, "}"))
        return concat(group(body), literal(";"))


class EnumDecl(CNode):
    """`enum state { left, right };`"""

    kind: Literal["enum"] = "enum"
    name: str = Field(..., min_length=1)
    variants: list[str] = Field(default_factory=list)

    def layout(self) -> Layout:
        head = space_join(literal("enum"), literal(self.name))
        variants = separated(self.variants, ",")
        body = space_join(head, bracket(BLOCK_INDENT, "{", variants, "}"))
        return concat(group(body), literal(";"))


class VarDecl(CNode):
    """`char* fmt;`"""

    kind: Literal["var"] = "var"
    type: CType
    name: str = Field(..., min_length=1)

    def layout(self) -> Layout:
        return concat(
            space_join(self.type.layout(), literal(self.name)),
            literal(";"),
        )


class FunctionDecl(CNode):
    """Function definition: `int main() { return 0; }`"""

    kind: Literal["function"] = "function"
    name: str = Field(..., min_length=1)
    returns: CType
    params: list[Member] = Field(default_factory=list)
    body: list[CStmt] = Field(default_factory=list)

    def layout(self) -> Layout:
        signature = space_join(self.returns.layout(), literal(self.name))
        params = parenthesized(separated(self.params, ","))
        statements = stack(self.body)
        return concat(
            signature,
            space_join(params, bracket(BLOCK_INDENT, "{", statements, "}")),
        )


CDecl = Annotated[
    Union[StructDecl, EnumDecl, VarDecl, FunctionDecl],
    Field(discriminator="kind"),
]


# =============================================================================
# Statements
# =============================================================================


class DeclStmt(CNode):
    """Local declaration inside a function body."""

    kind: Literal["decl"] = "decl"
    decl: CDecl

    def layout(self) -> Layout:
        return self.decl.layout()


class AssignStmt(CNode):
    """`n = 32;`"""

    kind: Literal["assign"] = "assign"
    target: str = Field(..., min_length=1)
    value: CExpr

    def layout(self) -> Layout:
        assignment = space_join(literal(self.target), literal("="))
        return concat(space_join(assignment, self.value.layout()), literal(";"))


class ExprStmt(CNode):
    """Expression evaluated for its effect: `printf(fmt, n);`"""

    kind: Literal["expr"] = "expr"
    expr: CExpr

    def layout(self) -> Layout:
        return concat(self.expr.layout(), literal(";"))


class ReturnStmt(CNode):
    kind: Literal["return"] = "return"
    value: CExpr

    def layout(self) -> Layout:
        return concat(
            space_join(literal("return"), self.value.layout()),
            literal(";"),
        )


CStmt = Annotated[
    Union[DeclStmt, AssignStmt, ExprStmt, ReturnStmt],
    Field(discriminator="kind"),
]


# =============================================================================
# Program
# =============================================================================


class Program(CNode):
    """Translation unit: top-level declarations, one after another."""

    declarations: list[CDecl] = Field(default_factory=list)

    def layout(self) -> Layout:
        return stack(self.declarations)


for _model in (
    PointerType,
    CallExpr,
    Member,
    VarDecl,
    StructDecl,
    FunctionDecl,
    DeclStmt,
    AssignStmt,
    ExprStmt,
    ReturnStmt,
    Program,
):
    _model.model_rebuild()


@register_formatter
class CFormatter(DocumentFormatter):
    """Formats a C translation unit."""

    @property
    def name(self) -> str:
        return "c"

    @property
    def description(self) -> str:
        return "C subset: structs, enums, variables and functions"

    @property
    def model(self) -> type[BaseModel]:
        return Program

    def layout(self, document: BaseModel) -> Layout:
        return document.layout()

    def sample(self) -> Program:
        int_type = {"kind": "int"}
        char_pointer = {"kind": "pointer", "target": {"kind": "char"}}
        greeting = {"kind": "str", "value": "Hello world n°%d!"}
        point_type = {"kind": "struct", "name": "point"}
        state_type = {"kind": "enum", "name": "state"}
        return Program.model_validate(
            {
                "declarations": [
                    {
                        "kind": "struct",
                        "name": "point",
                        "members": [
                            {"type": int_type, "name": "x"},
                            {"type": int_type, "name": "y"},
                        ],
                    },
                    {
                        "kind": "enum",
                        "name": "state",
                        "variants": [
                            "left",
                            "right",
                            "up",
                            "down",
                            "forward",
                            "backward",
                            "random",
                        ],
                    },
                    {
                        "kind": "function",
                        "name": "main",
                        "returns": int_type,
                        "body": [
                            _local({"type": int_type, "name": "n"}),
                            _local({"type": char_pointer, "name": "fmt"}),
                            {
                                "kind": "assign",
                                "target": "n",
                                "value": {"kind": "int", "value": 32},
                            },
                            {
                                "kind": "assign",
                                "target": "fmt",
                                "value": greeting,
                            },
                            {
                                "kind": "expr",
                                "expr": {
                                    "kind": "call",
                                    "function": "printf",
                                    "args": [
                                        {"kind": "ident", "name": "fmt"},
                                        {"kind": "ident", "name": "n"},
                                    ],
                                },
                            },
                            _local({"type": point_type, "name": "p"}),
                            _local({"type": state_type, "name": "s"}),
                            {"kind": "return", "value": {"kind": "int", "value": 0}},
                        ],
                    },
                ]
            }
        )


def _local(var: dict) -> dict:
    return {"kind": "decl", "decl": {"kind": "var", **var}}
