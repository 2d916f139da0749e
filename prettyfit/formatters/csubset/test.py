"""Unit tests for the C subset formatter."""

import pytest
from pydantic import ValidationError

from prettyfit.formatters import get_formatter
from prettyfit.render import pretty

from .lib import (
    CallExpr,
    CFormatter,
    CharType,
    EnumDecl,
    FunctionDecl,
    Identifier,
    IntType,
    Member,
    PointerType,
    Program,
    ReturnStmt,
    StringLiteral,
    StructDecl,
    StructType,
    VarDecl,
)

EXPECTED_SAMPLE = """\
struct point { int x; int y; };
enum state {
    left, right, up, down, forward, backward, random
};
int main() {
    int n;
    char* fmt;
    n = 32;
    fmt = "Hello world n°%d!";
    printf(fmt, n);
    struct point p;
    enum state s;
    return 0;
}"""


def add_function() -> FunctionDecl:
    return FunctionDecl(
        name="add",
        returns=IntType(),
        params=[
            Member(type=IntType(), name="a"),
            Member(type=IntType(), name="b"),
        ],
        body=[ReturnStmt(value=Identifier(name="a"))],
    )


class TestTypes:
    """Tests for type layouts."""

    @pytest.mark.unit
    def test_pointer_star_on_type(self):
        """The pointer star follows the pointee type directly."""
        assert pretty(PointerType(target=CharType()), 80) == "char*"

    @pytest.mark.unit
    def test_struct_reference(self):
        """A struct type prints with its keyword."""
        assert pretty(StructType(name="point"), 80) == "struct point"

    @pytest.mark.unit
    def test_unknown_kind_rejected(self):
        """An unknown discriminator is a validation error."""
        with pytest.raises(ValidationError):
            VarDecl.model_validate({"type": {"kind": "float"}, "name": "x"})


class TestExpressions:
    """Tests for expression layouts."""

    @pytest.mark.unit
    def test_string_escaping(self):
        """Quotes and backslashes inside strings are escaped."""
        text = pretty(StringLiteral(value='say "hi" \\o/'), 80)
        assert text == '"say \\"hi\\" \\\\o/"'

    @pytest.mark.unit
    def test_call(self):
        """Call arguments are comma separated inside parentheses."""
        call = CallExpr(
            function="printf",
            args=[Identifier(name="fmt"), Identifier(name="n")],
        )
        assert pretty(call, 80) == "printf(fmt, n)"

    @pytest.mark.unit
    def test_call_without_arguments(self):
        """An empty argument list prints as ()."""
        assert pretty(CallExpr(function="f"), 80) == "f()"


class TestDeclarations:
    """Tests for declaration layouts."""

    @pytest.mark.unit
    def test_struct_collapses(self):
        """A short struct fits on one line."""
        decl = StructDecl(
            name="point",
            members=[
                Member(type=IntType(), name="x"),
                Member(type=IntType(), name="y"),
            ],
        )
        assert pretty(decl, 80) == "struct point { int x; int y; };"

    @pytest.mark.unit
    def test_struct_expands(self):
        """A narrow struct puts one member per line."""
        decl = StructDecl(
            name="point",
            members=[
                Member(type=IntType(), name="x"),
                Member(type=IntType(), name="y"),
            ],
        )
        assert pretty(decl, 20) == "struct point {\n    int x;\n    int y;\n};"

    @pytest.mark.unit
    def test_enum_variants_stay_together(self):
        """Expanded enum variants remain on a single indented line."""
        decl = EnumDecl(name="color", variants=["red", "green", "blue"])
        assert pretty(decl, 80) == "enum color { red, green, blue };"
        assert pretty(decl, 20) == "enum color {\n    red, green, blue\n};"

    @pytest.mark.unit
    def test_function_collapses(self):
        """A small function fits on one line."""
        assert pretty(add_function(), 80) == "int add(int a, int b) { return a; }"

    @pytest.mark.unit
    def test_function_body_expands(self):
        """The body moves to a block; the parameter list stays intact."""
        assert pretty(add_function(), 30) == (
            "int add(int a, int b) {\n    return a;\n}"
        )


class TestCFormatter:
    """Tests for the registered formatter."""

    @pytest.mark.unit
    def test_registered(self):
        """The formatter is available by name."""
        assert isinstance(get_formatter("c"), CFormatter)

    @pytest.mark.unit
    def test_sample_at_60(self):
        """The sample program at 60 columns."""
        formatter = CFormatter()
        assert formatter.render(formatter.sample(), 60).text == EXPECTED_SAMPLE

    @pytest.mark.unit
    def test_sample_json_round_trip(self):
        """The sample survives a trip through its JSON form."""
        formatter = CFormatter()
        text = formatter.sample().model_dump_json()
        assert formatter.format(text, 60).text == EXPECTED_SAMPLE

    @pytest.mark.unit
    def test_empty_program(self):
        """A program without declarations renders nothing."""
        assert pretty(Program(), 80) == ""
