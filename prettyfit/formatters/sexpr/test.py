"""Unit tests for the S-expression formatter."""

import pytest
from pydantic import ValidationError

from prettyfit.formatters import get_formatter
from prettyfit.render import pretty

from .lib import Call, SExprFormatter, sexpr_layout


def add_one_two() -> Call:
    return Call(name="add", args=[1, 2])


class TestCallModel:
    """Tests for loading S-expressions."""

    @pytest.mark.unit
    def test_list_form_matches_object_form(self):
        """The compact list form loads to the same model."""
        compact = Call.model_validate(["add", 1, ["mul", 2, 3]])
        verbose = Call.model_validate(
            {"name": "add", "args": [1, {"name": "mul", "args": [2, 3]}]}
        )
        assert compact == verbose

    @pytest.mark.unit
    def test_list_form_requires_operator(self):
        """A list form starting with a number is rejected."""
        with pytest.raises(ValidationError):
            Call.model_validate([1, 2])

    @pytest.mark.unit
    def test_empty_name_rejected(self):
        """The operator name cannot be empty."""
        with pytest.raises(ValidationError):
            Call(name="", args=[])

    @pytest.mark.unit
    def test_call_is_formattable(self):
        """A Call renders itself."""
        assert add_one_two().pretty(80) == "(add 1 2)"


class TestSExprLayout:
    """Tests for S-expression layouts at various widths."""

    @pytest.mark.unit
    def test_fits_on_one_line(self):
        """A fitting call stays on one line."""
        assert pretty(sexpr_layout(add_one_two()), 80) == "(add 1 2)"

    @pytest.mark.unit
    def test_closing_parenthesis_moves_first(self):
        """When only the closing parenthesis overflows, it gets its own line."""
        assert pretty(sexpr_layout(add_one_two()), 8) == "(add 1 2\n)"

    @pytest.mark.unit
    def test_arguments_stack(self):
        """A narrow width stacks the arguments under the operator."""
        assert pretty(sexpr_layout(add_one_two()), 5) == "(add\n  1\n  2\n)"

    @pytest.mark.unit
    def test_nested_call_stays_flat(self):
        """A nested call that fits on its line stays flat."""
        expr = Call.model_validate(["add", ["mul", 2, 6], 3])
        assert pretty(sexpr_layout(expr), 12) == "(add\n  (mul 2 6)\n  3\n)"

    @pytest.mark.unit
    def test_no_arguments(self):
        """A call without arguments is a single literal."""
        assert pretty(sexpr_layout(Call(name="nop")), 1) == "(nop)"

    @pytest.mark.unit
    def test_custom_step(self):
        """The argument indentation is configurable."""
        expr = add_one_two()
        assert pretty(sexpr_layout(expr, step=4), 5) == "(add\n    1\n    2\n)"


class TestSExprFormatter:
    """Tests for the registered formatter."""

    @pytest.mark.unit
    def test_registered(self):
        """The formatter is available by name."""
        assert isinstance(get_formatter("sexpr"), SExprFormatter)

    @pytest.mark.unit
    def test_format_json(self):
        """JSON input is loaded and laid out."""
        result = get_formatter("sexpr").format('["add", 1, 2]', 80)
        assert result.text == "(add 1 2)"
        assert result.formatter == "sexpr"
        assert not result.has_overflow

    @pytest.mark.unit
    def test_sample_fits_at_80(self):
        """The sample expression fits on one line at width 80."""
        formatter = SExprFormatter()
        result = formatter.render(formatter.sample(), 80)
        assert result.text == (
            "(add (mul 2 6) (div (mul 4 (mul 3 2 1)) (add 1 (sub 3 (add 1 1)))))"
        )

    @pytest.mark.unit
    def test_sample_narrow_lines_within_width(self):
        """At width 40 every line of the sample fits."""
        formatter = SExprFormatter()
        result = formatter.render(formatter.sample(), 40)
        assert len(result.lines) > 1
        assert not result.has_overflow

    @pytest.mark.unit
    def test_indent_from_environment(self, monkeypatch):
        """PRETTYFIT_INDENT sets the default step."""
        monkeypatch.setenv("PRETTYFIT_INDENT", "3")
        assert SExprFormatter().step == 3
        assert SExprFormatter(step=1).step == 1

    @pytest.mark.unit
    def test_call_and_formatter_agree_on_step(self, monkeypatch):
        """A Call renders itself with the same step as the formatter."""
        monkeypatch.setenv("PRETTYFIT_INDENT", "4")
        call = add_one_two()
        expected = "(add\n    1\n    2\n)"
        assert call.pretty(5) == expected
        assert get_formatter("sexpr").render(call, 5).text == expected
