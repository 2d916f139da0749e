"""Unit tests for the renderer."""

from io import StringIO

import pytest

from prettyfit.combinators import bracket, fill, spread, stack
from prettyfit.doc import (
    break_join,
    empty,
    flatten,
    group,
    indent,
    literal,
)
from prettyfit.resolve import LineToken, TextToken

from .lib import best, pretty, render, write


class TestRender:
    """Tests for folding token streams."""

    @pytest.mark.unit
    def test_text_and_lines(self):
        """Text is copied, line tokens become newline plus indentation."""
        tokens = [TextToken("a"), LineToken(2), TextToken("b"), LineToken(0)]
        assert render(tokens) == "a\n  b\n"

    @pytest.mark.unit
    def test_negative_indent_clamped(self):
        """Negative indentation renders as no indentation."""
        assert render([TextToken("a"), LineToken(-3), TextToken("b")]) == "a\nb"

    @pytest.mark.unit
    def test_empty_stream(self):
        """No tokens render to the empty string."""
        assert render([]) == ""


class TestPretty:
    """Scenario tests for pretty."""

    @pytest.mark.unit
    def test_literal(self):
        """A literal renders as itself."""
        assert pretty(literal("hello"), 80) == "hello"

    @pytest.mark.unit
    def test_group_fits(self):
        """A fitting group collapses."""
        assert pretty(group(break_join(literal("a"), literal("b"))), 3) == "a b"

    @pytest.mark.unit
    def test_group_does_not_fit(self):
        """An overflowing group expands."""
        assert pretty(group(break_join(literal("a"), literal("b"))), 2) == "a\nb"

    @pytest.mark.unit
    def test_bracket_scenarios(self):
        """bracket collapses at 80 and expands at 5."""
        body = spread([literal("a"), literal("b")])
        assert pretty(bracket(2, "[", body, "]"), 80) == "[ a b ]"
        assert pretty(bracket(2, "[", body, "]"), 5) == "[\n  a b\n]"

    @pytest.mark.unit
    def test_fill_scenario(self):
        """fill packs two items on the first line at width 6."""
        items = [literal("aa"), literal("bb"), literal("cc")]
        assert pretty(fill(items), 6) == "aa bb\ncc"

    @pytest.mark.unit
    def test_flatten_is_width_independent(self):
        """The flattened form renders the same at every width."""
        doc = bracket(2, "{", stack([literal("x;"), indent(3, break_join(literal("y;"), literal("z;")))]), "}")
        flat = flatten(doc)
        expected = pretty(flat, 1000)
        for width in (0, 1, 5, 20, 80):
            assert pretty(flat, width) == expected
        assert "\n" not in expected

    @pytest.mark.unit
    def test_group_threshold(self):
        """A group collapses exactly when its flat length fits the room left."""
        doc = group(break_join(literal("abc"), literal("de")))
        flat_length = len("abc de")
        for column in range(0, 4):
            for width in range(0, 12):
                text = pretty(doc, width, column)
                if flat_length <= width - column:
                    assert text == "abc de"
                else:
                    assert text == "abc\nde"

    @pytest.mark.unit
    def test_empty(self):
        """Empty renders nothing."""
        assert pretty(empty(), 80) == ""

    @pytest.mark.unit
    def test_best_uses_start_column(self):
        """best accounts for columns already used."""
        doc = group(break_join(literal("a"), literal("b")))
        assert best(doc, 5, 2) == "a b"
        assert best(doc, 5, 3) == "a\nb"

    @pytest.mark.unit
    def test_pretty_on_formattable(self):
        """Layouts expose pretty() directly."""
        assert literal("x").break_join(literal("y")).group().pretty(3) == "x y"


class TestWrite:
    """Tests for streaming output."""

    @pytest.mark.unit
    def test_write_matches_pretty(self):
        """Streaming produces the same text as pretty."""
        doc = bracket(2, "[", spread([literal("alpha"), literal("beta")]), "]")
        stream = StringIO()
        written = write(doc, 8, stream)
        assert stream.getvalue() == pretty(doc, 8)
        assert written == len(stream.getvalue())

    @pytest.mark.unit
    def test_write_streams_before_completion(self):
        """Text is written line by line while resolution proceeds."""

        class Recorder(StringIO):
            def __init__(self):
                super().__init__()
                self.chunks = []

            def write(self, text):
                self.chunks.append(text)
                return super().write(text)

        doc = stack([literal(f"line{i}") for i in range(3)])
        stream = Recorder()
        write(doc, 80, stream)
        assert stream.chunks == ["line0", "\n", "line1", "\n", "line2"]
