"""Unit tests for the combinator library."""

import time

import pytest

from prettyfit.doc import (
    Choice,
    Empty,
    break_join,
    flat_text,
    group,
    literal,
    verify_choices,
)
from prettyfit.render import pretty

from .lib import bracket, fill, fold, parenthesized, separated, spread, stack


def _words(*words):
    return [literal(word) for word in words]


class TestFold:
    """Tests for fold and its specialisations."""

    @pytest.mark.unit
    def test_empty_sequence(self):
        """Folding nothing yields the empty layout."""
        assert isinstance(fold([], break_join), Empty)
        assert pretty(spread([]), 80) == ""

    @pytest.mark.unit
    def test_single_item(self):
        """A single item is returned unchanged."""
        item = literal("a")
        assert fold([item], break_join) is item

    @pytest.mark.unit
    def test_left_reduction(self):
        """Items are combined left to right."""
        calls = []

        def op(left, right):
            calls.append((flat_text(left), flat_text(right)))
            return left.concat(right)

        fold(_words("a", "b", "c"), op)
        assert calls == [("a", "b"), ("ab", "c")]

    @pytest.mark.unit
    def test_accepts_strings_and_generators(self):
        """Strings are converted and any iterable is accepted."""
        assert pretty(spread(word for word in ["a", "b"]), 80) == "a b"

    @pytest.mark.unit
    def test_spread(self):
        """spread joins with single spaces."""
        assert pretty(spread(_words("a", "b", "c")), 80) == "a b c"
        assert pretty(spread(_words("a", "b", "c")), 1) == "a b c"

    @pytest.mark.unit
    def test_stack_never_collapses(self):
        """stack always breaks, whatever the width."""
        for width in (1, 80, 1000):
            assert pretty(stack(_words("a", "b", "c")), width) == "a\nb\nc"

    @pytest.mark.unit
    def test_stack_uses_enclosing_indent(self):
        """Stacked lines start at the enclosing indentation."""
        doc = literal("x").concat(stack(_words("a", "b")).indent(2).break_join(literal("y")))
        assert pretty(doc, 80) == "xa\n  b\ny"

    @pytest.mark.unit
    def test_separated(self):
        """separated inserts the separator and a space."""
        assert pretty(separated(_words("a", "b", "c"), ","), 80) == "a, b, c"
        assert pretty(separated([], ","), 80) == ""

    @pytest.mark.unit
    def test_large_stack(self):
        """Thousands of stacked items render without recursion errors."""
        items = [literal(str(i)) for i in range(5000)]
        text = pretty(stack(items), 80)
        assert text.count("\n") == 4999


class TestBracket:
    """Tests for bracket."""

    @pytest.mark.unit
    def test_collapsed(self):
        """bracket renders on one line when it fits."""
        body = spread(_words("a", "b"))
        assert pretty(bracket(2, "[", body, "]"), 80) == "[ a b ]"

    @pytest.mark.unit
    def test_expanded(self):
        """bracket indents the body between delimiters when too wide."""
        body = spread(_words("a", "b"))
        assert pretty(bracket(2, "[", body, "]"), 5) == "[\n  a b\n]"

    @pytest.mark.unit
    def test_exact_fit(self):
        """A width equal to the flat length still collapses."""
        body = spread(_words("a", "b"))
        assert pretty(bracket(2, "[", body, "]"), 7) == "[ a b ]"
        assert pretty(bracket(2, "[", body, "]"), 6) == "[\n  a b\n]"

    @pytest.mark.unit
    def test_nested_brackets(self):
        """Inner brackets collapse independently of the outer one."""
        inner = bracket(2, "(", spread(_words("x", "y")), ")")
        outer = bracket(2, "[", spread([literal("a"), inner]), "]")
        assert pretty(outer, 80) == "[ a ( x y ) ]"
        assert pretty(outer, 12) == "[\n  a ( x y )\n]"
        assert pretty(outer, 8) == "[\n  a (\n    x y\n  )\n]"

    @pytest.mark.unit
    def test_is_a_group(self):
        """bracket offers its flat form as the primary choice."""
        node = bracket(4, "{", literal("a"), "}")
        assert isinstance(node, Choice)
        assert flat_text(node.primary) == "{ a }"


class TestParenthesized:
    """Tests for parenthesized."""

    @pytest.mark.unit
    def test_hugs_when_flat(self):
        """Parentheses sit right against a collapsed body."""
        assert pretty(parenthesized(separated(_words("a", "b"), ",")), 80) == "(a, b)"

    @pytest.mark.unit
    def test_breaks_before_closing_paren(self):
        """When too wide the closing paren moves to its own line."""
        body = separated(_words("alpha", "beta"), ",")
        assert pretty(parenthesized(body), 10) == "(alpha, beta\n)"

    @pytest.mark.unit
    def test_empty_body(self):
        """An empty argument list renders as ()."""
        assert pretty(parenthesized(separated([], ",")), 80) == "()"


class TestFill:
    """Tests for greedy line filling."""

    @pytest.mark.unit
    def test_empty_and_single(self):
        """fill of nothing is empty; fill of one item is that item."""
        assert isinstance(fill([]), Empty)
        item = literal("a")
        assert fill([item]) is item

    @pytest.mark.unit
    def test_packs_two_per_line(self):
        """Items are packed while they fit."""
        assert pretty(fill(_words("aa", "bb", "cc")), 6) == "aa bb\ncc"

    @pytest.mark.unit
    def test_everything_fits(self):
        """All items share a line when the width allows."""
        assert pretty(fill(_words("aa", "bb", "cc")), 8) == "aa bb cc"

    @pytest.mark.unit
    def test_narrow_width_one_per_line(self):
        """Each item gets its own line when nothing else fits."""
        assert pretty(fill(_words("aa", "bb", "cc")), 2) == "aa\nbb\ncc"

    @pytest.mark.unit
    def test_lines_never_exceed_width(self):
        """Packed lines stay within the width when every word fits."""
        words = [f"w{i}" * (1 + i % 3) for i in range(60)]
        text = pretty(fill(_words(*words)), 20)
        assert all(len(line) <= 20 for line in text.split("\n"))
        assert text.split() == words

    @pytest.mark.unit
    def test_flattened_form(self):
        """fill collapses to a space-joined line."""
        node = fill(_words("a", "b", "c"))
        assert flat_text(node) == "a b c"

    @pytest.mark.unit
    def test_items_are_flattened_when_packed(self):
        """An item kept on a previous item's line is flattened."""
        items = [literal("a"), group(break_join(literal("b"), literal("c")))]
        assert pretty(fill(items), 80) == "a b c"

    @pytest.mark.unit
    def test_satisfies_choice_invariant(self):
        """Every choice built by fill flattens consistently."""
        with verify_choices():
            fill(_words("a", "bb", "ccc", "dddd"))

    @pytest.mark.unit
    def test_many_items_is_fast(self):
        """Construction and rendering are linear in the number of items."""
        words = _words(*(f"item{i}" for i in range(2000)))
        started = time.perf_counter()
        text = pretty(fill(words), 40)
        assert time.perf_counter() - started < 10.0
        assert len(text.split()) == 2000
