"""Unit tests for the layout resolver."""

import itertools

import pytest

from prettyfit.combinators import fill, spread
from prettyfit.doc import (
    Concat,
    Literal,
    break_,
    break_join,
    choice,
    concat,
    empty,
    group,
    indent,
    literal,
)

from .lib import LineToken, TextToken, WorkItem, better, fits, resolve


def _text(node, width, column=0):
    """Render a token stream the simple way, for assertions."""
    parts = []
    for token in resolve(node, width, column):
        if isinstance(token, TextToken):
            parts.append(token.text)
        else:
            parts.append("\n" + " " * max(token.indent, 0))
    return "".join(parts)


class TestFits:
    """Tests for the fits predicate."""

    @pytest.mark.unit
    def test_negative_width_never_fits(self):
        """Nothing fits a negative width, not even an empty stream."""
        for width in (-1, -5, -100):
            assert not fits([], width)
            assert not fits([LineToken(0)], width)

    @pytest.mark.unit
    def test_end_fits(self):
        """An empty stream fits any non-negative width."""
        assert fits([], 0)

    @pytest.mark.unit
    def test_line_break_fits(self):
        """A line break ends the line successfully."""
        assert fits([LineToken(4), TextToken("x" * 50)], 0)

    @pytest.mark.unit
    def test_literal_chain_sums_lengths(self):
        """A chain fits iff its total length is at most the width."""
        tokens = [TextToken("ab"), TextToken("cde")]
        assert fits(tokens, 5)
        assert fits(tokens, 6)
        assert not fits(tokens, 4)

    @pytest.mark.unit
    def test_only_first_line_is_examined(self):
        """Tokens after the first line break are not consumed."""
        consumed = []

        def stream():
            for token in (TextToken("a"), LineToken(0), TextToken("b")):
                consumed.append(token)
                yield token

        assert fits(stream(), 1)
        assert consumed == [TextToken("a"), LineToken(0)]


class TestBetter:
    """Tests for the better tie-break."""

    @pytest.mark.unit
    def test_first_wins_when_it_fits(self):
        """The first candidate is kept when its first line fits."""
        first = [TextToken("ab")]
        second = [TextToken("a"), LineToken(0), TextToken("b")]
        assert list(better(first, second, 2)) == first

    @pytest.mark.unit
    def test_second_when_first_overflows(self):
        """The second candidate is taken when the first overflows."""
        first = [TextToken("abc")]
        second = [TextToken("a"), LineToken(0)]
        assert list(better(first, second, 2)) == second

    @pytest.mark.unit
    def test_first_stream_is_not_lost(self):
        """Probing a lazy stream does not drop its first tokens."""
        first = iter([TextToken("a"), TextToken("b")])
        result = better(first, [], 5)
        assert list(result) == [TextToken("a"), TextToken("b")]


class TestResolve:
    """Tests for resolve."""

    @pytest.mark.unit
    def test_literal(self):
        """A literal resolves to a single text token."""
        assert list(resolve(literal("hello"), 80)) == [TextToken("hello")]

    @pytest.mark.unit
    def test_empty(self):
        """Empty resolves to nothing."""
        assert list(resolve(empty(), 80)) == []

    @pytest.mark.unit
    def test_break_uses_ambient_indent(self):
        """Breaks carry the indentation of their enclosing Indent nodes."""
        doc = concat(literal("a"), indent(2, indent(3, break_join(empty(), literal("b")))))
        assert list(resolve(doc, 80)) == [
            TextToken("a"),
            LineToken(5),
            TextToken("b"),
        ]

    @pytest.mark.unit
    def test_group_collapses_when_it_fits(self):
        """A group fitting the width is rendered flat."""
        doc = group(break_join(literal("a"), literal("b")))
        assert _text(doc, 3) == "a b"

    @pytest.mark.unit
    def test_group_expands_when_too_wide(self):
        """A group wider than the width keeps its breaks."""
        doc = group(break_join(literal("a"), literal("b")))
        assert _text(doc, 2) == "a\nb"

    @pytest.mark.unit
    def test_start_column_reduces_room(self):
        """Columns already used count against the first line."""
        doc = group(break_join(literal("a"), literal("b")))
        assert _text(doc, 4, column=1) == "a b"
        assert _text(doc, 4, column=2) == "a\nb"

    @pytest.mark.unit
    def test_choice_lookahead_includes_following_text(self):
        """Text after a group on the same line counts toward its fit."""
        doc = concat(group(break_join(literal("a"), literal("b"))), literal("cd"))
        assert _text(doc, 5) == "a bcd"
        assert _text(doc, 4) == "a\nbcd"

    @pytest.mark.unit
    def test_lookahead_stops_at_line_break(self):
        """Text after the next line break does not affect a decision."""
        doc = concat(
            group(break_join(literal("a"), literal("b"))),
            break_join(empty(), literal("x" * 40)),
        )
        assert _text(doc, 3) == "a b\n" + "x" * 40

    @pytest.mark.unit
    def test_primary_preferred_on_tie(self):
        """When both branches fit, the primary one wins."""
        doc = choice(literal("ab"), literal("ab"))
        assert list(resolve(doc, 80)) == [TextToken("ab")]

    @pytest.mark.unit
    def test_secondary_used_even_if_too_wide(self):
        """The secondary branch is the fallback whether or not it fits."""
        doc = choice(literal("abcdef"), literal("abcdef"))
        assert _text(doc, 2) == "abcdef"

    @pytest.mark.unit
    def test_nested_groups(self):
        """Inner groups may stay flat while the outer one expands."""
        inner = group(break_join(literal("b"), literal("c")))
        doc = group(break_join(literal("aaaa"), inner))
        assert _text(doc, 80) == "aaaa b c"
        assert _text(doc, 5) == "aaaa\nb c"
        assert _text(doc, 2) == "aaaa\nb\nc"

    @pytest.mark.unit
    def test_negative_indent_is_kept_in_tokens(self):
        """The resolver does not clamp indentation; rendering does."""
        doc = indent(-4, break_join(literal("a"), literal("b")))
        assert list(resolve(doc, 80)) == [
            TextToken("a"),
            LineToken(-4),
            TextToken("b"),
        ]

    @pytest.mark.unit
    def test_accepts_strings(self):
        """Plain strings are resolved as literals."""
        assert list(resolve("abc", 80)) == [TextToken("abc")]


class TestResolveProperties:
    """Structural guarantees of the resolver."""

    @pytest.mark.unit
    def test_deterministic(self):
        """The same tree at the same width always resolves identically."""
        doc = group(break_join(literal("hello"), group(break_join(literal("big"), literal("world")))))
        for width in (3, 9, 20):
            assert list(resolve(doc, width)) == list(resolve(doc, width))

    @pytest.mark.unit
    def test_tree_is_not_mutated(self):
        """Resolving at one width does not affect another width."""
        doc = group(break_join(literal("aaa"), literal("bbb")))
        narrow_first = _text(doc, 3)
        wide = _text(doc, 80)
        narrow_again = _text(doc, 3)
        assert narrow_first == narrow_again == "aaa\nbbb"
        assert wide == "aaa bbb"

    @pytest.mark.unit
    def test_output_is_lazy(self):
        """Earlier lines are available before later ones are resolved."""
        line = break_join(literal("x"), literal("y"))
        doc = line
        for _ in range(1000):
            doc = break_join(doc, group(line))
        stream = resolve(doc, 80)
        assert list(itertools.islice(stream, 3)) == [
            TextToken("x"),
            LineToken(0),
            TextToken("y"),
        ]

    @pytest.mark.unit
    def test_deep_concat_does_not_recurse(self):
        """Left-nested concatenation deeper than the recursion limit resolves."""
        doc = literal("a")
        for _ in range(5000):
            doc = Concat(doc, Literal("a"))
        tokens = list(resolve(doc, 10))
        assert len(tokens) == 5001

    @pytest.mark.unit
    def test_many_choices_on_one_line(self):
        """Thousands of groups kept on a single line do not recurse."""
        pair = group(break_join(literal("a"), literal("b")))
        doc = spread([pair] * 2000)
        assert _text(doc, 10**5) == " ".join(["a b"] * 2000)

    @pytest.mark.unit
    def test_fill_at_unbounded_width(self):
        """fill of thousands of items fits on one very wide line."""
        doc = fill([literal("a")] * 2000)
        assert _text(doc, 10**5) == " ".join(["a"] * 2000)

    @pytest.mark.unit
    def test_many_rejected_choices(self):
        """Every group falls back to its expanded form at width 1."""
        pair = group(break_join(literal("a"), literal("b")))
        doc = spread([pair] * 2000)
        assert _text(doc, 1) == "a\n" + "b a\n" * 1999 + "b"

    @pytest.mark.unit
    def test_work_item_is_persistent(self):
        """Queue cells are immutable and share their tail."""
        tail = WorkItem(0, literal("b"))
        left = WorkItem(0, literal("a"), tail)
        right = WorkItem(2, literal("c"), tail)
        assert left.rest is right.rest
        with pytest.raises(AttributeError):
            left.indent = 3  # type: ignore[misc]
