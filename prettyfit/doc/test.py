"""Unit tests for the layout algebra."""

import pytest

from prettyfit.errors import ChoiceInvariantError, LayoutTypeError

from .lib import (
    BREAK,
    EMPTY,
    Break,
    Choice,
    Concat,
    Empty,
    Formattable,
    Indent,
    Layout,
    Literal,
    as_layout,
    break_,
    break_join,
    choice,
    concat,
    empty,
    flat_text,
    flatten,
    flatten_with,
    group,
    group_with,
    indent,
    literal,
    set_choice_verification,
    soft_join,
    space_join,
    verify_choices,
)


class Point(Formattable):
    """Minimal Formattable used by the tests."""

    def __init__(self, x: int, y: int) -> None:
        self.x = x
        self.y = y

    def layout(self) -> Layout:
        return group(
            concat(literal("("), break_join(literal(f"{self.x},"), literal(f"{self.y})")))
        )


class TestBuilders:
    """Tests for the primitive builders."""

    @pytest.mark.unit
    def test_primitive_kinds(self):
        """Each builder produces the matching node kind."""
        assert isinstance(empty(), Empty)
        assert isinstance(break_(), Break)
        assert literal("x") == Literal("x")
        assert indent(2, literal("x")) == Indent(2, Literal("x"))
        assert concat(literal("a"), literal("b")) == Concat(Literal("a"), Literal("b"))

    @pytest.mark.unit
    def test_singletons(self):
        """Empty and Break are shared singletons."""
        assert empty() is EMPTY
        assert break_() is BREAK

    @pytest.mark.unit
    def test_space_join(self):
        """space_join inserts a literal space."""
        node = space_join(literal("a"), literal("b"))
        assert node == Concat(Literal("a"), Concat(Literal(" "), Literal("b")))

    @pytest.mark.unit
    def test_break_join(self):
        """break_join inserts a mandatory break."""
        node = break_join(literal("a"), literal("b"))
        assert node == Concat(Literal("a"), Concat(Break(), Literal("b")))

    @pytest.mark.unit
    def test_soft_join_offers_space_or_break(self):
        """soft_join joins with a choice between a space and a break."""
        node = soft_join(literal("a"), literal("b"))
        assert isinstance(node.right.left, Choice)
        assert node.pretty(3) == "a b"
        assert node.pretty(2) == "a\nb"

    @pytest.mark.unit
    def test_nodes_are_immutable(self):
        """Layout nodes cannot be modified after construction."""
        node = literal("a")
        with pytest.raises(AttributeError):
            node.text = "b"  # type: ignore[misc]

    @pytest.mark.unit
    def test_fluent_methods_match_functions(self):
        """Fluent notation builds the same trees as the functions."""
        a, b = literal("a"), literal("b")
        assert a.concat(b) == concat(a, b)
        assert a.space_join(b) == space_join(a, b)
        assert a.break_join(b) == break_join(a, b)
        assert a.indent(3) == indent(3, a)
        assert a.break_join(b).group() == group(break_join(a, b))
        assert a.break_join("c") == break_join(a, literal("c"))


class TestFlatten:
    """Tests for the flattening transform."""

    @pytest.mark.unit
    def test_break_becomes_space(self):
        """Breaks flatten to a single space by default."""
        assert flatten(break_()) == Literal(" ")

    @pytest.mark.unit
    def test_break_becomes_separator(self):
        """flatten_with uses the given separator."""
        assert flatten_with("", break_()) == Literal("")
        assert flatten_with(", ", break_()) == Literal(", ")

    @pytest.mark.unit
    def test_indent_is_dropped(self):
        """Indentation is meaningless on a single line."""
        assert flatten(indent(4, literal("x"))) == Literal("x")

    @pytest.mark.unit
    def test_choice_keeps_primary(self):
        """Only the primary branch of a Choice is flattened."""
        node = Choice(literal("p"), literal("s"))
        assert flatten(node) == Literal("p")

    @pytest.mark.unit
    def test_concat_is_rebuilt(self):
        """Concatenations flatten both sides."""
        node = break_join(literal("a"), indent(2, break_join(literal("b"), literal("c"))))
        assert flat_text(node) == "a b c"
        assert flat_text(flatten(node)) == "a b c"

    @pytest.mark.unit
    def test_flatten_is_idempotent(self):
        """Flattening twice changes nothing."""
        node = group(break_join(literal("a"), literal("b")))
        once = flatten(node)
        assert flatten(once) == once

    @pytest.mark.unit
    def test_unchanged_subtrees_are_shared(self):
        """Sub-trees without breaks are reused, not copied."""
        text = concat(literal("a"), literal("b"))
        node = break_join(text, literal("c"))
        flat = flatten(node)
        assert flat.left is text

    @pytest.mark.unit
    def test_flatten_deep_tree(self):
        """Very deep left-nested trees flatten without recursion errors."""
        node = literal("x")
        for _ in range(5000):
            node = break_join(node, literal("x"))
        assert flat_text(flatten(node)) == " ".join(["x"] * 5001)

    @pytest.mark.unit
    def test_flatten_does_not_mutate_input(self):
        """The input tree keeps its breaks."""
        node = break_join(literal("a"), literal("b"))
        flatten(node)
        assert node.right.left is BREAK

    @pytest.mark.unit
    def test_flat_text_with_separator(self):
        """flat_text honours a custom separator."""
        node = break_join(literal("a"), literal("b"))
        assert flat_text(node, "") == "ab"

    @pytest.mark.unit
    def test_flat_text_skips_empty(self):
        """Empty nodes contribute no text."""
        assert flat_text(concat(empty(), literal("a"))) == "a"

    @pytest.mark.unit
    def test_walkers_reject_foreign_nodes(self):
        """flat_text and flatten both reject a child that is not a layout."""
        node = Concat(literal("a"), 42)  # type: ignore[arg-type]
        with pytest.raises(LayoutTypeError):
            flat_text(node)
        with pytest.raises(LayoutTypeError):
            flatten(node)


class TestGroup:
    """Tests for group and group_with."""

    @pytest.mark.unit
    def test_group_structure(self):
        """group(x) is Choice(flatten(x), x)."""
        x = break_join(literal("a"), literal("b"))
        node = group(x)
        assert isinstance(node, Choice)
        assert node.primary == flatten(x)
        assert node.secondary is x

    @pytest.mark.unit
    def test_group_with_structure(self):
        """group_with flattens with the given separator."""
        x = break_join(literal("a"), literal("b"))
        node = group_with("", x)
        assert flat_text(node.primary) == "ab"
        assert node.pretty(2) == "ab"
        assert node.pretty(1) == "a\nb"


class TestFormattable:
    """Tests for the Formattable capability."""

    @pytest.mark.unit
    def test_layout_is_identity_for_nodes(self):
        """A layout node formats as itself."""
        node = literal("a")
        assert node.layout() is node

    @pytest.mark.unit
    def test_custom_formattable(self):
        """Domain types render through their layout()."""
        assert Point(1, 2).pretty(80) == "(1, 2)"
        assert Point(1, 2).pretty(4) == "(1,\n2)"

    @pytest.mark.unit
    def test_as_layout(self):
        """as_layout accepts nodes, Formattables and strings."""
        node = literal("a")
        assert as_layout(node) is node
        assert as_layout("b") == Literal("b")
        assert isinstance(as_layout(Point(0, 0)), Choice)

    @pytest.mark.unit
    def test_as_layout_rejects_other_types(self):
        """Anything else is a LayoutTypeError."""
        with pytest.raises(LayoutTypeError):
            as_layout(42)  # type: ignore[arg-type]


class TestChoiceVerification:
    """Tests for opt-in Choice verification."""

    @pytest.fixture(autouse=True)
    def _reset(self, monkeypatch):
        monkeypatch.delenv("PRETTYFIT_VERIFY_CHOICES", raising=False)
        yield
        set_choice_verification(None)

    @pytest.mark.unit
    def test_disabled_by_default(self):
        """Mismatched branches are accepted when verification is off."""
        node = choice(literal("a"), literal("b"))
        assert isinstance(node, Choice)

    @pytest.mark.unit
    def test_context_manager_rejects_mismatch(self):
        """verify_choices raises on branches flattening differently."""
        with verify_choices():
            with pytest.raises(ChoiceInvariantError) as exc_info:
                choice(literal("a"), literal("b"))
        assert exc_info.value.primary == "a"
        assert exc_info.value.secondary == "b"

    @pytest.mark.unit
    def test_well_formed_choices_pass(self):
        """group and break/space alternatives satisfy the invariant."""
        with verify_choices():
            group(break_join(literal("a"), indent(2, literal("b"))))
            soft_join(literal("a"), literal("b"))

    @pytest.mark.unit
    def test_environment_enables_verification(self, monkeypatch):
        """PRETTYFIT_VERIFY_CHOICES turns verification on."""
        monkeypatch.setenv("PRETTYFIT_VERIFY_CHOICES", "true")
        with pytest.raises(ChoiceInvariantError):
            choice(literal("a"), literal("b"))

    @pytest.mark.unit
    def test_explicit_switch_overrides_environment(self, monkeypatch):
        """set_choice_verification(False) wins over the environment."""
        monkeypatch.setenv("PRETTYFIT_VERIFY_CHOICES", "true")
        set_choice_verification(False)
        choice(literal("a"), literal("b"))

    @pytest.mark.unit
    def test_context_manager_restores_previous_state(self):
        """Leaving verify_choices restores the previous setting."""
        with verify_choices():
            pass
        choice(literal("a"), literal("b"))

    @pytest.mark.unit
    def test_group_with_checks_with_its_separator(self):
        """group_with branches are compared using the group's separator."""
        with verify_choices():
            node = group_with("", break_join(literal("a"), literal("b")))
        assert node.pretty(80) == "ab"
