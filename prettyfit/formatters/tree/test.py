"""Unit tests for the tree formatter."""

import pytest
from pydantic import ValidationError

from prettyfit.formatters import get_formatter
from prettyfit.render import pretty

from .lib import TreeFormatter, TreeNode


@pytest.fixture
def sample_tree() -> TreeNode:
    return TreeFormatter().sample()


class TestTreeNode:
    """Tests for the tree model."""

    @pytest.mark.unit
    def test_string_is_leaf(self):
        """A bare string loads as a leaf."""
        node = TreeNode.model_validate("leaf")
        assert node.label == "leaf"
        assert node.is_leaf

    @pytest.mark.unit
    def test_nested_strings(self):
        """Children may be given as strings."""
        node = TreeNode.model_validate({"label": "a", "children": ["b", "c"]})
        assert [child.label for child in node.children] == ["b", "c"]

    @pytest.mark.unit
    def test_label_required(self):
        """A node without a label is rejected."""
        with pytest.raises(ValidationError):
            TreeNode.model_validate({"children": []})

    @pytest.mark.unit
    def test_leaf_layout(self):
        """A leaf renders as its label, with no brackets."""
        assert TreeNode(label="x").pretty(1) == "x"


class TestTreeLayout:
    """Tests for tree layouts at various widths."""

    @pytest.mark.unit
    def test_wide(self, sample_tree):
        """The whole tree fits on one line."""
        assert pretty(sample_tree, 80) == (
            "aaa [ bbbbb [ ccc dd ] eee ffff [ gg hhh ii ] ]"
        )

    @pytest.mark.unit
    def test_outer_block_only(self, sample_tree):
        """At 45 columns only the outermost children move to a block."""
        assert pretty(sample_tree, 45) == (
            "aaa [\n"
            "    bbbbb [ ccc dd ] eee ffff [ gg hhh ii ]\n"
            "]"
        )

    @pytest.mark.unit
    def test_narrow(self, sample_tree):
        """At 20 columns the inner children move to blocks as well."""
        assert pretty(sample_tree, 20) == (
            "aaa [\n"
            "    bbbbb [\n"
            "        ccc dd\n"
            "    ] eee ffff [\n"
            "        gg hhh ii\n"
            "    ]\n"
            "]"
        )


class TestTreeFormatter:
    """Tests for the registered formatter."""

    @pytest.mark.unit
    def test_registered(self):
        """The formatter is available by name."""
        assert isinstance(get_formatter("tree"), TreeFormatter)

    @pytest.mark.unit
    def test_format_json(self):
        """JSON input is loaded and laid out."""
        text = '{"label": "root", "children": ["a", "b"]}'
        assert get_formatter("tree").format(text, 80).text == "root [ a b ]"

    @pytest.mark.unit
    def test_invalid_json(self):
        """Malformed input raises a validation error."""
        with pytest.raises(ValidationError):
            get_formatter("tree").format('{"label": 3', 80)
