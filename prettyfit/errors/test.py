"""Tests for the exception hierarchy."""

import pytest

from .lib import ChoiceInvariantError, LayoutTypeError, PrettyFitError


class TestErrors:
    """Tests for prettyfit exceptions."""

    @pytest.mark.unit
    def test_layout_type_error_is_type_error(self):
        """LayoutTypeError can be caught as a TypeError."""
        err = LayoutTypeError(42)
        assert isinstance(err, TypeError)
        assert isinstance(err, PrettyFitError)
        assert err.value == 42
        assert "int" in str(err)

    @pytest.mark.unit
    def test_choice_invariant_error_carries_texts(self):
        """ChoiceInvariantError keeps both flattened texts."""
        err = ChoiceInvariantError("a b", "a  b")
        assert isinstance(err, ValueError)
        assert err.primary == "a b"
        assert err.secondary == "a  b"
        assert "'a b'" in str(err)
