"""Unit tests for the formatters module.

Tests for:
- DocumentFormatter abstract base class
- Formatter registry (register_formatter, get_formatter, list_formatters)
- FormatResult helpers
"""

import pytest
from pydantic import BaseModel

from prettyfit.combinators import fill
from prettyfit.doc import Layout

from . import lib
from .lib import (
    DocumentFormatter,
    FormatResult,
    get_formatter,
    list_formatters,
    register_formatter,
)


class Words(BaseModel):
    words: list[str]


class WordsFormatter(DocumentFormatter):
    @property
    def name(self) -> str:
        return "words"

    @property
    def description(self) -> str:
        return "Space separated words"

    @property
    def model(self) -> type[BaseModel]:
        return Words

    def layout(self, document: BaseModel) -> Layout:
        return fill(document.words)

    def sample(self) -> Words:
        return Words(words=["lorem", "ipsum", "dolor"])


@pytest.fixture
def words_registered():
    register_formatter(WordsFormatter)
    yield
    lib._registry.pop("words", None)


class TestDocumentFormatterContract:
    """Tests for the DocumentFormatter abstract base class."""

    @pytest.mark.unit
    def test_is_abstract(self):
        """DocumentFormatter cannot be instantiated directly."""
        with pytest.raises(TypeError, match="abstract"):
            DocumentFormatter()  # type: ignore

    @pytest.mark.unit
    def test_requires_layout(self):
        """Concrete formatters must implement layout."""

        class Incomplete(DocumentFormatter):
            name = "incomplete"
            description = ""
            model = Words

            def sample(self) -> Words:
                return Words(words=[])

        with pytest.raises(TypeError, match="abstract"):
            Incomplete()

    @pytest.mark.unit
    def test_format_loads_and_renders(self):
        """format() validates the JSON and renders it."""
        result = WordsFormatter().format('{"words": ["aa", "bb", "cc"]}', 6)
        assert result.text == "aa bb\ncc"
        assert result.formatter == "words"
        assert result.width == 6


class TestRegistry:
    """Tests for formatter registration and lookup."""

    @pytest.mark.unit
    def test_builtin_formatters(self):
        """The bundled formatters are all listed."""
        assert {"c", "sexpr", "tree"} <= set(list_formatters())

    @pytest.mark.unit
    def test_list_is_sorted(self):
        """Formatter names are listed in order."""
        names = list_formatters()
        assert names == sorted(names)

    @pytest.mark.unit
    def test_unknown_formatter(self):
        """Unknown names raise KeyError listing the available ones."""
        with pytest.raises(KeyError, match="Unknown formatter 'nope'.*sexpr"):
            get_formatter("nope")

    @pytest.mark.unit
    def test_register_custom(self, words_registered):
        """A registered formatter is returned as a fresh instance."""
        first = get_formatter("words")
        assert isinstance(first, WordsFormatter)
        assert get_formatter("words") is not first
        assert "words" in list_formatters()


class TestFormatResult:
    """Tests for FormatResult."""

    @pytest.mark.unit
    def test_no_overflow(self):
        """Lines within the width are not reported."""
        result = FormatResult(text="ab\ncd", formatter="x", width=2)
        assert result.lines == ["ab", "cd"]
        assert result.overflowing_lines == []
        assert not result.has_overflow

    @pytest.mark.unit
    def test_overflow(self):
        """Lines wider than the target are reported by 1-based number."""
        result = FormatResult(text="ok\ntoo long\nok", formatter="x", width=3)
        assert result.overflowing_lines == [2]
        assert result.has_overflow

    @pytest.mark.unit
    def test_column_counts_on_first_line(self):
        """Only the first line loses the columns already used."""
        result = FormatResult(text="abcd\nabcd", formatter="x", width=5, column=2)
        assert result.overflowing_lines == [1]

    @pytest.mark.unit
    def test_format_reports_first_line_column(self):
        """format() carries the start column into the overflow check."""
        result = WordsFormatter().format('{"words": ["abcd"]}', 6, column=4)
        assert result.column == 4
        assert result.has_overflow
        assert not WordsFormatter().format('{"words": ["abcd"]}', 6).has_overflow

    @pytest.mark.unit
    def test_long_literal_overflows(self):
        """A literal wider than the width cannot be helped."""
        result = WordsFormatter().format('{"words": ["abcdefgh"]}', 4)
        assert result.text == "abcdefgh"
        assert result.has_overflow
