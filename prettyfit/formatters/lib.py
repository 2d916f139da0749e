"""Document formatter abstraction and registry.

A document formatter maps a domain model (loaded from JSON with pydantic)
onto the layout algebra. Formatters are registered by name so the command
line can look them up.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from pydantic import BaseModel

from prettyfit.core.log import get_logger
from prettyfit.doc import Layout
from prettyfit.render import pretty

logger = get_logger("formatters")


@dataclass
class FormatResult:
    """Result of formatting a document.

    Attributes:
        text: The rendered text.
        formatter: Name of the formatter that produced it.
        width: Target width the text was laid out for.
        column: Columns already used on the first line.
    """

    text: str
    formatter: str
    width: int
    column: int = 0

    @property
    def lines(self) -> list[str]:
        """Rendered lines."""
        return self.text.split("\n")

    @property
    def overflowing_lines(self) -> list[int]:
        """1-based numbers of lines wider than the target width.

        Greedy layout cannot always stay within the width, e.g. when a
        single literal is longer than it. The first line only has
        `width - column` columns.
        """
        return [
            number
            for number, line in enumerate(self.lines, start=1)
            if len(line) > self.width - (self.column if number == 1 else 0)
        ]

    @property
    def has_overflow(self) -> bool:
        """Check if any line exceeds the target width."""
        return len(self.overflowing_lines) > 0


class DocumentFormatter(ABC):
    """Abstract base class for document formatters.

    Subclasses must implement:
        - name: Formatter identifier string
        - description: One-line summary for listings
        - model: Pydantic model of the input document
        - layout: Document to layout conversion
        - sample: Built-in example document

    Example:
        >>> class WordsFormatter(DocumentFormatter):
        ...     name = "words"
        ...     description = "Space separated words"
        ...     model = Words
        ...     def layout(self, document):
        ...         return fill(document.words)
        ...     def sample(self):
        ...         return Words(words=["a", "b"])
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Formatter identifier string."""
        ...

    @property
    @abstractmethod
    def description(self) -> str:
        """One-line description shown by `python . formatters`."""
        ...

    @property
    @abstractmethod
    def model(self) -> type[BaseModel]:
        """Pydantic model the input JSON must conform to."""
        ...

    @abstractmethod
    def layout(self, document: BaseModel) -> Layout:
        """Describe a document as a layout.

        Args:
            document: An instance of `model`.

        Returns:
            Layout: All the possible renderings of the document.
        """
        ...

    @abstractmethod
    def sample(self) -> BaseModel:
        """Built-in example document, used by `python . demo`."""
        ...

    def load(self, text: str) -> BaseModel:
        """Parse and validate a JSON document.

        Raises:
            pydantic.ValidationError: If the JSON does not match `model`.
        """
        return self.model.model_validate_json(text)

    def render(self, document: BaseModel, width: int, column: int = 0) -> FormatResult:
        """Lay out an already loaded document for `width` columns."""
        text = pretty(self.layout(document), width, column)
        result = FormatResult(
            text=text, formatter=self.name, width=width, column=column
        )
        if result.has_overflow:
            logger.debug(
                "%s: lines %s exceed width %d",
                self.name,
                result.overflowing_lines,
                width,
            )
        return result

    def format(self, text: str, width: int, column: int = 0) -> FormatResult:
        """Load a JSON document and lay it out for `width` columns."""
        return self.render(self.load(text), width, column)


# Formatter registry - populated by formatter modules on import
_registry: dict[str, type[DocumentFormatter]] = {}


def register_formatter(
    formatter_cls: type[DocumentFormatter],
) -> type[DocumentFormatter]:
    """Register a formatter class in the registry.

    Uses a temporary instance to retrieve the formatter name.

    Args:
        formatter_cls: The formatter class to register.

    Returns:
        The formatter class (for decorator chaining).
    """
    _registry[formatter_cls().name] = formatter_cls
    return formatter_cls


def get_formatter(name: str) -> DocumentFormatter:
    """Get a formatter instance by name.

    Args:
        name: The formatter identifier (e.g., "sexpr", "tree", "c").

    Returns:
        DocumentFormatter: An instance of the requested formatter.

    Raises:
        KeyError: If no formatter with the given name is registered.

    Example:
        >>> get_formatter("tree").format('{"label": "a"}', 80).text
        'a'
    """
    if name not in _registry:
        _import_formatters()
        if name not in _registry:
            available = ", ".join(sorted(_registry)) or "(none)"
            raise KeyError(f"Unknown formatter '{name}'. Available: {available}")
    return _registry[name]()


def list_formatters() -> list[str]:
    """List all registered formatter names, sorted."""
    _import_formatters()
    return sorted(_registry)


def _import_formatters() -> None:
    """Import formatter modules to trigger registration."""
    import importlib

    for module_name in ("csubset", "sexpr", "tree"):
        importlib.import_module(f"prettyfit.formatters.{module_name}")
