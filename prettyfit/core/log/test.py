"""Tests for core logging module."""

import logging
from io import StringIO

import pytest

from .lib import LOGGER_NAME, get_logger, setup_logging


class TestLogging:
    """Test core logging API."""

    @pytest.mark.unit
    def test_get_logger(self) -> None:
        """Verify logger instance creation under the package logger."""
        logger = get_logger("test")
        assert logger.name == "prettyfit.test"
        assert isinstance(logger, logging.Logger)

    @pytest.mark.unit
    def test_get_logger_default_name(self) -> None:
        """Verify default logger name."""
        logger = get_logger()
        assert logger.name == LOGGER_NAME

    @pytest.mark.unit
    def test_get_logger_keeps_qualified_name(self) -> None:
        """Already qualified names are not prefixed twice."""
        logger = get_logger("prettyfit.resolve")
        assert logger.name == "prettyfit.resolve"

    @pytest.mark.unit
    def test_setup_logging(self) -> None:
        """Verify logging setup."""
        stream = StringIO()
        setup_logging(level=logging.DEBUG, stream=stream)
        logger = get_logger("test_setup")
        logger.debug("test message")

        # basicConfig is a no-op once the root logger has handlers,
        # so only the API contract is checked here.
        assert logger.level == logging.NOTSET

    @pytest.mark.unit
    def test_setup_logging_accepts_level_name(self) -> None:
        """Level names are accepted as well as numeric levels."""
        setup_logging(level="debug", stream=StringIO())
