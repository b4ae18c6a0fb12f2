"""Tests for lexicon.logging.setup module."""

import logging

from lexicon.logging import configure_logging, get_module_logger
from lexicon.logging.setup import _is_test_environment


class TestLoggingSetup:
    """Tests for logging configuration."""

    def test_detects_pytest(self):
        """pytest runs are detected."""
        assert _is_test_environment() is True

    def test_configure_logging_returns_logger(self):
        """configure_logging() returns a usable logger."""
        logger = configure_logging()
        logger.info("test_event", key="value")

    def test_get_module_logger_binds_context(self):
        """Module loggers carry component and module_path."""
        logger = get_module_logger()
        context = logger._context
        assert context["module_path"] == __name__
        assert context["component"] == __name__.split(".")[-1]

    def test_pytest_runs_are_silenced(self):
        """A log level override does not unmute logging under pytest."""
        configure_logging(log_level="DEBUG", is_production=True)
        assert logging.root.level == logging.CRITICAL + 1
