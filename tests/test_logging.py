"""Tests for structured logging setup."""

import logging

import pytest
import structlog

from rankings_core.core.logging import configure_logging


@pytest.fixture
def restore_root_level():
    root = logging.getLogger()
    level = root.level
    yield
    root.setLevel(level)


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_console_renderer_by_default(self, restore_root_level):
        """Test the console renderer ends the processor chain."""
        configure_logging()
        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)
        assert logging.getLogger().level == logging.INFO

    def test_json_renderer(self, restore_root_level):
        """Test JSON output can be selected."""
        configure_logging("DEBUG", json=True)
        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)
        assert logging.getLogger().level == logging.DEBUG

    def test_numeric_level(self, restore_root_level):
        """Test a numeric stdlib level is accepted."""
        configure_logging(logging.WARNING)
        assert logging.getLogger().level == logging.WARNING
