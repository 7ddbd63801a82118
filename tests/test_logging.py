"""Tests for logging setup."""

import sys

import pytest
from loguru import logger

from roomtypes.config.schema import LoggingConfig
from roomtypes.utils.logging import configure_logging


@pytest.fixture
def restore_logger():
    """Put loguru back to a plain stderr sink after each test."""
    yield
    logger.remove()
    logger.add(sys.stderr)


class TestConfigureLogging:
    """Test configure_logging."""

    def test_file_sink_written(self, tmp_path, restore_logger):
        """Debug records reach the configured file even at the default console level."""
        log_file = tmp_path / "logs" / "roomtypes.log"

        handler_ids = configure_logging(LoggingConfig(file=str(log_file)))
        logger.debug("registered room type: team")

        assert len(handler_ids) == 2
        assert log_file.exists()
        content = log_file.read_text()
        assert "registered room type: team" in content
        assert "DEBUG" in content

    def test_file_path_expanded(self, tmp_path, monkeypatch, restore_logger):
        """A ~ in the configured file is expanded against the home directory."""
        monkeypatch.setenv("HOME", str(tmp_path))

        configure_logging(LoggingConfig(file="~/rt/roomtypes.log"))
        logger.info("ready")

        assert "ready" in (tmp_path / "rt" / "roomtypes.log").read_text()

    def test_console_level(self):
        assert LoggingConfig().console_level == "SUCCESS"
        assert LoggingConfig(level="WARNING").console_level == "WARNING"
        assert LoggingConfig(level="WARNING", verbose=True).console_level == "DEBUG"

    def test_default_file_from_settings(self):
        assert LoggingConfig().log_path.name == "roomtypes.log"
        assert LoggingConfig().log_path.parent.name == ".roomtypes"
