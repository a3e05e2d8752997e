"""Tests for centralized logging setup."""

import logging
from logging.handlers import RotatingFileHandler
from unittest.mock import patch

import pytest

from dominant_colors.config import setup_logging


@pytest.fixture
def package_logger(tmp_path):
    """Run setup_logging against a temporary log directory."""
    logger = logging.getLogger("dominant_colors")
    logger.handlers.clear()
    log_dir = tmp_path / "logs"
    with patch("dominant_colors.config.LOG_DIR", log_dir):
        yield logger, log_dir
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.WARNING)


def _console(logger):
    return [
        h
        for h in logger.handlers
        if isinstance(h, logging.StreamHandler) and not isinstance(h, RotatingFileHandler)
    ][0]


class TestSetupLogging:
    def test_console_and_rotating_file(self, package_logger):
        logger, log_dir = package_logger
        setup_logging()

        assert log_dir.exists()
        assert {type(h) for h in logger.handlers} == {logging.StreamHandler, RotatingFileHandler}

    def test_idempotent(self, package_logger):
        logger, _ = package_logger
        setup_logging()
        setup_logging(verbose=True)

        assert len(logger.handlers) == 2

    @pytest.mark.parametrize("verbose, level", [(True, logging.DEBUG), (False, logging.INFO)])
    def test_console_level(self, package_logger, verbose, level):
        logger, _ = package_logger
        setup_logging(verbose=verbose)

        assert _console(logger).level == level

    def test_file_handler_always_debug(self, package_logger):
        logger, _ = package_logger
        setup_logging()

        file_h = [h for h in logger.handlers if isinstance(h, RotatingFileHandler)][0]
        assert file_h.level == logging.DEBUG

    def test_module_loggers_reach_file(self, package_logger):
        """Records from module loggers land in the package log file."""
        _, log_dir = package_logger
        setup_logging()

        logging.getLogger("dominant_colors.histogram.parser").debug("parsed 3 entries")

        assert "parsed 3 entries" in (log_dir / "dominant_colors.log").read_text()
