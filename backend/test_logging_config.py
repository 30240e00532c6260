"""
Tests for logging setup
"""
import logging
import sys
from logging.handlers import RotatingFileHandler

import pytest

from together_mcp.core import logging_config


@pytest.fixture
def root_logger(monkeypatch):
    """Give setup_logging a clean root logger and undo its changes afterwards"""
    root = logging.getLogger()
    monkeypatch.setattr(logging_config, "_configured", False)
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(root, "level", root.level)
    for name in ("httpx", "httpcore"):
        logger = logging.getLogger(name)
        monkeypatch.setattr(logger, "level", logger.level)
    yield root
    for handler in root.handlers:
        handler.close()


def console_handlers(root):
    return [h for h in root.handlers if type(h) is logging.StreamHandler]


def file_handlers(root):
    return [h for h in root.handlers if isinstance(h, RotatingFileHandler)]


class TestSetupLogging:

    def test_console_goes_to_stderr(self, root_logger):
        logging_config.setup_logging("INFO")

        handlers = console_handlers(root_logger)
        assert len(handlers) == 1
        assert handlers[0].stream is sys.stderr
        assert file_handlers(root_logger) == []
        assert root_logger.level == logging.INFO

    def test_rotating_file_handler(self, root_logger, tmp_path):
        log_file = tmp_path / "together-mcp.log"

        logging_config.setup_logging("DEBUG", str(log_file))

        handlers = file_handlers(root_logger)
        assert len(handlers) == 1
        assert handlers[0].maxBytes == 10 * 1024 * 1024
        assert handlers[0].backupCount == 5
        assert handlers[0].baseFilename == str(log_file)
        assert root_logger.level == logging.DEBUG

    def test_httpx_quieted(self, root_logger):
        logging_config.setup_logging("DEBUG")

        assert logging.getLogger("httpx").level == logging.WARNING
        assert logging.getLogger("httpcore").level == logging.WARNING

    def test_second_call_adds_nothing(self, root_logger, tmp_path):
        log_file = str(tmp_path / "together-mcp.log")

        logging_config.setup_logging("INFO", log_file)
        logging_config.setup_logging("INFO", log_file)

        assert len(console_handlers(root_logger)) == 1
        assert len(file_handlers(root_logger)) == 1

    def test_unknown_level_defaults_to_info(self, root_logger):
        logging_config.setup_logging("chatty")

        assert root_logger.level == logging.INFO
