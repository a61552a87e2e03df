"""Tests for logging configuration."""

import logging

from career_canvas.logging import configure_logging


def test_configure_logging_sets_level_and_quiets_sdk_loggers():
    configure_logging("debug")
    assert logging.getLogger().level == logging.DEBUG
    assert logging.getLogger("azure.cosmos").level == logging.WARNING
    configure_logging("INFO")


def test_configure_logging_with_file(tmp_path):
    log_file = tmp_path / "editor.log"
    configure_logging("INFO", log_file=str(log_file))
    logging.getLogger("career_canvas.test").info("hello file")
    for handler in logging.getLogger().handlers:
        handler.flush()
    assert "hello file" in log_file.read_text(encoding="utf-8")
    configure_logging("INFO")
