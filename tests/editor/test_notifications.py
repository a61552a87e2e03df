"""Tests for the logging notifier."""

import logging

from career_canvas.editor.notifications import LoggingNotifier, Notifier


def test_logging_notifier_satisfies_protocol() -> None:
    assert isinstance(LoggingNotifier(), Notifier)


def test_logging_notifier_levels(caplog) -> None:
    notifier = LoggingNotifier()
    with caplog.at_level(logging.INFO, logger="career_canvas.editor.notifications"):
        notifier.success("Saved!")
        notifier.error("Save failed")

    levels = {record.getMessage(): record.levelno for record in caplog.records}
    assert levels == {"Saved!": logging.INFO, "Save failed": logging.ERROR}
