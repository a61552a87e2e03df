"""User-facing notification surface for editor outcomes."""

from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable

logger = logging.getLogger(__name__)


@runtime_checkable
class Notifier(Protocol):
    """Protocol for surfacing save and load outcomes to the user."""

    def success(self, message: str) -> None:
        """Show a success message."""
        ...

    def error(self, message: str) -> None:
        """Show an error message."""
        ...


class LoggingNotifier:
    """Notifier that writes messages to the log, for headless sessions."""

    def success(self, message: str) -> None:
        logger.info(message)

    def error(self, message: str) -> None:
        logger.error(message)
