"""Linear undo/redo history over document snapshots."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from career_canvas.models.blocks import Document

logger = logging.getLogger(__name__)


def copy_document(document: Document) -> Document:
    """Return a deep, independent copy of a document."""
    return [block.model_copy(deep=True) for block in document]


class History:
    """Ordered snapshots plus a cursor marking the current state.

    A cursor of -1 means nothing has been recorded yet. Snapshots are deep
    copies taken on push and handed out as deep copies again, so no caller
    can reach a stored snapshot.

    Dirty tracking compares against the last loaded or saved document, kept
    apart from the cursor so that edits, undo and redo never reset it.
    """

    def __init__(self) -> None:
        self._snapshots: list[Document] = []
        self._cursor = -1
        self._saved: Document = []

    def __len__(self) -> int:
        return len(self._snapshots)

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def can_undo(self) -> bool:
        return self._cursor > 0

    @property
    def can_redo(self) -> bool:
        return self._cursor < len(self._snapshots) - 1

    def current(self) -> Document | None:
        """Return a copy of the snapshot under the cursor, if any."""
        if self._cursor < 0:
            return None
        return copy_document(self._snapshots[self._cursor])

    def push(self, document: Document) -> None:
        """Record a snapshot, discarding any redo states after the cursor."""
        del self._snapshots[self._cursor + 1 :]
        self._snapshots.append(copy_document(document))
        self._cursor = len(self._snapshots) - 1
        logger.debug("History push — cursor=%d length=%d", self._cursor, len(self._snapshots))

    def undo(self) -> Document | None:
        """Step back one snapshot. Returns None when already at the start."""
        if not self.can_undo:
            return None
        self._cursor -= 1
        return copy_document(self._snapshots[self._cursor])

    def redo(self) -> Document | None:
        """Step forward one snapshot. Returns None when already at the end."""
        if not self.can_redo:
            return None
        self._cursor += 1
        return copy_document(self._snapshots[self._cursor])

    def mark_saved(self, document: Document) -> None:
        """Record the document the profile store now holds."""
        self._saved = copy_document(document)

    def is_dirty(self, document: Document) -> bool:
        """Return True when the document differs from the last loaded or saved one."""
        return document != self._saved
