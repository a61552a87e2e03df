"""Errors raised by the editor core."""

from __future__ import annotations


class EditorError(Exception):
    """Base class for block store misuse."""


class InvalidBlockType(EditorError):
    """A block type outside the supported set, or the wrong variant for an operation."""

    def __init__(self, block_type: object) -> None:
        super().__init__(f"Invalid block type: {block_type!r}")
        self.block_type = block_type


class BlockNotFound(EditorError):
    def __init__(self, block_id: str) -> None:
        super().__init__(f"Block not found: {block_id}")
        self.block_id = block_id


class EntryNotFound(EditorError):
    def __init__(self, block_id: str, entry_id: str) -> None:
        super().__init__(f"Entry {entry_id} not found in block {block_id}")
        self.block_id = block_id
        self.entry_id = entry_id


class DuplicateEntryId(EditorError):
    def __init__(self, block_id: str, entry_id: str) -> None:
        super().__init__(f"Entry id {entry_id} appears more than once in block {block_id}")
        self.block_id = block_id
        self.entry_id = entry_id


class SaveFailed(Exception):
    """The profile collaborator rejected or failed a save.

    Raised inside the save orchestrator and handled there; never propagated
    to editor callers.
    """
