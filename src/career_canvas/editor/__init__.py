"""Resume editor core — block store, history, autosave and session."""

from career_canvas.editor.autosave import Debouncer, SaveOrchestrator, SaveResult
from career_canvas.editor.builders import build_empty_block, build_empty_entry, build_initial_blocks
from career_canvas.editor.client import ProfileClient, ProfileGateway, ProfileServiceError
from career_canvas.editor.errors import (
    BlockNotFound,
    DuplicateEntryId,
    EditorError,
    EntryNotFound,
    InvalidBlockType,
    SaveFailed,
)
from career_canvas.editor.history import History, copy_document
from career_canvas.editor.notifications import LoggingNotifier, Notifier
from career_canvas.editor.serialize import to_payload, to_profile_update
from career_canvas.editor.session import EditorSession
from career_canvas.editor.store import BlockStore

__all__ = [
    "BlockNotFound",
    "BlockStore",
    "Debouncer",
    "DuplicateEntryId",
    "EditorError",
    "EditorSession",
    "EntryNotFound",
    "History",
    "InvalidBlockType",
    "LoggingNotifier",
    "Notifier",
    "ProfileClient",
    "ProfileGateway",
    "ProfileServiceError",
    "SaveFailed",
    "SaveOrchestrator",
    "SaveResult",
    "build_empty_block",
    "build_empty_entry",
    "build_initial_blocks",
    "copy_document",
    "to_payload",
    "to_profile_update",
]
