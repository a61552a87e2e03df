"""Editor session — one user's editing of one resume document."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from career_canvas.editor.autosave import DEFAULT_AUTOSAVE_DELAY, SaveOrchestrator, SaveResult
from career_canvas.editor.builders import build_empty_entry, build_initial_blocks
from career_canvas.editor.errors import EntryNotFound, InvalidBlockType
from career_canvas.editor.history import History
from career_canvas.editor.notifications import LoggingNotifier
from career_canvas.editor.preview import render_preview
from career_canvas.editor.store import BlockStore
from career_canvas.models.blocks import (
    EducationBlock,
    ExperienceBlock,
    PersonalBlock,
    PersonalInfo,
    ProjectsBlock,
    SkillsBlock,
    SummaryBlock,
)

if TYPE_CHECKING:
    from career_canvas.config import EditorConfig
    from career_canvas.editor.client import ProfileGateway
    from career_canvas.editor.notifications import Notifier
    from career_canvas.models.blocks import Block, BlockType, Document, Entry

logger = logging.getLogger(__name__)

_ENTRY_BLOCKS = (ExperienceBlock, EducationBlock, ProjectsBlock)


class EditorSession:
    """Wires the block store, history and save orchestrator together.

    Structural edits go through the store, which records history and arms
    the autosave timer. Entry and field edits are computed here and applied
    as whole-block replacements. Undo and redo swap the live document from
    history without recording a new snapshot.

    Edits must be made from a running event loop. Outside one, arming the
    autosave timer raises ``RuntimeError`` and the edit is rejected.
    """

    def __init__(
        self,
        gateway: ProfileGateway,
        *,
        notifier: Notifier | None = None,
        autosave_delay: float = DEFAULT_AUTOSAVE_DELAY,
        reschedule_dropped: bool = True,
    ) -> None:
        self._gateway = gateway
        self._notifier = notifier or LoggingNotifier()
        self.history = History()
        self.store = BlockStore(self.history, on_change=self._changed)
        self.saver = SaveOrchestrator(
            gateway,
            self.history,
            lambda: self.store.document,
            self._notifier,
            delay=autosave_delay,
            reschedule_dropped=reschedule_dropped,
        )
        self.loaded = False

    @classmethod
    def from_config(
        cls,
        gateway: ProfileGateway,
        config: EditorConfig,
        *,
        notifier: Notifier | None = None,
    ) -> EditorSession:
        return cls(
            gateway,
            notifier=notifier,
            autosave_delay=config.autosave_delay_seconds,
            reschedule_dropped=config.reschedule_dropped_autosave,
        )

    @property
    def document(self) -> Document:
        return self.store.document

    @property
    def is_dirty(self) -> bool:
        return self.history.is_dirty(self.store.document)

    @property
    def can_undo(self) -> bool:
        return self.history.can_undo

    @property
    def can_redo(self) -> bool:
        return self.history.can_redo

    def _changed(self, _document: Document) -> None:
        self.saver.schedule()

    async def load(self) -> bool:
        """Seed the document from the stored profile."""
        try:
            profile = await self._gateway.get_profile()
        except Exception:  # noqa: BLE001
            logger.warning("Failed to load profile", exc_info=True)
            self._notifier.error("Failed to load profile")
            return False
        self.store.load(build_initial_blocks(profile))
        self.loaded = True
        logger.info("Editor session loaded — blocks=%d", len(self.store.document))
        return True

    async def save(self) -> SaveResult:
        return await self.saver.save_now()

    async def close(self, *, flush: bool = False) -> None:
        await self.saver.close(flush=flush)

    def undo(self) -> bool:
        if not self.history.can_undo:
            return False
        self.saver.schedule()
        self.store.restore(self.history.undo())
        return True

    def redo(self) -> bool:
        if not self.history.can_redo:
            return False
        self.saver.schedule()
        self.store.restore(self.history.redo())
        return True

    def preview(self) -> str:
        return render_preview(self.store.document)

    # Structural edits

    def add_block(self, block_type: BlockType | str) -> Block:
        return self.store.add_block(block_type)

    def delete_block(self, block_id: str) -> bool:
        return self.store.delete_block(block_id)

    def update_block(self, block_id: str, new_block: Block) -> Block:
        return self.store.update_block(block_id, new_block)

    def move_block(self, index: int, direction: int) -> bool:
        return self.store.move_block(index, direction)

    def toggle_collapsed(self, block_id: str) -> Block:
        block = self.store.find(block_id)
        return self.store.update_block(
            block_id, block.model_copy(update={"collapsed": not block.collapsed})
        )

    # Field edits

    def set_personal_field(self, block_id: str, field: str, value: str) -> Block:
        block = self.store.find(block_id)
        if not isinstance(block, PersonalBlock):
            raise InvalidBlockType(block.type)
        if field not in PersonalInfo.model_fields:
            msg = f"Unknown personal field: {field}"
            raise ValueError(msg)
        data = block.data.model_copy(update={field: value})
        return self.store.update_block(block_id, block.model_copy(update={"data": data}))

    def set_summary(self, block_id: str, text: str) -> Block:
        block = self.store.find(block_id)
        if not isinstance(block, SummaryBlock):
            raise InvalidBlockType(block.type)
        data = block.data.model_copy(update={"text": text})
        return self.store.update_block(block_id, block.model_copy(update={"data": data}))

    # Entry edits

    def _entry_block(self, block_id: str) -> ExperienceBlock | EducationBlock | ProjectsBlock:
        block = self.store.find(block_id)
        if not isinstance(block, _ENTRY_BLOCKS):
            raise InvalidBlockType(block.type)
        return block

    def add_entry(self, block_id: str) -> Entry:
        block = self._entry_block(block_id)
        entry = build_empty_entry(block.type)
        self.store.update_block(block_id, block.model_copy(update={"data": [*block.data, entry]}))
        return entry

    def update_entry(self, block_id: str, entry_id: str, **fields: str) -> Entry:
        block = self._entry_block(block_id)
        entries = list(block.data)
        for index, entry in enumerate(entries):
            if entry.id == entry_id:
                allowed = set(type(entry).model_fields) - {"id"}
                unknown = set(fields) - allowed
                if unknown:
                    msg = f"Unknown {block.type} entry fields: {sorted(unknown)}"
                    raise ValueError(msg)
                entries[index] = entry.model_copy(update=fields)
                self.store.update_block(block_id, block.model_copy(update={"data": entries}))
                return entries[index]
        raise EntryNotFound(block_id, entry_id)

    def delete_entry(self, block_id: str, entry_id: str) -> bool:
        block = self._entry_block(block_id)
        entries = [entry for entry in block.data if entry.id != entry_id]
        if len(entries) == len(block.data):
            return False
        self.store.update_block(block_id, block.model_copy(update={"data": entries}))
        return True

    # Skill tags

    def _skills_block(self, block_id: str) -> SkillsBlock:
        block = self.store.find(block_id)
        if not isinstance(block, SkillsBlock):
            raise InvalidBlockType(block.type)
        return block

    def add_skill(self, block_id: str, skill: str) -> bool:
        block = self._skills_block(block_id)
        skill = skill.strip()
        if not skill:
            return False
        self.store.update_block(block_id, block.model_copy(update={"data": [*block.data, skill]}))
        return True

    def remove_skill(self, block_id: str, index: int) -> bool:
        block = self._skills_block(block_id)
        if not 0 <= index < len(block.data):
            return False
        skills = [skill for i, skill in enumerate(block.data) if i != index]
        self.store.update_block(block_id, block.model_copy(update={"data": skills}))
        return True
