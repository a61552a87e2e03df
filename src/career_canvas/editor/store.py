"""Block store — the live document and its structural mutations."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from career_canvas.editor.builders import build_empty_block
from career_canvas.editor.errors import BlockNotFound, DuplicateEntryId

if TYPE_CHECKING:
    from collections.abc import Callable

    from career_canvas.editor.history import History
    from career_canvas.models.blocks import Block, BlockType, Document

logger = logging.getLogger(__name__)

_DIRECTIONS = (-1, 1)


def _check_entry_ids(block: Block) -> None:
    if not isinstance(block.data, list):
        return
    seen: set[str] = set()
    for entry in block.data:
        entry_id = getattr(entry, "id", None)
        if entry_id is None:
            continue
        if entry_id in seen:
            raise DuplicateEntryId(block.id, entry_id)
        seen.add(entry_id)


class BlockStore:
    """Holds the live document and records every accepted mutation.

    Each mutation builds a new list rather than editing the previous one in
    place. ``on_change`` is told first; if it raises, the mutation is
    rejected and neither the document nor the history changes. Otherwise
    the new list becomes live and is pushed to the history. ``restore``
    swaps in a document without recording it, which is how undo and redo
    results are applied.
    """

    def __init__(
        self,
        history: History,
        *,
        on_change: Callable[[Document], None] | None = None,
    ) -> None:
        self._history = history
        self._on_change = on_change
        self._blocks: Document = []

    @property
    def document(self) -> Document:
        return self._blocks

    def find(self, block_id: str) -> Block:
        for block in self._blocks:
            if block.id == block_id:
                return block
        raise BlockNotFound(block_id)

    def load(self, document: Document) -> None:
        """Seed the store and record the starting snapshot as the saved state."""
        self._blocks = list(document)
        self._history.push(self._blocks)
        self._history.mark_saved(self._blocks)
        logger.debug("Loaded document with %d blocks", len(self._blocks))

    def restore(self, document: Document) -> None:
        """Replace the live document from history without recording it."""
        self._blocks = list(document)

    def _commit(self, blocks: Document) -> Document:
        if self._on_change is not None:
            self._on_change(blocks)
        self._blocks = blocks
        self._history.push(blocks)
        return blocks

    def add_block(self, block_type: BlockType | str) -> Block:
        """Append a blank block of the given type."""
        block = build_empty_block(block_type)
        self._commit([*self._blocks, block])
        logger.debug("Added %s block %s", block.type, block.id)
        return block

    def delete_block(self, block_id: str) -> bool:
        """Remove a block. Unknown ids are ignored; returns whether anything was removed."""
        remaining = [block for block in self._blocks if block.id != block_id]
        if len(remaining) == len(self._blocks):
            return False
        self._commit(remaining)
        logger.debug("Deleted block %s", block_id)
        return True

    def update_block(self, block_id: str, new_block: Block) -> Block:
        """Replace a block wholesale, keeping its id."""
        index = next(
            (i for i, block in enumerate(self._blocks) if block.id == block_id),
            None,
        )
        if index is None:
            raise BlockNotFound(block_id)
        if new_block.id != block_id:
            new_block = new_block.model_copy(update={"id": block_id})
        _check_entry_ids(new_block)

        blocks = list(self._blocks)
        blocks[index] = new_block
        self._commit(blocks)
        return new_block

    def move_block(self, index: int, direction: int) -> bool:
        """Swap the block at ``index`` with its neighbour. Out of range is a no-op."""
        if direction not in _DIRECTIONS:
            msg = f"direction must be -1 or 1, got {direction}"
            raise ValueError(msg)
        target = index + direction
        if not (0 <= index < len(self._blocks) and 0 <= target < len(self._blocks)):
            return False

        blocks = list(self._blocks)
        blocks[index], blocks[target] = blocks[target], blocks[index]
        self._commit(blocks)
        logger.debug("Moved block %s from %d to %d", blocks[target].id, index, target)
        return True
