"""Debounced autosave and manual save against the profile collaborator."""

from __future__ import annotations

import asyncio
import logging
from enum import StrEnum
from typing import TYPE_CHECKING

from career_canvas.editor.errors import SaveFailed
from career_canvas.editor.history import copy_document
from career_canvas.editor.serialize import to_profile_update

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from career_canvas.editor.client import ProfileGateway
    from career_canvas.editor.history import History
    from career_canvas.editor.notifications import Notifier
    from career_canvas.models.blocks import Document

logger = logging.getLogger(__name__)

DEFAULT_AUTOSAVE_DELAY = 5.0


class SaveResult(StrEnum):
    SAVED = "saved"
    FAILED = "failed"
    SKIPPED = "skipped"


class Debouncer:
    """Run a coroutine once a quiet period has passed since the last trigger.

    Each trigger cancels the pending timer and arms a new one. Once the timer
    fires, the callback runs as its own task and is no longer cancellable by
    later triggers.
    """

    def __init__(self, delay: float, callback: Callable[[], Awaitable[object]]) -> None:
        self._delay = delay
        self._callback = callback
        self._timer: asyncio.TimerHandle | None = None
        self._tasks: set[asyncio.Task] = set()

    @property
    def pending(self) -> bool:
        return self._timer is not None

    def trigger(self) -> None:
        """Restart the quiet period. Must be called from a running event loop."""
        self.cancel()
        loop = asyncio.get_running_loop()
        self._timer = loop.call_later(self._delay, self._fire)

    def cancel(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _fire(self) -> None:
        self._timer = None
        task = asyncio.ensure_future(self._callback())
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    async def wait(self) -> None:
        """Wait for callbacks that have already fired to finish."""
        if self._tasks:
            await asyncio.gather(*self._tasks, return_exceptions=True)


class SaveOrchestrator:
    """Reconciles the live document with the profile collaborator.

    At most one save is in flight; any other request is dropped. A dropped
    autosave is re-armed once the in-flight save completes when
    ``reschedule_dropped`` is set. Every successful save pushes the saved
    snapshot to history and marks it as the saved state. Once closed, no new
    save starts and the timer is never re-armed.
    """

    def __init__(
        self,
        gateway: ProfileGateway,
        history: History,
        source: Callable[[], Document],
        notifier: Notifier,
        *,
        delay: float = DEFAULT_AUTOSAVE_DELAY,
        reschedule_dropped: bool = True,
    ) -> None:
        self._gateway = gateway
        self._history = history
        self._source = source
        self._notifier = notifier
        self._reschedule_dropped = reschedule_dropped
        self._debouncer = Debouncer(delay, self.autosave)
        self._saving = False
        self._idle = asyncio.Event()
        self._idle.set()
        self._closed = False
        self._resave_requested = False
        self.last_error: SaveFailed | None = None

    @property
    def saving(self) -> bool:
        return self._saving

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def autosave_pending(self) -> bool:
        return self._debouncer.pending

    def schedule(self) -> None:
        """Arm (or re-arm) the autosave timer after a change to the document.

        Raises ``RuntimeError`` when called outside a running event loop.
        """
        if self._closed:
            logger.debug("Autosave not armed — orchestrator closed")
            return
        self._debouncer.trigger()

    def can_save(self) -> bool:
        """Manual save is allowed only with unsaved changes and no save in flight."""
        return not self._closed and not self._saving and self._history.is_dirty(self._source())

    async def autosave(self) -> SaveResult:
        return await self._save(manual=False)

    async def save_now(self) -> SaveResult:
        """Save immediately on user request, bypassing the autosave timer."""
        if not self.can_save():
            logger.debug("Manual save ignored — saving=%s", self._saving)
            return SaveResult.SKIPPED
        self._debouncer.cancel()
        return await self._save(manual=True)

    async def close(self, *, flush: bool = False) -> None:
        """Stop autosaving and wait for any in-flight save to finish.

        With ``flush`` a pending or dropped autosave runs once the in-flight
        save is done, instead of being discarded.
        """
        pending = self._debouncer.pending or self._resave_requested
        self._closed = True
        self._resave_requested = False
        self._debouncer.cancel()
        await self._debouncer.wait()
        await self._idle.wait()
        if flush and pending:
            await self._write(manual=False)

    async def _save(self, *, manual: bool) -> SaveResult:
        kind = "manual" if manual else "auto"
        if self._closed:
            logger.debug("Orchestrator closed — ignoring %s save", kind)
            return SaveResult.SKIPPED
        if self._saving:
            logger.info("Save already in flight — dropping %s save", kind)
            if not manual and self._reschedule_dropped:
                self._resave_requested = True
            return SaveResult.SKIPPED
        return await self._write(manual=manual)

    async def _write(self, *, manual: bool) -> SaveResult:
        kind = "manual" if manual else "auto"
        self._saving = True
        self._idle.clear()
        try:
            snapshot = copy_document(self._source())
            await self._gateway.update_profile(to_profile_update(snapshot))
        except Exception as exc:  # noqa: BLE001
            error = SaveFailed(f"{kind} save failed: {exc}")
            error.__cause__ = exc
            self.last_error = error
            logger.warning("Profile %s save failed", kind, exc_info=True)
            self._notifier.error("Save failed")
            return SaveResult.FAILED
        finally:
            self._saving = False
            self._idle.set()
            if self._resave_requested and not self._closed:
                self._resave_requested = False
                self._debouncer.trigger()

        self.last_error = None
        self._history.push(snapshot)
        self._history.mark_saved(snapshot)
        logger.info("Profile %s save complete — blocks=%d", kind, len(snapshot))
        if manual:
            self._notifier.success("Saved!")
        return SaveResult.SAVED
