"""Fire-and-forget clipboard copies with a transient "copied" indicator

The clipboard write is the only asynchronous boundary of the shortener core.
`CopyTracker.copy()` schedules the write on the running asyncio loop and
returns at once. When the write completes:

    - success: `copied_id` is set to the copied record's id and a timer clears
      it after `reset_after` seconds (2 by default). A newer successful copy
      replaces the pending timer.
    - failure: any exception raised by the clipboard is logged and swallowed.
      Nothing is retried and the caller never sees it.

Timers are scoped: `forget(record_id)` cancels the pending reset for a removed
record and `close()` tears everything down, so no callback ever fires against
stale state. Writes already in flight are not cancelled; their completion is
ignored once the tracker is closed or the record is no longer live.

Classes:
    Clipboard:
        Protocol of the clipboard-write primitive.
    MemoryClipboard:
        In-process clipboard used as the default collaborator and in tests.
    CopyTracker:
        Issues writes and owns the "copied" indicator.
"""

import asyncio
import logging
from typing import Protocol

from minishortener.constants import Limits, Event
from minishortener.exceptions import ClipboardError
from minishortener.types import RecordId, LivenessCheck


logger = logging.getLogger(__name__)


class Clipboard(Protocol):
    async def write_text(self, text: str) -> None: ...


class MemoryClipboard:
    """Clipboard keeping the last written text in memory

    Attributes:
        text (str | None):
            Last successfully written text.
        fail (bool):
            If True, every write raises ClipboardError.
    """

    def __init__(self, fail: bool = False):
        self.text: str | None = None
        self.fail = fail

    async def write_text(self, text: str) -> None:
        await asyncio.sleep(0)
        if self.fail:
            raise ClipboardError('Clipboard write rejected.')
        self.text = text


class CopyTracker:
    """Issue clipboard writes and track which record was copied last

    Attributes:
        copied_id (RecordId | None):
            Id of the record whose "copied" indicator is currently shown.
    """

    def __init__(
        self,
        clipboard: Clipboard,
        reset_after: float = Limits.COPIED_INDICATOR_SECONDS,
        is_live: LivenessCheck | None = None,
    ):
        """Initialize a tracker around a clipboard collaborator

        Args:
            clipboard (Clipboard):
                Object exposing `async write_text(text)`.
            reset_after (float):
                Seconds the indicator stays set after a successful copy.
            is_live (Callable[[RecordId], bool] | None):
                Optional check that a record still exists when its write completes.
        """
        self.clipboard = clipboard
        self.reset_after = reset_after
        self.copied_id: RecordId | None = None
        self._is_live = is_live
        self._reset_handle: asyncio.TimerHandle | None = None
        self._pending: set[asyncio.Task] = set()
        self._closed = False

    def copy(self, text: str, record_id: RecordId) -> asyncio.Task:
        """Schedule a clipboard write without waiting for it

        Must be called while an asyncio event loop is running.

        Returns:
            asyncio.Task: the scheduled write. Callers may ignore it.
        """
        task = asyncio.get_running_loop().create_task(self._write(text, record_id))
        # The loop only keeps weak references to tasks
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task

    def forget(self, record_id: RecordId) -> None:
        """Drop the indicator for a record that no longer exists."""
        if self.copied_id == record_id:
            self._clear()

    def close(self) -> None:
        """Cancel the pending reset and ignore writes that complete afterwards."""
        self._closed = True
        self._clear()

    async def _write(self, text: str, record_id: RecordId) -> None:
        try:
            await self.clipboard.write_text(text)
        except Exception:
            # Nobody awaits this task; any collaborator failure ends here
            logger.exception('Failed to copy.', extra={'recordId': record_id, 'event': Event.COPY_FAILED})
            return

        if self._closed or (self._is_live is not None and not self._is_live(record_id)):
            return

        self._cancel_reset()
        self.copied_id = record_id
        self._reset_handle = asyncio.get_running_loop().call_later(self.reset_after, self._clear)
        logger.debug('Copied short URL.', extra={'recordId': record_id, 'event': Event.COPY_SUCCEEDED})

    def _cancel_reset(self) -> None:
        if self._reset_handle is not None:
            self._reset_handle.cancel()
            self._reset_handle = None

    def _clear(self) -> None:
        self._cancel_reset()
        if self.copied_id is not None:
            logger.debug('Copy indicator cleared.', extra={'recordId': self.copied_id, 'event': Event.COPY_INDICATOR_CLEARED})
        self.copied_id = None
