"""Copying selected alignment text to the clipboard."""
import asyncio
import itertools
import logging
from typing import Any, Awaitable, Callable, Optional, Protocol

from schemas import ClipboardWriteMessage

logger = logging.getLogger(__name__)


class ClipboardError(Exception):
    """A clipboard write was rejected or could not be performed."""


class Clipboard(Protocol):
    async def write_text(self, text: str) -> None: ...


CopyObserver = Callable[[str], Awaitable[None]]


class SelectionClipboardBridge:
    """
    Turns finished text selections into clipboard writes.

    Each non-empty selection is written verbatim and, once the write
    succeeds, `on_copy` is awaited exactly once with the copied text.
    Failures are logged and swallowed; copying must never break the view.
    """

    def __init__(self, clipboard: Clipboard, on_copy: CopyObserver):
        self.clipboard = clipboard
        self.on_copy = on_copy
        self._closed = False
        self._tasks: set[asyncio.Task] = set()

    @property
    def pending(self) -> int:
        return len(self._tasks)

    async def selection_finished(self, text: Optional[str]) -> bool:
        """Copy `text`; returns True if the copy succeeded and was announced."""
        if self._closed or not text:
            return False

        try:
            await self.clipboard.write_text(text)
        except Exception as e:
            logger.warning("Could not copy selection to clipboard: %s", e)
            return False

        if self._closed:
            logger.debug("Bridge closed while copying; dropping notification")
            return False

        try:
            await self.on_copy(text)
        except Exception as e:
            logger.warning("Copied selection but could not announce it: %s", e)
            return False
        return True

    def handle_selection_finished(self, text: Optional[str]) -> Optional[asyncio.Task]:
        """Start an independent copy attempt without waiting for it."""
        if self._closed or not text:
            return None
        task = asyncio.ensure_future(self.selection_finished(text))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    def close(self) -> None:
        """Stop reacting to selections and drop any copy still in flight."""
        self._closed = True
        for task in list(self._tasks):
            task.cancel()


class RemoteClipboard:
    """
    Clipboard living on the other end of a message channel (the browser).

    A write sends a `clipboard_write` request and waits for the matching
    result, which the channel owner feeds back through `resolve`.
    """

    def __init__(self, send: Callable[[dict[str, Any]], Awaitable[None]]):
        self._send = send
        self._ids = itertools.count(1)
        self._pending: dict[int, asyncio.Future] = {}

    async def write_text(self, text: str) -> None:
        request_id = next(self._ids)
        future = asyncio.get_running_loop().create_future()
        self._pending[request_id] = future
        try:
            await self._send(ClipboardWriteMessage(id=request_id, text=text).model_dump())
            await future
        finally:
            self._pending.pop(request_id, None)

    def resolve(self, request_id: int, ok: bool, error: Optional[str] = None) -> None:
        future = self._pending.get(request_id)
        if future is None or future.done():
            logger.debug("Ignoring result for unknown clipboard request %d", request_id)
            return
        if ok:
            future.set_result(None)
        else:
            future.set_exception(ClipboardError(error or "clipboard write rejected"))

    def cancel_all(self) -> None:
        for future in self._pending.values():
            future.cancel()
