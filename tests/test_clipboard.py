"""Tests for the selection-to-clipboard bridge."""

from __future__ import annotations

import asyncio
import logging

import pytest

from clipboard import ClipboardError, RemoteClipboard, SelectionClipboardBridge


class _RecordingClipboard:
    """Clipboard that records writes and optionally fails them."""

    def __init__(self, error: Exception | None = None) -> None:
        self.writes: list[str] = []
        self._error = error

    async def write_text(self, text: str) -> None:
        if self._error is not None:
            raise self._error
        self.writes.append(text)


class _GatedClipboard:
    """Clipboard whose writes complete only when released."""

    def __init__(self) -> None:
        self.writes: list[str] = []
        self.release = asyncio.Event()

    async def write_text(self, text: str) -> None:
        self.writes.append(text)
        await self.release.wait()


def _observer():
    copied: list[str] = []

    async def on_copy(text: str) -> None:
        copied.append(text)

    return copied, on_copy


def test_selection_is_copied_and_announced_once():
    clipboard = _RecordingClipboard()
    copied, on_copy = _observer()
    bridge = SelectionClipboardBridge(clipboard, on_copy)

    assert asyncio.run(bridge.selection_finished("RND"))
    assert clipboard.writes == ["RND"]
    assert copied == ["RND"]


def test_selected_text_is_passed_through_verbatim():
    clipboard = _RecordingClipboard()
    copied, on_copy = _observer()
    bridge = SelectionClipboardBridge(clipboard, on_copy)

    text = "ARND\nAR\nNE"
    asyncio.run(bridge.selection_finished(text))
    assert clipboard.writes == [text]


@pytest.mark.parametrize("text", ["", None])
def test_empty_selection_is_a_no_op(text):
    clipboard = _RecordingClipboard()
    copied, on_copy = _observer()
    bridge = SelectionClipboardBridge(clipboard, on_copy)

    assert not asyncio.run(bridge.selection_finished(text))
    assert bridge.handle_selection_finished(text) is None
    assert clipboard.writes == []
    assert copied == []


def test_failed_write_is_logged_not_raised(caplog):
    clipboard = _RecordingClipboard(error=ClipboardError("permission denied"))
    copied, on_copy = _observer()
    bridge = SelectionClipboardBridge(clipboard, on_copy)

    with caplog.at_level(logging.WARNING, logger="clipboard"):
        assert not asyncio.run(bridge.selection_finished("ARN"))

    assert copied == []
    assert "permission denied" in caplog.text


def test_unexpected_clipboard_errors_are_contained():
    clipboard = _RecordingClipboard(error=RuntimeError("no clipboard"))
    copied, on_copy = _observer()
    bridge = SelectionClipboardBridge(clipboard, on_copy)

    assert not asyncio.run(bridge.selection_finished("ARN"))
    assert copied == []


def test_failing_observer_is_contained(caplog):
    clipboard = _RecordingClipboard()

    async def on_copy(text: str) -> None:
        raise RuntimeError("socket gone")

    bridge = SelectionClipboardBridge(clipboard, on_copy)

    with caplog.at_level(logging.WARNING, logger="clipboard"):
        assert not asyncio.run(bridge.selection_finished("ARN"))

    assert clipboard.writes == ["ARN"]
    assert "socket gone" in caplog.text


def test_repeated_gestures_copy_independently():
    async def scenario():
        clipboard = _GatedClipboard()
        copied, on_copy = _observer()
        bridge = SelectionClipboardBridge(clipboard, on_copy)

        first = bridge.handle_selection_finished("AR")
        second = bridge.handle_selection_finished("AR")
        await asyncio.sleep(0)
        assert clipboard.writes == ["AR", "AR"]
        assert bridge.pending == 2

        clipboard.release.set()
        assert await asyncio.gather(first, second) == [True, True]
        return copied, bridge

    copied, bridge = asyncio.run(scenario())
    assert copied == ["AR", "AR"]
    assert bridge.pending == 0


def test_no_notification_after_close():
    async def scenario():
        clipboard = _GatedClipboard()
        copied, on_copy = _observer()
        bridge = SelectionClipboardBridge(clipboard, on_copy)

        direct = asyncio.ensure_future(bridge.selection_finished("ARN"))
        scheduled = bridge.handle_selection_finished("ND")
        await asyncio.sleep(0)

        bridge.close()
        clipboard.release.set()
        assert await direct is False
        with pytest.raises(asyncio.CancelledError):
            await scheduled

        assert bridge.handle_selection_finished("ARN") is None
        return copied

    assert asyncio.run(scenario()) == []


def test_remote_clipboard_round_trip():
    async def scenario():
        sent = []

        async def send(payload):
            sent.append(payload)

        clipboard = RemoteClipboard(send)
        ok = asyncio.ensure_future(clipboard.write_text("ARN"))
        rejected = asyncio.ensure_future(clipboard.write_text("ND"))
        await asyncio.sleep(0)

        assert sent == [
            {"type": "clipboard_write", "id": 1, "text": "ARN"},
            {"type": "clipboard_write", "id": 2, "text": "ND"},
        ]
        clipboard.resolve(2, ok=False, error="denied")
        clipboard.resolve(1, ok=True)
        clipboard.resolve(1, ok=True)
        clipboard.resolve(99, ok=True)

        await ok
        with pytest.raises(ClipboardError, match="denied"):
            await rejected

    asyncio.run(scenario())


def test_remote_clipboard_cancel_all():
    async def scenario():
        async def send(payload):
            pass

        clipboard = RemoteClipboard(send)
        write = asyncio.ensure_future(clipboard.write_text("ARN"))
        await asyncio.sleep(0)
        clipboard.cancel_all()
        with pytest.raises(asyncio.CancelledError):
            await write

    asyncio.run(scenario())
