"""One live alignment view per websocket connection."""
import logging
from typing import Any, Optional

from fastapi import WebSocket, WebSocketDisconnect
from pydantic import TypeAdapter, ValidationError

from alignment import render_alignment
from clipboard import RemoteClipboard, SelectionClipboardBridge
from layout import CELL_WIDTH, LayoutObserver
from schemas import (
    AlignmentView, ClientMessage, ClipboardResultMessage, CopiedMessage,
    ErrorMessage, ResizeMessage, SelectionMessage, SequencesMessage, ViewMessage,
)

logger = logging.getLogger(__name__)

_client_message = TypeAdapter(ClientMessage)


class AlignmentSession:
    """
    Drives layout, rendering and copying for a single connected client.

    Every resize or new pair of sequences re-renders the whole view from the
    current inputs and pushes it, so the client always ends up showing the
    latest row capacity.
    """

    def __init__(self, websocket: WebSocket, cell_width: float = CELL_WIDTH):
        self.websocket = websocket
        self.seq1 = ""
        self.seq2 = ""
        self.view = AlignmentView()
        self.layout = LayoutObserver(cell_width)
        self.layout.subscribe(self._relayout)
        self.clipboard = RemoteClipboard(self._send)
        self.bridge = SelectionClipboardBridge(self.clipboard, self._notify_copied)

    async def run(self) -> None:
        await self.websocket.accept()
        try:
            while True:
                data = await self.websocket.receive_text()
                await self.handle(data)
        except WebSocketDisconnect:
            logger.debug("Alignment session disconnected")
        finally:
            self.close()

    async def handle(self, data: str) -> None:
        try:
            message = _client_message.validate_json(data)
        except ValidationError as e:
            logger.info("Rejected session message: %s", e.errors(include_url=False))
            await self._send_error(e)
            return

        if isinstance(message, SequencesMessage):
            self.seq1, self.seq2 = message.seq1, message.seq2
            self._relayout(self.layout.capacity)
            await self._send_view()
        elif isinstance(message, ResizeMessage):
            self.layout.measure(message.width)
            await self._send_view()
        elif isinstance(message, SelectionMessage):
            self.bridge.handle_selection_finished(message.text)
        elif isinstance(message, ClipboardResultMessage):
            self.clipboard.resolve(message.id, message.ok, message.error)

    def close(self) -> None:
        self.bridge.close()
        self.clipboard.cancel_all()

    def _relayout(self, capacity: Optional[int]) -> None:
        self.view = render_alignment(self.seq1, self.seq2, capacity)

    async def _send(self, payload: dict[str, Any]) -> None:
        await self.websocket.send_json(payload)

    async def _send_view(self) -> None:
        await self._send(ViewMessage(**self.view.model_dump()).model_dump())

    async def _send_error(self, error: ValidationError) -> None:
        detail = "; ".join(err["msg"] for err in error.errors())
        await self._send(ErrorMessage(detail=detail).model_dump())

    async def _notify_copied(self, text: str) -> None:
        await self._send(CopiedMessage(text=text).model_dump())
