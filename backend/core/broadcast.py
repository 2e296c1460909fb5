"""
Live stock updates over WebSocket.

Every connected client gets ``{"event": "stock-update", "data": product}``
after each committed movement. Delivery is best effort: no replay, no
acknowledgement, and a client whose send fails is dropped.
"""
import asyncio
import logging
from typing import Dict, Set

from fastapi import WebSocket

logger = logging.getLogger(__name__)

STOCK_UPDATE_EVENT = "stock-update"


class StockUpdateHub:
    def __init__(self):
        self._clients: Set[WebSocket] = set()
        self._pending: Set[asyncio.Task] = set()

    @property
    def client_count(self) -> int:
        return len(self._clients)

    async def connect(self, websocket: WebSocket) -> None:
        await websocket.accept()
        self._clients.add(websocket)
        logger.info("Client connected (%d live)", len(self._clients))

    def disconnect(self, websocket: WebSocket) -> None:
        if websocket in self._clients:
            self._clients.discard(websocket)
            logger.info("Client disconnected (%d live)", len(self._clients))

    async def broadcast(self, message: Dict) -> None:
        clients = list(self._clients)
        results = await asyncio.gather(
            *(ws.send_json(message) for ws in clients), return_exceptions=True
        )
        for ws, result in zip(clients, results):
            if isinstance(result, Exception):
                logger.warning("Dropping client after failed send: %s", result)
                self.disconnect(ws)

    def notify(self, product: Dict) -> None:
        """Schedule a stock-update broadcast without waiting for it."""
        if not self._clients:
            return
        task = asyncio.get_running_loop().create_task(
            self.broadcast({"event": STOCK_UPDATE_EVENT, "data": product})
        )
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)


hub = StockUpdateHub()
