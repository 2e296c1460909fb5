from fastapi import APIRouter, WebSocket

from core.broadcast import hub

router = APIRouter()


@router.websocket("/ws")
async def stock_updates(websocket: WebSocket):
    await hub.connect(websocket)
    try:
        # Clients only listen; inbound text or binary frames are ignored.
        while True:
            message = await websocket.receive()
            if message["type"] == "websocket.disconnect":
                break
    finally:
        hub.disconnect(websocket)
