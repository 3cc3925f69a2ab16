"""WebSocket stream of inbox events."""

import asyncio
import json
from fastapi import APIRouter, WebSocket, WebSocketDisconnect

from ..services import Event
from ..utils.logger import get_app_logger
from . import dependencies

router = APIRouter(prefix="/api", tags=["Events"])

logger = get_app_logger("api")


@router.websocket("/events")
async def events_endpoint(websocket: WebSocket):
    """
    Push every published event to the client as JSON.

    The client may send ``{"type": "ping"}`` and gets ``{"type": "pong"}`` back.

    Args:
        websocket: WebSocket connection
    """
    await websocket.accept()

    bus = dependencies.event_bus
    if bus is None:
        await websocket.send_json({"type": "error", "content": "Event bus not initialized"})
        await websocket.close()
        return

    queue: "asyncio.Queue[Event]" = asyncio.Queue()
    unsubscribe = bus.subscribe(queue.put_nowait)
    logger.info(f"Event stream opened ({bus.subscriber_count} subscribers)")

    async def forward_events():
        while True:
            event = await queue.get()
            await websocket.send_json(event.to_dict())

    forwarder = asyncio.create_task(forward_events())

    try:
        await websocket.send_json({"type": "connected"})

        while True:
            data = await websocket.receive_text()
            try:
                message = json.loads(data)
            except json.JSONDecodeError:
                await websocket.send_json({"type": "error", "content": "Invalid JSON message"})
                continue

            if isinstance(message, dict) and message.get("type") == "ping":
                await websocket.send_json({"type": "pong"})
            else:
                await websocket.send_json({"type": "error", "content": "Unknown message type"})

    except WebSocketDisconnect:
        logger.info("Event stream disconnected")

    finally:
        unsubscribe()
        forwarder.cancel()
        try:
            await forwarder
        except (asyncio.CancelledError, WebSocketDisconnect, RuntimeError):
            pass
        logger.info("Event stream closed")
