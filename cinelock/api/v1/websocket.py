"""WebSocket API for the live simulation log."""

import asyncio
import json
import logging

from fastapi import APIRouter, WebSocket, WebSocketDisconnect

from cinelock.api.v1.dependencies import SimulationDep
from cinelock.schemas.log import LogEntryResponse, WSMessage, WSMessageType

router = APIRouter()
logger = logging.getLogger(__name__)

# Seconds to wait for a client message before flushing new entries
POLL_INTERVAL_SECONDS = 0.25
KEEPALIVE_SECONDS = 30.0


@router.websocket("/logs")
async def websocket_logs(websocket: WebSocket, simulation: SimulationDep):
    """
    WebSocket endpoint streaming the simulation log.

    Messages:
    - backlog: current log contents, sent once on connect
    - log_entry: every entry appended afterwards
    - pong: reply to a {"type": "ping"} client message
    - keepalive: sent when the log has been quiet for a while
    """
    await websocket.accept()

    queue = simulation.event_log.subscribe()
    try:
        await websocket.send_text(
            WSMessage(
                type=WSMessageType.BACKLOG,
                data=[
                    LogEntryResponse.model_validate(e).model_dump(mode="json")
                    for e in simulation.event_log.snapshot()
                ],
            ).model_dump_json()
        )

        idle = 0.0
        while True:
            try:
                data = await asyncio.wait_for(
                    websocket.receive_text(),
                    timeout=POLL_INTERVAL_SECONDS,
                )
                client_msg = json.loads(data)
                if isinstance(client_msg, dict) and client_msg.get("type") == "ping":
                    await websocket.send_text(
                        WSMessage(type=WSMessageType.PONG).model_dump_json()
                    )
            except asyncio.TimeoutError:
                idle += POLL_INTERVAL_SECONDS
            except json.JSONDecodeError:
                logger.warning("Ignoring malformed WebSocket message")

            while not queue.empty():
                entry = queue.get_nowait()
                await websocket.send_text(
                    WSMessage(
                        type=WSMessageType.LOG_ENTRY,
                        data=LogEntryResponse.model_validate(entry).model_dump(
                            mode="json"
                        ),
                    ).model_dump_json()
                )
                idle = 0.0

            if idle >= KEEPALIVE_SECONDS:
                await websocket.send_text(
                    WSMessage(type=WSMessageType.KEEPALIVE).model_dump_json()
                )
                idle = 0.0

    except WebSocketDisconnect:
        pass
    finally:
        simulation.event_log.unsubscribe(queue)
