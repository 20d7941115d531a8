"""
WebSocket endpoint for chat fan-out.

Frames in both directions are JSON objects `{"event": <name>, "data": <payload>}`.

Client events:
    - authenticate: data is an access token
    - join_room / leave_room: data is a chat room id
    - chat_message: data is {"roomId", "message"}; relayed as `new_message`
    - typing: data is {"roomId", "userName"}; relayed as `user_typing` to others

Server events: authenticated, new_message, user_typing, error.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from fastapi import APIRouter, WebSocket, WebSocketDisconnect

from auth import security

from .manager import chat_room, hub

logger = logging.getLogger(__name__)

router = APIRouter()


async def _authenticate(sid: str, data: Any) -> None:
    try:
        payload = security.decode_access_token(str(data or ""))
        user_id = security.user_id_from_claims(payload)
    except security.AuthSecurityError as exc:
        await hub.send(sid, "error", {"message": str(exc)})
        return
    hub.authenticate(sid, user_id)
    await hub.send(sid, "authenticated", {"userId": user_id})


async def dispatch(sid: str, event: Any, data: Any) -> None:
    if event == "authenticate":
        await _authenticate(sid, data)
    elif event == "join_room":
        hub.join(sid, chat_room(data))
    elif event == "leave_room":
        hub.leave(sid, chat_room(data))
    elif event in ("chat_message", "typing") and not isinstance(data, dict):
        await hub.send(sid, "error", {"message": f"Invalid payload for {event}"})
    elif event == "chat_message":
        await hub.emit(chat_room(data.get("roomId")), "new_message", data.get("message"))
    elif event == "typing":
        await hub.emit(chat_room(data.get("roomId")), "user_typing", data, skip_sid=sid)
    else:
        await hub.send(sid, "error", {"message": f"Unknown event: {event}"})


async def _receive_frame(websocket: WebSocket) -> dict | None:
    """
    Next decoded frame, or None when it is not a JSON object in a text frame.
    """
    message = await websocket.receive()
    if message["type"] == "websocket.disconnect":
        raise WebSocketDisconnect(message.get("code", 1000))
    raw = message.get("text")
    if raw is None:
        return None
    try:
        frame = json.loads(raw)
    except ValueError:
        return None
    return frame if isinstance(frame, dict) else None


@router.websocket("/ws")
async def realtime_websocket(websocket: WebSocket):
    sid = await hub.connect(websocket)
    try:
        while True:
            frame = await _receive_frame(websocket)
            if frame is None:
                await hub.send(sid, "error", {"message": "Invalid frame"})
                continue
            await dispatch(sid, frame.get("event"), frame.get("data"))
    except WebSocketDisconnect:
        logger.info("realtime_client_left sid=%s", sid)
    finally:
        hub.disconnect(sid)
