"""
In-process real-time hub.

Connections are keyed by a server-generated connection id. Authenticated
users map to their most recent connection, and rooms (`chat:<room_id>`,
`user:<user_id>`) hold sets of connection ids. Everything lives on the single
event loop, so no locking is done.
"""

from __future__ import annotations

import logging
import uuid
from typing import Any

from fastapi import WebSocket

logger = logging.getLogger(__name__)


def chat_room(room_id: Any) -> str:
    return f"chat:{room_id}"


def user_room(user_id: Any) -> str:
    return f"user:{user_id}"


class RealtimeHub:
    def __init__(self) -> None:
        # user_id -> connection id
        self.connected_users: dict[str, str] = {}
        # connection id -> socket
        self.sockets: dict[str, WebSocket] = {}
        # room -> connection ids
        self.rooms: dict[str, set[str]] = {}

    async def connect(self, websocket: WebSocket) -> str:
        await websocket.accept()
        sid = uuid.uuid4().hex
        self.sockets[sid] = websocket
        logger.info("realtime_connected sid=%s total=%d", sid, len(self.sockets))
        return sid

    def authenticate(self, sid: str, user_id: str) -> None:
        self.connected_users[user_id] = sid
        self.join(sid, user_room(user_id))
        logger.info("realtime_authenticated sid=%s user_id=%s", sid, user_id)

    def join(self, sid: str, room: str) -> None:
        self.rooms.setdefault(room, set()).add(sid)

    def leave(self, sid: str, room: str) -> None:
        members = self.rooms.get(room)
        if members is None:
            return
        members.discard(sid)
        if not members:
            del self.rooms[room]

    def disconnect(self, sid: str) -> None:
        for user_id, user_sid in list(self.connected_users.items()):
            if user_sid == sid:
                del self.connected_users[user_id]
                break

        for room in list(self.rooms):
            self.leave(sid, room)

        self.sockets.pop(sid, None)
        logger.info("realtime_disconnected sid=%s total=%d", sid, len(self.sockets))

    def members(self, room: str) -> set[str]:
        return set(self.rooms.get(room, set()))

    async def send(self, sid: str, event: str, data: Any) -> bool:
        websocket = self.sockets.get(sid)
        if websocket is None:
            return False
        try:
            await websocket.send_json({"event": event, "data": data})
        except Exception as exc:
            logger.warning("realtime_send_failed sid=%s error=%s", sid, exc)
            return False
        return True

    async def emit(self, room: str, event: str, data: Any, *, skip_sid: str | None = None) -> int:
        """
        Send an event to every connection in a room.

        Connections that fail to receive are dropped from the hub. Returns the
        number of connections the event was delivered to.
        """
        sent = 0
        dead: list[str] = []
        for sid in self.members(room):
            if sid == skip_sid:
                continue
            if await self.send(sid, event, data):
                sent += 1
            else:
                dead.append(sid)

        for sid in dead:
            self.disconnect(sid)
        if dead:
            logger.info("realtime_pruned room=%s count=%d", room, len(dead))

        logger.debug("realtime_emit room=%s event=%s sent=%d", room, event, sent)
        return sent


hub = RealtimeHub()
