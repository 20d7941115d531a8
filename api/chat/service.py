"""
Chat business logic: room membership and message fan-out.
"""

from __future__ import annotations

import logging
from uuid import UUID

from fastapi import HTTPException, status
from fastapi.encoders import jsonable_encoder

from core import db
from core.listing import Page
from core.validation import not_found
from realtime.manager import chat_room, hub

from . import repository, schemas

logger = logging.getLogger(__name__)


def _not_a_participant() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_403_FORBIDDEN,
        detail="You are not a participant in this room",
    )


async def get_room(room_id: UUID, current_user: dict) -> dict:
    room = await repository.get_room_for_user(room_id, current_user["id"])
    if room is None:
        raise not_found("Chat room")
    room["participants"] = await repository.list_participants(room_id)
    return room


async def create_room(payload: schemas.ChatRoomCreate, current_user: dict) -> dict:
    creator_id = current_user["id"]
    async with db.transaction() as conn:
        room = await repository.insert_room(conn, payload, created_by=creator_id)
        await repository.insert_participant(conn, room["id"], creator_id)
        for user_id in payload.participant_ids or []:
            if str(user_id) == str(creator_id):
                continue
            await repository.insert_participant(conn, room["id"], user_id)
    return room


async def list_messages(room_id: UUID, current_user: dict, *, page: Page) -> list[dict]:
    if not await repository.is_participant(room_id, current_user["id"]):
        raise _not_a_participant()
    return await repository.list_messages(room_id, page=page)


async def post_message(room_id: UUID, payload: schemas.ChatMessageCreate, current_user: dict) -> dict:
    if not await repository.is_participant(room_id, current_user["id"]):
        raise _not_a_participant()

    message = await repository.insert_message(room_id, payload, sender_id=current_user["id"])
    sent = await hub.emit(chat_room(room_id), "new_message", jsonable_encoder(message))
    logger.debug("chat_message_posted room_id=%s delivered=%d", room_id, sent)
    return message
