"""
Chat room, participant, and message persistence (raw SQL).
"""

from __future__ import annotations

from uuid import UUID

import asyncpg

from core import db
from core.listing import Page

from . import schemas

# Scalar subqueries in the select list, so this listing is not counted.
ROOMS_FOR_USER = """
    SELECT cr.*,
           (SELECT message_body FROM chat_messages cm
             WHERE cm.chat_room_id = cr.id ORDER BY cm.created_at DESC LIMIT 1) AS last_message,
           (SELECT created_at FROM chat_messages cm
             WHERE cm.chat_room_id = cr.id ORDER BY cm.created_at DESC LIMIT 1) AS last_message_at
    FROM chat_rooms cr
    JOIN chat_room_participants crp ON crp.chat_room_id = cr.id
    WHERE crp.user_id = $1
    ORDER BY COALESCE(
        (SELECT created_at FROM chat_messages cm
          WHERE cm.chat_room_id = cr.id ORDER BY cm.created_at DESC LIMIT 1),
        cr.created_at
    ) DESC
    LIMIT $2 OFFSET $3
"""


async def list_rooms_for_user(user_id: str, *, page: Page) -> list[dict]:
    return await db.fetch_all(ROOMS_FOR_USER, user_id, page.limit, page.offset)


async def get_room_for_user(room_id: UUID, user_id: str) -> dict | None:
    return await db.fetch_one(
        """
        SELECT cr.*
        FROM chat_rooms cr
        JOIN chat_room_participants crp ON crp.chat_room_id = cr.id
        WHERE cr.id = $1 AND crp.user_id = $2
        """,
        room_id,
        user_id,
    )


async def list_participants(room_id: UUID) -> list[dict]:
    return await db.fetch_all(
        """
        SELECT crp.*, u.first_name, u.last_name, u.email
        FROM chat_room_participants crp
        JOIN app_users u ON u.id = crp.user_id
        WHERE crp.chat_room_id = $1
        """,
        room_id,
    )


async def is_participant(room_id: UUID, user_id: str) -> bool:
    row = await db.fetch_one(
        "SELECT id FROM chat_room_participants WHERE chat_room_id = $1 AND user_id = $2",
        room_id,
        user_id,
    )
    return row is not None


async def insert_room(conn: asyncpg.Connection, payload: schemas.ChatRoomCreate, *, created_by: str) -> dict:
    row = await db.fetch_one_in(
        conn,
        """
        INSERT INTO chat_rooms (property_id, room_type, subject, status, created_by)
        VALUES ($1, $2, $3, $4, $5)
        RETURNING *
        """,
        payload.property_id,
        payload.room_type or "general",
        payload.subject or None,
        "active",
        created_by,
    )
    if row is None:
        raise RuntimeError("Failed to create chat room.")
    return row


async def insert_participant(conn: asyncpg.Connection, room_id: UUID, user_id: str) -> None:
    await db.execute_in(
        conn,
        """
        INSERT INTO chat_room_participants (chat_room_id, user_id)
        VALUES ($1, $2)
        ON CONFLICT DO NOTHING
        """,
        room_id,
        user_id,
    )


async def update_room(room_id: UUID, payload: schemas.ChatRoomUpdate) -> dict | None:
    return await db.fetch_one(
        """
        UPDATE chat_rooms
        SET subject = COALESCE($1, subject),
            room_type = COALESCE($2, room_type),
            status = COALESCE($3, status),
            updated_at = NOW()
        WHERE id = $4
        RETURNING *
        """,
        payload.subject,
        payload.room_type,
        payload.status,
        room_id,
    )


async def delete_room(room_id: UUID) -> dict | None:
    return await db.fetch_one("DELETE FROM chat_rooms WHERE id = $1 RETURNING id", room_id)


async def list_messages(room_id: UUID, *, page: Page) -> list[dict]:
    return await db.fetch_all(
        """
        SELECT cm.*, u.first_name, u.last_name, u.email
        FROM chat_messages cm
        JOIN app_users u ON u.id = cm.sender_id
        WHERE cm.chat_room_id = $1
        ORDER BY cm.created_at ASC
        LIMIT $2 OFFSET $3
        """,
        room_id,
        page.limit,
        page.offset,
    )


async def insert_message(room_id: UUID, payload: schemas.ChatMessageCreate, *, sender_id: str) -> dict:
    row = await db.fetch_one(
        """
        INSERT INTO chat_messages (chat_room_id, sender_id, message_body, message_type, attachment_document_id)
        VALUES ($1, $2, $3, $4, $5)
        RETURNING *
        """,
        room_id,
        sender_id,
        payload.message_body,
        payload.message_type or "text",
        payload.attachment_document_id,
    )
    if row is None:
        raise RuntimeError("Failed to create chat message.")
    return row
