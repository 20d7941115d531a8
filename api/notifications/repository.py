"""
Per-user notification persistence (raw SQL).
"""

from __future__ import annotations

from uuid import UUID

from core import db
from core.listing import ListQuery, Page


async def unread_count(user_id: str) -> int:
    row = await db.fetch_one(
        "SELECT COUNT(*) AS count FROM notifications WHERE user_id = $1 AND is_read = false",
        user_id,
    )
    return int(row["count"]) if row else 0


async def mark_all_read(user_id: str) -> None:
    await db.execute(
        "UPDATE notifications SET is_read = true, read_at = NOW() WHERE user_id = $1 AND is_read = false",
        user_id,
    )


async def list_notifications(user_id: str, *, is_read: bool | None, page: Page) -> dict:
    query = ListQuery("SELECT * FROM notifications WHERE user_id = $1", user_id)
    query.where("is_read", is_read)
    return await query.fetch_page(order_by="created_at DESC", page=page)


async def mark_read(notification_id: UUID, user_id: str) -> dict | None:
    return await db.fetch_one(
        """
        UPDATE notifications
        SET is_read = true, read_at = NOW()
        WHERE id = $1 AND user_id = $2
        RETURNING *
        """,
        notification_id,
        user_id,
    )
