"""
Inspection persistence (raw SQL).
"""

from __future__ import annotations

from uuid import UUID

from core import db
from core.listing import ListQuery, Page

from . import schemas

INSPECTION_SELECT = """
    SELECT i.*, p.title AS property_name,
           u.first_name AS inspector_first_name, u.last_name AS inspector_last_name
    FROM inspections i
    JOIN properties p ON p.id = i.property_id
    LEFT JOIN app_users u ON u.id = i.inspector_id
"""


async def list_inspections(
    *,
    property_id: UUID | None,
    inspection_status: str | None,
    inspection_type: str | None,
    page: Page,
) -> dict:
    query = ListQuery(f"{INSPECTION_SELECT} WHERE 1=1")
    query.where("i.property_id", property_id)
    query.where("i.status", inspection_status)
    query.where("i.inspection_type", inspection_type)
    return await query.fetch_page(order_by="i.scheduled_at DESC", page=page)


async def get_inspection(inspection_id: UUID) -> dict | None:
    return await db.fetch_one(f"{INSPECTION_SELECT} WHERE i.id = $1", inspection_id)


async def create_inspection(payload: schemas.InspectionCreate) -> dict:
    row = await db.fetch_one(
        """
        INSERT INTO inspections (property_id, inspection_type, scheduled_at, status, inspector_id, summary)
        VALUES ($1, $2, $3, $4, $5, $6)
        RETURNING *
        """,
        payload.property_id,
        payload.inspection_type,
        payload.scheduled_at,
        payload.status or "scheduled",
        payload.inspector_id,
        payload.summary or None,
    )
    if row is None:
        raise RuntimeError("Failed to create inspection.")
    return row


async def update_inspection(inspection_id: UUID, payload: schemas.InspectionUpdate) -> dict | None:
    return await db.fetch_one(
        """
        UPDATE inspections
        SET inspection_type = COALESCE($1, inspection_type),
            scheduled_at = COALESCE($2, scheduled_at),
            completed_at = COALESCE($3, completed_at),
            status = COALESCE($4, status),
            inspector_id = COALESCE($5, inspector_id),
            summary = COALESCE($6, summary),
            risk_level = COALESCE($7, risk_level),
            updated_at = NOW()
        WHERE id = $8
        RETURNING *
        """,
        payload.inspection_type,
        payload.scheduled_at,
        payload.completed_at,
        payload.status,
        payload.inspector_id,
        payload.summary,
        payload.risk_level,
        inspection_id,
    )


async def delete_inspection(inspection_id: UUID) -> dict | None:
    return await db.fetch_one("DELETE FROM inspections WHERE id = $1 RETURNING id", inspection_id)


async def list_media(inspection_id: UUID) -> list[dict]:
    return await db.fetch_all(
        """
        SELECT * FROM inspection_media
        WHERE inspection_id = $1
        ORDER BY created_at DESC
        """,
        inspection_id,
    )


async def add_media(inspection_id: UUID, payload: schemas.MediaCreate) -> dict:
    row = await db.fetch_one(
        """
        INSERT INTO inspection_media (inspection_id, storage_key, media_type, caption, captured_at,
                                      latitude, longitude)
        VALUES ($1, $2, $3, $4, $5, $6, $7)
        RETURNING *
        """,
        inspection_id,
        payload.storage_key,
        payload.media_type or "photo",
        payload.caption or None,
        payload.captured_at,
        payload.latitude,
        payload.longitude,
    )
    if row is None:
        raise RuntimeError("Failed to add inspection media.")
    return row
