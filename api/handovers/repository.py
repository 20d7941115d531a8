"""
Service handover and checklist item persistence (raw SQL).
"""

from __future__ import annotations

from uuid import UUID

from core import db
from core.listing import ListQuery, Page

from . import schemas

HANDOVER_SELECT = """
    SELECT sh.*, p.title AS property_title
    FROM service_handovers sh
    LEFT JOIN properties p ON p.id = sh.property_id
"""


async def list_handovers(*, property_id: UUID | None, handover_status: str | None, page: Page) -> dict:
    query = ListQuery(f"{HANDOVER_SELECT} WHERE 1=1")
    query.where("sh.property_id", property_id)
    query.where("sh.status", handover_status)
    return await query.fetch_page(order_by="sh.created_at DESC", page=page)


async def get_handover(handover_id: UUID) -> dict | None:
    return await db.fetch_one(f"{HANDOVER_SELECT} WHERE sh.id = $1", handover_id)


async def create_handover(payload: schemas.HandoverCreate, *, initiated_by: str) -> dict:
    row = await db.fetch_one(
        """
        INSERT INTO service_handovers (property_id, subscription_id, initiated_by, handled_by, handover_type,
                                       status, target_completion_date, notes, cancellation_reason)
        VALUES ($1, $2, $3, $4, $5, $6, $7, $8, $9)
        RETURNING *
        """,
        payload.property_id,
        payload.subscription_id,
        initiated_by,
        payload.handled_by,
        payload.handover_type,
        payload.status or "initiated",
        payload.target_completion_date,
        payload.notes or None,
        payload.cancellation_reason or None,
    )
    if row is None:
        raise RuntimeError("Failed to create handover.")
    return row


async def update_handover(handover_id: UUID, payload: schemas.HandoverUpdate) -> dict | None:
    return await db.fetch_one(
        """
        UPDATE service_handovers
        SET status = COALESCE($1, status),
            handled_by = COALESCE($2, handled_by),
            target_completion_date = COALESCE($3, target_completion_date),
            completed_at = COALESCE($4, completed_at),
            notes = COALESCE($5, notes),
            cancellation_reason = COALESCE($6, cancellation_reason),
            updated_at = NOW()
        WHERE id = $7
        RETURNING *
        """,
        payload.status,
        payload.handled_by,
        payload.target_completion_date,
        payload.completed_at,
        payload.notes,
        payload.cancellation_reason,
        handover_id,
    )


async def delete_handover(handover_id: UUID) -> dict | None:
    return await db.fetch_one("DELETE FROM service_handovers WHERE id = $1 RETURNING id", handover_id)


async def list_items(handover_id: UUID) -> list[dict]:
    return await db.fetch_all(
        """
        SELECT * FROM handover_items
        WHERE handover_id = $1
        ORDER BY created_at ASC
        """,
        handover_id,
    )


async def add_item(handover_id: UUID, payload: schemas.HandoverItemFields) -> dict:
    row = await db.fetch_one(
        """
        INSERT INTO handover_items (handover_id, item_type, description, document_id, status, completed_at,
                                    completed_by, notes)
        VALUES ($1, $2, $3, $4, $5, $6, $7, $8)
        RETURNING *
        """,
        handover_id,
        payload.item_type,
        payload.description or None,
        payload.document_id,
        payload.status or "pending",
        payload.completed_at,
        payload.completed_by,
        payload.notes or None,
    )
    if row is None:
        raise RuntimeError("Failed to add handover item.")
    return row


async def update_item(item_id: UUID, payload: schemas.HandoverItemFields) -> dict | None:
    return await db.fetch_one(
        """
        UPDATE handover_items
        SET item_type = COALESCE($1, item_type),
            description = COALESCE($2, description),
            document_id = COALESCE($3, document_id),
            status = COALESCE($4, status),
            completed_at = COALESCE($5, completed_at),
            completed_by = COALESCE($6, completed_by),
            notes = COALESCE($7, notes),
            updated_at = NOW()
        WHERE id = $8
        RETURNING *
        """,
        payload.item_type,
        payload.description,
        payload.document_id,
        payload.status,
        payload.completed_at,
        payload.completed_by,
        payload.notes,
        item_id,
    )
