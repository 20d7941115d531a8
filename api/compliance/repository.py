"""
Compliance check and audit cycle persistence (raw SQL).
"""

from __future__ import annotations

from uuid import UUID

from core import db
from core.listing import ListQuery, Page

from . import schemas

CHECK_SELECT = """
    SELECT cc.*, p.title AS property_title
    FROM compliance_checks cc
    LEFT JOIN properties p ON p.id = cc.property_id
"""


async def list_audit_cycles(*, page: Page) -> list[dict]:
    return await db.fetch_all(
        """
        SELECT * FROM audit_cycles
        ORDER BY created_at DESC
        LIMIT $1 OFFSET $2
        """,
        page.limit,
        page.offset,
    )


async def get_audit_cycle(cycle_id: UUID) -> dict | None:
    return await db.fetch_one("SELECT * FROM audit_cycles WHERE id = $1", cycle_id)


async def create_audit_cycle(payload: schemas.AuditCycleCreate) -> dict:
    row = await db.fetch_one(
        """
        INSERT INTO audit_cycles (property_id, audit_year, audit_label, property_type_checklist,
                                  status, scheduled_start, scheduled_end, assigned_to, notes)
        VALUES ($1, $2, $3, $4, $5, $6, $7, $8, $9)
        RETURNING *
        """,
        payload.property_id,
        payload.audit_year,
        payload.audit_label,
        payload.property_type_checklist or None,
        payload.status or "scheduled",
        payload.scheduled_start,
        payload.scheduled_end,
        payload.assigned_to,
        payload.notes or None,
    )
    if row is None:
        raise RuntimeError("Failed to create audit cycle.")
    return row


async def list_checks(
    *,
    property_id: UUID | None,
    check_status: str | None,
    check_type: str | None,
    page: Page,
) -> dict:
    query = ListQuery(f"{CHECK_SELECT} WHERE 1=1")
    query.where("cc.property_id", property_id)
    query.where("cc.status", check_status)
    query.where("cc.check_type", check_type)
    return await query.fetch_page(order_by="cc.due_date ASC", page=page)


async def get_check(check_id: UUID) -> dict | None:
    return await db.fetch_one(f"{CHECK_SELECT} WHERE cc.id = $1", check_id)


async def create_check(payload: schemas.ComplianceCheckCreate) -> dict:
    row = await db.fetch_one(
        """
        INSERT INTO compliance_checks (property_id, check_type, status, due_date, completed_at,
                                       assigned_to, notes, audit_cycle_id)
        VALUES ($1, $2, $3, $4, $5, $6, $7, $8)
        RETURNING *
        """,
        payload.property_id,
        payload.check_type,
        payload.status or "pending",
        payload.due_date,
        payload.completed_at,
        payload.assigned_to,
        payload.notes or None,
        payload.audit_cycle_id,
    )
    if row is None:
        raise RuntimeError("Failed to create compliance check.")
    return row


async def update_check(check_id: UUID, payload: schemas.ComplianceCheckUpdate) -> dict | None:
    return await db.fetch_one(
        """
        UPDATE compliance_checks
        SET check_type = COALESCE($1, check_type),
            status = COALESCE($2, status),
            due_date = COALESCE($3, due_date),
            completed_at = COALESCE($4, completed_at),
            assigned_to = COALESCE($5, assigned_to),
            notes = COALESCE($6, notes),
            audit_cycle_id = COALESCE($7, audit_cycle_id),
            updated_at = NOW()
        WHERE id = $8
        RETURNING *
        """,
        payload.check_type,
        payload.status,
        payload.due_date,
        payload.completed_at,
        payload.assigned_to,
        payload.notes,
        payload.audit_cycle_id,
        check_id,
    )


async def delete_check(check_id: UUID) -> dict | None:
    return await db.fetch_one("DELETE FROM compliance_checks WHERE id = $1 RETURNING id", check_id)
