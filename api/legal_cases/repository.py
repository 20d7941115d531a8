"""
Legal case persistence (raw SQL).
"""

from __future__ import annotations

from uuid import UUID

from core import db
from core.listing import ListQuery, Page

from . import schemas

LEGAL_CASE_SELECT = """
    SELECT lc.*, p.title AS property_name
    FROM legal_cases lc
    LEFT JOIN properties p ON p.id = lc.property_id
"""


async def list_legal_cases(
    *,
    property_id: UUID | None,
    case_status: str | None,
    case_type: str | None,
    page: Page,
) -> dict:
    query = ListQuery(f"{LEGAL_CASE_SELECT} WHERE 1=1")
    query.where("lc.property_id", property_id)
    query.where("lc.status", case_status)
    query.where("lc.case_type", case_type)
    return await query.fetch_page(order_by="lc.created_at DESC", page=page)


async def get_legal_case(case_id: UUID) -> dict | None:
    return await db.fetch_one(f"{LEGAL_CASE_SELECT} WHERE lc.id = $1", case_id)


async def create_legal_case(payload: schemas.LegalCaseCreate, *, opened_by: str) -> dict:
    row = await db.fetch_one(
        """
        INSERT INTO legal_cases (property_id, case_type, summary, details, status, priority,
                                 assigned_to, case_number, opened_by)
        VALUES ($1, $2, $3, $4, $5, $6, $7, $8, $9)
        RETURNING *
        """,
        payload.property_id,
        payload.case_type,
        payload.summary,
        payload.details or None,
        payload.status or "open",
        payload.priority or "medium",
        payload.assigned_to,
        payload.case_number or None,
        opened_by,
    )
    if row is None:
        raise RuntimeError("Failed to create legal case.")
    return row


async def update_legal_case(case_id: UUID, payload: schemas.LegalCaseUpdate) -> dict | None:
    return await db.fetch_one(
        """
        UPDATE legal_cases
        SET case_type = COALESCE($1, case_type),
            summary = COALESCE($2, summary),
            details = COALESCE($3, details),
            status = COALESCE($4, status),
            priority = COALESCE($5, priority),
            assigned_to = COALESCE($6, assigned_to),
            case_number = COALESCE($7, case_number),
            closed_at = COALESCE($8, closed_at),
            updated_at = NOW()
        WHERE id = $9
        RETURNING *
        """,
        payload.case_type,
        payload.summary,
        payload.details,
        payload.status,
        payload.priority,
        payload.assigned_to,
        payload.case_number,
        payload.closed_at,
        case_id,
    )


async def delete_legal_case(case_id: UUID) -> dict | None:
    return await db.fetch_one("DELETE FROM legal_cases WHERE id = $1 RETURNING id", case_id)


async def list_case_updates(case_id: UUID, *, page: Page) -> list[dict]:
    return await db.fetch_all(
        """
        SELECT cu.*, u.first_name, u.last_name
        FROM legal_case_updates cu
        LEFT JOIN app_users u ON u.id = cu.author_id
        WHERE cu.legal_case_id = $1
        ORDER BY cu.created_at DESC
        LIMIT $2 OFFSET $3
        """,
        case_id,
        page.limit,
        page.offset,
    )


async def create_case_update(
    case_id: UUID,
    payload: schemas.CaseUpdateCreate,
    *,
    author_id: str,
) -> dict:
    row = await db.fetch_one(
        """
        INSERT INTO legal_case_updates (legal_case_id, update_type, content, is_visible_to_owner, author_id)
        VALUES ($1, $2, $3, $4, $5)
        RETURNING *
        """,
        case_id,
        payload.update_type or "note",
        payload.content,
        payload.is_visible_to_owner is not False,
        author_id,
    )
    if row is None:
        raise RuntimeError("Failed to create case update.")
    return row
