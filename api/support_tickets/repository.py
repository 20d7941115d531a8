"""
Support ticket persistence (raw SQL).
"""

from __future__ import annotations

from uuid import UUID

from core import db
from core.listing import ListQuery, Page

from . import schemas

TICKET_SELECT = """
    SELECT st.*, p.title AS property_title,
           u.first_name AS opener_first_name, u.last_name AS opener_last_name
    FROM support_tickets st
    LEFT JOIN properties p ON p.id = st.property_id
    LEFT JOIN app_users u ON u.id = st.opened_by
"""


async def list_tickets(
    *,
    property_id: UUID | None,
    ticket_status: str | None,
    ticket_type: str | None,
    page: Page,
) -> dict:
    query = ListQuery(f"{TICKET_SELECT} WHERE 1=1")
    query.where("st.property_id", property_id)
    query.where("st.status", ticket_status)
    query.where("st.ticket_type", ticket_type)
    return await query.fetch_page(order_by="st.created_at DESC", page=page)


async def get_ticket(ticket_id: UUID) -> dict | None:
    return await db.fetch_one(f"{TICKET_SELECT} WHERE st.id = $1", ticket_id)


async def create_ticket(payload: schemas.TicketCreate, *, opened_by: str) -> dict:
    row = await db.fetch_one(
        """
        INSERT INTO support_tickets (property_id, ticket_type, subject, description, priority, status,
                                     assigned_to, opened_by)
        VALUES ($1, $2, $3, $4, $5, $6, $7, $8)
        RETURNING *
        """,
        payload.property_id,
        payload.ticket_type,
        payload.subject,
        payload.description or None,
        payload.priority or "medium",
        payload.status or "open",
        payload.assigned_to,
        opened_by,
    )
    if row is None:
        raise RuntimeError("Failed to create support ticket.")
    return row


async def update_ticket(ticket_id: UUID, payload: schemas.TicketUpdate) -> dict | None:
    return await db.fetch_one(
        """
        UPDATE support_tickets
        SET ticket_type = COALESCE($1, ticket_type),
            subject = COALESCE($2, subject),
            description = COALESCE($3, description),
            priority = COALESCE($4, priority),
            status = COALESCE($5, status),
            assigned_to = COALESCE($6, assigned_to),
            resolved_at = COALESCE($7, resolved_at),
            updated_at = NOW()
        WHERE id = $8
        RETURNING *
        """,
        payload.ticket_type,
        payload.subject,
        payload.description,
        payload.priority,
        payload.status,
        payload.assigned_to,
        payload.resolved_at,
        ticket_id,
    )


async def delete_ticket(ticket_id: UUID) -> dict | None:
    return await db.fetch_one("DELETE FROM support_tickets WHERE id = $1 RETURNING id", ticket_id)


async def list_messages(ticket_id: UUID, *, page: Page) -> list[dict]:
    return await db.fetch_all(
        """
        SELECT tm.*, u.first_name, u.last_name, u.email
        FROM ticket_messages tm
        LEFT JOIN app_users u ON u.id = tm.sender_id
        WHERE tm.ticket_id = $1
        ORDER BY tm.created_at ASC
        LIMIT $2 OFFSET $3
        """,
        ticket_id,
        page.limit,
        page.offset,
    )


async def add_message(ticket_id: UUID, payload: schemas.TicketMessageCreate, *, sender_id: str) -> dict:
    row = await db.fetch_one(
        """
        INSERT INTO ticket_messages (ticket_id, sender_id, message_body, is_internal)
        VALUES ($1, $2, $3, $4)
        RETURNING *
        """,
        ticket_id,
        sender_id,
        payload.message_body,
        payload.is_internal or False,
    )
    if row is None:
        raise RuntimeError("Failed to create ticket message.")
    return row
