"""
Maintenance request persistence (raw SQL).
"""

from __future__ import annotations

from uuid import UUID

from core import db
from core.listing import ListQuery, Page

from . import schemas

REQUEST_SELECT = """
    SELECT mr.*, p.title AS property_name,
           u.first_name AS requester_first_name, u.last_name AS requester_last_name
    FROM maintenance_requests mr
    LEFT JOIN properties p ON p.id = mr.property_id
    LEFT JOIN app_users u ON u.id = mr.raised_by
"""


async def list_requests(
    *,
    property_id: UUID | None,
    request_status: str | None,
    priority: str | None,
    page: Page,
) -> dict:
    query = ListQuery(f"{REQUEST_SELECT} WHERE 1=1")
    query.where("mr.property_id", property_id)
    query.where("mr.status", request_status)
    query.where("mr.priority", priority)
    return await query.fetch_page(order_by="mr.created_at DESC", page=page)


async def get_request(request_id: UUID) -> dict | None:
    return await db.fetch_one(f"{REQUEST_SELECT} WHERE mr.id = $1", request_id)


async def create_request(payload: schemas.MaintenanceRequestCreate, *, raised_by: str) -> dict:
    row = await db.fetch_one(
        """
        INSERT INTO maintenance_requests (property_id, description, request_type, priority, status,
                                          assigned_to, estimated_cost, raised_by)
        VALUES ($1, $2, $3, $4, $5, $6, $7, $8)
        RETURNING *
        """,
        payload.property_id,
        payload.description,
        payload.request_type,
        payload.priority or "medium",
        payload.status or "open",
        payload.assigned_to,
        payload.estimated_cost,
        raised_by,
    )
    if row is None:
        raise RuntimeError("Failed to create maintenance request.")
    return row


async def update_request(request_id: UUID, payload: schemas.MaintenanceRequestUpdate) -> dict | None:
    return await db.fetch_one(
        """
        UPDATE maintenance_requests
        SET description = COALESCE($1, description),
            request_type = COALESCE($2, request_type),
            priority = COALESCE($3, priority),
            status = COALESCE($4, status),
            assigned_to = COALESCE($5, assigned_to),
            estimated_cost = COALESCE($6, estimated_cost),
            actual_cost = COALESCE($7, actual_cost),
            closed_at = COALESCE($8, closed_at),
            updated_at = NOW()
        WHERE id = $9
        RETURNING *
        """,
        payload.description,
        payload.request_type,
        payload.priority,
        payload.status,
        payload.assigned_to,
        payload.estimated_cost,
        payload.actual_cost,
        payload.closed_at,
        request_id,
    )


async def delete_request(request_id: UUID) -> dict | None:
    return await db.fetch_one("DELETE FROM maintenance_requests WHERE id = $1 RETURNING id", request_id)
