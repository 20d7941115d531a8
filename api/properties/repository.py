"""
Property persistence (raw SQL).
"""

from __future__ import annotations

from uuid import UUID

import asyncpg

from core import db
from core.listing import ListQuery, Page

from . import schemas

DEFAULT_COUNTRY = "India"

PROPERTY_SELECT = """
    SELECT p.*, a.line1, a.line2, a.city, a.state, a.postal_code, a.country
    FROM properties p
    LEFT JOIN addresses a ON a.id = p.address_id
"""


async def list_properties(
    *,
    occupancy_status: str | None,
    property_type: str | None,
    page: Page,
) -> dict:
    query = ListQuery(f"{PROPERTY_SELECT} WHERE 1=1")
    query.where("p.occupancy_status", occupancy_status)
    query.where("p.property_type", property_type)
    return await query.fetch_page(order_by="p.created_at DESC", page=page)


async def get_property(property_id: UUID) -> dict | None:
    return await db.fetch_one(f"{PROPERTY_SELECT} WHERE p.id = $1", property_id)


async def insert_address(conn: asyncpg.Connection, payload: schemas.PropertyCreate) -> UUID:
    row = await db.fetch_one_in(
        conn,
        """
        INSERT INTO addresses (line1, line2, city, state, postal_code, country)
        VALUES ($1, $2, $3, $4, $5, $6)
        RETURNING id
        """,
        payload.line1,
        payload.line2 or None,
        payload.city or None,
        payload.state or None,
        payload.postal_code or None,
        payload.country or DEFAULT_COUNTRY,
    )
    if row is None:
        raise RuntimeError("Failed to insert address.")
    return row["id"]


async def insert_property(
    conn: asyncpg.Connection,
    payload: schemas.PropertyCreate,
    *,
    address_id: UUID | None,
) -> dict:
    row = await db.fetch_one_in(
        conn,
        """
        INSERT INTO properties (title, property_type, property_code, usage_type, occupancy_status,
                                organization_id, address_id, purchase_date, acquisition_value,
                                current_estimated_value)
        VALUES ($1, $2, $3, $4, $5, $6, $7, $8, $9, $10)
        RETURNING *
        """,
        payload.title,
        payload.property_type,
        payload.property_code,
        payload.usage_type,
        payload.occupancy_status or "vacant",
        payload.organization_id,
        address_id,
        payload.purchase_date,
        payload.acquisition_value,
        payload.current_estimated_value,
    )
    if row is None:
        raise RuntimeError("Failed to insert property.")
    return row


async def update_property(property_id: UUID, payload: schemas.PropertyUpdate) -> dict | None:
    return await db.fetch_one(
        """
        UPDATE properties
        SET title = COALESCE($1, title),
            property_type = COALESCE($2, property_type),
            property_code = COALESCE($3, property_code),
            usage_type = COALESCE($4, usage_type),
            occupancy_status = COALESCE($5, occupancy_status),
            purchase_date = COALESCE($6, purchase_date),
            acquisition_value = COALESCE($7, acquisition_value),
            current_estimated_value = COALESCE($8, current_estimated_value),
            updated_at = NOW()
        WHERE id = $9
        RETURNING *
        """,
        payload.title,
        payload.property_type,
        payload.property_code,
        payload.usage_type,
        payload.occupancy_status,
        payload.purchase_date,
        payload.acquisition_value,
        payload.current_estimated_value,
        property_id,
    )


async def delete_property(property_id: UUID) -> dict | None:
    return await db.fetch_one("DELETE FROM properties WHERE id = $1 RETURNING id", property_id)


async def list_owners(property_id: UUID) -> list[dict]:
    return await db.fetch_all(
        """
        SELECT po.*, u.email, u.first_name, u.last_name
        FROM property_owners po
        JOIN app_users u ON u.id = po.user_id
        WHERE po.property_id = $1
        ORDER BY po.ownership_percentage DESC
        """,
        property_id,
    )


async def add_owner(property_id: UUID, payload: schemas.OwnerCreate) -> dict:
    row = await db.fetch_one(
        """
        INSERT INTO property_owners (property_id, user_id, ownership_percentage, ownership_type)
        VALUES ($1, $2, $3, $4)
        RETURNING *
        """,
        property_id,
        payload.user_id,
        payload.ownership_percentage or 100,
        payload.ownership_type or "primary",
    )
    if row is None:
        raise RuntimeError("Failed to add property owner.")
    return row
