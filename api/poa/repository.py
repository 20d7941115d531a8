"""
Power of attorney persistence (raw SQL).
"""

from __future__ import annotations

from uuid import UUID

from core import db
from core.listing import ListQuery, Page

from . import schemas

POA_SELECT = """
    SELECT poa.*, p.title AS property_title,
           owner.first_name AS owner_first_name, owner.last_name AS owner_last_name,
           attorney.first_name AS attorney_first_name, attorney.last_name AS attorney_last_name
    FROM powers_of_attorney poa
    LEFT JOIN properties p ON p.id = poa.property_id
    LEFT JOIN app_users owner ON owner.id = poa.owner_id
    LEFT JOIN app_users attorney ON attorney.id = poa.attorney_holder_id
"""


async def list_powers(*, property_id: UUID | None, poa_status: str | None, page: Page) -> dict:
    query = ListQuery(f"{POA_SELECT} WHERE 1=1")
    query.where("poa.property_id", property_id)
    query.where("poa.status", poa_status)
    return await query.fetch_page(order_by="poa.created_at DESC", page=page)


async def get_power(poa_id: UUID) -> dict | None:
    return await db.fetch_one(f"{POA_SELECT} WHERE poa.id = $1", poa_id)


async def create_power(payload: schemas.PowerOfAttorneyCreate) -> dict:
    row = await db.fetch_one(
        """
        INSERT INTO powers_of_attorney (property_id, owner_id, attorney_holder_id, poa_scope, registration_number,
                                        status, issued_on, valid_until, revoked_on, revocation_reason)
        VALUES ($1, $2, $3, $4, $5, $6, $7, $8, $9, $10)
        RETURNING *
        """,
        payload.property_id,
        payload.owner_id,
        payload.attorney_holder_id,
        payload.poa_scope,
        payload.registration_number or None,
        payload.status or "draft",
        payload.issued_on,
        payload.valid_until,
        payload.revoked_on,
        payload.revocation_reason or None,
    )
    if row is None:
        raise RuntimeError("Failed to create power of attorney.")
    return row


async def update_power(poa_id: UUID, payload: schemas.PowerOfAttorneyUpdate) -> dict | None:
    return await db.fetch_one(
        """
        UPDATE powers_of_attorney
        SET poa_scope = COALESCE($1, poa_scope),
            registration_number = COALESCE($2, registration_number),
            status = COALESCE($3, status),
            issued_on = COALESCE($4, issued_on),
            valid_until = COALESCE($5, valid_until),
            revoked_on = COALESCE($6, revoked_on),
            revocation_reason = COALESCE($7, revocation_reason),
            updated_at = NOW()
        WHERE id = $8
        RETURNING *
        """,
        payload.poa_scope,
        payload.registration_number,
        payload.status,
        payload.issued_on,
        payload.valid_until,
        payload.revoked_on,
        payload.revocation_reason,
        poa_id,
    )


async def delete_power(poa_id: UUID) -> dict | None:
    return await db.fetch_one("DELETE FROM powers_of_attorney WHERE id = $1 RETURNING id", poa_id)
