"""
Recurring property obligation persistence (raw SQL).
"""

from __future__ import annotations

from uuid import UUID

from core import db
from core.listing import ListQuery, Page

from . import schemas

OBLIGATION_SELECT = """
    SELECT po.*, p.title AS property_title
    FROM property_obligations po
    LEFT JOIN properties p ON p.id = po.property_id
"""


async def list_obligations(*, property_id: UUID | None, obligation_type: str | None, page: Page) -> dict:
    query = ListQuery(f"{OBLIGATION_SELECT} WHERE 1=1")
    query.where("po.property_id", property_id)
    query.where("po.obligation_type", obligation_type)
    return await query.fetch_page(order_by="po.effective_from ASC", page=page)


async def get_obligation(obligation_id: UUID) -> dict | None:
    return await db.fetch_one(f"{OBLIGATION_SELECT} WHERE po.id = $1", obligation_id)


async def create_obligation(payload: schemas.ObligationCreate) -> dict:
    row = await db.fetch_one(
        """
        INSERT INTO property_obligations (property_id, obligation_type, description, amount, currency_code,
                                          billing_frequency, effective_from, effective_until, is_active)
        VALUES ($1, $2, $3, $4, $5, $6, $7, $8, $9)
        RETURNING *
        """,
        payload.property_id,
        payload.obligation_type,
        payload.description or None,
        payload.amount,
        payload.currency_code or "INR",
        payload.billing_frequency or None,
        payload.effective_from,
        payload.effective_until,
        payload.is_active if payload.is_active is not None else True,
    )
    if row is None:
        raise RuntimeError("Failed to create obligation.")
    return row


async def update_obligation(obligation_id: UUID, payload: schemas.ObligationUpdate) -> dict | None:
    return await db.fetch_one(
        """
        UPDATE property_obligations
        SET obligation_type = COALESCE($1, obligation_type),
            description = COALESCE($2, description),
            amount = COALESCE($3, amount),
            currency_code = COALESCE($4, currency_code),
            billing_frequency = COALESCE($5, billing_frequency),
            effective_from = COALESCE($6, effective_from),
            effective_until = COALESCE($7, effective_until),
            is_active = COALESCE($8, is_active),
            updated_at = NOW()
        WHERE id = $9
        RETURNING *
        """,
        payload.obligation_type,
        payload.description,
        payload.amount,
        payload.currency_code,
        payload.billing_frequency,
        payload.effective_from,
        payload.effective_until,
        payload.is_active,
        obligation_id,
    )


async def delete_obligation(obligation_id: UUID) -> dict | None:
    return await db.fetch_one("DELETE FROM property_obligations WHERE id = $1 RETURNING id", obligation_id)


async def list_payments(obligation_id: UUID, *, page: Page) -> list[dict]:
    return await db.fetch_all(
        """
        SELECT * FROM obligation_payments
        WHERE obligation_id = $1
        ORDER BY period_start DESC
        LIMIT $2 OFFSET $3
        """,
        obligation_id,
        page.limit,
        page.offset,
    )


async def create_payment(obligation_id: UUID, payload: schemas.ObligationPaymentCreate) -> dict:
    row = await db.fetch_one(
        """
        INSERT INTO obligation_payments (obligation_id, period_start, period_end, amount_due, amount_paid,
                                         payment_status, paid_on, reference_number)
        VALUES ($1, $2, $3, $4, $5, $6, $7, $8)
        RETURNING *
        """,
        obligation_id,
        payload.period_start,
        payload.period_end,
        payload.amount_due,
        payload.amount_paid,
        payload.payment_status or "due",
        payload.paid_on,
        payload.reference_number or None,
    )
    if row is None:
        raise RuntimeError("Failed to create obligation payment.")
    return row
