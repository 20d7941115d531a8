"""
Tenancy and rent payment persistence (raw SQL).
"""

from __future__ import annotations

from uuid import UUID

from core import db
from core.listing import ListQuery, Page

from . import schemas

TENANCY_SELECT = """
    SELECT t.*,
           p.title AS property_name,
           tn.full_name AS tenant_name, tn.email AS tenant_email, tn.phone AS tenant_phone
    FROM tenancies t
    JOIN properties p ON p.id = t.property_id
    JOIN tenants tn ON tn.id = t.tenant_id
"""


async def list_tenancies(
    *,
    property_id: UUID | None,
    agreement_status: str | None,
    page: Page,
) -> dict:
    query = ListQuery(f"{TENANCY_SELECT} WHERE 1=1")
    query.where("t.property_id", property_id)
    query.where("t.agreement_status", agreement_status)
    return await query.fetch_page(order_by="t.created_at DESC", page=page)


async def get_tenancy(tenancy_id: UUID) -> dict | None:
    return await db.fetch_one(f"{TENANCY_SELECT} WHERE t.id = $1", tenancy_id)


async def create_tenancy(payload: schemas.TenancyCreate) -> dict:
    row = await db.fetch_one(
        """
        INSERT INTO tenancies (property_id, tenant_id, lease_start, lease_end, monthly_rent,
                               security_deposit, payment_day_of_month, agreement_status)
        VALUES ($1, $2, $3, $4, $5, $6, $7, $8)
        RETURNING *
        """,
        payload.property_id,
        payload.tenant_id,
        payload.lease_start,
        payload.lease_end,
        payload.monthly_rent,
        payload.security_deposit,
        payload.payment_day_of_month,
        payload.agreement_status or "active",
    )
    if row is None:
        raise RuntimeError("Failed to create tenancy.")
    return row


async def update_tenancy(tenancy_id: UUID, payload: schemas.TenancyUpdate) -> dict | None:
    return await db.fetch_one(
        """
        UPDATE tenancies
        SET lease_start = COALESCE($1, lease_start),
            lease_end = COALESCE($2, lease_end),
            monthly_rent = COALESCE($3, monthly_rent),
            security_deposit = COALESCE($4, security_deposit),
            payment_day_of_month = COALESCE($5, payment_day_of_month),
            agreement_status = COALESCE($6, agreement_status),
            updated_at = NOW()
        WHERE id = $7
        RETURNING *
        """,
        payload.lease_start,
        payload.lease_end,
        payload.monthly_rent,
        payload.security_deposit,
        payload.payment_day_of_month,
        payload.agreement_status,
        tenancy_id,
    )


async def delete_tenancy(tenancy_id: UUID) -> dict | None:
    return await db.fetch_one("DELETE FROM tenancies WHERE id = $1 RETURNING id", tenancy_id)


async def list_payments(tenancy_id: UUID, *, page: Page) -> list[dict]:
    return await db.fetch_all(
        """
        SELECT * FROM rent_payments
        WHERE tenancy_id = $1
        ORDER BY due_date DESC
        LIMIT $2 OFFSET $3
        """,
        tenancy_id,
        page.limit,
        page.offset,
    )


async def create_payment(tenancy_id: UUID, payload: schemas.RentPaymentCreate) -> dict:
    row = await db.fetch_one(
        """
        INSERT INTO rent_payments (tenancy_id, amount_due, due_date, amount_paid, paid_on,
                                   payment_status, reference_number)
        VALUES ($1, $2, $3, $4, $5, $6, $7)
        RETURNING *
        """,
        tenancy_id,
        payload.amount_due,
        payload.due_date,
        payload.amount_paid or 0,
        payload.paid_on,
        payload.payment_status or "due",
        payload.reference_number or None,
    )
    if row is None:
        raise RuntimeError("Failed to create rent payment.")
    return row


async def update_payment(payment_id: UUID, payload: schemas.RentPaymentUpdate) -> dict | None:
    return await db.fetch_one(
        """
        UPDATE rent_payments
        SET amount_due = COALESCE($1, amount_due),
            due_date = COALESCE($2, due_date),
            amount_paid = COALESCE($3, amount_paid),
            paid_on = COALESCE($4, paid_on),
            payment_status = COALESCE($5, payment_status),
            reference_number = COALESCE($6, reference_number),
            updated_at = NOW()
        WHERE id = $7
        RETURNING *
        """,
        payload.amount_due,
        payload.due_date,
        payload.amount_paid,
        payload.paid_on,
        payload.payment_status,
        payload.reference_number,
        payment_id,
    )
