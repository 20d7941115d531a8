"""
Property expense persistence (raw SQL).
"""

from __future__ import annotations

from datetime import date
from uuid import UUID

from core import db
from core.listing import ListQuery, Page

from . import schemas

EXPENSE_SELECT = """
    SELECT pe.*, p.title AS property_title
    FROM property_expenses pe
    LEFT JOIN properties p ON p.id = pe.property_id
"""


async def summary_by_category(property_id: UUID) -> list[dict]:
    return await db.fetch_all(
        """
        SELECT expense_category,
               COUNT(*) AS count,
               SUM(amount) AS total_amount,
               SUM(CASE WHEN payment_status = 'paid' THEN amount ELSE 0 END) AS paid_amount,
               SUM(CASE WHEN payment_status = 'pending' THEN amount ELSE 0 END) AS pending_amount
        FROM property_expenses
        WHERE property_id = $1
        GROUP BY expense_category
        ORDER BY total_amount DESC
        """,
        property_id,
    )


async def list_expenses(
    *,
    property_id: UUID | None,
    expense_category: str | None,
    payment_status: str | None,
    page: Page,
) -> dict:
    query = ListQuery(f"{EXPENSE_SELECT} WHERE 1=1")
    query.where("pe.property_id", property_id)
    query.where("pe.expense_category", expense_category)
    query.where("pe.payment_status", payment_status)
    return await query.fetch_page(order_by="pe.expense_date DESC", page=page)


async def get_expense(expense_id: UUID) -> dict | None:
    return await db.fetch_one(f"{EXPENSE_SELECT} WHERE pe.id = $1", expense_id)


async def create_expense(payload: schemas.ExpenseCreate, *, recorded_by: str) -> dict:
    row = await db.fetch_one(
        """
        INSERT INTO property_expenses (property_id, recorded_by, expense_category, description, amount,
                                       currency_code, expense_date, due_date, payment_status, vendor_name,
                                       receipt_document_id, reference_number, is_recurring,
                                       recurrence_interval, notes)
        VALUES ($1, $2, $3, $4, $5, $6, $7, $8, $9, $10, $11, $12, $13, $14, $15)
        RETURNING *
        """,
        payload.property_id,
        recorded_by,
        payload.expense_category,
        payload.description or None,
        payload.amount,
        payload.currency_code or "INR",
        payload.expense_date or date.today(),
        payload.due_date,
        payload.payment_status or "pending",
        payload.vendor_name or None,
        payload.receipt_document_id,
        payload.reference_number or None,
        payload.is_recurring or False,
        payload.recurrence_interval or None,
        payload.notes or None,
    )
    if row is None:
        raise RuntimeError("Failed to create expense.")
    return row


async def update_expense(expense_id: UUID, payload: schemas.ExpenseUpdate) -> dict | None:
    return await db.fetch_one(
        """
        UPDATE property_expenses
        SET expense_category = COALESCE($1, expense_category),
            description = COALESCE($2, description),
            amount = COALESCE($3, amount),
            currency_code = COALESCE($4, currency_code),
            expense_date = COALESCE($5, expense_date),
            due_date = COALESCE($6, due_date),
            payment_status = COALESCE($7, payment_status),
            vendor_name = COALESCE($8, vendor_name),
            receipt_document_id = COALESCE($9, receipt_document_id),
            reference_number = COALESCE($10, reference_number),
            is_recurring = COALESCE($11, is_recurring),
            recurrence_interval = COALESCE($12, recurrence_interval),
            notes = COALESCE($13, notes),
            updated_at = NOW()
        WHERE id = $14
        RETURNING *
        """,
        payload.expense_category,
        payload.description,
        payload.amount,
        payload.currency_code,
        payload.expense_date,
        payload.due_date,
        payload.payment_status,
        payload.vendor_name,
        payload.receipt_document_id,
        payload.reference_number,
        payload.is_recurring,
        payload.recurrence_interval,
        payload.notes,
        expense_id,
    )


async def delete_expense(expense_id: UUID) -> dict | None:
    return await db.fetch_one("DELETE FROM property_expenses WHERE id = $1 RETURNING id", expense_id)
