from __future__ import annotations

from datetime import date
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel


class ExpenseCreate(BaseModel):
    property_id: UUID | None = None
    expense_category: str | None = None
    description: str | None = None
    amount: Decimal | None = None
    currency_code: str | None = None
    expense_date: date | None = None
    due_date: date | None = None
    payment_status: str | None = None
    vendor_name: str | None = None
    receipt_document_id: UUID | None = None
    reference_number: str | None = None
    is_recurring: bool | None = None
    recurrence_interval: str | None = None
    notes: str | None = None


class ExpenseUpdate(BaseModel):
    expense_category: str | None = None
    description: str | None = None
    amount: Decimal | None = None
    currency_code: str | None = None
    expense_date: date | None = None
    due_date: date | None = None
    payment_status: str | None = None
    vendor_name: str | None = None
    receipt_document_id: UUID | None = None
    reference_number: str | None = None
    is_recurring: bool | None = None
    recurrence_interval: str | None = None
    notes: str | None = None
