from __future__ import annotations

from datetime import date
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel


class ObligationCreate(BaseModel):
    property_id: UUID | None = None
    obligation_type: str | None = None
    description: str | None = None
    amount: Decimal | None = None
    currency_code: str | None = None
    billing_frequency: str | None = None
    effective_from: date | None = None
    effective_until: date | None = None
    is_active: bool | None = None


class ObligationUpdate(BaseModel):
    obligation_type: str | None = None
    description: str | None = None
    amount: Decimal | None = None
    currency_code: str | None = None
    billing_frequency: str | None = None
    effective_from: date | None = None
    effective_until: date | None = None
    is_active: bool | None = None


class ObligationPaymentCreate(BaseModel):
    period_start: date | None = None
    period_end: date | None = None
    amount_due: Decimal | None = None
    amount_paid: Decimal | None = None
    payment_status: str | None = None
    paid_on: date | None = None
    reference_number: str | None = None
