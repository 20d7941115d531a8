from __future__ import annotations

from datetime import date
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel


class TenancyCreate(BaseModel):
    property_id: UUID | None = None
    tenant_id: UUID | None = None
    lease_start: date | None = None
    lease_end: date | None = None
    monthly_rent: Decimal | None = None
    security_deposit: Decimal | None = None
    payment_day_of_month: int | None = None
    agreement_status: str | None = None


class TenancyUpdate(BaseModel):
    lease_start: date | None = None
    lease_end: date | None = None
    monthly_rent: Decimal | None = None
    security_deposit: Decimal | None = None
    payment_day_of_month: int | None = None
    agreement_status: str | None = None


class RentPaymentCreate(BaseModel):
    amount_due: Decimal | None = None
    due_date: date | None = None
    amount_paid: Decimal | None = None
    paid_on: date | None = None
    payment_status: str | None = None
    reference_number: str | None = None


class RentPaymentUpdate(RentPaymentCreate):
    pass
