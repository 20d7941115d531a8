from __future__ import annotations

from datetime import date
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel


class RevenueRecordFields(BaseModel):
    record_type: str | None = None
    state_code: str | None = None
    district: str | None = None
    taluk: str | None = None
    village: str | None = None
    survey_number: str | None = None
    sub_division: str | None = None
    extent_acres: Decimal | None = None
    extent_hectares: Decimal | None = None
    land_classification: str | None = None
    current_holder_name: str | None = None
    cultivation_details: str | None = None
    pattadar_passbook_number: str | None = None
    last_verified_on: date | None = None
    document_id: UUID | None = None
    notes: str | None = None


class RevenueRecordCreate(RevenueRecordFields):
    property_id: UUID | None = None


class RevenueRecordUpdate(RevenueRecordFields):
    pass
