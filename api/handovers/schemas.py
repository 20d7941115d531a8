from __future__ import annotations

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel


class HandoverCreate(BaseModel):
    property_id: UUID | None = None
    subscription_id: UUID | None = None
    handled_by: UUID | None = None
    handover_type: str | None = None
    status: str | None = None
    target_completion_date: date | None = None
    notes: str | None = None
    cancellation_reason: str | None = None


class HandoverUpdate(BaseModel):
    status: str | None = None
    handled_by: UUID | None = None
    target_completion_date: date | None = None
    completed_at: datetime | None = None
    notes: str | None = None
    cancellation_reason: str | None = None


class HandoverItemFields(BaseModel):
    item_type: str | None = None
    description: str | None = None
    document_id: UUID | None = None
    status: str | None = None
    completed_at: datetime | None = None
    completed_by: UUID | None = None
    notes: str | None = None
