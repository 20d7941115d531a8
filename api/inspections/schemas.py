from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel


class InspectionCreate(BaseModel):
    property_id: UUID | None = None
    inspection_type: str | None = None
    scheduled_at: datetime | None = None
    status: str | None = None
    inspector_id: UUID | None = None
    summary: str | None = None


class InspectionUpdate(BaseModel):
    inspection_type: str | None = None
    scheduled_at: datetime | None = None
    completed_at: datetime | None = None
    status: str | None = None
    inspector_id: UUID | None = None
    summary: str | None = None
    risk_level: str | None = None


class MediaCreate(BaseModel):
    storage_key: str | None = None
    media_type: str | None = None
    caption: str | None = None
    captured_at: datetime | None = None
    latitude: float | None = None
    longitude: float | None = None
