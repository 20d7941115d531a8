from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel


class LegalCaseCreate(BaseModel):
    property_id: UUID | None = None
    case_type: str | None = None
    summary: str | None = None
    details: str | None = None
    status: str | None = None
    priority: str | None = None
    assigned_to: UUID | None = None
    case_number: str | None = None


class LegalCaseUpdate(BaseModel):
    case_type: str | None = None
    summary: str | None = None
    details: str | None = None
    status: str | None = None
    priority: str | None = None
    assigned_to: UUID | None = None
    case_number: str | None = None
    closed_at: datetime | None = None


class CaseUpdateCreate(BaseModel):
    update_type: str | None = None
    content: str | None = None
    is_visible_to_owner: bool | None = None
