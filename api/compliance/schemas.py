from __future__ import annotations

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel


class AuditCycleCreate(BaseModel):
    property_id: UUID | None = None
    audit_year: int | None = None
    audit_label: str | None = None
    property_type_checklist: list[str] | None = None
    status: str | None = None
    scheduled_start: date | None = None
    scheduled_end: date | None = None
    assigned_to: UUID | None = None
    notes: str | None = None


class ComplianceCheckCreate(BaseModel):
    property_id: UUID | None = None
    check_type: str | None = None
    status: str | None = None
    due_date: date | None = None
    completed_at: datetime | None = None
    assigned_to: UUID | None = None
    notes: str | None = None
    audit_cycle_id: UUID | None = None


class ComplianceCheckUpdate(BaseModel):
    check_type: str | None = None
    status: str | None = None
    due_date: date | None = None
    completed_at: datetime | None = None
    assigned_to: UUID | None = None
    notes: str | None = None
    audit_cycle_id: UUID | None = None
