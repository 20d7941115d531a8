from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel


class ProjectBase(BaseModel):
    project_type: str | None = None
    title: str | None = None
    description: str | None = None
    status: str | None = None
    contractor_name: str | None = None
    contractor_phone: str | None = None
    estimated_budget: Decimal | None = None
    actual_spend: Decimal | None = None
    currency_code: str | None = None
    planned_start: date | None = None
    planned_end: date | None = None
    actual_start: date | None = None
    actual_end: date | None = None


class ProjectCreate(ProjectBase):
    property_id: UUID | None = None


class ProjectUpdate(ProjectBase):
    pass


class MilestoneFields(BaseModel):
    title: str | None = None
    description: str | None = None
    sequence_order: int | None = None
    due_date: date | None = None
    status: str | None = None
    completed_at: datetime | None = None
