from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel


class MaintenanceRequestCreate(BaseModel):
    property_id: UUID | None = None
    description: str | None = None
    request_type: str | None = None
    priority: str | None = None
    status: str | None = None
    assigned_to: UUID | None = None
    estimated_cost: Decimal | None = None


class MaintenanceRequestUpdate(BaseModel):
    description: str | None = None
    request_type: str | None = None
    priority: str | None = None
    status: str | None = None
    assigned_to: UUID | None = None
    estimated_cost: Decimal | None = None
    actual_cost: Decimal | None = None
    closed_at: datetime | None = None
