from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel


class TicketCreate(BaseModel):
    property_id: UUID | None = None
    ticket_type: str | None = None
    subject: str | None = None
    description: str | None = None
    priority: str | None = None
    status: str | None = None
    assigned_to: UUID | None = None


class TicketUpdate(BaseModel):
    ticket_type: str | None = None
    subject: str | None = None
    description: str | None = None
    priority: str | None = None
    status: str | None = None
    assigned_to: UUID | None = None
    resolved_at: datetime | None = None


class TicketMessageCreate(BaseModel):
    message_body: str | None = None
    is_internal: bool | None = None
