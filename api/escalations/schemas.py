from __future__ import annotations

from typing import Any
from uuid import UUID

from pydantic import BaseModel


class EscalationRuleFields(BaseModel):
    rule_name: str | None = None
    entity_type: str | None = None
    trigger_condition: str | None = None
    priority_filter: str | None = None
    breach_threshold_minutes: int | None = None
    escalate_to_role: str | None = None
    notify_channels: Any = None
    is_active: bool | None = None


class EscalationEventCreate(BaseModel):
    rule_id: UUID | None = None
    entity_type: str | None = None
    entity_id: UUID | None = None
    escalated_to: UUID | None = None
    resolution_notes: str | None = None
