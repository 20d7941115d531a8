from __future__ import annotations

from datetime import date
from uuid import UUID

from pydantic import BaseModel


class PowerOfAttorneyFields(BaseModel):
    poa_scope: str | None = None
    registration_number: str | None = None
    status: str | None = None
    issued_on: date | None = None
    valid_until: date | None = None
    revoked_on: date | None = None
    revocation_reason: str | None = None


class PowerOfAttorneyCreate(PowerOfAttorneyFields):
    property_id: UUID | None = None
    owner_id: UUID | None = None
    attorney_holder_id: UUID | None = None


class PowerOfAttorneyUpdate(PowerOfAttorneyFields):
    pass
