"""
Pydantic schemas for property endpoints.

Fields are optional at the schema level; required ones are checked in the
router so the 400 message stays static.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel


class PropertyCreate(BaseModel):
    title: str | None = None
    property_type: str | None = None
    property_code: str | None = None
    usage_type: str | None = None
    occupancy_status: str | None = None
    organization_id: UUID | None = None
    purchase_date: date | None = None
    acquisition_value: Decimal | None = None
    current_estimated_value: Decimal | None = None
    # Address columns; an address row is created only when line1 is given.
    line1: str | None = None
    line2: str | None = None
    city: str | None = None
    state: str | None = None
    postal_code: str | None = None
    country: str | None = None


class PropertyUpdate(BaseModel):
    title: str | None = None
    property_type: str | None = None
    property_code: str | None = None
    usage_type: str | None = None
    occupancy_status: str | None = None
    purchase_date: date | None = None
    acquisition_value: Decimal | None = None
    current_estimated_value: Decimal | None = None


class OwnerCreate(BaseModel):
    user_id: UUID | None = None
    ownership_percentage: Decimal | None = None
    ownership_type: str | None = None
