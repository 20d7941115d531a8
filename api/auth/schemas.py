"""
Auth API schemas (response models).
"""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ProfileResponse(BaseModel):
    # The web client reads camelCase keys.
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: UUID
    email: str
    first_name: str | None = None
    last_name: str | None = None
    phone: str | None = None
    roles: list[str] = []
    is_active: bool
    created_at: datetime | None = None
