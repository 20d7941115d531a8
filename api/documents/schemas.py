from __future__ import annotations

from datetime import date
from uuid import UUID

from pydantic import BaseModel


class DocumentCreate(BaseModel):
    property_id: UUID | None = None
    owner_id: UUID | None = None
    document_type: str | None = None
    title: str | None = None
    storage_key: str | None = None
    mime_type: str | None = None
    file_size_bytes: int | None = None
    checksum_sha256: str | None = None
    is_sensitive: bool | None = None
    expires_on: date | None = None


class DocumentUpdate(BaseModel):
    document_type: str | None = None
    title: str | None = None
    storage_key: str | None = None
    mime_type: str | None = None
    file_size_bytes: int | None = None
    checksum_sha256: str | None = None
    is_sensitive: bool | None = None
    expires_on: date | None = None
    owner_id: UUID | None = None
