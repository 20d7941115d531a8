from __future__ import annotations

from uuid import UUID

from pydantic import BaseModel


class ChatRoomCreate(BaseModel):
    subject: str | None = None
    room_type: str | None = None
    property_id: UUID | None = None
    participant_ids: list[UUID] | None = None


class ChatRoomUpdate(BaseModel):
    subject: str | None = None
    room_type: str | None = None
    status: str | None = None


class ChatMessageCreate(BaseModel):
    message_body: str | None = None
    message_type: str | None = None
    attachment_document_id: UUID | None = None
