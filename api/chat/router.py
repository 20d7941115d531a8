"""
Chat room API endpoints. Rooms are only visible to their participants.
"""

from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, BackgroundTasks, Depends, Request, status

from auth import dependencies as auth_dependencies
from core import audit
from core.listing import Page, page_params
from core.validation import deleted, not_found, require_fields

from . import repository, schemas, service

router = APIRouter()


@router.get("/api/chat")
async def list_rooms(
    page: Page = Depends(page_params),
    current_user: dict = Depends(auth_dependencies.get_current_user),
) -> list[dict]:
    return await repository.list_rooms_for_user(current_user["id"], page=page)


@router.get("/api/chat/{room_id}")
async def get_room(
    room_id: UUID,
    current_user: dict = Depends(auth_dependencies.get_current_user),
) -> dict:
    return await service.get_room(room_id, current_user)


@router.post("/api/chat", status_code=status.HTTP_201_CREATED)
async def create_room(
    payload: schemas.ChatRoomCreate,
    request: Request,
    background_tasks: BackgroundTasks,
    current_user: dict = Depends(auth_dependencies.get_current_user),
) -> dict:
    room = await service.create_room(payload, current_user)
    background_tasks.add_task(
        audit.record_background, request, current_user, "create", "chat_room", room["id"]
    )
    return room


@router.put("/api/chat/{room_id}")
async def update_room(
    room_id: UUID,
    payload: schemas.ChatRoomUpdate,
    _: dict = Depends(auth_dependencies.get_current_user),
) -> dict:
    row = await repository.update_room(room_id, payload)
    if row is None:
        raise not_found("Chat room")
    return row


@router.delete("/api/chat/{room_id}")
async def delete_room(
    room_id: UUID,
    request: Request,
    background_tasks: BackgroundTasks,
    current_user: dict = Depends(auth_dependencies.get_current_user),
) -> dict:
    row = await repository.delete_room(room_id)
    if row is None:
        raise not_found("Chat room")
    background_tasks.add_task(
        audit.record_background, request, current_user, "delete", "chat_room", room_id
    )
    return deleted("Chat room")


@router.get("/api/chat/{room_id}/messages")
async def list_messages(
    room_id: UUID,
    page: Page = Depends(page_params),
    current_user: dict = Depends(auth_dependencies.get_current_user),
) -> list[dict]:
    return await service.list_messages(room_id, current_user, page=page)


@router.post("/api/chat/{room_id}/messages", status_code=status.HTTP_201_CREATED)
async def post_message(
    room_id: UUID,
    payload: schemas.ChatMessageCreate,
    current_user: dict = Depends(auth_dependencies.get_current_user),
) -> dict:
    require_fields(payload, "message_body")
    return await service.post_message(room_id, payload, current_user)
