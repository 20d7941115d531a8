from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, Query

from auth import dependencies as auth_dependencies
from core.listing import Page, page_params
from core.validation import not_found

from . import repository

router = APIRouter()


@router.get("/api/notifications/unread-count")
async def unread_count(current_user: dict = Depends(auth_dependencies.get_current_user)) -> dict:
    return {"count": await repository.unread_count(current_user["id"])}


@router.put("/api/notifications/read-all")
async def mark_all_read(current_user: dict = Depends(auth_dependencies.get_current_user)) -> dict:
    await repository.mark_all_read(current_user["id"])
    return {"message": "All notifications marked as read"}


@router.get("/api/notifications")
async def list_notifications(
    is_read: str | None = Query(default=None),
    page: Page = Depends(page_params),
    current_user: dict = Depends(auth_dependencies.get_current_user),
) -> dict:
    read_filter = None if is_read is None else is_read == "true"
    return await repository.list_notifications(current_user["id"], is_read=read_filter, page=page)


@router.put("/api/notifications/{notification_id}/read")
async def mark_read(
    notification_id: UUID,
    current_user: dict = Depends(auth_dependencies.get_current_user),
) -> dict:
    row = await repository.mark_read(notification_id, current_user["id"])
    if row is None:
        raise not_found("Notification")
    return row
