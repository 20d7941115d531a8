"""
Service handover API endpoints and their checklist items.
"""

from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, BackgroundTasks, Depends, Query, Request, status

from auth import dependencies as auth_dependencies
from core import audit
from core.listing import Page, page_params
from core.validation import deleted, not_found, require_fields

from . import repository, schemas

router = APIRouter()


@router.get("/api/handovers")
async def list_handovers(
    property_id: UUID | None = Query(default=None),
    handover_status: str | None = Query(default=None, alias="status"),
    page: Page = Depends(page_params),
    _: dict = Depends(auth_dependencies.get_current_user),
) -> dict:
    return await repository.list_handovers(property_id=property_id, handover_status=handover_status, page=page)


@router.put("/api/handovers/items/{item_id}")
async def update_item(
    item_id: UUID,
    payload: schemas.HandoverItemFields,
    _: dict = Depends(auth_dependencies.get_current_user),
) -> dict:
    row = await repository.update_item(item_id, payload)
    if row is None:
        raise not_found("Handover item")
    return row


@router.get("/api/handovers/{handover_id}")
async def get_handover(
    handover_id: UUID,
    _: dict = Depends(auth_dependencies.get_current_user),
) -> dict:
    row = await repository.get_handover(handover_id)
    if row is None:
        raise not_found("Handover")
    return row


@router.post("/api/handovers", status_code=status.HTTP_201_CREATED)
async def create_handover(
    payload: schemas.HandoverCreate,
    request: Request,
    background_tasks: BackgroundTasks,
    current_user: dict = Depends(auth_dependencies.get_current_user),
) -> dict:
    require_fields(payload, "property_id", "handover_type")
    row = await repository.create_handover(payload, initiated_by=current_user["id"])
    background_tasks.add_task(
        audit.record_background, request, current_user, "create", "handover", row["id"]
    )
    return row


@router.put("/api/handovers/{handover_id}")
async def update_handover(
    handover_id: UUID,
    payload: schemas.HandoverUpdate,
    _: dict = Depends(auth_dependencies.get_current_user),
) -> dict:
    row = await repository.update_handover(handover_id, payload)
    if row is None:
        raise not_found("Handover")
    return row


@router.delete("/api/handovers/{handover_id}")
async def delete_handover(
    handover_id: UUID,
    request: Request,
    background_tasks: BackgroundTasks,
    current_user: dict = Depends(auth_dependencies.get_current_user),
) -> dict:
    row = await repository.delete_handover(handover_id)
    if row is None:
        raise not_found("Handover")
    background_tasks.add_task(
        audit.record_background, request, current_user, "delete", "handover", handover_id
    )
    return deleted("Handover")


@router.get("/api/handovers/{handover_id}/items")
async def list_items(
    handover_id: UUID,
    _: dict = Depends(auth_dependencies.get_current_user),
) -> list[dict]:
    return await repository.list_items(handover_id)


@router.post("/api/handovers/{handover_id}/items", status_code=status.HTTP_201_CREATED)
async def add_item(
    handover_id: UUID,
    payload: schemas.HandoverItemFields,
    _: dict = Depends(auth_dependencies.get_current_user),
) -> dict:
    require_fields(payload, "item_type")
    return await repository.add_item(handover_id, payload)
