"""
Inspection API endpoints, including nested media.
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


@router.get("/api/inspections")
async def list_inspections(
    property_id: UUID | None = Query(default=None),
    inspection_status: str | None = Query(default=None, alias="status"),
    inspection_type: str | None = Query(default=None, alias="type"),
    page: Page = Depends(page_params),
    _: dict = Depends(auth_dependencies.get_current_user),
) -> dict:
    return await repository.list_inspections(
        property_id=property_id,
        inspection_status=inspection_status,
        inspection_type=inspection_type,
        page=page,
    )


@router.get("/api/inspections/{inspection_id}")
async def get_inspection(
    inspection_id: UUID,
    _: dict = Depends(auth_dependencies.get_current_user),
) -> dict:
    row = await repository.get_inspection(inspection_id)
    if row is None:
        raise not_found("Inspection")
    return row


@router.post("/api/inspections", status_code=status.HTTP_201_CREATED)
async def create_inspection(
    payload: schemas.InspectionCreate,
    request: Request,
    background_tasks: BackgroundTasks,
    current_user: dict = Depends(auth_dependencies.get_current_user),
) -> dict:
    require_fields(payload, "property_id", "inspection_type", "scheduled_at")
    row = await repository.create_inspection(payload)
    background_tasks.add_task(
        audit.record_background, request, current_user, "create", "inspection", row["id"]
    )
    return row


@router.put("/api/inspections/{inspection_id}")
async def update_inspection(
    inspection_id: UUID,
    payload: schemas.InspectionUpdate,
    _: dict = Depends(auth_dependencies.get_current_user),
) -> dict:
    row = await repository.update_inspection(inspection_id, payload)
    if row is None:
        raise not_found("Inspection")
    return row


@router.delete("/api/inspections/{inspection_id}")
async def delete_inspection(
    inspection_id: UUID,
    request: Request,
    background_tasks: BackgroundTasks,
    current_user: dict = Depends(auth_dependencies.get_current_user),
) -> dict:
    row = await repository.delete_inspection(inspection_id)
    if row is None:
        raise not_found("Inspection")
    background_tasks.add_task(
        audit.record_background, request, current_user, "delete", "inspection", inspection_id
    )
    return deleted("Inspection")


@router.get("/api/inspections/{inspection_id}/media")
async def list_media(
    inspection_id: UUID,
    _: dict = Depends(auth_dependencies.get_current_user),
) -> list[dict]:
    return await repository.list_media(inspection_id)


@router.post("/api/inspections/{inspection_id}/media", status_code=status.HTTP_201_CREATED)
async def add_media(
    inspection_id: UUID,
    payload: schemas.MediaCreate,
    _: dict = Depends(auth_dependencies.get_current_user),
) -> dict:
    require_fields(payload, "storage_key")
    return await repository.add_media(inspection_id, payload)
