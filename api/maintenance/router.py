"""
Maintenance request API endpoints.
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


@router.get("/api/maintenance")
async def list_requests(
    property_id: UUID | None = Query(default=None),
    request_status: str | None = Query(default=None, alias="status"),
    priority: str | None = Query(default=None),
    page: Page = Depends(page_params),
    _: dict = Depends(auth_dependencies.get_current_user),
) -> dict:
    return await repository.list_requests(
        property_id=property_id,
        request_status=request_status,
        priority=priority,
        page=page,
    )


@router.get("/api/maintenance/{request_id}")
async def get_request(
    request_id: UUID,
    _: dict = Depends(auth_dependencies.get_current_user),
) -> dict:
    row = await repository.get_request(request_id)
    if row is None:
        raise not_found("Maintenance request")
    return row


@router.post("/api/maintenance", status_code=status.HTTP_201_CREATED)
async def create_request(
    payload: schemas.MaintenanceRequestCreate,
    request: Request,
    background_tasks: BackgroundTasks,
    current_user: dict = Depends(auth_dependencies.get_current_user),
) -> dict:
    require_fields(payload, "property_id", "description")
    row = await repository.create_request(payload, raised_by=current_user["id"])
    background_tasks.add_task(
        audit.record_background, request, current_user, "create", "maintenance_request", row["id"]
    )
    return row


@router.put("/api/maintenance/{request_id}")
async def update_request(
    request_id: UUID,
    payload: schemas.MaintenanceRequestUpdate,
    _: dict = Depends(auth_dependencies.get_current_user),
) -> dict:
    row = await repository.update_request(request_id, payload)
    if row is None:
        raise not_found("Maintenance request")
    return row


@router.delete("/api/maintenance/{request_id}")
async def delete_request(
    request_id: UUID,
    request: Request,
    background_tasks: BackgroundTasks,
    current_user: dict = Depends(auth_dependencies.get_current_user),
) -> dict:
    row = await repository.delete_request(request_id)
    if row is None:
        raise not_found("Maintenance request")
    background_tasks.add_task(
        audit.record_background, request, current_user, "delete", "maintenance_request", request_id
    )
    return deleted("Maintenance request")
