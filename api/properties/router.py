"""
Property API endpoints.
"""

from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, BackgroundTasks, Depends, Query, Request, status

from auth import dependencies as auth_dependencies
from core import audit
from core.listing import Page, page_params
from core.validation import deleted, not_found, require_fields

from . import repository, schemas, service

router = APIRouter()


@router.get("/api/properties")
async def list_properties(
    occupancy_status: str | None = Query(default=None, alias="status"),
    property_type: str | None = Query(default=None, alias="type"),
    page: Page = Depends(page_params),
    _: dict = Depends(auth_dependencies.get_current_user),
) -> dict:
    return await repository.list_properties(
        occupancy_status=occupancy_status,
        property_type=property_type,
        page=page,
    )


@router.get("/api/properties/{property_id}")
async def get_property(
    property_id: UUID,
    _: dict = Depends(auth_dependencies.get_current_user),
) -> dict:
    row = await repository.get_property(property_id)
    if row is None:
        raise not_found("Property")
    return row


@router.post("/api/properties", status_code=status.HTTP_201_CREATED)
async def create_property(
    payload: schemas.PropertyCreate,
    request: Request,
    background_tasks: BackgroundTasks,
    current_user: dict = Depends(auth_dependencies.get_current_user),
) -> dict:
    require_fields(payload, "title", "property_type")
    row = await service.create_property(payload)
    background_tasks.add_task(
        audit.record_background, request, current_user, "create", "property", row["id"]
    )
    return row


@router.put("/api/properties/{property_id}")
async def update_property(
    property_id: UUID,
    payload: schemas.PropertyUpdate,
    _: dict = Depends(auth_dependencies.get_current_user),
) -> dict:
    row = await repository.update_property(property_id, payload)
    if row is None:
        raise not_found("Property")
    return row


@router.delete("/api/properties/{property_id}")
async def delete_property(
    property_id: UUID,
    request: Request,
    background_tasks: BackgroundTasks,
    current_user: dict = Depends(auth_dependencies.get_current_user),
) -> dict:
    row = await repository.delete_property(property_id)
    if row is None:
        raise not_found("Property")
    background_tasks.add_task(
        audit.record_background, request, current_user, "delete", "property", property_id
    )
    return deleted("Property")


@router.get("/api/properties/{property_id}/owners")
async def list_owners(
    property_id: UUID,
    _: dict = Depends(auth_dependencies.get_current_user),
) -> list[dict]:
    return await repository.list_owners(property_id)


@router.post("/api/properties/{property_id}/owners", status_code=status.HTTP_201_CREATED)
async def add_owner(
    property_id: UUID,
    payload: schemas.OwnerCreate,
    _: dict = Depends(auth_dependencies.get_current_user),
) -> dict:
    require_fields(payload, "user_id")
    return await repository.add_owner(property_id, payload)
