from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, BackgroundTasks, Depends, Query, Request, status

from auth import dependencies as auth_dependencies
from core import audit
from core.listing import Page, page_params
from core.validation import deleted, not_found, require_fields

from . import repository, schemas

router = APIRouter()


@router.get("/api/poa")
async def list_powers(
    property_id: UUID | None = Query(default=None),
    poa_status: str | None = Query(default=None, alias="status"),
    page: Page = Depends(page_params),
    _: dict = Depends(auth_dependencies.get_current_user),
) -> dict:
    return await repository.list_powers(property_id=property_id, poa_status=poa_status, page=page)


@router.get("/api/poa/{poa_id}")
async def get_power(
    poa_id: UUID,
    _: dict = Depends(auth_dependencies.get_current_user),
) -> dict:
    row = await repository.get_power(poa_id)
    if row is None:
        raise not_found("Power of attorney")
    return row


@router.post("/api/poa", status_code=status.HTTP_201_CREATED)
async def create_power(
    payload: schemas.PowerOfAttorneyCreate,
    request: Request,
    background_tasks: BackgroundTasks,
    current_user: dict = Depends(auth_dependencies.get_current_user),
) -> dict:
    require_fields(payload, "owner_id", "attorney_holder_id", "poa_scope")
    row = await repository.create_power(payload)
    background_tasks.add_task(
        audit.record_background, request, current_user, "create", "power_of_attorney", row["id"]
    )
    return row


@router.put("/api/poa/{poa_id}")
async def update_power(
    poa_id: UUID,
    payload: schemas.PowerOfAttorneyUpdate,
    _: dict = Depends(auth_dependencies.get_current_user),
) -> dict:
    row = await repository.update_power(poa_id, payload)
    if row is None:
        raise not_found("Power of attorney")
    return row


@router.delete("/api/poa/{poa_id}")
async def delete_power(
    poa_id: UUID,
    request: Request,
    background_tasks: BackgroundTasks,
    current_user: dict = Depends(auth_dependencies.get_current_user),
) -> dict:
    row = await repository.delete_power(poa_id)
    if row is None:
        raise not_found("Power of attorney")
    background_tasks.add_task(
        audit.record_background, request, current_user, "delete", "power_of_attorney", poa_id
    )
    return deleted("Power of attorney")
