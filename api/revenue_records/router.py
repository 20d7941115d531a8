from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, BackgroundTasks, Depends, Query, Request, status

from auth import dependencies as auth_dependencies
from core import audit
from core.listing import Page, page_params
from core.validation import deleted, not_found, require_fields

from . import repository, schemas

router = APIRouter()


@router.get("/api/revenue-records")
async def list_records(
    property_id: UUID | None = Query(default=None),
    record_type: str | None = Query(default=None),
    state_code: str | None = Query(default=None),
    page: Page = Depends(page_params),
    _: dict = Depends(auth_dependencies.get_current_user),
) -> dict:
    return await repository.list_records(
        property_id=property_id,
        record_type=record_type,
        state_code=state_code,
        page=page,
    )


@router.get("/api/revenue-records/{record_id}")
async def get_record(
    record_id: UUID,
    _: dict = Depends(auth_dependencies.get_current_user),
) -> dict:
    row = await repository.get_record(record_id)
    if row is None:
        raise not_found("Revenue record")
    return row


@router.post("/api/revenue-records", status_code=status.HTTP_201_CREATED)
async def create_record(
    payload: schemas.RevenueRecordCreate,
    request: Request,
    background_tasks: BackgroundTasks,
    current_user: dict = Depends(auth_dependencies.get_current_user),
) -> dict:
    require_fields(payload, "property_id", "record_type")
    row = await repository.create_record(payload)
    background_tasks.add_task(
        audit.record_background, request, current_user, "create", "revenue_record", row["id"]
    )
    return row


@router.put("/api/revenue-records/{record_id}")
async def update_record(
    record_id: UUID,
    payload: schemas.RevenueRecordUpdate,
    _: dict = Depends(auth_dependencies.get_current_user),
) -> dict:
    row = await repository.update_record(record_id, payload)
    if row is None:
        raise not_found("Revenue record")
    return row


@router.delete("/api/revenue-records/{record_id}")
async def delete_record(
    record_id: UUID,
    request: Request,
    background_tasks: BackgroundTasks,
    current_user: dict = Depends(auth_dependencies.get_current_user),
) -> dict:
    row = await repository.delete_record(record_id)
    if row is None:
        raise not_found("Revenue record")
    background_tasks.add_task(
        audit.record_background, request, current_user, "delete", "revenue_record", record_id
    )
    return deleted("Revenue record")
