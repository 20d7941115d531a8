from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, BackgroundTasks, Depends, Query, Request, status

from auth import dependencies as auth_dependencies
from core import audit
from core.listing import Page, page_params
from core.validation import deleted, not_found, require_fields

from . import repository, schemas

router = APIRouter()


@router.get("/api/obligations")
async def list_obligations(
    property_id: UUID | None = Query(default=None),
    obligation_type: str | None = Query(default=None, alias="type"),
    page: Page = Depends(page_params),
    _: dict = Depends(auth_dependencies.get_current_user),
) -> dict:
    return await repository.list_obligations(property_id=property_id, obligation_type=obligation_type, page=page)


@router.get("/api/obligations/{obligation_id}")
async def get_obligation(
    obligation_id: UUID,
    _: dict = Depends(auth_dependencies.get_current_user),
) -> dict:
    row = await repository.get_obligation(obligation_id)
    if row is None:
        raise not_found("Obligation")
    return row


@router.post("/api/obligations", status_code=status.HTTP_201_CREATED)
async def create_obligation(
    payload: schemas.ObligationCreate,
    request: Request,
    background_tasks: BackgroundTasks,
    current_user: dict = Depends(auth_dependencies.get_current_user),
) -> dict:
    require_fields(payload, "property_id", "obligation_type")
    row = await repository.create_obligation(payload)
    background_tasks.add_task(
        audit.record_background, request, current_user, "create", "obligation", row["id"]
    )
    return row


@router.put("/api/obligations/{obligation_id}")
async def update_obligation(
    obligation_id: UUID,
    payload: schemas.ObligationUpdate,
    _: dict = Depends(auth_dependencies.get_current_user),
) -> dict:
    row = await repository.update_obligation(obligation_id, payload)
    if row is None:
        raise not_found("Obligation")
    return row


@router.delete("/api/obligations/{obligation_id}")
async def delete_obligation(
    obligation_id: UUID,
    request: Request,
    background_tasks: BackgroundTasks,
    current_user: dict = Depends(auth_dependencies.get_current_user),
) -> dict:
    row = await repository.delete_obligation(obligation_id)
    if row is None:
        raise not_found("Obligation")
    background_tasks.add_task(
        audit.record_background, request, current_user, "delete", "obligation", obligation_id
    )
    return deleted("Obligation")


@router.get("/api/obligations/{obligation_id}/payments")
async def list_payments(
    obligation_id: UUID,
    page: Page = Depends(page_params),
    _: dict = Depends(auth_dependencies.get_current_user),
) -> list[dict]:
    return await repository.list_payments(obligation_id, page=page)


@router.post("/api/obligations/{obligation_id}/payments", status_code=status.HTTP_201_CREATED)
async def create_payment(
    obligation_id: UUID,
    payload: schemas.ObligationPaymentCreate,
    _: dict = Depends(auth_dependencies.get_current_user),
) -> dict:
    require_fields(payload, "amount_due")
    return await repository.create_payment(obligation_id, payload)
