"""
Tenancy API endpoints, including nested rent payments.
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


@router.get("/api/tenancies")
async def list_tenancies(
    property_id: UUID | None = Query(default=None),
    agreement_status: str | None = Query(default=None),
    page: Page = Depends(page_params),
    _: dict = Depends(auth_dependencies.get_current_user),
) -> dict:
    return await repository.list_tenancies(
        property_id=property_id,
        agreement_status=agreement_status,
        page=page,
    )


@router.put("/api/tenancies/payments/{payment_id}")
async def update_payment(
    payment_id: UUID,
    payload: schemas.RentPaymentUpdate,
    _: dict = Depends(auth_dependencies.get_current_user),
) -> dict:
    row = await repository.update_payment(payment_id, payload)
    if row is None:
        raise not_found("Payment")
    return row


@router.get("/api/tenancies/{tenancy_id}")
async def get_tenancy(
    tenancy_id: UUID,
    _: dict = Depends(auth_dependencies.get_current_user),
) -> dict:
    row = await repository.get_tenancy(tenancy_id)
    if row is None:
        raise not_found("Tenancy")
    return row


@router.post("/api/tenancies", status_code=status.HTTP_201_CREATED)
async def create_tenancy(
    payload: schemas.TenancyCreate,
    request: Request,
    background_tasks: BackgroundTasks,
    current_user: dict = Depends(auth_dependencies.get_current_user),
) -> dict:
    require_fields(payload, "property_id", "tenant_id", "lease_start", "monthly_rent")
    row = await repository.create_tenancy(payload)
    background_tasks.add_task(
        audit.record_background, request, current_user, "create", "tenancy", row["id"]
    )
    return row


@router.put("/api/tenancies/{tenancy_id}")
async def update_tenancy(
    tenancy_id: UUID,
    payload: schemas.TenancyUpdate,
    _: dict = Depends(auth_dependencies.get_current_user),
) -> dict:
    row = await repository.update_tenancy(tenancy_id, payload)
    if row is None:
        raise not_found("Tenancy")
    return row


@router.delete("/api/tenancies/{tenancy_id}")
async def delete_tenancy(
    tenancy_id: UUID,
    request: Request,
    background_tasks: BackgroundTasks,
    current_user: dict = Depends(auth_dependencies.get_current_user),
) -> dict:
    row = await repository.delete_tenancy(tenancy_id)
    if row is None:
        raise not_found("Tenancy")
    background_tasks.add_task(
        audit.record_background, request, current_user, "delete", "tenancy", tenancy_id
    )
    return deleted("Tenancy")


@router.get("/api/tenancies/{tenancy_id}/payments")
async def list_payments(
    tenancy_id: UUID,
    page: Page = Depends(page_params),
    _: dict = Depends(auth_dependencies.get_current_user),
) -> list[dict]:
    return await repository.list_payments(tenancy_id, page=page)


@router.post("/api/tenancies/{tenancy_id}/payments", status_code=status.HTTP_201_CREATED)
async def create_payment(
    tenancy_id: UUID,
    payload: schemas.RentPaymentCreate,
    _: dict = Depends(auth_dependencies.get_current_user),
) -> dict:
    require_fields(payload, "amount_due", "due_date")
    return await repository.create_payment(tenancy_id, payload)
