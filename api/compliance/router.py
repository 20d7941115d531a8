"""
Compliance API endpoints.

The audit-cycle routes are registered before `/{check_id}` so the literal
segment is not parsed as an id.
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


@router.get("/api/compliance/audit-cycles")
async def list_audit_cycles(
    page: Page = Depends(page_params),
    _: dict = Depends(auth_dependencies.get_current_user),
) -> list[dict]:
    return await repository.list_audit_cycles(page=page)


@router.post("/api/compliance/audit-cycles", status_code=status.HTTP_201_CREATED)
async def create_audit_cycle(
    payload: schemas.AuditCycleCreate,
    _: dict = Depends(auth_dependencies.get_current_user),
) -> dict:
    require_fields(payload, "property_id", "audit_year", "audit_label")
    return await repository.create_audit_cycle(payload)


@router.get("/api/compliance/audit-cycles/{cycle_id}")
async def get_audit_cycle(
    cycle_id: UUID,
    _: dict = Depends(auth_dependencies.get_current_user),
) -> dict:
    row = await repository.get_audit_cycle(cycle_id)
    if row is None:
        raise not_found("Audit cycle")
    return row


@router.get("/api/compliance")
async def list_checks(
    property_id: UUID | None = Query(default=None),
    check_status: str | None = Query(default=None, alias="status"),
    check_type: str | None = Query(default=None),
    page: Page = Depends(page_params),
    _: dict = Depends(auth_dependencies.get_current_user),
) -> dict:
    return await repository.list_checks(
        property_id=property_id,
        check_status=check_status,
        check_type=check_type,
        page=page,
    )


@router.get("/api/compliance/{check_id}")
async def get_check(
    check_id: UUID,
    _: dict = Depends(auth_dependencies.get_current_user),
) -> dict:
    row = await repository.get_check(check_id)
    if row is None:
        raise not_found("Compliance check")
    return row


@router.post("/api/compliance", status_code=status.HTTP_201_CREATED)
async def create_check(
    payload: schemas.ComplianceCheckCreate,
    request: Request,
    background_tasks: BackgroundTasks,
    current_user: dict = Depends(auth_dependencies.get_current_user),
) -> dict:
    require_fields(payload, "property_id", "check_type")
    row = await repository.create_check(payload)
    background_tasks.add_task(
        audit.record_background, request, current_user, "create", "compliance_check", row["id"]
    )
    return row


@router.put("/api/compliance/{check_id}")
async def update_check(
    check_id: UUID,
    payload: schemas.ComplianceCheckUpdate,
    _: dict = Depends(auth_dependencies.get_current_user),
) -> dict:
    row = await repository.update_check(check_id, payload)
    if row is None:
        raise not_found("Compliance check")
    return row


@router.delete("/api/compliance/{check_id}")
async def delete_check(
    check_id: UUID,
    request: Request,
    background_tasks: BackgroundTasks,
    current_user: dict = Depends(auth_dependencies.get_current_user),
) -> dict:
    row = await repository.delete_check(check_id)
    if row is None:
        raise not_found("Compliance check")
    background_tasks.add_task(
        audit.record_background, request, current_user, "delete", "compliance_check", check_id
    )
    return deleted("Compliance check")
