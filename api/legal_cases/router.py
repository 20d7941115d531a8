"""
Legal case API endpoints.
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


@router.get("/api/legal-cases")
async def list_legal_cases(
    property_id: UUID | None = Query(default=None),
    case_status: str | None = Query(default=None, alias="status"),
    case_type: str | None = Query(default=None),
    page: Page = Depends(page_params),
    _: dict = Depends(auth_dependencies.get_current_user),
) -> dict:
    return await repository.list_legal_cases(
        property_id=property_id,
        case_status=case_status,
        case_type=case_type,
        page=page,
    )


@router.get("/api/legal-cases/{case_id}")
async def get_legal_case(
    case_id: UUID,
    _: dict = Depends(auth_dependencies.get_current_user),
) -> dict:
    row = await repository.get_legal_case(case_id)
    if row is None:
        raise not_found("Legal case")
    return row


@router.post("/api/legal-cases", status_code=status.HTTP_201_CREATED)
async def create_legal_case(
    payload: schemas.LegalCaseCreate,
    request: Request,
    background_tasks: BackgroundTasks,
    current_user: dict = Depends(auth_dependencies.get_current_user),
) -> dict:
    require_fields(payload, "summary", "case_type")
    row = await repository.create_legal_case(payload, opened_by=current_user["id"])
    background_tasks.add_task(
        audit.record_background, request, current_user, "create", "legal_case", row["id"]
    )
    return row


@router.put("/api/legal-cases/{case_id}")
async def update_legal_case(
    case_id: UUID,
    payload: schemas.LegalCaseUpdate,
    _: dict = Depends(auth_dependencies.get_current_user),
) -> dict:
    row = await repository.update_legal_case(case_id, payload)
    if row is None:
        raise not_found("Legal case")
    return row


@router.delete("/api/legal-cases/{case_id}")
async def delete_legal_case(
    case_id: UUID,
    request: Request,
    background_tasks: BackgroundTasks,
    current_user: dict = Depends(auth_dependencies.get_current_user),
) -> dict:
    row = await repository.delete_legal_case(case_id)
    if row is None:
        raise not_found("Legal case")
    background_tasks.add_task(
        audit.record_background, request, current_user, "delete", "legal_case", case_id
    )
    return deleted("Legal case")


@router.get("/api/legal-cases/{case_id}/updates")
async def list_case_updates(
    case_id: UUID,
    page: Page = Depends(page_params),
    _: dict = Depends(auth_dependencies.get_current_user),
) -> list[dict]:
    return await repository.list_case_updates(case_id, page=page)


@router.post("/api/legal-cases/{case_id}/updates", status_code=status.HTTP_201_CREATED)
async def create_case_update(
    case_id: UUID,
    payload: schemas.CaseUpdateCreate,
    current_user: dict = Depends(auth_dependencies.get_current_user),
) -> dict:
    require_fields(payload, "content")
    return await repository.create_case_update(case_id, payload, author_id=current_user["id"])
