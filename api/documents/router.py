from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, BackgroundTasks, Depends, Query, Request, status

from auth import dependencies as auth_dependencies
from core import audit
from core.listing import Page, page_params
from core.validation import deleted, not_found, require_fields

from . import repository, schemas

router = APIRouter()


@router.get("/api/documents")
async def list_documents(
    property_id: UUID | None = Query(default=None),
    document_type: str | None = Query(default=None),
    page: Page = Depends(page_params),
    _: dict = Depends(auth_dependencies.get_current_user),
) -> dict:
    return await repository.list_documents(property_id=property_id, document_type=document_type, page=page)


@router.get("/api/documents/{document_id}")
async def get_document(
    document_id: UUID,
    _: dict = Depends(auth_dependencies.get_current_user),
) -> dict:
    row = await repository.get_document(document_id)
    if row is None:
        raise not_found("Document")
    return row


@router.post("/api/documents", status_code=status.HTTP_201_CREATED)
async def create_document(
    payload: schemas.DocumentCreate,
    request: Request,
    background_tasks: BackgroundTasks,
    current_user: dict = Depends(auth_dependencies.get_current_user),
) -> dict:
    require_fields(payload, "title", "storage_key")
    row = await repository.create_document(payload, uploaded_by=current_user["id"])
    background_tasks.add_task(
        audit.record_background, request, current_user, "create", "document", row["id"]
    )
    return row


@router.put("/api/documents/{document_id}")
async def update_document(
    document_id: UUID,
    payload: schemas.DocumentUpdate,
    _: dict = Depends(auth_dependencies.get_current_user),
) -> dict:
    row = await repository.update_document(document_id, payload)
    if row is None:
        raise not_found("Document")
    return row


@router.delete("/api/documents/{document_id}")
async def delete_document(
    document_id: UUID,
    request: Request,
    background_tasks: BackgroundTasks,
    current_user: dict = Depends(auth_dependencies.get_current_user),
) -> dict:
    row = await repository.delete_document(document_id)
    if row is None:
        raise not_found("Document")
    background_tasks.add_task(
        audit.record_background, request, current_user, "delete", "document", document_id
    )
    return deleted("Document")
