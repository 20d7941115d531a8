"""
Construction project API endpoints, including milestones.
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


@router.get("/api/construction")
async def list_projects(
    property_id: UUID | None = Query(default=None),
    project_status: str | None = Query(default=None, alias="status"),
    page: Page = Depends(page_params),
    _: dict = Depends(auth_dependencies.get_current_user),
) -> dict:
    return await repository.list_projects(property_id=property_id, project_status=project_status, page=page)


@router.put("/api/construction/milestones/{milestone_id}")
async def update_milestone(
    milestone_id: UUID,
    payload: schemas.MilestoneFields,
    _: dict = Depends(auth_dependencies.get_current_user),
) -> dict:
    row = await repository.update_milestone(milestone_id, payload)
    if row is None:
        raise not_found("Milestone")
    return row


@router.get("/api/construction/{project_id}")
async def get_project(
    project_id: UUID,
    _: dict = Depends(auth_dependencies.get_current_user),
) -> dict:
    row = await repository.get_project(project_id)
    if row is None:
        raise not_found("Construction project")
    return row


@router.post("/api/construction", status_code=status.HTTP_201_CREATED)
async def create_project(
    payload: schemas.ProjectCreate,
    request: Request,
    background_tasks: BackgroundTasks,
    current_user: dict = Depends(auth_dependencies.get_current_user),
) -> dict:
    require_fields(payload, "property_id", "title")
    row = await repository.create_project(payload, managed_by=current_user["id"])
    background_tasks.add_task(
        audit.record_background, request, current_user, "create", "construction_project", row["id"]
    )
    return row


@router.put("/api/construction/{project_id}")
async def update_project(
    project_id: UUID,
    payload: schemas.ProjectUpdate,
    _: dict = Depends(auth_dependencies.get_current_user),
) -> dict:
    row = await repository.update_project(project_id, payload)
    if row is None:
        raise not_found("Construction project")
    return row


@router.delete("/api/construction/{project_id}")
async def delete_project(
    project_id: UUID,
    request: Request,
    background_tasks: BackgroundTasks,
    current_user: dict = Depends(auth_dependencies.get_current_user),
) -> dict:
    row = await repository.delete_project(project_id)
    if row is None:
        raise not_found("Construction project")
    background_tasks.add_task(
        audit.record_background, request, current_user, "delete", "construction_project", project_id
    )
    return deleted("Construction project")


@router.get("/api/construction/{project_id}/milestones")
async def list_milestones(
    project_id: UUID,
    _: dict = Depends(auth_dependencies.get_current_user),
) -> list[dict]:
    return await repository.list_milestones(project_id)


@router.post("/api/construction/{project_id}/milestones", status_code=status.HTTP_201_CREATED)
async def create_milestone(
    project_id: UUID,
    payload: schemas.MilestoneFields,
    _: dict = Depends(auth_dependencies.get_current_user),
) -> dict:
    require_fields(payload, "title")
    return await repository.create_milestone(project_id, payload)
