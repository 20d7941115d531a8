"""
Escalation rule and escalation event API endpoints.
"""

from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, BackgroundTasks, Depends, Request, status

from auth import dependencies as auth_dependencies
from core import audit
from core.listing import Page, page_params
from core.validation import deleted, not_found, require_fields

from . import repository, schemas

router = APIRouter()


@router.get("/api/escalations/events")
async def list_events(
    page: Page = Depends(page_params),
    _: dict = Depends(auth_dependencies.get_current_user),
) -> list[dict]:
    return await repository.list_events(page=page)


@router.post("/api/escalations/events", status_code=status.HTTP_201_CREATED)
async def create_event(
    payload: schemas.EscalationEventCreate,
    _: dict = Depends(auth_dependencies.get_current_user),
) -> dict:
    require_fields(payload, "entity_type", "entity_id")
    return await repository.create_event(payload)


@router.get("/api/escalations")
async def list_rules(
    page: Page = Depends(page_params),
    _: dict = Depends(auth_dependencies.get_current_user),
) -> list[dict]:
    return await repository.list_rules(page=page)


@router.get("/api/escalations/{rule_id}")
async def get_rule(
    rule_id: UUID,
    _: dict = Depends(auth_dependencies.get_current_user),
) -> dict:
    row = await repository.get_rule(rule_id)
    if row is None:
        raise not_found("Escalation rule")
    return row


@router.post("/api/escalations", status_code=status.HTTP_201_CREATED)
async def create_rule(
    payload: schemas.EscalationRuleFields,
    request: Request,
    background_tasks: BackgroundTasks,
    current_user: dict = Depends(auth_dependencies.get_current_user),
) -> dict:
    require_fields(payload, "rule_name", "entity_type", "escalate_to_role")
    row = await repository.create_rule(payload)
    background_tasks.add_task(
        audit.record_background, request, current_user, "create", "escalation_rule", row["id"]
    )
    return row


@router.put("/api/escalations/{rule_id}")
async def update_rule(
    rule_id: UUID,
    payload: schemas.EscalationRuleFields,
    _: dict = Depends(auth_dependencies.get_current_user),
) -> dict:
    row = await repository.update_rule(rule_id, payload)
    if row is None:
        raise not_found("Escalation rule")
    return row


@router.delete("/api/escalations/{rule_id}")
async def delete_rule(
    rule_id: UUID,
    request: Request,
    background_tasks: BackgroundTasks,
    current_user: dict = Depends(auth_dependencies.get_current_user),
) -> dict:
    row = await repository.delete_rule(rule_id)
    if row is None:
        raise not_found("Escalation rule")
    background_tasks.add_task(
        audit.record_background, request, current_user, "delete", "escalation_rule", rule_id
    )
    return deleted("Escalation rule")
