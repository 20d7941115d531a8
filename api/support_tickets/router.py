"""
Support ticket API endpoints and the ticket message thread.
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


@router.get("/api/support-tickets")
async def list_tickets(
    property_id: UUID | None = Query(default=None),
    ticket_status: str | None = Query(default=None, alias="status"),
    ticket_type: str | None = Query(default=None, alias="type"),
    page: Page = Depends(page_params),
    _: dict = Depends(auth_dependencies.get_current_user),
) -> dict:
    return await repository.list_tickets(
        property_id=property_id,
        ticket_status=ticket_status,
        ticket_type=ticket_type,
        page=page,
    )


@router.get("/api/support-tickets/{ticket_id}")
async def get_ticket(
    ticket_id: UUID,
    _: dict = Depends(auth_dependencies.get_current_user),
) -> dict:
    row = await repository.get_ticket(ticket_id)
    if row is None:
        raise not_found("Support ticket")
    return row


@router.post("/api/support-tickets", status_code=status.HTTP_201_CREATED)
async def create_ticket(
    payload: schemas.TicketCreate,
    request: Request,
    background_tasks: BackgroundTasks,
    current_user: dict = Depends(auth_dependencies.get_current_user),
) -> dict:
    require_fields(payload, "subject", "ticket_type")
    row = await repository.create_ticket(payload, opened_by=current_user["id"])
    background_tasks.add_task(
        audit.record_background, request, current_user, "create", "support_ticket", row["id"]
    )
    return row


@router.put("/api/support-tickets/{ticket_id}")
async def update_ticket(
    ticket_id: UUID,
    payload: schemas.TicketUpdate,
    _: dict = Depends(auth_dependencies.get_current_user),
) -> dict:
    row = await repository.update_ticket(ticket_id, payload)
    if row is None:
        raise not_found("Support ticket")
    return row


@router.delete("/api/support-tickets/{ticket_id}")
async def delete_ticket(
    ticket_id: UUID,
    request: Request,
    background_tasks: BackgroundTasks,
    current_user: dict = Depends(auth_dependencies.get_current_user),
) -> dict:
    row = await repository.delete_ticket(ticket_id)
    if row is None:
        raise not_found("Support ticket")
    background_tasks.add_task(
        audit.record_background, request, current_user, "delete", "support_ticket", ticket_id
    )
    return deleted("Support ticket")


@router.get("/api/support-tickets/{ticket_id}/messages")
async def list_messages(
    ticket_id: UUID,
    page: Page = Depends(page_params),
    _: dict = Depends(auth_dependencies.get_current_user),
) -> list[dict]:
    return await repository.list_messages(ticket_id, page=page)


@router.post("/api/support-tickets/{ticket_id}/messages", status_code=status.HTTP_201_CREATED)
async def add_message(
    ticket_id: UUID,
    payload: schemas.TicketMessageCreate,
    current_user: dict = Depends(auth_dependencies.get_current_user),
) -> dict:
    require_fields(payload, "message_body")
    return await repository.add_message(ticket_id, payload, sender_id=current_user["id"])
