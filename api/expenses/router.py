"""
Property expense API endpoints.
"""

from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException, Query, Request, status

from auth import dependencies as auth_dependencies
from core import audit
from core.listing import Page, page_params
from core.validation import deleted, not_found, require_fields

from . import repository, schemas

router = APIRouter()


@router.get("/api/expenses/summary")
async def expense_summary(
    property_id: UUID | None = Query(default=None),
    _: dict = Depends(auth_dependencies.get_current_user),
) -> list[dict]:
    if property_id is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="property_id query parameter is required",
        )
    return await repository.summary_by_category(property_id)


@router.get("/api/expenses")
async def list_expenses(
    property_id: UUID | None = Query(default=None),
    expense_category: str | None = Query(default=None),
    payment_status: str | None = Query(default=None),
    page: Page = Depends(page_params),
    _: dict = Depends(auth_dependencies.get_current_user),
) -> dict:
    return await repository.list_expenses(
        property_id=property_id,
        expense_category=expense_category,
        payment_status=payment_status,
        page=page,
    )


@router.get("/api/expenses/{expense_id}")
async def get_expense(
    expense_id: UUID,
    _: dict = Depends(auth_dependencies.get_current_user),
) -> dict:
    row = await repository.get_expense(expense_id)
    if row is None:
        raise not_found("Expense")
    return row


@router.post("/api/expenses", status_code=status.HTTP_201_CREATED)
async def create_expense(
    payload: schemas.ExpenseCreate,
    request: Request,
    background_tasks: BackgroundTasks,
    current_user: dict = Depends(auth_dependencies.get_current_user),
) -> dict:
    require_fields(payload, "property_id", "expense_category", "amount")
    row = await repository.create_expense(payload, recorded_by=current_user["id"])
    background_tasks.add_task(
        audit.record_background, request, current_user, "create", "expense", row["id"]
    )
    return row


@router.put("/api/expenses/{expense_id}")
async def update_expense(
    expense_id: UUID,
    payload: schemas.ExpenseUpdate,
    _: dict = Depends(auth_dependencies.get_current_user),
) -> dict:
    row = await repository.update_expense(expense_id, payload)
    if row is None:
        raise not_found("Expense")
    return row


@router.delete("/api/expenses/{expense_id}")
async def delete_expense(
    expense_id: UUID,
    request: Request,
    background_tasks: BackgroundTasks,
    current_user: dict = Depends(auth_dependencies.get_current_user),
) -> dict:
    row = await repository.delete_expense(expense_id)
    if row is None:
        raise not_found("Expense")
    background_tasks.add_task(
        audit.record_background, request, current_user, "delete", "expense", expense_id
    )
    return deleted("Expense")
