"""
Construction project and milestone persistence (raw SQL).
"""

from __future__ import annotations

from uuid import UUID

from core import db
from core.listing import ListQuery, Page

from . import schemas

PROJECT_SELECT = """
    SELECT cp.*, p.title AS property_title
    FROM construction_projects cp
    LEFT JOIN properties p ON p.id = cp.property_id
"""


async def list_projects(*, property_id: UUID | None, project_status: str | None, page: Page) -> dict:
    query = ListQuery(f"{PROJECT_SELECT} WHERE 1=1")
    query.where("cp.property_id", property_id)
    query.where("cp.status", project_status)
    return await query.fetch_page(order_by="cp.created_at DESC", page=page)


async def get_project(project_id: UUID) -> dict | None:
    return await db.fetch_one(f"{PROJECT_SELECT} WHERE cp.id = $1", project_id)


async def create_project(payload: schemas.ProjectCreate, *, managed_by: str) -> dict:
    row = await db.fetch_one(
        """
        INSERT INTO construction_projects (property_id, managed_by, project_type, title, description, status,
                                           contractor_name, contractor_phone, estimated_budget, actual_spend,
                                           currency_code, planned_start, planned_end, actual_start, actual_end)
        VALUES ($1, $2, $3, $4, $5, $6, $7, $8, $9, $10, $11, $12, $13, $14, $15)
        RETURNING *
        """,
        payload.property_id,
        managed_by,
        payload.project_type or None,
        payload.title,
        payload.description or None,
        payload.status or "planned",
        payload.contractor_name or None,
        payload.contractor_phone or None,
        payload.estimated_budget,
        payload.actual_spend,
        payload.currency_code or "INR",
        payload.planned_start,
        payload.planned_end,
        payload.actual_start,
        payload.actual_end,
    )
    if row is None:
        raise RuntimeError("Failed to create construction project.")
    return row


async def update_project(project_id: UUID, payload: schemas.ProjectUpdate) -> dict | None:
    return await db.fetch_one(
        """
        UPDATE construction_projects
        SET project_type = COALESCE($1, project_type),
            title = COALESCE($2, title),
            description = COALESCE($3, description),
            status = COALESCE($4, status),
            contractor_name = COALESCE($5, contractor_name),
            contractor_phone = COALESCE($6, contractor_phone),
            estimated_budget = COALESCE($7, estimated_budget),
            actual_spend = COALESCE($8, actual_spend),
            currency_code = COALESCE($9, currency_code),
            planned_start = COALESCE($10, planned_start),
            planned_end = COALESCE($11, planned_end),
            actual_start = COALESCE($12, actual_start),
            actual_end = COALESCE($13, actual_end),
            updated_at = NOW()
        WHERE id = $14
        RETURNING *
        """,
        payload.project_type,
        payload.title,
        payload.description,
        payload.status,
        payload.contractor_name,
        payload.contractor_phone,
        payload.estimated_budget,
        payload.actual_spend,
        payload.currency_code,
        payload.planned_start,
        payload.planned_end,
        payload.actual_start,
        payload.actual_end,
        project_id,
    )


async def delete_project(project_id: UUID) -> dict | None:
    return await db.fetch_one("DELETE FROM construction_projects WHERE id = $1 RETURNING id", project_id)


async def list_milestones(project_id: UUID) -> list[dict]:
    return await db.fetch_all(
        """
        SELECT * FROM construction_milestones
        WHERE project_id = $1
        ORDER BY sequence_order ASC
        """,
        project_id,
    )


async def create_milestone(project_id: UUID, payload: schemas.MilestoneFields) -> dict:
    row = await db.fetch_one(
        """
        INSERT INTO construction_milestones (project_id, title, description, sequence_order, due_date,
                                             status, completed_at)
        VALUES ($1, $2, $3, $4, $5, $6, $7)
        RETURNING *
        """,
        project_id,
        payload.title,
        payload.description or None,
        payload.sequence_order or 0,
        payload.due_date,
        payload.status or "pending",
        payload.completed_at,
    )
    if row is None:
        raise RuntimeError("Failed to create milestone.")
    return row


async def update_milestone(milestone_id: UUID, payload: schemas.MilestoneFields) -> dict | None:
    return await db.fetch_one(
        """
        UPDATE construction_milestones
        SET title = COALESCE($1, title),
            description = COALESCE($2, description),
            sequence_order = COALESCE($3, sequence_order),
            due_date = COALESCE($4, due_date),
            status = COALESCE($5, status),
            completed_at = COALESCE($6, completed_at),
            updated_at = NOW()
        WHERE id = $7
        RETURNING *
        """,
        payload.title,
        payload.description,
        payload.sequence_order,
        payload.due_date,
        payload.status,
        payload.completed_at,
        milestone_id,
    )
