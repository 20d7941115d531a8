"""
Land revenue record persistence (raw SQL).
"""

from __future__ import annotations

from uuid import UUID

from core import db
from core.listing import ListQuery, Page

from . import schemas

RECORD_SELECT = """
    SELECT rr.*, p.title AS property_title
    FROM revenue_records rr
    LEFT JOIN properties p ON p.id = rr.property_id
"""


async def list_records(
    *,
    property_id: UUID | None,
    record_type: str | None,
    state_code: str | None,
    page: Page,
) -> dict:
    query = ListQuery(f"{RECORD_SELECT} WHERE 1=1")
    query.where("rr.property_id", property_id)
    query.where("rr.record_type", record_type)
    query.where("rr.state_code", state_code)
    return await query.fetch_page(order_by="rr.created_at DESC", page=page)


async def get_record(record_id: UUID) -> dict | None:
    return await db.fetch_one(f"{RECORD_SELECT} WHERE rr.id = $1", record_id)


async def create_record(payload: schemas.RevenueRecordCreate) -> dict:
    row = await db.fetch_one(
        """
        INSERT INTO revenue_records (property_id, record_type, state_code, district, taluk, village,
                                     survey_number, sub_division, extent_acres, extent_hectares,
                                     land_classification, current_holder_name, cultivation_details,
                                     pattadar_passbook_number, last_verified_on, document_id, notes)
        VALUES ($1, $2, $3, $4, $5, $6, $7, $8, $9, $10, $11, $12, $13, $14, $15, $16, $17)
        RETURNING *
        """,
        payload.property_id,
        payload.record_type,
        payload.state_code or None,
        payload.district or None,
        payload.taluk or None,
        payload.village or None,
        payload.survey_number or None,
        payload.sub_division or None,
        payload.extent_acres,
        payload.extent_hectares,
        payload.land_classification or None,
        payload.current_holder_name or None,
        payload.cultivation_details or None,
        payload.pattadar_passbook_number or None,
        payload.last_verified_on,
        payload.document_id,
        payload.notes or None,
    )
    if row is None:
        raise RuntimeError("Failed to create revenue record.")
    return row


async def update_record(record_id: UUID, payload: schemas.RevenueRecordUpdate) -> dict | None:
    return await db.fetch_one(
        """
        UPDATE revenue_records
        SET record_type = COALESCE($1, record_type),
            state_code = COALESCE($2, state_code),
            district = COALESCE($3, district),
            taluk = COALESCE($4, taluk),
            village = COALESCE($5, village),
            survey_number = COALESCE($6, survey_number),
            sub_division = COALESCE($7, sub_division),
            extent_acres = COALESCE($8, extent_acres),
            extent_hectares = COALESCE($9, extent_hectares),
            land_classification = COALESCE($10, land_classification),
            current_holder_name = COALESCE($11, current_holder_name),
            cultivation_details = COALESCE($12, cultivation_details),
            pattadar_passbook_number = COALESCE($13, pattadar_passbook_number),
            last_verified_on = COALESCE($14, last_verified_on),
            document_id = COALESCE($15, document_id),
            notes = COALESCE($16, notes),
            updated_at = NOW()
        WHERE id = $17
        RETURNING *
        """,
        payload.record_type,
        payload.state_code,
        payload.district,
        payload.taluk,
        payload.village,
        payload.survey_number,
        payload.sub_division,
        payload.extent_acres,
        payload.extent_hectares,
        payload.land_classification,
        payload.current_holder_name,
        payload.cultivation_details,
        payload.pattadar_passbook_number,
        payload.last_verified_on,
        payload.document_id,
        payload.notes,
        record_id,
    )


async def delete_record(record_id: UUID) -> dict | None:
    return await db.fetch_one("DELETE FROM revenue_records WHERE id = $1 RETURNING id", record_id)
