"""
Document metadata persistence. File bytes live in object storage under `storage_key`.
"""

from __future__ import annotations

from uuid import UUID

from core import db
from core.listing import ListQuery, Page

from . import schemas

DOCUMENT_SELECT = """
    SELECT d.*, p.title AS property_title,
           u.first_name AS uploader_first_name, u.last_name AS uploader_last_name
    FROM documents d
    LEFT JOIN properties p ON p.id = d.property_id
    LEFT JOIN app_users u ON u.id = d.uploaded_by
"""


async def list_documents(*, property_id: UUID | None, document_type: str | None, page: Page) -> dict:
    query = ListQuery(f"{DOCUMENT_SELECT} WHERE 1=1")
    query.where("d.property_id", property_id)
    query.where("d.document_type", document_type)
    return await query.fetch_page(order_by="d.created_at DESC", page=page)


async def get_document(document_id: UUID) -> dict | None:
    return await db.fetch_one(f"{DOCUMENT_SELECT} WHERE d.id = $1", document_id)


async def create_document(payload: schemas.DocumentCreate, *, uploaded_by: str) -> dict:
    row = await db.fetch_one(
        """
        INSERT INTO documents (property_id, owner_id, uploaded_by, document_type, title, storage_key,
                               mime_type, file_size_bytes, checksum_sha256, is_sensitive, expires_on)
        VALUES ($1, $2, $3, $4, $5, $6, $7, $8, $9, $10, $11)
        RETURNING *
        """,
        payload.property_id,
        payload.owner_id,
        uploaded_by,
        payload.document_type or "other",
        payload.title,
        payload.storage_key,
        payload.mime_type or None,
        payload.file_size_bytes,
        payload.checksum_sha256 or None,
        payload.is_sensitive or False,
        payload.expires_on,
    )
    if row is None:
        raise RuntimeError("Failed to create document.")
    return row


async def update_document(document_id: UUID, payload: schemas.DocumentUpdate) -> dict | None:
    return await db.fetch_one(
        """
        UPDATE documents
        SET document_type = COALESCE($1, document_type),
            title = COALESCE($2, title),
            storage_key = COALESCE($3, storage_key),
            mime_type = COALESCE($4, mime_type),
            file_size_bytes = COALESCE($5, file_size_bytes),
            checksum_sha256 = COALESCE($6, checksum_sha256),
            is_sensitive = COALESCE($7, is_sensitive),
            expires_on = COALESCE($8, expires_on),
            owner_id = COALESCE($9, owner_id),
            updated_at = NOW()
        WHERE id = $10
        RETURNING *
        """,
        payload.document_type,
        payload.title,
        payload.storage_key,
        payload.mime_type,
        payload.file_size_bytes,
        payload.checksum_sha256,
        payload.is_sensitive,
        payload.expires_on,
        payload.owner_id,
        document_id,
    )


async def delete_document(document_id: UUID) -> dict | None:
    return await db.fetch_one("DELETE FROM documents WHERE id = $1 RETURNING id", document_id)
