"""
Property business logic.
"""

from __future__ import annotations

from core import db

from . import repository, schemas


async def create_property(payload: schemas.PropertyCreate) -> dict:
    """
    Insert the optional address and the property in one transaction.

    A failure after the address insert rolls it back, so no orphan address
    row is left behind.
    """
    async with db.transaction() as conn:
        address_id = None
        if payload.line1:
            address_id = await repository.insert_address(conn, payload)
        return await repository.insert_property(conn, payload, address_id=address_id)
