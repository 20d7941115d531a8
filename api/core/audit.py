"""
Audit trail writes.

Routers schedule `record_background` through FastAPI `BackgroundTasks`, so the
insert happens after the response is sent and never fails the request.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from fastapi import Request

from core import db

logger = logging.getLogger(__name__)


async def record(
    *,
    actor_user_id: str | None,
    action: str,
    entity_type: str,
    entity_id: Any,
    metadata: dict[str, Any] | None = None,
    ip_address: str | None = None,
    user_agent: str | None = None,
) -> None:
    await db.execute(
        """
        INSERT INTO audit_logs (actor_user_id, action, entity_type, entity_id, metadata, ip_address, user_agent)
        VALUES ($1, $2, $3, $4, $5, $6, $7)
        """,
        actor_user_id,
        action,
        entity_type,
        str(entity_id),
        json.dumps(metadata or {}, default=str),
        ip_address,
        user_agent,
    )


async def record_background(
    request: Request,
    current_user: dict,
    action: str,
    entity_type: str,
    entity_id: Any,
    metadata: dict[str, Any] | None = None,
) -> None:
    """
    BackgroundTasks entrypoint.

    This should never raise to the request path; we just log failures.
    """
    try:
        await record(
            actor_user_id=current_user.get("id"),
            action=action,
            entity_type=entity_type,
            entity_id=entity_id,
            metadata=metadata,
            ip_address=request.client.host if request.client else None,
            user_agent=request.headers.get("user-agent"),
        )
    except Exception:
        logger.exception(
            "audit_write_failed action=%s entity_type=%s entity_id=%s",
            action,
            entity_type,
            entity_id,
        )
