"""
Escalation rule and event persistence (raw SQL).

`notify_channels` is a JSON column; values are serialized before binding.
"""

from __future__ import annotations

import json
from typing import Any
from uuid import UUID

from core import db
from core.listing import Page

from . import schemas


def _channels_json(channels: Any) -> str | None:
    return json.dumps(channels) if channels is not None else None


async def list_events(*, page: Page) -> list[dict]:
    return await db.fetch_all(
        """
        SELECT ee.*, er.rule_name, er.entity_type AS rule_entity_type,
               u.first_name AS escalated_to_first_name, u.last_name AS escalated_to_last_name
        FROM escalation_events ee
        LEFT JOIN escalation_rules er ON er.id = ee.rule_id
        LEFT JOIN app_users u ON u.id = ee.escalated_to
        ORDER BY ee.created_at DESC
        LIMIT $1 OFFSET $2
        """,
        page.limit,
        page.offset,
    )


async def create_event(payload: schemas.EscalationEventCreate) -> dict:
    row = await db.fetch_one(
        """
        INSERT INTO escalation_events (rule_id, entity_type, entity_id, escalated_to, resolution_notes)
        VALUES ($1, $2, $3, $4, $5)
        RETURNING *
        """,
        payload.rule_id,
        payload.entity_type,
        payload.entity_id,
        payload.escalated_to,
        payload.resolution_notes or None,
    )
    if row is None:
        raise RuntimeError("Failed to create escalation event.")
    return row


async def list_rules(*, page: Page) -> list[dict]:
    return await db.fetch_all(
        """
        SELECT * FROM escalation_rules
        ORDER BY created_at DESC
        LIMIT $1 OFFSET $2
        """,
        page.limit,
        page.offset,
    )


async def get_rule(rule_id: UUID) -> dict | None:
    return await db.fetch_one("SELECT * FROM escalation_rules WHERE id = $1", rule_id)


async def create_rule(payload: schemas.EscalationRuleFields) -> dict:
    row = await db.fetch_one(
        """
        INSERT INTO escalation_rules (rule_name, entity_type, trigger_condition, priority_filter,
                                      breach_threshold_minutes, escalate_to_role, notify_channels, is_active)
        VALUES ($1, $2, $3, $4, $5, $6, $7, $8)
        RETURNING *
        """,
        payload.rule_name,
        payload.entity_type,
        payload.trigger_condition or None,
        payload.priority_filter or None,
        payload.breach_threshold_minutes,
        payload.escalate_to_role,
        _channels_json(payload.notify_channels),
        payload.is_active if payload.is_active is not None else True,
    )
    if row is None:
        raise RuntimeError("Failed to create escalation rule.")
    return row


async def update_rule(rule_id: UUID, payload: schemas.EscalationRuleFields) -> dict | None:
    return await db.fetch_one(
        """
        UPDATE escalation_rules
        SET rule_name = COALESCE($1, rule_name),
            entity_type = COALESCE($2, entity_type),
            trigger_condition = COALESCE($3, trigger_condition),
            priority_filter = COALESCE($4, priority_filter),
            breach_threshold_minutes = COALESCE($5, breach_threshold_minutes),
            escalate_to_role = COALESCE($6, escalate_to_role),
            notify_channels = COALESCE($7, notify_channels),
            is_active = COALESCE($8, is_active),
            updated_at = NOW()
        WHERE id = $9
        RETURNING *
        """,
        payload.rule_name,
        payload.entity_type,
        payload.trigger_condition,
        payload.priority_filter,
        payload.breach_threshold_minutes,
        payload.escalate_to_role,
        _channels_json(payload.notify_channels),
        payload.is_active,
        rule_id,
    )


async def delete_rule(rule_id: UUID) -> dict | None:
    return await db.fetch_one("DELETE FROM escalation_rules WHERE id = $1 RETURNING id", rule_id)
