"""
User profile persistence helpers.
"""

from __future__ import annotations

from core import db


async def get_user_profile(user_id: str) -> dict | None:
    return await db.fetch_one(
        """
        SELECT u.id, u.email, u.first_name, u.last_name, u.phone,
               u.is_active, u.created_at, u.updated_at,
               COALESCE(array_agg(r.code) FILTER (WHERE r.code IS NOT NULL), '{}') AS roles
        FROM app_users u
        LEFT JOIN user_roles ur ON ur.user_id = u.id
        LEFT JOIN roles r ON r.id = ur.role_id
        WHERE u.id = $1
        GROUP BY u.id
        """,
        user_id,
    )
