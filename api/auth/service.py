"""
Caller identity resolution.
"""

from __future__ import annotations

from fastapi import HTTPException, status

from . import repository, schemas, security


def get_user_from_access_token(access_token: str) -> dict:
    try:
        payload = security.decode_access_token(access_token)
        user_id = security.user_id_from_claims(payload)
    except security.AuthSecurityError as exc:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(exc),
        ) from exc

    roles = payload.get("roles") or []
    return {
        "id": user_id,
        "email": payload.get("email"),
        "first_name": payload.get("firstName") or payload.get("first_name"),
        "last_name": payload.get("lastName") or payload.get("last_name"),
        "roles": [str(role) for role in roles] if isinstance(roles, list) else [],
    }


async def me(current_user: dict) -> schemas.ProfileResponse:
    row = await repository.get_user_profile(current_user["id"])
    if row is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found",
        )
    return schemas.ProfileResponse(
        id=row["id"],
        email=str(row["email"]),
        first_name=row.get("first_name"),
        last_name=row.get("last_name"),
        phone=row.get("phone"),
        roles=list(row.get("roles") or []),
        is_active=bool(row.get("is_active", False)),
        created_at=row.get("created_at"),
    )
