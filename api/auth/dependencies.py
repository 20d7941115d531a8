"""
Bearer-token dependency shared by every protected route.
"""

from __future__ import annotations

from fastapi import Depends, Header, HTTPException, status

from . import service

BEARER_PREFIX = "Bearer "


def bearer_token(authorization: str | None) -> str:
    header = authorization or ""
    if not header.startswith(BEARER_PREFIX):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
        )
    return header[len(BEARER_PREFIX):]


async def get_bearer_token(authorization: str | None = Header(default=None)) -> str:
    return bearer_token(authorization)


async def get_current_user(access_token: str = Depends(get_bearer_token)) -> dict:
    """Caller dict built from the verified access-token claims."""
    return service.get_user_from_access_token(access_token)
