"""
Auth API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from . import dependencies, schemas, service

router = APIRouter()


@router.get("/api/auth/me", response_model=schemas.ProfileResponse)
async def get_me(
    current_user: dict = Depends(dependencies.get_current_user),
) -> schemas.ProfileResponse:
    return await service.me(current_user)
