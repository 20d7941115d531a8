from __future__ import annotations

from fastapi import APIRouter, Depends

from auth import dependencies as auth_dependencies

from . import repository

router = APIRouter()


@router.get("/api/dashboard/stats")
async def stats(current_user: dict = Depends(auth_dependencies.get_current_user)) -> dict:
    return await repository.stats(current_user["id"])


@router.get("/api/dashboard/recent-activity")
async def recent_activity(_: dict = Depends(auth_dependencies.get_current_user)) -> list[dict]:
    return await repository.recent_activity()


@router.get("/api/dashboard/financial-summary")
async def financial_summary(current_user: dict = Depends(auth_dependencies.get_current_user)) -> dict:
    return await repository.financial_summary(current_user["id"])


@router.get("/api/dashboard/upcoming")
async def upcoming(_: dict = Depends(auth_dependencies.get_current_user)) -> dict:
    return await repository.upcoming()
