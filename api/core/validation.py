"""
Required-field checks for request bodies.

Bodies are parsed into pydantic models whose fields are all optional, so a
missing field reaches the handler as None and is reported with a static 400
message naming every required field of the operation.
"""

from __future__ import annotations

from typing import Any

from fastapi import HTTPException, status


def _is_missing(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def required_message(names: tuple[str, ...]) -> str:
    if len(names) == 1:
        return f"{names[0]} is required"
    if len(names) == 2:
        return f"{names[0]} and {names[1]} are required"
    return f"{', '.join(names[:-1])}, and {names[-1]} are required"


def require_fields(payload: Any, *names: str) -> None:
    if any(_is_missing(getattr(payload, name, None)) for name in names):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=required_message(names),
        )


def not_found(entity: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"{entity} not found")


def deleted(entity: str) -> dict[str, str]:
    return {"message": f"{entity} deleted successfully"}
