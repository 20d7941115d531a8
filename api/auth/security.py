"""
Access-token verification.

Tokens are issued elsewhere (shared HS256 secret); this service only decodes
them to find out who is calling.
"""

from __future__ import annotations

from typing import Any

import jwt

from core import settings


class AuthSecurityError(RuntimeError):
    pass


def decode_access_token(token: str) -> dict[str, Any]:
    raw = (token or "").strip()
    if not raw:
        raise AuthSecurityError("Access token is empty.")

    try:
        payload = jwt.decode(raw, settings.jwt_secret(), algorithms=[settings.jwt_algorithm()])
    except jwt.ExpiredSignatureError as exc:
        raise AuthSecurityError("Invalid or expired token") from exc
    except jwt.InvalidTokenError as exc:
        raise AuthSecurityError("Invalid or expired token") from exc

    # Tokens without a type claim predate typed tokens and are accepted.
    token_type = str(payload.get("type") or "access").strip().lower()
    if token_type != "access":
        raise AuthSecurityError("Token is not an access token.")

    return payload


def user_id_from_claims(payload: dict[str, Any]) -> str:
    subject = str(payload.get("sub") or payload.get("id") or "").strip()
    if not subject:
        raise AuthSecurityError("Invalid access token subject.")
    return subject
