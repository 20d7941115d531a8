import time

import jwt
import pytest

from auth import security
from auth.service import get_user_from_access_token
from fastapi import HTTPException

from conftest import USER_ID


class TestDecodeAccessToken:
    def test_valid_token(self, token_factory):
        payload = security.decode_access_token(token_factory())
        assert payload["sub"] == USER_ID

    def test_token_without_type_is_accepted(self, token_factory):
        payload = security.decode_access_token(token_factory(type=None))
        assert security.user_id_from_claims(payload) == USER_ID

    def test_refresh_token_is_rejected(self, token_factory):
        with pytest.raises(security.AuthSecurityError):
            security.decode_access_token(token_factory(type="refresh"))

    def test_expired_token_is_rejected(self, token_factory):
        with pytest.raises(security.AuthSecurityError, match="Invalid or expired token"):
            security.decode_access_token(token_factory(exp=int(time.time()) - 60))

    def test_wrong_secret_is_rejected(self):
        token = jwt.encode({"sub": USER_ID}, "some-other-secret", algorithm="HS256")
        with pytest.raises(security.AuthSecurityError):
            security.decode_access_token(token)

    def test_empty_token(self):
        with pytest.raises(security.AuthSecurityError):
            security.decode_access_token("   ")

    def test_subject_falls_back_to_id_claim(self):
        assert security.user_id_from_claims({"id": "abc"}) == "abc"

    def test_missing_subject(self):
        with pytest.raises(security.AuthSecurityError):
            security.user_id_from_claims({"email": "x@y.z"})


def test_caller_dict_from_claims(token_factory):
    user = get_user_from_access_token(token_factory())
    assert user == {
        "id": USER_ID,
        "email": "manager@elevare.test",
        "first_name": "Asha",
        "last_name": "Rao",
        "roles": ["manager"],
    }


def test_bad_token_maps_to_401():
    with pytest.raises(HTTPException) as exc_info:
        get_user_from_access_token("not-a-jwt")
    assert exc_info.value.status_code == 401


class TestBearerDependency:
    def test_missing_header(self, client, fake_db):
        response = client.get("/api/properties")
        assert response.status_code == 401
        assert response.json() == {"error": "Authentication required"}
        assert fake_db.calls == []

    def test_wrong_scheme(self, client, token_factory):
        response = client.get("/api/properties", headers={"Authorization": f"Basic {token_factory()}"})
        assert response.status_code == 401

    def test_invalid_token(self, client):
        response = client.get("/api/properties", headers={"Authorization": "Bearer nope"})
        assert response.status_code == 401
        assert response.json() == {"error": "Invalid or expired token"}


class TestMe:
    def test_profile_with_roles(self, client, fake_db, auth_headers):
        fake_db.one.append(
            {
                "id": USER_ID,
                "email": "manager@elevare.test",
                "first_name": "Asha",
                "last_name": "Rao",
                "phone": None,
                "is_active": True,
                "created_at": None,
                "roles": ["manager", "admin"],
            }
        )
        response = client.get("/api/auth/me", headers=auth_headers)
        assert response.status_code == 200
        body = response.json()
        assert body["firstName"] == "Asha"
        assert body["roles"] == ["manager", "admin"]
        assert fake_db.calls[0][2] == (USER_ID,)

    def test_unknown_user(self, client, fake_db, auth_headers):
        response = client.get("/api/auth/me", headers=auth_headers)
        assert response.status_code == 404
        assert response.json() == {"error": "User not found"}
