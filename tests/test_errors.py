import pytest
from fastapi.testclient import TestClient

from core import settings
from core.validation import deleted, not_found, require_fields, required_message
from fastapi import HTTPException
from main import app
from properties.schemas import PropertyCreate


class TestRequiredFields:
    def test_messages(self):
        assert required_message(("content",)) == "content is required"
        assert required_message(("title", "property_type")) == "title and property_type are required"
        assert (
            required_message(("owner_id", "attorney_holder_id", "poa_scope"))
            == "owner_id, attorney_holder_id, and poa_scope are required"
        )

    def test_blank_string_is_missing(self):
        with pytest.raises(HTTPException) as exc_info:
            require_fields(PropertyCreate(title="  ", property_type="villa"), "title", "property_type")
        assert exc_info.value.status_code == 400
        assert exc_info.value.detail == "title and property_type are required"

    def test_present_fields_pass(self):
        require_fields(PropertyCreate(title="Sea View", property_type="villa"), "title", "property_type")

    def test_helpers(self):
        assert not_found("Expense").detail == "Expense not found"
        assert deleted("Expense") == {"message": "Expense deleted successfully"}


def test_health_needs_no_auth(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ok"
    assert "timestamp" in body


def test_malformed_id_is_a_400(client, fake_db, auth_headers):
    response = client.get("/api/properties/not-a-uuid", headers=auth_headers)
    assert response.status_code == 400
    assert response.json()["error"] == "Invalid request"
    assert fake_db.calls == []


def test_unknown_route_uses_error_envelope(client):
    response = client.get("/api/nowhere")
    assert response.status_code == 404
    assert response.json() == {"error": "Not Found"}


class TestUnhandledErrors:
    @pytest.fixture
    def lenient_client(self):
        return TestClient(app, raise_server_exceptions=False)

    def test_storage_failure_is_a_generic_500(self, lenient_client, fake_db, auth_headers, monkeypatch):
        monkeypatch.setenv("APP_ENV", "production")
        fake_db.error = RuntimeError("relation does not exist")
        response = lenient_client.get("/api/properties", headers=auth_headers)
        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error"}

    def test_development_exposes_message(self, lenient_client, fake_db, auth_headers, monkeypatch):
        monkeypatch.setenv("APP_ENV", "development")
        assert settings.is_development()
        fake_db.error = RuntimeError("relation does not exist")
        response = lenient_client.get("/api/properties", headers=auth_headers)
        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error", "message": "relation does not exist"}


class TestSettings:
    def test_blank_values_fall_back(self, monkeypatch):
        monkeypatch.setenv("PORT", "  ")
        monkeypatch.setenv("DB_POOL_MAX_SIZE", "lots")
        assert settings.port() == 3001
        assert settings.db_pool_max_size() == 20

    def test_client_origins_are_split(self, monkeypatch):
        monkeypatch.setenv("CLIENT_URL", "http://a.test, http://b.test,")
        assert settings.client_origins() == ["http://a.test", "http://b.test"]

    def test_default_environment_is_production(self, monkeypatch):
        monkeypatch.delenv("APP_ENV", raising=False)
        assert settings.environment() == "production"
        assert not settings.is_development()
