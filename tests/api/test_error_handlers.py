"""
Tests for the global error handlers.
"""

import logging

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from pydantic import BaseModel

from api.error_handlers import STATUS_BY_KIND, register_error_handlers
from modules.auth.exceptions import AuthNotConfiguredError, EmailAlreadyExistsError
from modules.messages.exceptions import MessageNotFoundError
from shared.exceptions import (
    AuthenticationError,
    ErrorKind,
    InternalError,
    ValidationError,
)


class Item(BaseModel):
    name: str
    count: int


@pytest.fixture
def error_app() -> FastAPI:
    app = FastAPI()
    register_error_handlers(app)

    @app.get("/raise/validation")
    async def raise_validation():
        raise ValidationError("bad input", code="BAD_INPUT")

    @app.get("/raise/conflict")
    async def raise_conflict():
        raise EmailAlreadyExistsError()

    @app.get("/raise/unauthorized")
    async def raise_unauthorized():
        raise AuthenticationError("nope", code="NOPE")

    @app.get("/raise/not-found")
    async def raise_not_found():
        raise MessageNotFoundError("m-1")

    @app.get("/raise/internal")
    async def raise_internal():
        raise InternalError("store down", code="STORE_DOWN", details={"table": "users"})

    @app.get("/raise/not-configured")
    async def raise_not_configured():
        raise AuthNotConfiguredError()

    @app.get("/raise/unhandled")
    async def raise_unhandled():
        raise RuntimeError("connection string with password=hunter2")

    @app.post("/items")
    async def create_item(item: Item):
        return item

    return app


@pytest.fixture
def error_client(error_app) -> TestClient:
    return TestClient(error_app, raise_server_exceptions=False)


class TestStatusMapping:

    def test_every_kind_has_a_status(self):
        assert set(STATUS_BY_KIND) == set(ErrorKind)

    @pytest.mark.parametrize(
        "path,status_code,code",
        [
            ("/raise/validation", 400, "BAD_INPUT"),
            ("/raise/conflict", 409, "EMAIL_EXISTS"),
            ("/raise/unauthorized", 401, "NOPE"),
            ("/raise/not-found", 404, "MESSAGE_NOT_FOUND"),
            ("/raise/internal", 500, "STORE_DOWN"),
            ("/raise/not-configured", 500, "AUTH_NOT_CONFIGURED"),
        ],
    )
    def test_domain_errors(self, error_client, path, status_code, code):
        response = error_client.get(path)
        assert response.status_code == status_code
        assert response.json()["error"] == code
        assert set(response.json().keys()) == {"error", "message"}

    def test_details_not_exposed(self, error_client):
        response = error_client.get("/raise/internal")
        assert "users" not in response.text

    def test_www_authenticate_only_on_401(self, error_client):
        assert error_client.get("/raise/unauthorized").headers["WWW-Authenticate"] == "Bearer"
        assert "WWW-Authenticate" not in error_client.get("/raise/not-found").headers


class TestRequestValidation:

    def test_body_validation_is_400(self, error_client):
        response = error_client.post("/items", json={"name": "x"})
        assert response.status_code == 400
        data = response.json()
        assert data["error"] == "VALIDATION_ERROR"
        assert data["message"].startswith("count:")

    def test_invalid_json_is_400(self, error_client):
        response = error_client.post(
            "/items",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 400


class TestUnhandled:

    def test_generic_500(self, error_client):
        response = error_client.get("/raise/unhandled")
        assert response.status_code == 500
        assert response.json() == {
            "error": "INTERNAL_ERROR",
            "message": "internal server error",
        }
        assert "hunter2" not in response.text

    def test_unhandled_is_logged(self, error_client, caplog):
        with caplog.at_level(logging.ERROR, logger="api.error_handlers"):
            error_client.get("/raise/unhandled")
        assert "Unhandled exception on /raise/unhandled" in caplog.text

    def test_client_errors_logged_as_warnings(self, error_client, caplog):
        with caplog.at_level(logging.WARNING, logger="api.error_handlers"):
            error_client.get("/raise/not-found")
        records = [r for r in caplog.records if r.name == "api.error_handlers"]
        assert records and all(r.levelno == logging.WARNING for r in records)
