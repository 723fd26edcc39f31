"""Error classifier: every failure variant maps to one response shape."""

import pytest
from fastapi import HTTPException
from fastapi.testclient import TestClient
from pydantic import BaseModel
from sqlalchemy.exc import IntegrityError, OperationalError

from blog_api.core.exceptions import (
    AppError,
    NotFoundError,
    StoreError,
    StoreErrorKind,
    extract_store_code,
)
from blog_api.database import Database
from blog_api.main import create_app
from tests.conftest import build_settings


class FakePsycopgError(Exception):
    def __init__(self, pgcode):
        super().__init__(f"driver error {pgcode}")
        self.pgcode = pgcode


class Strict(BaseModel):
    count: int


def _raise(exc):
    def endpoint():
        raise exc
    return endpoint


def _client_for(environment="test", **routes):
    settings = build_settings(ENVIRONMENT=environment)
    app = create_app(settings, Database(settings.DATABASE_URL))
    for name, exc in routes.items():
        app.add_api_route(f"/boom/{name}", _raise(exc), methods=["GET"])
    return TestClient(app, raise_server_exceptions=False)


def test_http_exception_passes_through():
    client = _client_for(teapot=HTTPException(status_code=418, detail="I'm a teapot", headers={"X-Tea": "green"}))
    res = client.get("/boom/teapot")
    assert res.status_code == 418
    assert res.json() == {"error": "I'm a teapot"}
    assert res.headers["x-tea"] == "green"


def test_http_exception_with_dict_detail_is_used_as_body():
    client = _client_for(forbidden=HTTPException(status_code=403, detail={"error": "Forbidden", "message": "nope"}))
    res = client.get("/boom/forbidden")
    assert res.status_code == 403
    assert res.json() == {"error": "Forbidden", "message": "nope"}


def test_pydantic_validation_error_is_400():
    try:
        Strict(count="many")
    except Exception as e:
        validation_error = e
    client = _client_for(invalid=validation_error)
    res = client.get("/boom/invalid")
    assert res.status_code == 400
    body = res.json()
    assert body["error"] == "Validation Error"
    assert body["details"][0]["loc"] == ["count"]


def test_request_body_validation_is_400_with_field_details(client):
    res = client.post("/api/v1/categories", json={"name": ""})
    assert res.status_code == 400
    body = res.json()
    assert body["error"] == "Validation Error"
    assert body["details"][0]["loc"] == ["body", "name"]


def test_malformed_json_body_is_400(client):
    res = client.post(
        "/api/v1/categories", content=b"{not json", headers={"Content-Type": "application/json"},
    )
    assert res.status_code == 400
    assert res.json()["error"] == "Validation Error"


def test_app_error_uses_its_status():
    client = _client_for(gone=AppError("Gone for good", 410))
    res = client.get("/boom/gone")
    assert res.status_code == 410
    assert res.json() == {"error": "Gone for good"}


def test_not_found_error():
    client = _client_for(missing=NotFoundError("Widget"))
    res = client.get("/boom/missing")
    assert res.status_code == 404
    assert res.json() == {"error": "Widget not found"}


@pytest.mark.parametrize(
    "kind, status, message",
    [
        (StoreErrorKind.UNIQUE_VIOLATION, 409, "Resource already exists"),
        (StoreErrorKind.FOREIGN_KEY_VIOLATION, 400, "Referenced resource does not exist"),
        (StoreErrorKind.OTHER, 500, "Database error"),
    ],
)
def test_store_errors_by_kind(kind, status, message):
    client = _client_for(store=StoreError(kind, "code", "detail that must not leak"))
    res = client.get("/boom/store")
    assert res.status_code == status
    assert res.json() == {"error": message}


@pytest.mark.parametrize(
    "pgcode, status",
    [("23505", 409), ("23503", 400), ("23502", 500)],
)
def test_raw_sqlalchemy_errors_are_classified_by_vendor_code(pgcode, status):
    error = IntegrityError("INSERT INTO users ...", {}, FakePsycopgError(pgcode))
    client = _client_for(raw=error)
    assert client.get("/boom/raw").status_code == status


def test_store_error_without_vendor_code_is_500():
    error = OperationalError("SELECT 1", {}, Exception("connection refused"))
    client = _client_for(down=error)
    res = client.get("/boom/down")
    assert res.status_code == 500
    assert res.json() == {"error": "Database error"}


def test_extract_store_code_reads_driver_attributes():
    assert extract_store_code(IntegrityError("stmt", {}, FakePsycopgError("23505"))) == "23505"
    assert extract_store_code(IntegrityError("stmt", {}, Exception("no code"))) is None
    assert StoreError.from_exception(IntegrityError("stmt", {}, FakePsycopgError("23503"))).kind is StoreErrorKind.FOREIGN_KEY_VIOLATION


def test_unexpected_error_is_redacted_outside_development():
    client = _client_for("production", crash=RuntimeError("secret internals"))
    res = client.get("/boom/crash")
    assert res.status_code == 500
    assert res.json() == {"error": "Internal Server Error"}


def test_unexpected_error_message_shown_in_development():
    client = _client_for("development", crash=RuntimeError("secret internals"))
    res = client.get("/boom/crash")
    assert res.status_code == 500
    assert res.json() == {"error": "secret internals"}


def test_unexpected_error_keeps_cors_headers_and_access_log(caplog):
    client = _client_for("production", crash=RuntimeError("secret internals"))
    with caplog.at_level("INFO", logger="blog_api.access"):
        res = client.get("/boom/crash", headers={"Origin": "http://localhost:3000"})
    assert res.status_code == 500
    assert res.json() == {"error": "Internal Server Error"}
    assert res.headers.get("access-control-allow-origin") == "http://localhost:3000"
    assert any(r.getMessage().startswith("--> GET /boom/crash 500") for r in caplog.records)


def test_unexpected_error_does_not_escape_the_app():
    settings = build_settings()
    app = create_app(settings, Database(settings.DATABASE_URL))
    app.add_api_route("/boom", _raise(RuntimeError("kaput")), methods=["GET"])
    # raise_server_exceptions defaults to True: a re-raised error would fail here
    res = TestClient(app).get("/boom")
    assert res.status_code == 500


def test_failures_are_logged(caplog):
    client = _client_for(gone=AppError("Gone for good", 410))
    with caplog.at_level("WARNING", logger="blog_api.core.error_handler"):
        client.get("/boom/gone")
    assert any("Gone for good" in record.getMessage() for record in caplog.records)


def test_unknown_route_is_404_with_method(client):
    res = client.delete("/api/v1/nothing-here")
    assert res.status_code == 404
    assert res.json() == {
        "error": "Not Found",
        "message": "The requested path /api/v1/nothing-here was not found",
        "method": "DELETE",
    }


def test_wrong_method_is_405(client):
    res = client.patch("/api/v1/users")
    assert res.status_code == 405
    assert res.json() == {"error": "Method Not Allowed"}
