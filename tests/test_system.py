"""Health, welcome, middleware."""

from datetime import datetime


def test_health(client):
    res = client.get("/health")
    assert res.status_code == 200
    body = res.json()
    assert body["status"] == "OK"
    assert body["environment"] == "test"
    datetime.fromisoformat(body["timestamp"])


def test_health_under_api_prefix(client):
    res = client.get("/api/v1/health")
    assert res.status_code == 200
    assert res.json()["status"] == "OK"


def test_welcome(client):
    res = client.get("/")
    assert res.status_code == 200
    assert "message" in res.json()


def test_pretty_json(client):
    res = client.get("/health?pretty")
    assert res.status_code == 200
    assert res.text.startswith("{\n  ")
    assert res.json()["status"] == "OK"


def test_compact_json_by_default(client):
    assert "\n" not in client.get("/health").text


def test_cors_preflight_allows_configured_origin(client):
    res = client.options(
        "/api/v1/users",
        headers={
            "Origin": "http://localhost:3000",
            "Access-Control-Request-Method": "POST",
            "Access-Control-Request-Headers": "Content-Type, Authorization",
        },
    )
    assert res.status_code == 200
    assert res.headers["access-control-allow-origin"] == "http://localhost:3000"
    assert res.headers["access-control-allow-credentials"] == "true"
    assert "POST" in res.headers["access-control-allow-methods"]


def test_cors_rejects_unknown_origin(client):
    res = client.options(
        "/api/v1/users",
        headers={"Origin": "https://evil.example", "Access-Control-Request-Method": "GET"},
    )
    assert "access-control-allow-origin" not in res.headers


def test_requests_are_logged(client, caplog):
    with caplog.at_level("INFO", logger="blog_api.access"):
        client.get("/health")
    messages = [record.getMessage() for record in caplog.records]
    assert any(m.startswith("<-- GET /health") for m in messages)
    assert any(m.startswith("--> GET /health 200") for m in messages)
