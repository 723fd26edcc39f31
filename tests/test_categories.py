"""Category API."""

import uuid


def test_create_and_get_category(client):
    res = client.post("/api/v1/categories", json={"name": "python", "description": "All things Python"})
    assert res.status_code == 201
    created = res.json()["data"]
    assert created["name"] == "python"
    assert created["description"] == "All things Python"

    fetched = client.get(f"/api/v1/categories/{created['id']}")
    assert fetched.status_code == 200
    assert fetched.json()["data"] == created


def test_description_is_optional(client):
    res = client.post("/api/v1/categories", json={"name": "misc"})
    assert res.status_code == 201
    assert res.json()["data"]["description"] is None


def test_list_categories(client, make_category):
    make_category("a")
    make_category("b")
    res = client.get("/api/v1/categories")
    assert res.status_code == 200
    assert sorted(c["name"] for c in res.json()["data"]) == ["a", "b"]


def test_name_too_long_is_validation_error(client):
    res = client.post("/api/v1/categories", json={"name": "x" * 101})
    assert res.status_code == 400
    assert res.json()["error"] == "Validation Error"


def test_duplicate_name_is_409(client, make_category):
    make_category("python")
    res = client.post("/api/v1/categories", json={"name": "python"})
    assert res.status_code == 409
    assert res.json() == {"error": "Resource already exists"}


def test_update_category_is_partial(client, make_category):
    created = make_category("python", "old")
    res = client.put(f"/api/v1/categories/{created['id']}", json={"description": "new"})
    assert res.status_code == 200
    data = res.json()["data"]
    assert data["name"] == "python"
    assert data["description"] == "new"


def test_update_category_rejects_null_name(client, make_category):
    created = make_category("python")
    res = client.put(f"/api/v1/categories/{created['id']}", json={"name": None})
    assert res.status_code == 400


def test_missing_category_is_404(client):
    missing = uuid.uuid4()
    assert client.get(f"/api/v1/categories/{missing}").json() == {"error": "Category not found"}
    assert client.put(f"/api/v1/categories/{missing}", json={"name": "x"}).status_code == 404
    assert client.delete(f"/api/v1/categories/{missing}").status_code == 404


def test_delete_category(client, make_category):
    created = make_category("python")
    res = client.delete(f"/api/v1/categories/{created['id']}")
    assert res.status_code == 200
    assert res.json() == {"success": True, "message": "Category deleted successfully"}
    assert client.delete(f"/api/v1/categories/{created['id']}").status_code == 404


def test_delete_category_in_use_is_rejected(client, make_category, auth_headers):
    created = make_category("python")
    client.post(
        "/api/v1/posts",
        json={"title": "T", "content": "C", "slug": "s", "categoryIds": [created["id"]]},
        headers=auth_headers,
    )
    res = client.delete(f"/api/v1/categories/{created['id']}")
    assert res.status_code == 400
    assert res.json() == {"error": "Referenced resource does not exist"}
