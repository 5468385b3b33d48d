import pytest

from avl_profiler.app import COMPLETED_MESSAGE, create_app


@pytest.fixture
def client():
    app = create_app({"default_query_length": 64, "max_query_length": 1000, "seed": 7})
    app.config["TESTING"] = True
    return app.test_client()


@pytest.mark.parametrize("operation", ["insert", "delete", "search"])
def test_profile_routes(client, operation):
    resp = client.get(f"/profile/{operation}?length=150")
    assert resp.status_code == 200

    body = resp.get_json()
    assert body["ok"] is True
    assert body["message"] == COMPLETED_MESSAGE
    assert body["data"]["operation"] == operation.capitalize()
    assert body["data"]["count"] == 150
    assert "elapsed_ms" in body["data"]
    assert "memory_delta_mb" in body["data"]


def test_missing_length_uses_default(client):
    body = client.get("/profile/insert").get_json()
    assert body["data"]["count"] == 64


def test_negative_length_rejected(client):
    resp = client.get("/profile/search?length=-3")
    assert resp.status_code == 400
    assert resp.get_json()["ok"] is False


def test_length_over_limit_rejected(client):
    resp = client.get("/profile/insert?length=5000")
    assert resp.status_code == 400
    assert "at most 1000" in resp.get_json()["error"]


def test_api_profile_by_name(client):
    body = client.get("/api/profile/delete?length=10").get_json()
    assert body["ok"] is True
    assert body["data"]["operation"] == "Delete"


def test_api_profile_unknown_operation(client):
    resp = client.get("/api/profile/rotate")
    assert resp.status_code == 404
    body = resp.get_json()
    assert body["ok"] is False
    assert body["operations"] == ["delete", "insert", "search"]


def test_status(client):
    body = client.get("/api/status").get_json()
    assert body["data"] == {
        "operations": ["delete", "insert", "search"],
        "default_query_length": 64,
        "max_query_length": 1000,
        "seeded": True,
    }
