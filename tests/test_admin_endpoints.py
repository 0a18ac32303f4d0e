"""Tests for admin endpoints."""

from fastapi.testclient import TestClient

from nutrition_estimator.api.app import create_app

_HEADERS = {"X-Admin-Token": "admin-token"}


def test_admin_requires_token(container) -> None:
    client = TestClient(create_app(container))

    assert client.get("/admin/health").status_code == 401
    response = client.get("/admin/cache", headers={"X-Admin-Token": "wrong"})
    assert response.status_code == 401


def test_admin_health(container) -> None:
    client = TestClient(create_app(container))

    response = client.get("/admin/health", headers=_HEADERS)

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_admin_cache_stats_and_clear(container) -> None:
    client = TestClient(create_app(container))
    client.post("/estimate", json={"ingredient": "water", "measurement": "1 cup"})
    client.post("/estimate", json={"ingredient": "water", "measurement": "1 cup"})

    response = client.get("/admin/cache", headers=_HEADERS)

    assert response.status_code == 200
    data = response.json()
    assert data["size"] == 1
    assert data["hits"] == 1
    assert data["popular"] == [["calc:water:1 cup", 1]]

    cleared = client.delete("/admin/cache", headers=_HEADERS)

    assert cleared.json() == {"status": "cleared"}
    assert client.get("/admin/cache", headers=_HEADERS).json()["size"] == 0
