"""Tests for the public HTTP endpoints."""

from fastapi.testclient import TestClient

from nutrition_estimator.api.app import create_app
from tests.conftest import fdc_food


def test_health(container) -> None:
    client = TestClient(create_app(container))

    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_estimate_endpoint(container) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/estimate", json={"ingredient": "chicken breast", "measurement": "6 oz"}
    )

    assert response.status_code == 200
    data = response.json()
    assert data["estimated_calories"] == 281
    assert data["grams"] == 170.1
    assert data["nutrition_per_100g"]["calories"] == 165
    assert data["portion_info"]["is_realistic"] is True


def test_estimate_rejects_blank_request(container) -> None:
    client = TestClient(create_app(container))

    response = client.post("/estimate", json={"ingredient": " ", "measurement": ""})

    assert response.status_code == 400


def test_estimate_rejects_overlong_text(container) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/estimate",
        json={"ingredient": "rice", "measurement": "9" * 400 + " g"},
    )

    assert response.status_code == 422


def test_batch_estimate_endpoint(container) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/estimate/batch",
        json={
            "items": [
                {"ingredient": "water", "measurement": "1 cup"},
                {"ingredient": "", "measurement": ""},
            ]
        },
    )

    assert response.status_code == 200
    results = response.json()["results"]
    assert results[0]["estimated_calories"] == 0
    assert results[1]["ingredient"] == ""
    assert "error" in results[1]


def test_batch_estimate_limits_item_count(container) -> None:
    client = TestClient(create_app(container))
    items = [{"ingredient": "water", "measurement": "1 cup"}] * 51

    response = client.post("/estimate/batch", json={"items": items})

    assert response.status_code == 422


def test_food_search_endpoint(container) -> None:
    container.food_source.fdc_client.foods = [
        fdc_food(1, "Broccoli, cooked, with butter", "Survey (FNDDS)", 85),
        fdc_food(2, "Broccoli, raw", calories=34),
    ]
    client = TestClient(create_app(container))

    response = client.get("/foods/search", params={"query": "broccoli", "limit": 1})

    assert response.status_code == 200
    foods = response.json()["foods"]
    assert len(foods) == 1
    assert foods[0]["fdc_id"] == 2
    assert foods[0]["source_kind"] == "Curated"
    assert foods[0]["nutrition_per_100g"]["calories"] == 34


def test_food_search_reports_upstream_outage(container) -> None:
    container.food_source.fdc_client.error = RuntimeError("timeout")
    client = TestClient(create_app(container))

    response = client.get("/foods/search", params={"query": "kale"})

    assert response.status_code == 503


def test_food_detail_endpoint(container) -> None:
    fdc_client = container.food_source.fdc_client
    fdc_client.food_payload = fdc_food(7, "Kale, raw", calories=35)
    client = TestClient(create_app(container))

    found = client.get("/foods/7")
    fdc_client.food_payload = None
    missing = client.get("/foods/8")

    assert found.status_code == 200
    assert found.json()["description"] == "Kale, raw"
    assert missing.status_code == 404
