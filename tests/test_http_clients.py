"""Tests for HTTP-based adapters."""

import asyncio
import json

import httpx
import pytest

from nutrition_estimator.adapters.fdc_client import HttpxFdcClient


def _client(handler) -> HttpxFdcClient:  # type: ignore[no-untyped-def]
    transport = httpx.MockTransport(handler)
    async_client = httpx.AsyncClient(transport=transport)
    return HttpxFdcClient(
        api_key="key",
        base_url="https://api.test/fdc/v1",
        http_client=async_client,
    )


def test_fdc_client_search_posts_query() -> None:
    seen: dict[str, object] = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["path"] = request.url.path
        seen["api_key"] = request.url.params.get("api_key")
        seen["payload"] = json.loads(request.content.decode())
        return httpx.Response(
            200,
            json={
                "totalHits": 1,
                "foods": [
                    {
                        "fdcId": 170379,
                        "description": "Broccoli, raw",
                        "dataType": "Foundation",
                        "foodCategory": "Vegetables and Vegetable Products",
                        "foodNutrients": [
                            {
                                "nutrientId": 1008,
                                "nutrientName": "Energy",
                                "unitName": "KCAL",
                                "value": 34,
                            }
                        ],
                    }
                ],
            },
        )

    client = _client(handler)

    result = asyncio.run(client.search_foods("broccoli", page_size=10))

    assert seen["path"] == "/fdc/v1/foods/search"
    assert seen["api_key"] == "key"
    payload = seen["payload"]
    assert payload["query"] == "broccoli"
    assert payload["pageSize"] == 10
    assert payload["dataType"] == ["Foundation", "Survey (FNDDS)"]
    assert result.total_hits == 1
    candidate = result.foods[0].to_candidate()
    assert candidate.external_id == 170379
    assert candidate.category == "Vegetables and Vegetable Products"
    assert candidate.raw_nutrients[0].value == 34


def test_fdc_client_get_food() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/fdc/v1/food/1"
        return httpx.Response(
            200,
            json={
                "fdcId": 1,
                "description": "Rice, white, cooked",
                "foodCategory": {"description": "Cereal Grains and Pasta"},
                "foodNutrients": [
                    {"nutrient": {"id": 1003, "name": "Protein", "unitName": "g"}},
                    {
                        "nutrient": {"id": 1008, "name": "Energy", "unitName": "kcal"},
                        "amount": 130,
                    },
                ],
            },
        )

    client = _client(handler)

    food = asyncio.run(client.get_food(1))

    assert food.fdc_id == 1
    assert food.category_name() == "Cereal Grains and Pasta"
    rows = food.to_candidate().raw_nutrients
    assert [row.nutrient_id for row in rows] == [1008]
    assert rows[0].unit == "kcal"


def test_fdc_client_raises_on_error_status() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(429, json={"error": "rate limited"})

    client = _client(handler)

    with pytest.raises(httpx.HTTPStatusError):
        asyncio.run(client.search_foods("rice"))
