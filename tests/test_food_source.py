import asyncio

import httpx
import pytest

from nutrition_estimator.domain.errors import UpstreamUnavailable
from nutrition_estimator.domain.foods import CachedFood, SourceKind
from nutrition_estimator.domain.nutrition import NutrientRow
from nutrition_estimator.services.food_cache import FoodCacheService
from nutrition_estimator.services.food_source import (
    FoodSourceService,
    _status_code_from_exception,
)
from tests.conftest import FakeFdcClient, InMemoryFoodCacheRepository, fdc_food


def _cached(fdc_id: int, description: str, calories: float | None) -> CachedFood:
    nutrients = (
        (NutrientRow(1008, "Energy", "KCAL", calories),)
        if calories is not None
        else (NutrientRow(1003, "Protein", "G", 1.0),)
    )
    return CachedFood(
        fdc_id=fdc_id,
        description=description,
        data_type="Survey (FNDDS)",
        food_category=None,
        brand_owner=None,
        brand_name=None,
        ingredients=None,
        serving_size=None,
        serving_size_unit=None,
        household_serving_full_text=None,
        nutrients=nutrients,
    )


def test_candy_queries_skip_every_store(
    food_source: FoodSourceService,
    fdc_client: FakeFdcClient,
    food_cache_repository: InMemoryFoodCacheRepository,
) -> None:
    candidates = asyncio.run(food_source.search("snickers"))

    assert len(candidates) == 1
    assert candidates[0].source_kind is SourceKind.ENHANCED
    assert fdc_client.search_calls == []
    assert food_cache_repository.foods == {}


def test_usable_cache_hits_skip_the_api(
    food_source: FoodSourceService,
    fdc_client: FakeFdcClient,
    food_cache_repository: InMemoryFoodCacheRepository,
) -> None:
    food_cache_repository.foods[11] = _cached(11, "Apples, raw", 52)

    candidates = asyncio.run(food_source.search("apples"))

    assert [c.external_id for c in candidates] == [11]
    assert fdc_client.search_calls == []


def test_cache_hits_without_energy_fall_through_to_the_api(
    food_source: FoodSourceService,
    fdc_client: FakeFdcClient,
    food_cache_repository: InMemoryFoodCacheRepository,
) -> None:
    food_cache_repository.foods[11] = _cached(11, "Apples, dried", None)
    fdc_client.foods = [fdc_food(22, "Apples, raw, with skin", calories=52)]

    candidates = asyncio.run(food_source.search("apples"))

    assert [c.external_id for c in candidates] == [22]
    assert fdc_client.search_calls == ["apples"]
    assert 22 in food_cache_repository.foods


def test_api_failures_are_retried_then_reported(
    food_source: FoodSourceService, fdc_client: FakeFdcClient
) -> None:
    fdc_client.error = RuntimeError("timeout")

    with pytest.raises(UpstreamUnavailable):
        asyncio.run(food_source.search("kale"))

    assert fdc_client.search_calls == ["kale", "kale"]


def test_get_food_prefers_the_cache(
    food_source: FoodSourceService,
    fdc_client: FakeFdcClient,
    food_cache_repository: InMemoryFoodCacheRepository,
) -> None:
    food_cache_repository.foods[11] = _cached(11, "Apples, raw", 52)

    candidate = asyncio.run(food_source.get_food(11))

    assert candidate is not None
    assert candidate.description == "Apples, raw"
    assert fdc_client.get_calls == []


def test_get_food_fetches_detail_and_stores_it(
    food_source: FoodSourceService,
    fdc_client: FakeFdcClient,
    food_cache_repository: InMemoryFoodCacheRepository,
) -> None:
    fdc_client.food_payload = {
        "fdcId": 5,
        "description": "Kale, raw",
        "dataType": "Foundation",
        "foodCategory": {"description": "Vegetables and Vegetable Products"},
        "foodNutrients": [
            {
                "nutrient": {"id": 1008, "name": "Energy", "unitName": "kcal"},
                "amount": 35,
            }
        ],
    }

    candidate = asyncio.run(food_source.get_food(5))

    assert candidate is not None
    assert candidate.category == "Vegetables and Vegetable Products"
    assert candidate.raw_nutrients[0].nutrient_id == 1008
    assert candidate.raw_nutrients[0].value == 35
    assert 5 in food_cache_repository.foods


def test_get_food_returns_none_on_failure(
    food_source: FoodSourceService, fdc_client: FakeFdcClient
) -> None:
    assert asyncio.run(food_source.get_food(404)) is None
    assert fdc_client.get_calls == [404, 404]


def test_food_source_without_cache_backend_still_searches() -> None:
    fdc_client = FakeFdcClient(foods=[fdc_food(1, "Kale, raw", calories=35)])
    service = FoodSourceService(
        fdc_client=fdc_client,
        food_cache=FoodCacheService(InMemoryFoodCacheRepository(fail=True)),
        retry_delay_seconds=0,
    )

    candidates = asyncio.run(service.search("kale"))

    assert [c.description for c in candidates] == ["Kale, raw"]


def test_status_code_from_exception() -> None:
    request = httpx.Request("POST", "https://api.nal.usda.gov/fdc/v1/foods/search")
    response = httpx.Response(429, request=request)
    error = httpx.HTTPStatusError("rate limited", request=request, response=response)

    assert _status_code_from_exception(error) == "429"
    assert _status_code_from_exception(RuntimeError("boom")) == "n/a"


def test_cache_hits_that_rank_out_fall_through_to_the_api(
    food_source: FoodSourceService,
    fdc_client: FakeFdcClient,
    food_cache_repository: InMemoryFoodCacheRepository,
) -> None:
    food_cache_repository.foods[11] = _cached(
        11, "Salmon cakes, prepared with egg and onion", 220
    )
    fdc_client.foods = [
        fdc_food(22, "Fish, salmon, Atlantic, farmed, raw", calories=208)
    ]

    candidates = asyncio.run(food_source.search("salmon", ranking_query="salmon"))

    assert fdc_client.search_calls == ["salmon"]
    assert [c.external_id for c in candidates] == [22]
