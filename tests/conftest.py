"""Shared test fixtures."""

from dataclasses import dataclass, field, replace

import pytest

from nutrition_estimator.adapters.fdc_client import FdcClient
from nutrition_estimator.config import Settings
from nutrition_estimator.containers import AppContainer
from nutrition_estimator.domain.fdc import FdcFood, FdcSearchResult
from nutrition_estimator.domain.foods import CachedFood
from nutrition_estimator.services.cache import MemoryCache
from nutrition_estimator.services.estimator import EstimationService
from nutrition_estimator.services.fallback import FallbackChain
from nutrition_estimator.services.food_cache import (
    FoodCacheRepository,
    FoodCacheService,
)
from nutrition_estimator.services.food_source import FoodSourceService


def fdc_food(  # noqa: PLR0913
    fdc_id: int,
    description: str,
    data_type: str = "Foundation",
    calories: float | None = 100,
    protein: float = 0,
    fat: float = 0,
    carbs: float = 0,
) -> dict[str, object]:
    """Build a food in the FDC search-result shape."""
    nutrients: list[dict[str, object]] = [
        {
            "nutrientId": 1003,
            "nutrientName": "Protein",
            "unitName": "G",
            "value": protein,
        },
        {
            "nutrientId": 1004,
            "nutrientName": "Total lipid (fat)",
            "unitName": "G",
            "value": fat,
        },
        {
            "nutrientId": 1005,
            "nutrientName": "Carbohydrate, by difference",
            "unitName": "G",
            "value": carbs,
        },
    ]
    if calories is not None:
        nutrients.append(
            {
                "nutrientId": 1008,
                "nutrientName": "Energy",
                "unitName": "KCAL",
                "value": calories,
            }
        )
    return {
        "fdcId": fdc_id,
        "description": description,
        "dataType": data_type,
        "foodNutrients": nutrients,
    }


@dataclass
class FakeFdcClient(FdcClient):
    """Fake FDC client that records calls and serves canned payloads."""

    foods: list[dict[str, object]] = field(default_factory=list)
    food_payload: dict[str, object] | None = None
    error: Exception | None = None
    search_calls: list[str] = field(default_factory=list)
    get_calls: list[int] = field(default_factory=list)

    async def search_foods(self, query: str, page_size: int = 25) -> FdcSearchResult:
        self.search_calls.append(query)
        if self.error is not None:
            raise self.error
        return FdcSearchResult.model_validate(
            {"totalHits": len(self.foods), "foods": self.foods}
        )

    async def get_food(self, fdc_id: int) -> FdcFood:
        self.get_calls.append(fdc_id)
        if self.error is not None:
            raise self.error
        if self.food_payload is None:
            raise RuntimeError("Food not found")
        return FdcFood.model_validate(self.food_payload)


@dataclass
class InMemoryFoodCacheRepository(FoodCacheRepository):
    """In-memory food cache repository for tests."""

    foods: dict[int, CachedFood] = field(default_factory=dict)
    fail: bool = False
    incremented: list[int] = field(default_factory=list)

    def _check(self) -> None:
        if self.fail:
            raise RuntimeError("database offline")

    def search(self, query: str, limit: int) -> list[CachedFood]:
        self._check()
        matches = [
            food
            for food in self.foods.values()
            if query in food.description.lower()
            or query in (food.brand_name or "").lower()
        ]
        return matches[:limit]

    def get_by_fdc_id(self, fdc_id: int) -> CachedFood | None:
        self._check()
        return self.foods.get(fdc_id)

    def upsert(self, food: CachedFood) -> None:
        self._check()
        existing = self.foods.get(food.fdc_id)
        count = existing.search_count + 1 if existing else 1
        self.foods[food.fdc_id] = replace(food, search_count=count)

    def increment_search_count(self, fdc_id: int) -> None:
        self._check()
        self.incremented.append(fdc_id)
        food = self.foods.get(fdc_id)
        if food is not None:
            self.foods[fdc_id] = replace(food, search_count=food.search_count + 1)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="service-key",
        admin_token="admin-token",
        fdc_api_key="fdc-key",
        warm_up_enabled=False,
    )


@pytest.fixture
def fdc_client() -> FakeFdcClient:
    return FakeFdcClient()


@pytest.fixture
def food_cache_repository() -> InMemoryFoodCacheRepository:
    return InMemoryFoodCacheRepository()


@pytest.fixture
def food_source(
    fdc_client: FakeFdcClient, food_cache_repository: InMemoryFoodCacheRepository
) -> FoodSourceService:
    return FoodSourceService(
        fdc_client=fdc_client,
        food_cache=FoodCacheService(food_cache_repository),
        retry_delay_seconds=0,
    )


@pytest.fixture
def estimation_service(food_source: FoodSourceService) -> EstimationService:
    return EstimationService(
        food_source=food_source,
        cache=MemoryCache(max_entries=50, ttl_seconds=60),
        fallback=FallbackChain(),
    )


@pytest.fixture
def container(
    settings: Settings,
    food_source: FoodSourceService,
    estimation_service: EstimationService,
) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        food_cache_service=food_source.food_cache,
        food_source=food_source,
        estimation_service=estimation_service,
        close_resources=close_resources,
    )
