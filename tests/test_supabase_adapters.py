"""Tests for Supabase adapter implementations."""

from dataclasses import dataclass, field

import pytest

from nutrition_estimator.adapters.supabase_food_cache_repository import (
    SupabaseFoodCacheRepository,
)
from nutrition_estimator.domain.foods import CachedFood
from nutrition_estimator.domain.nutrition import NutrientRow


@dataclass
class FakeResponse:
    data: list[dict[str, object]] | None


@dataclass
class FakeTable:
    name: str
    response_queue: dict[str, list[list[dict[str, object]]]] = field(
        default_factory=lambda: {"select": [], "insert": [], "update": []}
    )
    last_payload: object | None = None
    last_filters: list[tuple[str, object]] = field(default_factory=list)
    actions: list[str] = field(default_factory=list)

    def queue(self, action: str, data: list[dict[str, object]]) -> None:
        self.response_queue[action].append(data)

    def select(self, *_args) -> "FakeTable":
        self._action = "select"
        self.actions.append("select")
        return self

    def insert(self, payload) -> "FakeTable":  # type: ignore[no-untyped-def]
        self._action = "insert"
        self.actions.append("insert")
        self.last_payload = payload
        return self

    def update(self, payload) -> "FakeTable":  # type: ignore[no-untyped-def]
        self._action = "update"
        self.actions.append("update")
        self.last_payload = payload
        return self

    def eq(self, column: str, value) -> "FakeTable":  # type: ignore[no-untyped-def]
        self.last_filters.append((column, value))
        return self

    def or_(self, filters: str) -> "FakeTable":
        self.last_filters.append(("or", filters))
        return self

    def limit(self, _count: int) -> "FakeTable":
        return self

    def execute(self) -> FakeResponse:
        action = getattr(self, "_action", "select")
        queue = self.response_queue.get(action, [])
        data = queue.pop(0) if queue else []
        return FakeResponse(data=data)


@dataclass
class FakeSupabaseClient:
    tables: dict[str, FakeTable] = field(default_factory=dict)

    def table(self, name: str) -> FakeTable:
        if name not in self.tables:
            self.tables[name] = FakeTable(name=name)
        return self.tables[name]


def _row(fdc_id: int = 170379, search_count: int = 3) -> dict[str, object]:
    return {
        "fdc_id": fdc_id,
        "description": "Broccoli, raw",
        "data_type": "Foundation",
        "food_category": "Vegetables and Vegetable Products",
        "brand_owner": None,
        "brand_name": None,
        "ingredients": None,
        "serving_size": None,
        "serving_size_unit": None,
        "household_serving_full_text": None,
        "nutrients": [
            {"nutrient_id": 1008, "name": "Energy", "unit": "KCAL", "value": 34},
            {"nutrient_id": 1003, "name": "Protein", "unit": "G", "value": None},
        ],
        "search_count": search_count,
        "last_updated": "2025-01-02T03:04:05+00:00",
    }


def _food() -> CachedFood:
    return CachedFood(
        fdc_id=170379,
        description="Broccoli, raw",
        data_type="Foundation",
        food_category=None,
        brand_owner=None,
        brand_name=None,
        ingredients=None,
        serving_size=None,
        serving_size_unit=None,
        household_serving_full_text=None,
        nutrients=(NutrientRow(1008, "Energy", "KCAL", 34.0),),
    )


def test_food_cache_search_filters_description_and_brand() -> None:
    client = FakeSupabaseClient()
    table = client.table("usda_food_cache")
    table.queue("select", [_row()])
    repository = SupabaseFoodCacheRepository(client)

    foods = repository.search("broccoli, (raw)", 10)

    assert len(foods) == 1
    food = foods[0]
    assert food.fdc_id == 170379
    assert food.search_count == 3
    assert food.last_updated is not None
    assert food.nutrients == (NutrientRow(1008, "Energy", "KCAL", 34.0),)
    _, filters = table.last_filters[-1]
    assert "," not in filters.split("description.ilike.")[1].split(",brand")[0]
    assert filters.startswith("description.ilike.%broccoli")


def test_food_cache_get_by_fdc_id() -> None:
    client = FakeSupabaseClient()
    table = client.table("usda_food_cache")
    table.queue("select", [_row()])
    repository = SupabaseFoodCacheRepository(client)

    food = repository.get_by_fdc_id(170379)
    missing = repository.get_by_fdc_id(1)

    assert food is not None
    assert food.food_category == "Vegetables and Vegetable Products"
    assert missing is None
    assert ("fdc_id", 1) in table.last_filters


def test_food_cache_upsert_inserts_new_rows() -> None:
    client = FakeSupabaseClient()
    table = client.table("usda_food_cache")
    table.queue("insert", [_row(search_count=1)])
    repository = SupabaseFoodCacheRepository(client)

    repository.upsert(_food())

    assert table.actions == ["select", "insert"]
    payload = table.last_payload
    assert payload["search_count"] == 1
    assert payload["nutrients"] == [
        {"nutrient_id": 1008, "name": "Energy", "unit": "KCAL", "value": 34.0}
    ]


def test_food_cache_upsert_bumps_existing_rows() -> None:
    client = FakeSupabaseClient()
    table = client.table("usda_food_cache")
    table.queue("select", [{"search_count": 4}])
    repository = SupabaseFoodCacheRepository(client)

    repository.upsert(_food())

    assert table.actions == ["select", "update"]
    assert table.last_payload["search_count"] == 5
    assert "last_updated" in table.last_payload


def test_food_cache_upsert_raises_when_insert_is_empty() -> None:
    client = FakeSupabaseClient()
    repository = SupabaseFoodCacheRepository(client)

    with pytest.raises(RuntimeError, match="Failed to cache food"):
        repository.upsert(_food())


def test_food_cache_increment_search_count() -> None:
    client = FakeSupabaseClient()
    table = client.table("usda_food_cache")
    table.queue("select", [{"search_count": 2}])
    repository = SupabaseFoodCacheRepository(client)

    repository.increment_search_count(170379)
    repository.increment_search_count(1)

    assert table.actions == ["select", "update", "select"]
    assert table.last_payload["search_count"] == 3
