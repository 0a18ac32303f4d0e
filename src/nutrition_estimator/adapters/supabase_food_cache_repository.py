"""Supabase implementation of the persistent food cache."""

from dataclasses import asdict, dataclass
from datetime import UTC, datetime

from supabase import Client

from nutrition_estimator.domain.foods import CachedFood
from nutrition_estimator.domain.nutrition import NutrientRow
from nutrition_estimator.services.food_cache import FoodCacheRepository

_TABLE = "usda_food_cache"


@dataclass
class SupabaseFoodCacheRepository(FoodCacheRepository):
    """Supabase-backed store of foods fetched from FoodData Central."""

    client: Client

    def search(self, query: str, limit: int) -> list[CachedFood]:
        """Return foods whose description or brand contains the query."""
        # PostgREST filter syntax reserves commas and parentheses.
        term = query.translate(str.maketrans(",()", "   ")).strip()
        pattern = f"%{term}%"
        response = (
            self.client.table(_TABLE)
            .select("*")
            .or_(f"description.ilike.{pattern},brand_name.ilike.{pattern}")
            .limit(limit)
            .execute()
        )
        return [_parse_food(row) for row in response.data or []]

    def get_by_fdc_id(self, fdc_id: int) -> CachedFood | None:
        """Return a cached food by FDC id, if present."""
        response = (
            self.client.table(_TABLE)
            .select("*")
            .eq("fdc_id", fdc_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_food(response.data[0])

    def upsert(self, food: CachedFood) -> None:
        """Insert a food, or bump its search count when it already exists."""
        response = (
            self.client.table(_TABLE)
            .select("search_count")
            .eq("fdc_id", food.fdc_id)
            .limit(1)
            .execute()
        )
        now = datetime.now(tz=UTC).isoformat()
        if response.data:
            current = int(response.data[0].get("search_count") or 0)
            self.client.table(_TABLE).update(
                {
                    **_serialize_food(food),
                    "search_count": current + 1,
                    "last_updated": now,
                }
            ).eq("fdc_id", food.fdc_id).execute()
            return
        inserted = (
            self.client.table(_TABLE)
            .insert({**_serialize_food(food), "search_count": 1, "last_updated": now})
            .execute()
        )
        if not inserted.data:
            raise RuntimeError("Failed to cache food")

    def increment_search_count(self, fdc_id: int) -> None:
        """Increment the popularity counter of a cached food."""
        response = (
            self.client.table(_TABLE)
            .select("search_count")
            .eq("fdc_id", fdc_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return
        current = int(response.data[0].get("search_count") or 0)
        self.client.table(_TABLE).update(
            {
                "search_count": current + 1,
                "last_updated": datetime.now(tz=UTC).isoformat(),
            }
        ).eq("fdc_id", fdc_id).execute()


def _serialize_food(food: CachedFood) -> dict[str, object]:
    """Serialize a cached food into a table row."""
    return {
        "fdc_id": food.fdc_id,
        "description": food.description,
        "data_type": food.data_type,
        "food_category": food.food_category,
        "brand_owner": food.brand_owner,
        "brand_name": food.brand_name,
        "ingredients": food.ingredients,
        "serving_size": food.serving_size,
        "serving_size_unit": food.serving_size_unit,
        "household_serving_full_text": food.household_serving_full_text,
        "nutrients": [asdict(row) for row in food.nutrients],
    }


def _parse_nutrient(raw: dict[str, object]) -> NutrientRow | None:
    value = raw.get("value")
    if value is None:
        return None
    nutrient_id = raw.get("nutrient_id")
    return NutrientRow(
        nutrient_id=int(nutrient_id) if nutrient_id is not None else None,
        name=raw.get("name"),
        unit=raw.get("unit"),
        value=float(value),
    )


def _parse_food(row: dict[str, object]) -> CachedFood:
    """Parse a cache row into a domain model."""
    last_updated_raw = row.get("last_updated")
    last_updated = (
        datetime.fromisoformat(last_updated_raw)
        if isinstance(last_updated_raw, str) and last_updated_raw
        else None
    )
    nutrients = [_parse_nutrient(item) for item in row.get("nutrients") or []]
    serving_size = row.get("serving_size")
    return CachedFood(
        fdc_id=int(row["fdc_id"]),
        description=str(row.get("description", "")),
        data_type=row.get("data_type"),
        food_category=row.get("food_category"),
        brand_owner=row.get("brand_owner"),
        brand_name=row.get("brand_name"),
        ingredients=row.get("ingredients"),
        serving_size=float(serving_size) if serving_size is not None else None,
        serving_size_unit=row.get("serving_size_unit"),
        household_serving_full_text=row.get("household_serving_full_text"),
        nutrients=tuple(item for item in nutrients if item is not None),
        search_count=int(row.get("search_count") or 0),
        last_updated=last_updated,
    )
