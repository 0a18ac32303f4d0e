"""Domain models for candidate foods and cached food records."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from nutrition_estimator.domain.nutrition import NutrientRow


class SourceKind(Enum):
    """Where a candidate's nutrient data came from."""

    CURATED = "Curated"
    SURVEY = "Survey"
    BRANDED = "Branded"
    ENHANCED = "Enhanced"
    FALLBACK = "Fallback"
    GENERIC = "Generic"


class SpecialCategory(Enum):
    """Ingredient categories that bypass the normal search path."""

    NONE = "none"
    ZERO_CALORIE_BEVERAGE = "zero-calorie-beverage"
    CANDY = "candy"


_DATA_TYPE_KINDS = {
    "foundation": SourceKind.CURATED,
    "sr legacy": SourceKind.CURATED,
    "survey (fndds)": SourceKind.SURVEY,
    "branded": SourceKind.BRANDED,
}


def source_kind_for(data_type: str | None) -> SourceKind:
    """Map an external data type label onto a source kind."""
    if not data_type:
        return SourceKind.FALLBACK
    return _DATA_TYPE_KINDS.get(data_type.strip().lower(), SourceKind.FALLBACK)


@dataclass(frozen=True)
class FoodCandidate:
    """A food record under consideration as the match for a query."""

    external_id: int | None
    description: str
    source_kind: SourceKind
    category: str | None
    raw_nutrients: tuple[NutrientRow, ...]
    data_type: str | None = None
    brand_owner: str | None = None
    brand_name: str | None = None
    serving_size: float | None = None
    serving_size_unit: str | None = None
    household_serving: str | None = None

    @property
    def is_curated(self) -> bool:
        return self.source_kind is SourceKind.CURATED


@dataclass(frozen=True)
class CachedFood:
    """Food record persisted in the upstream-result cache."""

    fdc_id: int
    description: str
    data_type: str | None
    food_category: str | None
    brand_owner: str | None
    brand_name: str | None
    ingredients: str | None
    serving_size: float | None
    serving_size_unit: str | None
    household_serving_full_text: str | None
    nutrients: tuple[NutrientRow, ...]
    search_count: int = 1
    last_updated: datetime | None = None

    def to_candidate(self) -> FoodCandidate:
        """Rehydrate the cached record into a candidate."""
        return FoodCandidate(
            external_id=self.fdc_id,
            description=self.description,
            source_kind=source_kind_for(self.data_type),
            category=self.food_category,
            raw_nutrients=self.nutrients,
            data_type=self.data_type,
            brand_owner=self.brand_owner,
            brand_name=self.brand_name,
            serving_size=self.serving_size,
            serving_size_unit=self.serving_size_unit,
            household_serving=self.household_serving_full_text,
        )

    @classmethod
    def from_candidate(cls, candidate: FoodCandidate) -> "CachedFood":
        """Build a cache record from an externally fetched candidate."""
        if candidate.external_id is None:
            raise ValueError("Synthetic candidates cannot be cached")
        return cls(
            fdc_id=candidate.external_id,
            description=candidate.description,
            data_type=candidate.data_type,
            food_category=candidate.category,
            brand_owner=candidate.brand_owner,
            brand_name=candidate.brand_name,
            ingredients=None,
            serving_size=candidate.serving_size,
            serving_size_unit=candidate.serving_size_unit,
            household_serving_full_text=candidate.household_serving,
            nutrients=candidate.raw_nutrients,
        )
