"""Pydantic models for FoodData Central payloads."""

from pydantic import BaseModel, ConfigDict, Field

from nutrition_estimator.domain.foods import FoodCandidate, source_kind_for
from nutrition_estimator.domain.nutrition import NutrientRow


class FdcNutrientInfo(BaseModel):
    """Nested nutrient descriptor used by the detail endpoint."""

    id: int | None = None
    name: str | None = None
    unit_name: str | None = Field(default=None, alias="unitName")


class FdcFoodNutrient(BaseModel):
    """Nutrient row in either the search or the detail shape."""

    model_config = ConfigDict(populate_by_name=True)

    nutrient_id: int | None = Field(default=None, alias="nutrientId")
    nutrient_name: str | None = Field(default=None, alias="nutrientName")
    unit_name: str | None = Field(default=None, alias="unitName")
    value: float | None = None
    amount: float | None = None
    nutrient: FdcNutrientInfo | None = None

    def to_row(self) -> NutrientRow | None:
        """Flatten into a nutrient row, or None when no value is present."""
        info = self.nutrient or FdcNutrientInfo()
        value = self.value if self.value is not None else self.amount
        if value is None:
            return None
        return NutrientRow(
            nutrient_id=self.nutrient_id if self.nutrient_id is not None else info.id,
            name=self.nutrient_name or info.name,
            unit=self.unit_name or info.unit_name,
            value=float(value),
        )


class FdcFood(BaseModel):
    """Food record returned by the search and detail endpoints."""

    model_config = ConfigDict(populate_by_name=True)

    fdc_id: int = Field(alias="fdcId")
    description: str = ""
    data_type: str | None = Field(default=None, alias="dataType")
    food_category: str | dict | None = Field(default=None, alias="foodCategory")
    brand_owner: str | None = Field(default=None, alias="brandOwner")
    brand_name: str | None = Field(default=None, alias="brandName")
    serving_size: float | None = Field(default=None, alias="servingSize")
    serving_size_unit: str | None = Field(default=None, alias="servingSizeUnit")
    household_serving_full_text: str | None = Field(
        default=None, alias="householdServingFullText"
    )
    food_nutrients: list[FdcFoodNutrient] = Field(
        default_factory=list, alias="foodNutrients"
    )

    def category_name(self) -> str | None:
        """Return the category label; the detail endpoint nests it."""
        if isinstance(self.food_category, dict):
            return self.food_category.get("description")
        return self.food_category

    def to_candidate(self) -> FoodCandidate:
        rows = [nutrient.to_row() for nutrient in self.food_nutrients]
        return FoodCandidate(
            external_id=self.fdc_id,
            description=self.description,
            source_kind=source_kind_for(self.data_type),
            category=self.category_name(),
            raw_nutrients=tuple(row for row in rows if row is not None),
            data_type=self.data_type,
            brand_owner=self.brand_owner,
            brand_name=self.brand_name,
            serving_size=self.serving_size,
            serving_size_unit=self.serving_size_unit,
            household_serving=self.household_serving_full_text,
        )


class FdcSearchResult(BaseModel):
    """Page of foods returned by the search endpoint."""

    model_config = ConfigDict(populate_by_name=True)

    total_hits: int = Field(default=0, alias="totalHits")
    foods: list[FdcFood] = Field(default_factory=list)
