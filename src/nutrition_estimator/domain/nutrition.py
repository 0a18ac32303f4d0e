"""Nutrition domain models."""

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class MacroProfile:
    """Macronutrient profile per 100g of a food item."""

    calories: float
    protein_g: float
    fat_g: float
    carbs_g: float


@dataclass(frozen=True)
class NutrientRow:
    """Single nutrient value as reported by a nutrition source."""

    nutrient_id: int | None
    name: str | None
    unit: str | None
    value: float


@dataclass(frozen=True)
class CanonicalNutrients:
    """Normalized per-100g nutrient record; every field defaults to zero."""

    calories: float = 0.0
    protein: float = 0.0
    carbs: float = 0.0
    fat: float = 0.0
    fiber: float = 0.0
    sugar: float = 0.0
    sodium: float = 0.0
    iron: float = 0.0
    calcium: float = 0.0
    zinc: float = 0.0
    magnesium: float = 0.0
    vitamin_c: float = 0.0
    vitamin_d: float = 0.0
    vitamin_b12: float = 0.0
    folate: float = 0.0
    vitamin_a: float = 0.0
    vitamin_e: float = 0.0
    potassium: float = 0.0
    phosphorus: float = 0.0

    def as_dict(self) -> dict[str, float]:
        return asdict(self)
