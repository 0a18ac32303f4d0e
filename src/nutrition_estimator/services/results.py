"""Compose nutrition estimates from a chosen candidate."""

import math

from nutrition_estimator.domain.estimates import NutritionEstimate
from nutrition_estimator.domain.foods import FoodCandidate
from nutrition_estimator.domain.nutrition import CanonicalNutrients
from nutrition_estimator.services.measurement import parse_measurement
from nutrition_estimator.services.portions import assess_portion


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def compose_estimate(
    *,
    query: str,
    display_name: str,
    candidate: FoodCandidate,
    nutrients: CanonicalNutrients,
    measurement: str,
    note: str,
    reference_serving: str | None = None,
    is_generic_estimate: bool = False,
) -> NutritionEstimate:
    """Scale per-100g nutrients to the parsed portion and attach its assessment."""
    spec = parse_measurement(measurement, candidate)
    portion = assess_portion(
        query, candidate.description, spec, nutrients.calories, measurement
    )
    return NutritionEstimate(
        ingredient=display_name,
        measurement=spec.label,
        estimated_calories=round_half_up(nutrients.calories * spec.grams / 100),
        equivalent_measurement=f"100g ≈ {nutrients.calories:g} kcal",
        note=note,
        nutrition_per_100g=nutrients,
        grams=spec.grams,
        reference_serving=reference_serving or spec.reference_serving,
        portion_info=portion,
        is_generic_estimate=is_generic_estimate,
    )
