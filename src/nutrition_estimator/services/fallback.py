"""Tiered fallback estimator used when no database candidate is usable."""

import logging
from dataclasses import dataclass, field
from typing import Protocol

from nutrition_estimator.domain.errors import NoCandidateFound
from nutrition_estimator.domain.estimates import NutritionEstimate
from nutrition_estimator.domain.foods import FoodCandidate, SourceKind
from nutrition_estimator.domain.nutrition import CanonicalNutrients, MacroProfile
from nutrition_estimator.services.measurement import liquid_serving
from nutrition_estimator.services.normalizer import clean_text, is_zero_calorie_beverage
from nutrition_estimator.services.results import compose_estimate
from nutrition_estimator.tables.beverages import WATER_SERVING_LABEL
from nutrition_estimator.tables.fallback_foods import (
    CURATED_FOODS,
    GENERIC_DEFAULT,
    GENERIC_PATTERNS,
    LIQUID_FOODS,
)

ZERO_CALORIE_NOTE = "Zero-calorie beverage"
NO_CALORIE_NOTE = "Contains no calories"
LOW_CALORIE_NOTE = "Low-calorie beverage"
CURATED_NOTE = (
    "Estimate based on USDA nutrition averages with enhanced conversion factors"
)
GENERIC_NOTE = "Generic estimate - consider adding specific nutrition data"

# Trace minerals reported for drinks regardless of their macros.
_BEVERAGE_MINERALS = {
    "iron": 0.1,
    "calcium": 5.0,
    "zinc": 0.1,
    "magnesium": 3.0,
    "potassium": 50.0,
    "phosphorus": 10.0,
}

_logger = logging.getLogger(__name__)


class FallbackTier(Protocol):
    """One stage of the fallback chain."""

    def try_estimate(self, name: str, measurement: str) -> NutritionEstimate | None:
        """Return an estimate, or None to pass to the next tier."""


def _synthetic(name: str, source_kind: SourceKind) -> FoodCandidate:
    return FoodCandidate(
        external_id=None,
        description=name,
        source_kind=source_kind,
        category=None,
        raw_nutrients=(),
        data_type=source_kind.value,
    )


def _beverage_nutrients(macros: MacroProfile) -> CanonicalNutrients:
    return CanonicalNutrients(
        calories=macros.calories,
        protein=macros.protein_g,
        carbs=macros.carbs_g,
        fat=macros.fat_g,
        **_BEVERAGE_MINERALS,
    )


def curated_nutrients(macros: MacroProfile) -> CanonicalNutrients:
    """Derive approximate micronutrients from curated macros."""
    p, c, f, cal = macros.protein_g, macros.carbs_g, macros.fat_g, macros.calories
    return CanonicalNutrients(
        calories=cal,
        protein=p,
        carbs=c,
        fat=f,
        iron=round(p * 0.1 + 1, 1),
        calcium=round(p * 2 + 20),
        zinc=round(p * 0.05 + 0.5, 1),
        magnesium=round(c * 0.5 + 10),
        vitamin_c=round(c * 0.3),
        vitamin_d=round(f * 0.02, 1),
        vitamin_b12=round(p * 0.02, 1),
        folate=round(c * 0.8 + 5),
        vitamin_a=round(f * 0.5),
        vitamin_e=round(f * 0.1, 1),
        potassium=round(cal * 1.5),
        phosphorus=round(p * 8 + 50),
    )


def generic_nutrients(macros: MacroProfile) -> CanonicalNutrients:
    """Derive looser micronutrient guesses for pattern-based profiles."""
    p, c, f, cal = macros.protein_g, macros.carbs_g, macros.fat_g, macros.calories
    return CanonicalNutrients(
        calories=cal,
        protein=p,
        carbs=c,
        fat=f,
        iron=p * 0.08 + 0.8,
        calcium=p * 1.5 + 15,
        zinc=p * 0.04 + 0.4,
        magnesium=c * 0.4 + 8,
        vitamin_c=c * 0.2,
        vitamin_d=f * 0.01,
        vitamin_b12=p * 0.01,
        folate=c * 0.6 + 4,
        vitamin_a=f * 0.3,
        vitamin_e=f * 0.08,
        potassium=cal * 1.2,
        phosphorus=p * 6 + 40,
    )


def generic_profile(name: str) -> MacroProfile:
    text = clean_text(name)
    for predicate, macros in GENERIC_PATTERNS:
        if predicate(text):
            return macros
    return GENERIC_DEFAULT


@dataclass(frozen=True)
class ZeroCalorieTier:
    """Plain waters, unsweetened tea and coffee, diet sodas."""

    def try_estimate(self, name: str, measurement: str) -> NutritionEstimate | None:
        if not is_zero_calorie_beverage(name):
            return None
        serving = liquid_serving(name)
        return compose_estimate(
            query=name,
            display_name=name,
            candidate=_synthetic(name, SourceKind.FALLBACK),
            nutrients=_beverage_nutrients(MacroProfile(0, 0, 0, 0)),
            measurement=measurement,
            note=ZERO_CALORIE_NOTE,
            reference_serving=serving.label if serving else WATER_SERVING_LABEL,
        )


@dataclass(frozen=True)
class LiquidTier:
    """Exact-name lookup in the beverage and staple table."""

    def try_estimate(self, name: str, measurement: str) -> NutritionEstimate | None:
        macros = LIQUID_FOODS.get(clean_text(name))
        if macros is None:
            return None
        return compose_estimate(
            query=name,
            display_name=name,
            candidate=_synthetic(name, SourceKind.FALLBACK),
            nutrients=_beverage_nutrients(macros),
            measurement=measurement,
            note=NO_CALORIE_NOTE if macros.calories == 0 else LOW_CALORIE_NOTE,
        )


@dataclass(frozen=True)
class CuratedTier:
    """Exact-name lookup in the curated per-100g table."""

    def try_estimate(self, name: str, measurement: str) -> NutritionEstimate | None:
        macros = CURATED_FOODS.get(clean_text(name))
        if macros is None:
            return None
        return compose_estimate(
            query=name,
            display_name=name,
            candidate=_synthetic(name, SourceKind.FALLBACK),
            nutrients=curated_nutrients(macros),
            measurement=measurement,
            note=CURATED_NOTE,
        )


@dataclass(frozen=True)
class GenericTier:
    """Keyword-pattern profile; always produces an estimate."""

    def try_estimate(self, name: str, measurement: str) -> NutritionEstimate | None:
        return compose_estimate(
            query=name,
            display_name=name,
            candidate=_synthetic(name, SourceKind.GENERIC),
            nutrients=generic_nutrients(generic_profile(name)),
            measurement=measurement,
            note=GENERIC_NOTE,
            is_generic_estimate=True,
        )


def _default_tiers() -> tuple[FallbackTier, ...]:
    return (ZeroCalorieTier(), LiquidTier(), CuratedTier(), GenericTier())


@dataclass
class FallbackChain:
    """Runs tiers in order and returns the first estimate produced."""

    tiers: tuple[FallbackTier, ...] = field(default_factory=_default_tiers)

    def estimate(self, name: str, measurement: str) -> NutritionEstimate:
        for tier in self.tiers:
            result = tier.try_estimate(name, measurement)
            if result is not None:
                _logger.debug(
                    "Fallback tier %s answered %s", type(tier).__name__, name
                )
                return result
        raise NoCandidateFound(f"No fallback tier could estimate {name!r}")
