"""Estimation orchestrator tying together search, ranking, parsing and fallback."""

import asyncio
import logging
from dataclasses import dataclass, field

from nutrition_estimator.domain.errors import EmptyRequestError, EstimationError
from nutrition_estimator.domain.estimates import (
    BatchItemError,
    CacheStats,
    EstimateRequest,
    NutritionEstimate,
)
from nutrition_estimator.services.cache import Cache, cache_key
from nutrition_estimator.services.fallback import FallbackChain, ZeroCalorieTier
from nutrition_estimator.services.food_source import FoodSourceService
from nutrition_estimator.services.normalizer import normalize
from nutrition_estimator.services.ranking import select_candidate
from nutrition_estimator.services.results import compose_estimate

DEFAULT_WARM_UP_FOODS = (
    "chicken",
    "rice",
    "eggs",
    "bread",
    "milk",
    "cheese",
    "yogurt",
    "apple",
    "banana",
    "salmon",
    "beef",
    "pasta",
    "pizza",
    "salad",
    "potato",
)
DEFAULT_WARM_UP_MEASUREMENTS = ("100g", "1 cup", "1 medium", "1 serving")

BATCH_SIZE = 5
UNKNOWN_INGREDIENT = "unknown"
DEFAULT_MEASUREMENT = "1 serving"

_logger = logging.getLogger(__name__)


@dataclass
class EstimationService:
    """Turn an ingredient and a portion phrase into a nutrition estimate.

    Every request yields an estimate: search, ranking and plausibility
    failures fall through to the fallback chain. Only a request with both
    fields blank is rejected.
    """

    food_source: FoodSourceService
    cache: Cache
    fallback: FallbackChain = field(default_factory=FallbackChain)
    zero_calorie: ZeroCalorieTier = field(default_factory=ZeroCalorieTier)

    async def estimate(self, ingredient: str, measurement: str) -> NutritionEstimate:
        """Estimate calories and nutrients for one ingredient portion."""
        ingredient = " ".join(ingredient.split())
        measurement = " ".join(measurement.split())
        if not ingredient and not measurement:
            raise EmptyRequestError("Ingredient and measurement are both empty")
        ingredient = ingredient or UNKNOWN_INGREDIENT
        measurement = measurement or DEFAULT_MEASUREMENT

        key = cache_key(ingredient, measurement)
        cached = self.cache.get(key)
        if isinstance(cached, NutritionEstimate):
            return cached

        result = self.zero_calorie.try_estimate(ingredient, measurement)
        if result is None:
            try:
                result = await self._estimate_from_source(ingredient, measurement)
            except EstimationError as exc:
                _logger.debug("Falling back for %s: %s", ingredient, exc)
                result = self.fallback.estimate(ingredient, measurement)

        self.cache.set(key, result)
        return result

    async def _estimate_from_source(
        self, ingredient: str, measurement: str
    ) -> NutritionEstimate:
        query = ingredient.lower()
        candidates = await self.food_source.search(
            normalize(ingredient), ranking_query=query
        )
        candidate, nutrients = select_candidate(query, candidates)
        source = candidate.data_type or candidate.source_kind.value
        return compose_estimate(
            query=ingredient,
            display_name=candidate.description,
            candidate=candidate,
            nutrients=nutrients,
            measurement=measurement,
            note=f"From USDA database ({source})",
        )

    async def estimate_batch(
        self, requests: list[EstimateRequest]
    ) -> list[NutritionEstimate | BatchItemError]:
        """Estimate requests in small concurrent groups; failures stay per item."""
        results: list[NutritionEstimate | BatchItemError] = []
        for start in range(0, len(requests), BATCH_SIZE):
            group = requests[start : start + BATCH_SIZE]
            outcomes = await asyncio.gather(
                *(self.estimate(item.ingredient, item.measurement) for item in group),
                return_exceptions=True,
            )
            for item, outcome in zip(group, outcomes, strict=True):
                if isinstance(outcome, Exception):
                    results.append(BatchItemError(item.ingredient, str(outcome)))
                else:
                    results.append(outcome)
        return results

    async def warm_up(
        self,
        foods: tuple[str, ...] = DEFAULT_WARM_UP_FOODS,
        measurements: tuple[str, ...] = DEFAULT_WARM_UP_MEASUREMENTS,
        delay_seconds: float = 1.0,
    ) -> int:
        """Pre-populate the memory cache with popular foods."""
        await asyncio.sleep(delay_seconds)
        warmed = 0
        for food in foods:
            for measurement in measurements:
                try:
                    await self.estimate(food, measurement)
                except Exception as exc:
                    _logger.debug(
                        "Warm-up failed for %s %s: %s", food, measurement, exc
                    )
                    continue
                warmed += 1
        _logger.info("Warm-up cached %s estimates", warmed)
        return warmed

    def cache_stats(self) -> CacheStats:
        return self.cache.stats()

    def clear_cache(self) -> None:
        self.cache.clear()
        _logger.info("Estimate cache cleared")
