"""Candidate source: synthetic candy records, persistent cache, then USDA FDC."""

import asyncio
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeVar

from nutrition_estimator.adapters.fdc_client import FdcClient
from nutrition_estimator.domain.errors import EstimationError, UpstreamUnavailable
from nutrition_estimator.domain.foods import FoodCandidate
from nutrition_estimator.services.candy import candy_candidate
from nutrition_estimator.services.food_cache import FoodCacheService
from nutrition_estimator.services.nutrients import has_energy
from nutrition_estimator.services.ranking import select_candidate

_T = TypeVar("_T")

_logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable


def _usable(query: str, candidates: list[FoodCandidate]) -> bool:
    """Whether cached hits would yield a selectable, plausible match."""
    if not any(c.is_curated or has_energy(c.raw_nutrients) for c in candidates):
        return False
    try:
        select_candidate(query, candidates)
    except EstimationError:
        return False
    return True


@dataclass
class FoodSourceService:
    """Find candidate foods for a normalized query."""

    fdc_client: FdcClient
    food_cache: FoodCacheService
    page_size: int = 25
    cache_limit: int = 10
    debug: bool = False
    retry_attempts: int = 1
    retry_delay_seconds: float = 0.3

    async def search(
        self, query: str, ranking_query: str | None = None
    ) -> list[FoodCandidate]:
        """Return candidates, consulting FDC only when the cache has nothing usable.

        Cached hits count as usable only when ranking them against
        ``ranking_query`` (defaults to ``query``) leaves a plausible match.
        """
        candy = candy_candidate(query)
        if candy is not None:
            return [candy]

        cached = self.food_cache.search(query, self.cache_limit)
        if _usable(ranking_query or query, cached):
            if self.debug:
                _logger.info("Food cache hit: query=%s results=%s", query, len(cached))
            return cached

        try:
            result = await self._call_with_retry(
                lambda: self.fdc_client.search_foods(query, page_size=self.page_size),
                action="search",
            )
        except Exception as exc:
            raise UpstreamUnavailable(f"FDC search failed for {query!r}") from exc
        candidates = [food.to_candidate() for food in result.foods]
        self.food_cache.store(candidates)
        if self.debug:
            _logger.info("Food search FDC: query=%s results=%s", query, len(candidates))
        return candidates

    async def get_food(self, fdc_id: int) -> FoodCandidate | None:
        """Fetch one food by FDC id; None when it cannot be found or fetched."""
        cached = self.food_cache.get(fdc_id)
        if cached is not None:
            return cached
        try:
            food = await self._call_with_retry(
                lambda: self.fdc_client.get_food(fdc_id),
                action=f"get_food:{fdc_id}",
            )
        except Exception as exc:
            _logger.warning(
                "FDC food lookup failed: fdc_id=%s status=%s",
                fdc_id,
                _status_code_from_exception(exc),
            )
            return None
        candidate = food.to_candidate()
        self.food_cache.store([candidate])
        return candidate

    async def _call_with_retry(
        self, func: "Callable[[], Awaitable[_T]]", *, action: str
    ) -> _T:
        """Call an async function with a short retry."""
        attempt = 0
        while True:
            try:
                return await func()
            except Exception as exc:
                attempt += 1
                status_code = _status_code_from_exception(exc)
                if self.debug:
                    _logger.warning(
                        "FDC %s failed (attempt %s/%s, status=%s): %s",
                        action,
                        attempt,
                        self.retry_attempts + 1,
                        status_code,
                        exc,
                    )
                if attempt > self.retry_attempts:
                    raise
                await asyncio.sleep(self.retry_delay_seconds)


def _status_code_from_exception(exc: Exception) -> str:
    """Extract HTTP status code from an exception, if available."""
    response = getattr(exc, "response", None)
    status_code = getattr(response, "status_code", None)
    if isinstance(status_code, int):
        return str(status_code)
    return "n/a"
