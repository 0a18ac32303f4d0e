"""Persistent cache of upstream food records."""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol, TypeVar

from nutrition_estimator.domain.errors import PersistenceUnavailable
from nutrition_estimator.domain.foods import CachedFood, FoodCandidate

_T = TypeVar("_T")

_POPULAR_SEARCH_COUNT = 10
_FAMILIAR_SEARCH_COUNT = 5

_logger = logging.getLogger(__name__)


class FoodCacheRepository(Protocol):
    """Persistence interface for cached food records."""

    def search(self, query: str, limit: int) -> list[CachedFood]:
        """Return foods whose description or brand contains the query."""

    def get_by_fdc_id(self, fdc_id: int) -> CachedFood | None:
        """Return a cached food by FDC id, if present."""

    def upsert(self, food: CachedFood) -> None:
        """Insert a food or increment its search count on conflict."""

    def increment_search_count(self, fdc_id: int) -> None:
        """Increment the popularity counter of a cached food."""


def relevance_rank(food: CachedFood, query: str) -> int:
    """Bucket a cached hit; lower buckets are more relevant."""
    description = food.description.lower()
    data_type = (food.data_type or "").lower()
    if description == query:
        return 0
    if description.startswith(query):
        return 1
    if data_type == "foundation":
        return 2
    if data_type == "sr legacy":
        return 3
    if food.search_count > _POPULAR_SEARCH_COUNT:
        return 4
    if food.search_count > _FAMILIAR_SEARCH_COUNT:
        return 5
    return 6


@dataclass
class FoodCacheService:
    """Best-effort access to the persistent food cache.

    Repository failures never reach the caller: they are logged and the
    operation degrades to an empty result.
    """

    repository: FoodCacheRepository

    def search(self, query: str, limit: int = 10) -> list[FoodCandidate]:
        """Return cached candidates ordered by relevance and popularity."""
        text = " ".join(query.lower().split())
        if not text:
            return []
        foods = self._recover("search", lambda: self.repository.search(text, limit), [])
        if not foods:
            return []
        foods.sort(
            key=lambda food: (
                relevance_rank(food, text),
                -food.search_count,
                food.description.lower(),
            )
        )
        top = foods[0]
        self._recover(
            "increment",
            lambda: self.repository.increment_search_count(top.fdc_id),
            None,
        )
        return [food.to_candidate() for food in foods[:limit]]

    def get(self, fdc_id: int) -> FoodCandidate | None:
        food = self._recover("get", lambda: self.repository.get_by_fdc_id(fdc_id), None)
        return food.to_candidate() if food else None

    def store(self, candidates: list[FoodCandidate]) -> None:
        """Upsert externally fetched candidates; synthetic ones are skipped."""
        for candidate in candidates:
            if candidate.external_id is None:
                continue
            record = CachedFood.from_candidate(candidate)
            self._recover("upsert", lambda: self.repository.upsert(record), None)

    def _recover(self, action: str, func: Callable[[], _T], default: _T) -> _T:
        try:
            return func()
        except Exception as exc:
            error = PersistenceUnavailable(f"Food cache {action} failed: {exc}")
            _logger.warning("%s", error)
            return default
