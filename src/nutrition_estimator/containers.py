"""Dependency container wiring for the application."""

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import ClientOptions, create_client

from nutrition_estimator.adapters.fdc_client import HttpxFdcClient
from nutrition_estimator.adapters.supabase_food_cache_repository import (
    SupabaseFoodCacheRepository,
)
from nutrition_estimator.config import DEMO_API_KEY, Settings
from nutrition_estimator.services.cache import MemoryCache
from nutrition_estimator.services.estimator import EstimationService
from nutrition_estimator.services.fallback import FallbackChain
from nutrition_estimator.services.food_cache import FoodCacheService
from nutrition_estimator.services.food_source import FoodSourceService

_logger = logging.getLogger(__name__)


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    food_cache_service: FoodCacheService
    food_source: FoodSourceService
    estimation_service: EstimationService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    if resolved_settings.fdc_api_key == DEMO_API_KEY:
        _logger.warning("Using the FDC demo API key; requests are rate limited")

    supabase_client = create_client(
        resolved_settings.supabase_url,
        resolved_settings.supabase_service_key,
        options=ClientOptions(
            postgrest_client_timeout=resolved_settings.supabase_timeout_seconds
        ),
    )
    food_cache_service = FoodCacheService(SupabaseFoodCacheRepository(supabase_client))

    fdc_client = HttpxFdcClient.create(
        api_key=resolved_settings.fdc_api_key,
        base_url=resolved_settings.fdc_base_url,
        timeout_seconds=resolved_settings.fdc_timeout_seconds,
    )
    food_source = FoodSourceService(
        fdc_client=fdc_client,
        food_cache=food_cache_service,
        page_size=resolved_settings.fdc_page_size,
        debug=resolved_settings.debug,
        retry_attempts=resolved_settings.fdc_retry_attempts,
    )
    estimation_service = EstimationService(
        food_source=food_source,
        cache=MemoryCache(
            max_entries=resolved_settings.memory_cache_max_entries,
            ttl_seconds=resolved_settings.memory_cache_ttl_seconds,
        ),
        fallback=FallbackChain(),
    )

    async def close_resources() -> None:
        await fdc_client.close()

    return AppContainer(
        settings=resolved_settings,
        food_cache_service=food_cache_service,
        food_source=food_source,
        estimation_service=estimation_service,
        close_resources=close_resources,
    )
