"""FastAPI application factory."""

import asyncio
import contextlib
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import asdict

from fastapi import FastAPI, HTTPException, Request, status

from nutrition_estimator.api.admin import router as admin_router
from nutrition_estimator.api.models import BatchEstimatePayload, EstimatePayload
from nutrition_estimator.app_logging import configure_logging
from nutrition_estimator.config import parse_warm_up_foods
from nutrition_estimator.containers import AppContainer
from nutrition_estimator.domain.errors import EmptyRequestError, UpstreamUnavailable
from nutrition_estimator.domain.estimates import EstimateRequest
from nutrition_estimator.domain.foods import FoodCandidate
from nutrition_estimator.services.estimator import DEFAULT_WARM_UP_FOODS
from nutrition_estimator.services.normalizer import normalize
from nutrition_estimator.services.nutrients import extract_nutrients
from nutrition_estimator.services.ranking import rank_candidates

MAX_SEARCH_LIMIT = 50


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)
    settings = container.settings

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        warm_up_task: asyncio.Task[int] | None = None
        if settings.warm_up_enabled:
            try:
                warm_up_task = asyncio.create_task(
                    app.state.container.estimation_service.warm_up(
                        foods=parse_warm_up_foods(settings.warm_up_foods)
                        or DEFAULT_WARM_UP_FOODS,
                        delay_seconds=settings.warm_up_delay_seconds,
                    )
                )
            except Exception:
                logger.exception("Failed to schedule cache warm-up")
        yield
        if warm_up_task is not None and not warm_up_task.done():
            warm_up_task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await warm_up_task
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    app.include_router(admin_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/estimate")
    async def estimate(payload: EstimatePayload, request: Request) -> dict[str, object]:
        """Estimate calories and nutrients for one ingredient portion."""
        state_container: AppContainer = request.app.state.container
        try:
            result = await state_container.estimation_service.estimate(
                payload.ingredient, payload.measurement
            )
        except EmptyRequestError as exc:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)
            ) from exc
        return asdict(result)

    @app.post("/estimate/batch")
    async def estimate_batch(
        payload: BatchEstimatePayload, request: Request
    ) -> dict[str, object]:
        """Estimate several ingredients; failed items carry an error message."""
        state_container: AppContainer = request.app.state.container
        requests = [
            EstimateRequest(item.ingredient, item.measurement) for item in payload.items
        ]
        results = await state_container.estimation_service.estimate_batch(requests)
        return {"results": [asdict(item) for item in results]}

    @app.get("/foods/search")
    async def search_foods(
        query: str, request: Request, limit: int = 10
    ) -> dict[str, object]:
        """Search candidate foods, best match first."""
        state_container: AppContainer = request.app.state.container
        limit = max(1, min(limit, MAX_SEARCH_LIMIT))
        try:
            candidates = await state_container.food_source.search(
                normalize(query), ranking_query=query.lower()
            )
        except UpstreamUnavailable as exc:
            logger.warning("Food search unavailable: %s", exc)
            raise HTTPException(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                detail="Food database unavailable",
            ) from exc
        ranked = rank_candidates(query.lower(), candidates)
        return {"foods": [_serialize_candidate(c) for c in ranked[:limit]]}

    @app.get("/foods/{fdc_id}")
    async def get_food(fdc_id: int, request: Request) -> dict[str, object]:
        """Return one food with its per-100g nutrients."""
        state_container: AppContainer = request.app.state.container
        candidate = await state_container.food_source.get_food(fdc_id)
        if candidate is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
        return _serialize_candidate(candidate)

    return app


def _serialize_candidate(candidate: FoodCandidate) -> dict[str, object]:
    """Serialize a candidate for API responses."""
    return {
        "fdc_id": candidate.external_id,
        "description": candidate.description,
        "source_kind": candidate.source_kind.value,
        "data_type": candidate.data_type,
        "category": candidate.category,
        "brand_owner": candidate.brand_owner,
        "brand_name": candidate.brand_name,
        "serving_size": candidate.serving_size,
        "serving_size_unit": candidate.serving_size_unit,
        "nutrition_per_100g": extract_nutrients(candidate.raw_nutrients).as_dict(),
    }
