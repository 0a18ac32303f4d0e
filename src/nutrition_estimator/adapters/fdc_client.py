"""USDA FoodData Central API client."""

from dataclasses import dataclass
from typing import Protocol

import httpx

from nutrition_estimator.domain.fdc import FdcFood, FdcSearchResult

SEARCH_DATA_TYPES = ("Foundation", "Survey (FNDDS)")


class FdcClient(Protocol):
    """Interface for FoodData Central API interactions."""

    async def search_foods(self, query: str, page_size: int = 25) -> FdcSearchResult:
        """Search foods by query."""

    async def get_food(self, fdc_id: int) -> FdcFood:
        """Fetch a food by FDC id."""


@dataclass
class HttpxFdcClient(FdcClient):
    """HTTPX-backed FDC client."""

    api_key: str
    base_url: str
    http_client: httpx.AsyncClient
    timeout_seconds: float = 15

    @classmethod
    def create(
        cls, api_key: str, base_url: str, timeout_seconds: float = 15
    ) -> "HttpxFdcClient":
        """Create an FDC client with a managed httpx session."""
        return cls(
            api_key=api_key,
            base_url=base_url,
            http_client=httpx.AsyncClient(),
            timeout_seconds=timeout_seconds,
        )

    async def search_foods(self, query: str, page_size: int = 25) -> FdcSearchResult:
        """Search curated and survey foods, curated entries first."""
        url = f"{self.base_url}/foods/search"
        response = await self.http_client.post(
            url,
            params={"api_key": self.api_key},
            json={
                "query": query,
                "dataType": list(SEARCH_DATA_TYPES),
                "pageSize": page_size,
                "pageNumber": 1,
                "sortBy": "dataType.keyword",
                "sortOrder": "asc",
            },
            timeout=self.timeout_seconds,
        )
        response.raise_for_status()
        return FdcSearchResult.model_validate(response.json())

    async def get_food(self, fdc_id: int) -> FdcFood:
        """Fetch a food by FDC id."""
        url = f"{self.base_url}/food/{fdc_id}"
        response = await self.http_client.get(
            url,
            params={"api_key": self.api_key},
            timeout=self.timeout_seconds,
        )
        response.raise_for_status()
        return FdcFood.model_validate(response.json())

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
