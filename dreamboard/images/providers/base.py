"""Provider adapter base: one HTTP search, one normalizer.

Usage:
    class MyProvider(ImageProvider):
        name = "mine"
        endpoint = "https://api.example.com/search"
        results_key = "items"

        def query_params(self, enhanced_query, orientation, limit): ...
        def normalize(self, raw, params): ...

Any transport failure, non-2xx status or malformed payload surfaces as
``ProviderError``; the agent treats that as zero results from the provider.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any

import httpx

from dreamboard.errors import ProviderError
from dreamboard.models.images import ImageCandidate, ImageSearchParams
from dreamboard.models.vocab import Orientation

logger = logging.getLogger(__name__)

PLACEHOLDER_KEYS = frozenset({"", "demo"})


class ImageProvider(ABC):
    name: str = ""
    endpoint: str = ""
    results_key: str = ""
    max_per_page: int = 30

    def __init__(self, api_key: str = "", min_interval: float = 0.5) -> None:
        self.api_key = api_key.strip()
        self.min_interval = min_interval

    @property
    def is_configured(self) -> bool:
        return self.api_key not in PLACEHOLDER_KEYS

    @abstractmethod
    def query_params(self, enhanced_query: str, orientation: Orientation, limit: int) -> dict[str, Any]:
        ...

    def headers(self) -> dict[str, str]:
        return {}

    @abstractmethod
    def normalize(self, raw: dict[str, Any], params: ImageSearchParams) -> ImageCandidate:
        """Map one raw result onto the common candidate shape."""

    async def search_images(
        self,
        client: httpx.AsyncClient,
        enhanced_query: str,
        orientation: Orientation,
        limit: int,
    ) -> list[dict[str, Any]]:
        """Raw result dicts for one query."""
        per_page = max(1, min(limit, self.max_per_page))
        try:
            response = await client.get(
                self.endpoint,
                params=self.query_params(enhanced_query, orientation, per_page),
                headers=self.headers(),
            )
        except httpx.HTTPError as e:
            raise ProviderError(self.name, f"request failed: {e!r}") from e

        if not response.is_success:
            raise ProviderError(self.name, f"HTTP {response.status_code}")

        try:
            payload = response.json()
        except ValueError as e:
            raise ProviderError(self.name, "response is not JSON") from e

        results = payload.get(self.results_key) if isinstance(payload, dict) else None
        if not isinstance(results, list):
            raise ProviderError(self.name, f"payload has no '{self.results_key}' list")
        return results

    def normalize_all(self, raw_results: list[dict[str, Any]], params: ImageSearchParams) -> list[ImageCandidate]:
        try:
            return [self.normalize(raw, params) for raw in raw_results]
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise ProviderError(self.name, f"malformed result: {e!r}") from e

    async def fetch(
        self,
        client: httpx.AsyncClient,
        enhanced_query: str,
        params: ImageSearchParams,
    ) -> list[ImageCandidate]:
        raw = await self.search_images(client, enhanced_query, params.orientation, params.limit)
        candidates = self.normalize_all(raw, params)
        logger.debug("%s returned %d candidates for %r", self.name, len(candidates), enhanced_query)
        return candidates
