"""Image discovery agent: fan out to providers, score, filter, cache.

One ``search`` call issues a single enhanced query to every configured
provider concurrently; ``search_many`` does the same for several queries
under one rate slot per provider. A provider that is unconfigured, throttled
or failing contributes nothing. When no provider is configured, or the
providers that were called left nothing after filtering, the fixed fallback
set is returned (and not cached). When every configured provider is merely
throttled the result is empty.
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
import math
import time
from collections.abc import AsyncIterator
from urllib.parse import urlencode

import httpx

from dreamboard.analysis.lexicon import CURATED_QUERIES
from dreamboard.config import Settings
from dreamboard.errors import ProviderError
from dreamboard.images.cache import SearchCache
from dreamboard.images.providers.base import ImageProvider
from dreamboard.images.providers.pexels import PexelsProvider
from dreamboard.images.providers.pixabay import PixabayProvider
from dreamboard.images.providers.unsplash import UnsplashProvider
from dreamboard.images.rate_limit import RateLimiter
from dreamboard.images.scoring import DEFAULT_SCORING, ScoringConfig, enhanced_query, filter_candidates, rank
from dreamboard.models.images import ImageCandidate, ImageEnhancement, ImageSearchParams
from dreamboard.models.vocab import DEFAULT_CATEGORY, Category, Composition, parse

logger = logging.getLogger(__name__)

FALLBACK_IMAGES: tuple[ImageCandidate, ...] = (
    ImageCandidate(
        id="fallback_1",
        source="unsplash",
        url="https://images.unsplash.com/photo-1506905925346-21bda4d32df4?w=600&h=400",
        thumbnail_url="https://images.unsplash.com/photo-1506905925346-21bda4d32df4?w=300&h=200",
        alt="Mountain landscape",
        width=600,
        height=400,
        composition=Composition.LANDSCAPE,
        color_palette=["#4A90E2"],
        style="expansive",
        tags=["nature", "mountain", "landscape"],
        relevance_score=0.6,
        emotional_resonance=0.7,
    ),
)

# ImageEnhancement field -> imgix parameter understood by images.unsplash.com
_UNSPLASH_PARAMS = (
    ("brightness", "bri"),
    ("contrast", "con"),
    ("saturation", "sat"),
    ("blur", "blur"),
    ("crop_focus", "crop"),
)


def fallback_images(params: ImageSearchParams) -> list[ImageCandidate]:
    return list(FALLBACK_IMAGES[: params.limit])


def build_providers(settings: Settings) -> list[ImageProvider]:
    return [
        UnsplashProvider(settings.unsplash_access_key, settings.unsplash_min_interval_seconds),
        PexelsProvider(settings.pexels_api_key, settings.pexels_min_interval_seconds),
        PixabayProvider(settings.pixabay_api_key, settings.pixabay_min_interval_seconds),
    ]


class ImageDiscoveryAgent:
    """Multi-provider image search.

    ``client`` may be injected (tests pass one built on ``httpx.MockTransport``);
    the agent never closes a client it did not create.
    """

    def __init__(
        self,
        providers: list[ImageProvider] | None = None,
        cache: SearchCache | None = None,
        rate_limiter: RateLimiter | None = None,
        client: httpx.AsyncClient | None = None,
        timeout: float = 8.0,
        scoring: ScoringConfig = DEFAULT_SCORING,
    ) -> None:
        self.providers = providers if providers is not None else []
        self.cache = cache if cache is not None else SearchCache()
        self.rate_limiter = rate_limiter if rate_limiter is not None else RateLimiter()
        self.timeout = timeout
        self.scoring = scoring
        self._client = client

    @classmethod
    def from_settings(cls, settings: Settings, client: httpx.AsyncClient | None = None) -> ImageDiscoveryAgent:
        return cls(
            providers=build_providers(settings),
            cache=SearchCache(settings.image_cache_size, settings.image_cache_ttl_seconds),
            client=client,
            timeout=settings.provider_timeout_seconds,
        )

    @property
    def configured_providers(self) -> list[str]:
        return [p.name for p in self.providers if p.is_configured]

    async def search(self, params: ImageSearchParams) -> list[ImageCandidate]:
        return (await self.search_many([params]))[0]

    async def search_many(self, batch: list[ImageSearchParams]) -> list[list[ImageCandidate]]:
        """Run several searches as one request, one result list per ``batch`` entry.

        Each provider's rate slot is claimed once for the whole batch, so the
        queries of a single board never throttle each other.
        """
        results: list[list[ImageCandidate] | None] = []
        pending: list[int] = []
        for index, params in enumerate(batch):
            cached = self.cache.get(params.cache_key())
            if cached is not None:
                logger.debug("Cache hit for %r", params.query)
            else:
                pending.append(index)
            results.append(cached)

        if pending:
            configured = bool(self.configured_providers)
            active = self._active_providers()
            # No client is opened when every provider is skipped
            opener = self._http_client() if active else contextlib.nullcontext()
            async with opener as client:
                found = await asyncio.gather(
                    *(self._search_providers(client, batch[i], active, configured) for i in pending)
                )
            for index, images in zip(pending, found):
                results[index] = images
        return results

    async def _search_providers(
        self,
        client: httpx.AsyncClient | None,
        params: ImageSearchParams,
        active: list[ImageProvider],
        configured: bool,
    ) -> list[ImageCandidate]:
        if configured and not active:
            logger.info("All providers throttled; no images for %r this time", params.query)
            return []

        start = time.perf_counter()
        query = enhanced_query(params)
        candidates: list[ImageCandidate] = []
        if active:
            results = await asyncio.gather(
                *(provider.fetch(client, query, params) for provider in active),
                return_exceptions=True,
            )
            for provider, result in zip(active, results):
                if isinstance(result, ProviderError):
                    logger.warning("Provider failed: %s", result)
                elif isinstance(result, Exception):
                    logger.warning("Provider %s raised %r", provider.name, result)
                elif isinstance(result, BaseException):
                    raise result
                else:
                    candidates.extend(result)

        filtered = filter_candidates(rank(candidates, params, self.scoring), params, self.scoring)
        elapsed = (time.perf_counter() - start) * 1000

        if not filtered:
            logger.warning(
                "No usable images for %r from %d provider(s); returning fallback set",
                params.query,
                len(active),
            )
            return fallback_images(params)

        self.cache.put(params.cache_key(), filtered)
        logger.info(
            "Image search %r: %d raw, %d kept from %d provider(s) in %.0fms",
            params.query,
            len(candidates),
            len(filtered),
            len(active),
            elapsed,
        )
        return filtered

    async def curated_collection(self, category: str | Category, limit: int = 10) -> list[ImageCandidate]:
        """Images for a category's curated query set, de-duplicated by id."""
        resolved = parse(Category, category, DEFAULT_CATEGORY)
        queries = CURATED_QUERIES[resolved]
        per_query = max(1, math.ceil(limit / len(queries)))

        collected: dict[str, ImageCandidate] = {}
        for query in queries:
            images = await self.search(ImageSearchParams(
                query=query,
                category=resolved.value,
                emotional_tone="positive",
                limit=per_query,
            ))
            for image in images:
                collected.setdefault(image.id, image)
        return list(collected.values())[:limit]

    def _active_providers(self) -> list[ImageProvider]:
        active: list[ImageProvider] = []
        for provider in self.providers:
            if not provider.is_configured:
                logger.debug("Skipping %s: no credentials", provider.name)
            elif not self.rate_limiter.try_acquire(provider.name, provider.min_interval):
                logger.debug("Skipping %s: called within %.1fs", provider.name, provider.min_interval)
            else:
                active.append(provider)
        return active

    @contextlib.asynccontextmanager
    async def _http_client(self) -> AsyncIterator[httpx.AsyncClient]:
        if self._client is not None:
            yield self._client
            return
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            yield client


def enhance_image_url(url: str, enhancement: ImageEnhancement) -> str:
    """Append imgix transformation parameters to Unsplash URLs; other hosts unchanged."""
    if "unsplash.com" not in url:
        return url
    params = []
    for field_name, query_key in _UNSPLASH_PARAMS:
        value = getattr(enhancement, field_name)
        if value:
            params.append((query_key, value))
    if not params:
        return url
    separator = "&" if "?" in url else "?"
    return f"{url}{separator}{urlencode(params)}"
