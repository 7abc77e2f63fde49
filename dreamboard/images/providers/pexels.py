"""Pexels search adapter."""

from __future__ import annotations

from typing import Any

from dreamboard.images.providers.base import ImageProvider
from dreamboard.models.images import ImageCandidate, ImageSearchParams, composition_for
from dreamboard.models.vocab import Orientation


class PexelsProvider(ImageProvider):
    name = "pexels"
    endpoint = "https://api.pexels.com/v1/search"
    results_key = "photos"
    max_per_page = 80

    def query_params(self, enhanced_query: str, orientation: Orientation, limit: int) -> dict[str, Any]:
        params: dict[str, Any] = {"query": enhanced_query, "per_page": limit}
        if orientation != Orientation.ANY:
            params["orientation"] = orientation.value
        return params

    def headers(self) -> dict[str, str]:
        return {"Authorization": self.api_key}

    def normalize(self, raw: dict[str, Any], params: ImageSearchParams) -> ImageCandidate:
        width, height = int(raw["width"]), int(raw["height"])
        src = raw["src"]
        return ImageCandidate(
            id=f"pexels_{raw['id']}",
            source=self.name,
            url=src["large"],
            thumbnail_url=src["medium"],
            high_res_url=src.get("original"),
            alt=raw.get("alt") or "Vision board image",
            photographer=raw.get("photographer"),
            photographer_url=raw.get("photographer_url"),
            width=width,
            height=height,
            composition=composition_for(width, height),
            color_palette=[raw.get("avg_color") or "#000000"],
            style=params.style or "dynamic",
            tags=[],
        )
