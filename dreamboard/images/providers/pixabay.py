"""Pixabay search adapter. The key travels as a query parameter."""

from __future__ import annotations

from typing import Any

from dreamboard.images.providers.base import ImageProvider
from dreamboard.models.images import ImageCandidate, ImageSearchParams, composition_for
from dreamboard.models.vocab import Orientation

_ORIENTATIONS = {
    Orientation.LANDSCAPE: "horizontal",
    Orientation.PORTRAIT: "vertical",
}

_CATEGORIES = "backgrounds,nature,business,health,people,places"


class PixabayProvider(ImageProvider):
    name = "pixabay"
    endpoint = "https://pixabay.com/api/"
    results_key = "hits"
    max_per_page = 200

    def query_params(self, enhanced_query: str, orientation: Orientation, limit: int) -> dict[str, Any]:
        return {
            "key": self.api_key,
            "q": enhanced_query,
            "image_type": "photo",
            # Pixabay rejects per_page below 3
            "per_page": max(3, limit),
            "orientation": _ORIENTATIONS.get(orientation, "all"),
            "category": _CATEGORIES,
        }

    def normalize(self, raw: dict[str, Any], params: ImageSearchParams) -> ImageCandidate:
        width, height = int(raw["imageWidth"]), int(raw["imageHeight"])
        tags = [t.strip() for t in str(raw.get("tags") or "").split(",") if t.strip()]
        return ImageCandidate(
            id=f"pixabay_{raw['id']}",
            source=self.name,
            url=raw["webformatURL"],
            thumbnail_url=raw["previewURL"],
            high_res_url=raw.get("largeImageURL"),
            alt=raw.get("tags") or "Vision board image",
            photographer=raw.get("user"),
            width=width,
            height=height,
            composition=composition_for(width, height),
            color_palette=[],
            style=params.style or "dynamic",
            tags=tags,
        )
