"""Unsplash search adapter."""

from __future__ import annotations

from typing import Any

from dreamboard.images.providers.base import ImageProvider
from dreamboard.models.images import ImageCandidate, ImageSearchParams, composition_for
from dreamboard.models.vocab import Orientation

_ORIENTATIONS = {
    Orientation.LANDSCAPE: "landscape",
    Orientation.PORTRAIT: "portrait",
    Orientation.SQUARE: "squarish",
}


class UnsplashProvider(ImageProvider):
    name = "unsplash"
    endpoint = "https://api.unsplash.com/search/photos"
    results_key = "results"
    max_per_page = 30

    def query_params(self, enhanced_query: str, orientation: Orientation, limit: int) -> dict[str, Any]:
        params: dict[str, Any] = {"query": enhanced_query, "per_page": limit}
        if orientation in _ORIENTATIONS:
            params["orientation"] = _ORIENTATIONS[orientation]
        return params

    def headers(self) -> dict[str, str]:
        return {"Authorization": f"Client-ID {self.api_key}"}

    def normalize(self, raw: dict[str, Any], params: ImageSearchParams) -> ImageCandidate:
        width, height = int(raw["width"]), int(raw["height"])
        user = raw.get("user") or {}
        return ImageCandidate(
            id=f"unsplash_{raw['id']}",
            source=self.name,
            url=raw["urls"]["regular"],
            thumbnail_url=raw["urls"]["thumb"],
            high_res_url=raw["urls"].get("full"),
            alt=raw.get("alt_description") or raw.get("description") or "Vision board image",
            photographer=user.get("name"),
            photographer_url=(user.get("links") or {}).get("html"),
            width=width,
            height=height,
            composition=composition_for(width, height),
            color_palette=[raw["color"]] if raw.get("color") else [],
            style=params.style or "dynamic",
            tags=[tag["title"] for tag in raw.get("tags") or [] if tag.get("title")],
        )
