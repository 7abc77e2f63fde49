"""FastAPI dependency injection."""

from __future__ import annotations

from functools import lru_cache

from dreamboard.config import settings
from dreamboard.pipeline import VisionBoardGenerator, create_generator


def get_settings():
    return settings


@lru_cache(maxsize=1)
def get_generator() -> VisionBoardGenerator:
    """Process-wide generator, so history and the image cache outlive a request."""
    return create_generator(get_settings())
