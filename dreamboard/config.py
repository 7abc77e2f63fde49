"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    dreamboard_env: str = "development"
    dreamboard_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Image providers ("" or "demo" = not configured)
    unsplash_access_key: str = ""
    pexels_api_key: str = ""
    pixabay_api_key: str = ""
    provider_timeout_seconds: float = 8.0

    # Minimum interval between calls to the same provider
    unsplash_min_interval_seconds: float = 1.0
    pexels_min_interval_seconds: float = 0.5
    pixabay_min_interval_seconds: float = 0.5

    # Search cache
    image_cache_size: int = 256
    image_cache_ttl_seconds: float = 900.0

    # Per-user analysis history
    history_limit: int = 50

    # Layout randomness; None = fresh entropy per board
    layout_seed: int | None = None

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


settings = Settings()
