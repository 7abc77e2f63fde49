"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from dreamboard import __version__
from dreamboard.config import Settings, settings
from dreamboard.layout.engine import load_strategies
from dreamboard.layout.registry import get_registry

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.dreamboard_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)

logger = logging.getLogger(__name__)


def create_app(app_settings: Settings | None = None) -> FastAPI:
    app_settings = app_settings or settings
    app = FastAPI(
        title="Dreamboard",
        description="Turns a written dream into a styled, laid-out vision board",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Layout strategies register themselves on import
    load_strategies()

    from dreamboard.api.router import api_router

    app.include_router(api_router)

    logger.info(
        "Dreamboard %s (%s): %d layout strategies",
        __version__,
        app_settings.dreamboard_env,
        get_registry().count,
    )
    return app


app = create_app()
