"""FastAPI application factory."""
from __future__ import annotations

import contextlib
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from storefront import __version__
from storefront.adapters.fastapi import CorrelationIdMiddleware, HealthRouter, StorefrontExceptionMapper
from storefront.api import api_router
from storefront.application.assets import AssetHost
from storefront.application.cache import ResponseCache
from storefront.config import StorefrontSettings, load_settings
from storefront.container import Repositories, build_container
from storefront.observability.logging import get_logger

__all__ = ["create_app"]

logger = get_logger(__name__)


def create_app(
    settings: StorefrontSettings | None = None,
    *,
    cache: ResponseCache | None = None,
    repositories: Repositories | None = None,
    asset_host: AssetHost | None = None,
) -> FastAPI:
    """Build the app. Injected components replace the ones built from *settings*."""
    settings = settings or load_settings()

    @contextlib.asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        container = await build_container(
            settings, cache=cache, repositories=repositories, asset_host=asset_host
        )
        app.state.container = container
        logger.info("storefront.started", port=settings.port)
        try:
            yield
        finally:
            await container.close()
            logger.info("storefront.stopped")

    app = FastAPI(title="storefront", version=__version__, lifespan=lifespan)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(CorrelationIdMiddleware)
    StorefrontExceptionMapper().register(app)

    @app.get("/", response_class=PlainTextResponse, include_in_schema=False)
    async def root() -> str:
        return "API working with /api/v1"

    async def store() -> bool:
        return await app.state.container.ready()

    app.include_router(api_router, prefix="/api/v1")
    app.include_router(HealthRouter(readiness_checks=[store]))
    return app
