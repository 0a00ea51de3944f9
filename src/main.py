"""Main FastAPI application entry point."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import ORJSONResponse
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from api.exception_handlers import setup_exception_handlers
from api.middleware.logging import RequestLoggingMiddleware
from api.middleware.request_id import RequestIDMiddleware
from api.middleware.security import SecurityHeadersMiddleware
from api.routes.cards import router as cards_router
from api.routes.health import router as health_router
from api.v1 import router as v1_router
from core.config import Settings, settings as default_settings
from core.logging import setup_logging
from core.rate_limit import limiter, rate_limit_exceeded_handler
from infrastructure.rendering.card_renderer import CardRenderer
from infrastructure.storage import build_profile_store

logger = structlog.get_logger()


def build_lifespan(config: Settings):  # type: ignore[no-untyped-def]
    """Lifespan that opens the profile store on startup and closes it on shutdown."""

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        store = await build_profile_store(config)
        app.state.profile_store = store
        logger.info(
            "app_started",
            storage=store.name,
            overflow_policy=config.card_overflow_policy.value,
        )
        try:
            yield
        finally:
            await store.close()
            logger.info("app_stopped")

    return lifespan


def create_app(config: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    config = config or default_settings
    setup_logging(config)

    app = FastAPI(
        lifespan=build_lifespan(config),
        default_response_class=ORJSONResponse,
        title=config.app_name,
        description=(
            "## Digital Business Cards\n\n"
            "Store contact details and social links for a person and download "
            "them as a branded PDF card with clickable links.\n\n"
            "### Links\n"
            "Instagram, WhatsApp, Facebook, LinkedIn and Website accept either "
            "a handle or a full URL. Extra links use `label|url` pairs separated "
            "by commas.\n\n"
            "### Rate Limits\n"
            "- GET endpoints: 30 requests/minute\n"
            "- Card downloads: 20 requests/minute\n"
            "- POST/PUT: 10 requests/minute"
        ),
        version="1.0.0",
        debug=config.debug,
        license_info={
            "name": "MIT",
        },
        openapi_tags=[
            {
                "name": "health",
                "description": "Health check endpoints",
            },
            {
                "name": "profiles",
                "description": "Profile management operations",
            },
            {
                "name": "cards",
                "description": "Rendered business cards",
            },
        ],
    )

    app.state.card_renderer = CardRenderer(
        overflow_policy=config.card_overflow_policy,
        author=config.app_name,
    )
    app.state.card_disposition = config.card_disposition
    app.state.settings = config

    # Rate limiting. The limiter is shared by the route decorators, so the
    # most recently created app decides whether it is active.
    limiter.enabled = config.rate_limit_enabled
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)

    # Security & tracking middleware (LIFO order - last added = outermost)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # GZip compression for responses > 1KB
    app.add_middleware(GZipMiddleware, minimum_size=1000)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    setup_exception_handlers(app, config)

    app.include_router(health_router)
    app.include_router(cards_router)
    app.include_router(v1_router, prefix="/api/v1")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host=default_settings.host,
        port=default_settings.port,
        reload=not default_settings.is_production,
    )
