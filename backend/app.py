"""FastAPI application entry point for the video streamer API."""

import logging
import os
import sys
import time

import httpx
from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from config import Settings, settings as default_settings
from errors import register_error_handlers
from frontend import SPAStaticFiles
from middleware import SelectiveGZipMiddleware
from services.cache import ResponseCache
from services.pexels import PexelsClient

# Structured logging: JSON for production, human-readable for local
if default_settings.is_production:
    logging.basicConfig(
        level=logging.INFO,
        format='{"time":"%(asctime)s","level":"%(levelname)s","logger":"%(name)s","message":"%(message)s"}',
        stream=sys.stdout,
    )
else:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings | None = None,
    cache: ResponseCache | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> FastAPI:
    """Build the app. Tests pass their own settings, cache and upstream transport."""
    settings = settings or default_settings
    app = FastAPI(title="Free Video Streamer API", version="1.0.0")

    # One cache and one upstream client per process, shared by every route.
    app.state.settings = settings
    app.state.cache = cache if cache is not None else ResponseCache(ttl_seconds=settings.cache_ttl_seconds)
    app.state.pexels = PexelsClient(settings, app.state.cache, transport=transport)
    app.state.started_at = time.monotonic()

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Compression; proxied video is streamed as-is
    app.add_middleware(SelectiveGZipMiddleware, minimum_size=1000, exclude_paths=("/api/proxy/",))

    # Security headers
    @app.middleware("http")
    async def add_security_headers(request: Request, call_next):
        response: Response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        if settings.is_production:
            response.headers["Strict-Transport-Security"] = "max-age=31536000; includeSubDomains"
        return response

    # Centralized error handlers
    register_error_handlers(app, expose_errors=not settings.is_production)

    from routes.admin import router as admin_router
    from routes.health import router as health_router
    from routes.proxy import router as proxy_router
    from routes.videos import router as videos_router

    app.include_router(health_router)
    app.include_router(videos_router)
    app.include_router(admin_router)
    app.include_router(proxy_router)

    # Frontend bundle last, so /api/* always wins; deep links fall back to index.html
    if settings.static_dir and os.path.isdir(settings.static_dir):
        app.mount("/", SPAStaticFiles(directory=settings.static_dir, html=True), name="frontend")

    @app.on_event("startup")
    async def _validate_config() -> None:
        missing = settings.validate()
        if missing:
            logger.warning("Missing env vars (upstream or admin features may fail): %s", ", ".join(missing))

    @app.on_event("shutdown")
    async def _close_upstream() -> None:
        await app.state.pexels.aclose()

    return app


app = create_app()


def main() -> None:
    """Run the API with uvicorn on $PORT."""
    import uvicorn

    uvicorn.run("app:app", host="0.0.0.0", port=default_settings.port)


if __name__ == "__main__":
    main()
