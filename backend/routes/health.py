"""Health and diagnostics routes — no upstream calls."""

import time
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, Request

from config import Settings
from routes.dependencies import get_cache, get_settings
from services import catalog
from services.cache import ResponseCache

router = APIRouter(prefix="/api")


@router.get("/health")
async def health(
    cache: ResponseCache = Depends(get_cache),
    settings: Settings = Depends(get_settings),
) -> dict:
    """Lightweight liveness check that also reports the cache size."""
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "api": "Pexels",
        "cacheSize": cache.size(),
        "commit": settings.git_sha,
    }


@router.get("/stats")
async def stats(request: Request, cache: ResponseCache = Depends(get_cache)) -> dict:
    return {
        "totalVideos": catalog.TOTAL_VIDEOS_ESTIMATE,
        "categories": len(catalog.CATEGORY_QUERIES),
        "collections": len(catalog.COLLECTIONS),
        "cacheHits": cache.size(),
        "uptime": round(time.monotonic() - request.app.state.started_at, 3),
    }
