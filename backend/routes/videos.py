"""Video browsing routes — cached passthrough to the Pexels video API.

GET /api/trending                → Pexels `popular`
GET /api/search                  → Pexels `search`
GET /api/video/{id}              → Pexels `videos/{id}`
GET /api/category/{category}     → Pexels `search` with the category's query
GET /api/collections             → static collection list (no upstream call)
GET /api/collection/{id}         → Pexels `search` with the collection's query
"""

import logging
from typing import Any

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from errors import UpstreamError, VideoAPIError
from routes.dependencies import get_pexels
from services import catalog
from services.pexels import PexelsClient

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")

MAX_PER_PAGE = 80
MIN_DURATION_SECONDS = 5
MIN_WIDTH = 640


async def _fetch_or_fail(
    pexels: PexelsClient,
    error_message: str,
    endpoint: str,
    params: dict[str, Any] | None = None,
    status_code: int = 500,
) -> Any:
    """Fetch through the cache; map upstream failures to a route-level error."""
    try:
        return await pexels.fetch(endpoint, params)
    except UpstreamError as e:
        logger.error("%s: %s", error_message, e)
        raise VideoAPIError(error_message, status_code=status_code, detail=e.detail) from e


def _search_params(query: str, page: int, per_page: int) -> dict[str, Any]:
    return {
        "query": query,
        "page": page,
        "per_page": min(per_page, MAX_PER_PAGE),
        "orientation": "landscape",
    }


@router.get("/trending")
async def trending(
    page: int = Query(1, ge=1),
    per_page: int = Query(15, ge=1),
    pexels: PexelsClient = Depends(get_pexels),
):
    """Popular videos, filtered to reasonably sized clips."""
    return await _fetch_or_fail(
        pexels,
        "Failed to fetch trending videos",
        "popular",
        {
            "page": page,
            "per_page": min(per_page, MAX_PER_PAGE),
            "min_width": MIN_WIDTH,
            "min_duration": MIN_DURATION_SECONDS,
        },
    )


@router.get("/search")
async def search(
    q: str | None = Query(None),
    page: int = Query(1, ge=1),
    per_page: int = Query(15, ge=1),
    orientation: str = Query("landscape"),
    pexels: PexelsClient = Depends(get_pexels),
):
    if not q or not q.strip():
        return JSONResponse({"error": "Search query is required"}, status_code=400)

    return await _fetch_or_fail(
        pexels,
        "Failed to search videos",
        "search",
        {
            "query": q,
            "page": page,
            "per_page": min(per_page, MAX_PER_PAGE),
            "orientation": orientation,
            "size": "medium",
            "min_duration": MIN_DURATION_SECONDS,
        },
    )


@router.get("/video/{video_id}")
async def video_details(video_id: str, pexels: PexelsClient = Depends(get_pexels)):
    return await _fetch_or_fail(pexels, "Video not found", f"videos/{video_id}", status_code=404)


@router.get("/category/{category}")
async def category_videos(
    category: str,
    page: int = Query(1, ge=1),
    per_page: int = Query(15, ge=1),
    pexels: PexelsClient = Depends(get_pexels),
):
    query = catalog.category_query(category)
    return await _fetch_or_fail(
        pexels,
        "Failed to fetch category videos",
        "search",
        _search_params(query, page, per_page),
    )


@router.get("/collections")
async def collections() -> list[dict]:
    return catalog.COLLECTIONS


@router.get("/collection/{collection_id}")
async def collection_videos(
    collection_id: str,
    page: int = Query(1, ge=1),
    per_page: int = Query(15, ge=1),
    pexels: PexelsClient = Depends(get_pexels),
):
    query = catalog.collection_query(collection_id)
    return await _fetch_or_fail(
        pexels,
        "Failed to fetch collection videos",
        "search",
        _search_params(query, page, per_page),
    )
