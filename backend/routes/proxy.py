"""Video file proxy — streams Pexels video files to avoid browser CORS issues.

Only hosts listed in PROXY_ALLOWED_HOSTS are fetched, redirects included.
Responses are streamed through and never cached.
"""

import logging

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse, StreamingResponse
from starlette.background import BackgroundTask

from config import Settings
from errors import UpstreamError
from routes.dependencies import get_pexels, get_settings
from services.pexels import PexelsClient, is_allowed_url

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")

PASSTHROUGH_HEADERS = ("content-type", "content-length", "content-encoding")


@router.get("/proxy/video")
async def proxy_video(
    url: str | None = Query(None),
    settings: Settings = Depends(get_settings),
    pexels: PexelsClient = Depends(get_pexels),
):
    if not url:
        return JSONResponse({"error": "URL is required"}, status_code=400)
    if not is_allowed_url(url, settings.proxy_allowed_hosts):
        logger.warning("Refusing to proxy disallowed URL: %s", url)
        return JSONResponse({"error": "URL host is not allowed"}, status_code=400)

    try:
        upstream = await pexels.stream(url, settings.proxy_allowed_hosts)
    except UpstreamError:
        return JSONResponse({"error": "Failed to proxy video"}, status_code=500)

    headers = {name: upstream.headers[name] for name in PASSTHROUGH_HEADERS if name in upstream.headers}
    return StreamingResponse(
        upstream.aiter_raw(),
        status_code=upstream.status_code,
        headers=headers,
        background=BackgroundTask(upstream.aclose),
    )
