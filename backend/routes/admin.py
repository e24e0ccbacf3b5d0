"""Administrative routes gated by the shared ADMIN_SECRET."""

import hmac
import logging

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from config import Settings
from routes.dependencies import get_cache, get_settings
from services.cache import ResponseCache

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")


def _secret_matches(supplied: str | None, expected: str | None) -> bool:
    """Constant-time comparison. An unset ADMIN_SECRET matches nothing."""
    if not supplied or not expected:
        return False
    return hmac.compare_digest(supplied.encode(), expected.encode())


@router.delete("/cache")
async def clear_cache(
    secret: str | None = Query(None),
    settings: Settings = Depends(get_settings),
    cache: ResponseCache = Depends(get_cache),
):
    if not _secret_matches(secret, settings.admin_secret):
        logger.warning("Rejected cache clear: bad or missing secret")
        return JSONResponse({"error": "Unauthorized"}, status_code=403)

    cleared = cache.clear()
    return {"message": f"Cache cleared ({cleared} items)"}
