"""Pexels video API client with fetch-on-miss caching.

Every JSON call goes through the ResponseCache: identical requests within the
TTL are answered from memory, and only successful upstream responses are
stored. A failed fetch raises UpstreamError and leaves the cache untouched, so
the next identical request tries the upstream again.
"""

import logging
from typing import Any, Mapping
from urllib.parse import urlsplit

import httpx

from config import Settings
from errors import UpstreamError
from services.cache import MISSING, ResponseCache, make_key

logger = logging.getLogger(__name__)

USER_AGENT = "FreeVideoStreamer/1.0"
PROXY_REFERER = "https://www.pexels.com/"
MAX_PROXY_REDIRECTS = 5


def is_allowed_url(url: str, allowed_hosts: set[str]) -> bool:
    parts = urlsplit(url)
    return parts.scheme in ("http", "https") and (parts.hostname or "").lower() in allowed_hosts


class PexelsClient:
    def __init__(
        self,
        settings: Settings,
        cache: ResponseCache,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.cache = cache
        self._client = httpx.AsyncClient(
            base_url=settings.pexels_api_url.rstrip("/") + "/",
            headers={
                "Authorization": settings.pexels_api_key,
                "User-Agent": USER_AGENT,
            },
            timeout=settings.upstream_timeout_seconds,
            transport=transport,
        )

    async def fetch(self, endpoint: str, params: Mapping[str, Any] | None = None) -> Any:
        """Return the upstream JSON for ``endpoint``, from cache when fresh."""
        key = make_key(endpoint, params)
        cached = self.cache.get(key, MISSING)
        if cached is not MISSING:
            logger.info("Cache hit for: %s", endpoint)
            return cached

        try:
            resp = await self._client.get(endpoint, params=dict(params or {}))
            resp.raise_for_status()
            data = resp.json()
        except httpx.HTTPStatusError as e:
            logger.error("Pexels API error for %s: %s", endpoint, e)
            raise UpstreamError(
                f"Pexels API returned {e.response.status_code}",
                upstream_status=e.response.status_code,
                detail=_error_body(e.response),
            ) from e
        except httpx.HTTPError as e:
            logger.error("Pexels API unreachable for %s: %s", endpoint, e)
            raise UpstreamError(f"Pexels API request failed: {e}") from e
        except ValueError as e:
            logger.error("Pexels API returned invalid JSON for %s: %s", endpoint, e)
            raise UpstreamError("Pexels API returned invalid JSON") from e

        self.cache.purge_expired()
        self.cache.put(key, data)
        return data

    async def stream(self, url: str, allowed_hosts: set[str]) -> httpx.Response:
        """Open a streaming GET for a video file. The caller must aclose() it.

        Redirects are followed by hand, up to MAX_PROXY_REDIRECTS hops, and
        every hop must stay on ``allowed_hosts``.
        """
        for _ in range(MAX_PROXY_REDIRECTS + 1):
            if not is_allowed_url(url, allowed_hosts):
                raise UpstreamError(f"Video host not allowed: {url}")

            request = self._client.build_request(
                "GET",
                url,
                headers={"Referer": PROXY_REFERER, "Accept-Encoding": "identity"},
            )
            # The API key is only for api.pexels.com, never for file hosts.
            del request.headers["Authorization"]
            try:
                resp = await self._client.send(request, stream=True)
            except httpx.HTTPError as e:
                logger.error("Video proxy fetch failed for %s: %s", url, e)
                raise UpstreamError(f"Video fetch failed: {e}") from e

            if not resp.has_redirect_location:
                break
            await resp.aclose()
            next_url = str(resp.url.join(resp.headers["Location"]))
            logger.info("Video proxy redirected %s -> %s", url, next_url)
            url = next_url
        else:
            raise UpstreamError(f"Too many redirects fetching video (>{MAX_PROXY_REDIRECTS})")

        if resp.is_error:
            await resp.aclose()
            logger.error("Video proxy got %d for %s", resp.status_code, url)
            raise UpstreamError(
                f"Video host returned {resp.status_code}",
                upstream_status=resp.status_code,
            )
        return resp

    async def aclose(self) -> None:
        await self._client.aclose()


def _error_body(resp: httpx.Response) -> Any:
    """Best-effort upstream error body for the client-facing message."""
    try:
        return resp.json()
    except ValueError:
        return resp.text or resp.reason_phrase
