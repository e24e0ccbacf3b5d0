"""
Pytest configuration and fixtures for the video streamer API tests
"""
import httpx
import pytest
from fastapi.testclient import TestClient

from app import create_app
from config import Settings
from services.cache import ResponseCache
from services.pexels import PexelsClient


class FakeClock:
    """Manually advanced clock for TTL tests."""

    def __init__(self, now: float = 0.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class StubUpstream:
    """Stand-in for the Pexels API that records every request it receives."""

    def __init__(self):
        self.calls: list[httpx.Request] = []
        self.status_code = 200
        self.error: Exception | None = None
        self.body: bytes | None = None
        self.video_body = b"fake-video-bytes"
        self.redirects: dict[str, str] = {}

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.calls.append(request)
        if self.error is not None:
            if isinstance(self.error, httpx.RequestError):
                self.error.request = request
            raise self.error
        if str(request.url) in self.redirects:
            return httpx.Response(302, headers={"Location": self.redirects[str(request.url)]})
        if request.url.host != "api.pexels.com":
            return httpx.Response(
                self.status_code,
                content=self.video_body,
                headers={"content-type": "video/mp4"},
            )
        if self.status_code >= 400:
            return httpx.Response(self.status_code, json={"error": "upstream says no"})
        if self.body is not None:
            return httpx.Response(200, content=self.body, headers={"content-type": "application/json"})
        return httpx.Response(
            200,
            json={
                "path": request.url.path,
                "params": dict(request.url.params),
                "videos": [{"id": 1}],
            },
        )

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    @property
    def call_count(self) -> int:
        return len(self.calls)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def cache(clock):
    return ResponseCache(ttl_seconds=300, clock=clock)


@pytest.fixture
def upstream():
    return StubUpstream()


@pytest.fixture
def settings():
    s = Settings()
    s.environment = "test"
    s.pexels_api_key = "test-key"
    s.pexels_api_url = "https://api.pexels.com/videos"
    s.admin_secret = "s3cret"
    s.static_dir = None
    s.proxy_allowed_hosts = {"videos.pexels.com", "player.vimeo.com"}
    return s


@pytest.fixture
def pexels(settings, cache, upstream):
    return PexelsClient(settings, cache, transport=upstream.transport)


@pytest.fixture
def client(settings, cache, upstream):
    app = create_app(settings=settings, cache=cache, transport=upstream.transport)
    with TestClient(app) as test_client:
        yield test_client
