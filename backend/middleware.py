"""
Response compression middleware
"""
from fastapi.middleware.gzip import GZipMiddleware
from starlette.types import ASGIApp, Receive, Scope, Send


class SelectiveGZipMiddleware(GZipMiddleware):
    """GZipMiddleware that leaves some path prefixes alone.

    Video streams from the proxy are already compressed media and must keep
    their Content-Length, so they bypass gzip entirely.
    """

    def __init__(
        self,
        app: ASGIApp,
        minimum_size: int = 1000,
        exclude_paths: tuple[str, ...] = (),
    ) -> None:
        super().__init__(app, minimum_size=minimum_size)
        self.exclude_paths = exclude_paths

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "http" and scope["path"].startswith(self.exclude_paths):
            await self.app(scope, receive, send)
            return
        await super().__call__(scope, receive, send)
