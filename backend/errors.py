"""Custom exceptions and centralized FastAPI error handlers."""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class VideoAPIError(Exception):
    """Base exception with HTTP status code and optional upstream detail."""

    def __init__(self, message: str, status_code: int = 500, detail: Any = None):
        super().__init__(message)
        self.status_code = status_code
        self.detail = detail


class UpstreamError(VideoAPIError):
    """The Pexels API could not be reached or answered with an error."""

    def __init__(self, message: str, upstream_status: int | None = None, detail: Any = None):
        super().__init__(message, status_code=500, detail=detail if detail is not None else message)
        self.upstream_status = upstream_status


def register_error_handlers(app: FastAPI, expose_errors: bool = True) -> None:
    """Register centralized exception handlers on the FastAPI app."""

    @app.exception_handler(VideoAPIError)
    async def handle_video_api_error(_request: Request, exc: VideoAPIError):
        body: dict[str, Any] = {"error": str(exc)}
        if exc.detail is not None:
            body["message"] = exc.detail
        return JSONResponse(body, status_code=exc.status_code)

    @app.exception_handler(ValueError)
    async def handle_value_error(_request: Request, exc: ValueError):
        return JSONResponse({"error": str(exc)}, status_code=400)

    @app.exception_handler(Exception)
    async def handle_unexpected(_request: Request, exc: Exception):
        logger.exception("Unhandled error: %s", exc)
        body = {"error": "Internal server error"}
        if expose_errors:
            body["message"] = str(exc)
        return JSONResponse(body, status_code=500)
