"""FastAPI dependencies exposing the app-scoped cache and upstream client."""

from fastapi import Request

from config import Settings
from services.cache import ResponseCache
from services.pexels import PexelsClient


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_cache(request: Request) -> ResponseCache:
    return request.app.state.cache


def get_pexels(request: Request) -> PexelsClient:
    return request.app.state.pexels
