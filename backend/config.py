"""Centralized configuration — all env vars in one place."""

import os


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        self.cors_origins: list[str] = os.getenv("CORS_ORIGINS", "*").split(",")
        self.git_sha: str = os.getenv("GIT_SHA", "unknown")
        self.environment: str = os.getenv("ENVIRONMENT", "local")
        self.port: int = int(os.getenv("PORT", "3000"))

        # Pexels upstream
        self.pexels_api_key: str = os.getenv("PEXELS_API_KEY", "")
        self.pexels_api_url: str = os.getenv("PEXELS_API_URL", "https://api.pexels.com/videos")
        self.upstream_timeout_seconds: float = float(os.getenv("UPSTREAM_TIMEOUT_SECONDS", "10"))

        # Response cache
        self.cache_ttl_seconds: float = float(os.getenv("CACHE_TTL_SECONDS", "300"))

        # Admin + proxy
        self.admin_secret: str | None = os.getenv("ADMIN_SECRET") or None
        self.proxy_allowed_hosts: set[str] = {
            host.strip().lower()
            for host in os.getenv(
                "PROXY_ALLOWED_HOSTS",
                "videos.pexels.com,player.vimeo.com,images.pexels.com",
            ).split(",")
            if host.strip()
        }

        # Optional frontend bundle served at /
        self.static_dir: str | None = os.getenv("STATIC_DIR") or None

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    def validate(self) -> list[str]:
        """Return list of missing required env vars."""
        required = ["PEXELS_API_KEY", "ADMIN_SECRET"]
        return [var for var in required if not getattr(self, _attr_for(var))]


settings = Settings()


def _attr_for(env_var: str) -> str:
    """Map env var name to Settings attribute name."""
    mapping = {
        "PEXELS_API_KEY": "pexels_api_key",
        "ADMIN_SECRET": "admin_secret",
    }
    return mapping.get(env_var, env_var.lower())
