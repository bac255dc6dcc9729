from __future__ import annotations

import os
from urllib.parse import urlparse

from pydantic import BaseModel, field_validator


class Settings(BaseModel):
    """Typed client settings built from environment variables."""

    base_url: str
    timeout: float = 10.0
    # Strip request URLs from raised errors (tokens in query strings etc.)
    redact_urls: bool = False

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        if not v:
            raise ValueError("Base URL cannot be empty")
        parsed = urlparse(v)
        if parsed.scheme not in {"http", "https"}:
            raise ValueError("Base URL must start with http:// or https://")
        if not parsed.netloc:
            raise ValueError("Base URL must include a host")
        return v

    @field_validator("timeout")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("Timeout must be positive")
        return v


def get_settings() -> Settings:
    """Return typed settings instance sourced from env vars."""
    base_url = os.environ.get("HTTPX_EXTRA_BASE_URL")
    if not base_url:
        raise ValueError("HTTPX_EXTRA_BASE_URL is required")
    return Settings(
        base_url=base_url,
        timeout=float(os.environ.get("HTTPX_EXTRA_TIMEOUT", "10.0")),
        redact_urls=os.environ.get("HTTPX_EXTRA_REDACT_URLS", "false").lower() == "true",
    )
