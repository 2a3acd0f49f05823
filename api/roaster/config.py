"""Process configuration, read once from the environment at startup."""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_GEMINI_MODEL = "gemini-2.5-flash"
DEFAULT_GEMINI_API_URL = "https://generativelanguage.googleapis.com/v1beta"
DEFAULT_GITHUB_API_URL = "https://api.github.com"


def _env_str(name: str, default: str = "") -> str:
    return (os.getenv(name) or default).strip()


def _allowed_origins() -> list[str]:
    raw = os.getenv("ALLOWED_ORIGINS", "http://localhost:3000")
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


@dataclass(frozen=True)
class Settings:
    gemini_api_key: str
    gemini_model: str = DEFAULT_GEMINI_MODEL
    gemini_api_url: str = DEFAULT_GEMINI_API_URL
    github_api_url: str = DEFAULT_GITHUB_API_URL
    allowed_origins: tuple[str, ...] = ("http://localhost:3000",)
    log_level: str = "INFO"

    @property
    def has_gemini_key(self) -> bool:
        return bool(self.gemini_api_key)


def load_settings() -> Settings:
    """Build Settings from the current environment.

    ``VITE_GEMINI_API_KEY`` is accepted as a fallback so existing frontend
    ``.env`` files keep working.
    """
    api_key = _env_str("GEMINI_API_KEY") or _env_str("VITE_GEMINI_API_KEY")
    log_level = _env_str("ROASTER_LOG_LEVEL", "INFO").upper() or "INFO"
    return Settings(
        gemini_api_key=api_key,
        gemini_model=_env_str("GEMINI_MODEL", DEFAULT_GEMINI_MODEL) or DEFAULT_GEMINI_MODEL,
        gemini_api_url=_env_str("GEMINI_API_URL", DEFAULT_GEMINI_API_URL) or DEFAULT_GEMINI_API_URL,
        github_api_url=_env_str("GITHUB_API_URL", DEFAULT_GITHUB_API_URL) or DEFAULT_GITHUB_API_URL,
        allowed_origins=tuple(_allowed_origins()),
        log_level=log_level,
    )
