"""
Application Settings

Reads configuration from the environment (populated from .env by bible_browser.main).
"""

import os
from dataclasses import dataclass

DEFAULT_BASE_URL = "https://bible-api.com"


@dataclass(frozen=True)
class Settings:
    bible_api_base_url: str = DEFAULT_BASE_URL
    books_translation: str = "web"
    chapters_translation: str = "web"
    verses_translation: str = "asv"
    upstream_timeout: float = 10.0
    site_title: str = "ASV Bible"
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"


_settings: Settings | None = None


def _read_number(name: str, default, cast):
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return cast(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number. Got: '{raw}'")


def load_settings() -> Settings:
    """Build a Settings instance from the current environment."""
    timeout = _read_number("UPSTREAM_TIMEOUT", 10.0, float)
    if timeout <= 0:
        raise ValueError(f"UPSTREAM_TIMEOUT must be positive. Got: {timeout}")

    return Settings(
        bible_api_base_url=os.getenv("BIBLE_API_BASE_URL", DEFAULT_BASE_URL).rstrip("/"),
        books_translation=os.getenv("BOOKS_TRANSLATION", "web"),
        chapters_translation=os.getenv("CHAPTERS_TRANSLATION", "web"),
        verses_translation=os.getenv("VERSES_TRANSLATION", "asv"),
        upstream_timeout=timeout,
        site_title=os.getenv("SITE_TITLE", "ASV Bible"),
        host=os.getenv("HOST", "0.0.0.0"),
        port=_read_number("PORT", 3000, int),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )


def get_settings() -> Settings:
    """Get or create the settings (lazy singleton)."""
    global _settings
    if _settings is None:
        _settings = load_settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next call re-reads the environment."""
    global _settings
    _settings = None
