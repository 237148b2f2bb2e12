"""
Pagewright configuration — all environment variables in one place.

Read from environment once, at import.
"""

from __future__ import annotations

import os


def _optional_int(name: str) -> int | None:
    value = os.environ.get(name, "").strip()
    return int(value) if value else None


class Settings:
    """Application settings from environment variables."""

    # Application
    ENVIRONMENT: str = os.environ.get("PAGEWRIGHT_ENV", "development")
    LOG_LEVEL: str = os.environ.get("PAGEWRIGHT_LOG_LEVEL", "INFO").upper()

    # Sessions
    MAX_SESSIONS: int = int(os.environ.get("PAGEWRIGHT_MAX_SESSIONS", "100"))
    HISTORY_LIMIT: int | None = _optional_int("PAGEWRIGHT_HISTORY_LIMIT")  # None keeps every step

    # Editor
    DEFAULT_TARGET: str = os.environ.get("PAGEWRIGHT_DEFAULT_TARGET", "react")
    DROP_EDGE: float = float(os.environ.get("PAGEWRIGHT_DROP_EDGE", "15"))  # px band for top/bottom drops


# Singleton instance
settings = Settings()

if settings.MAX_SESSIONS < 1:
    raise RuntimeError("PAGEWRIGHT_MAX_SESSIONS must be at least 1")
if settings.HISTORY_LIMIT is not None and settings.HISTORY_LIMIT < 1:
    raise RuntimeError("PAGEWRIGHT_HISTORY_LIMIT must be at least 1 when set")
if settings.DROP_EDGE < 0:
    raise RuntimeError("PAGEWRIGHT_DROP_EDGE must not be negative")
