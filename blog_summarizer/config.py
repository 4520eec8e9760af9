"""Centralised settings for the blog summarizer client.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the project root (two levels up from this file)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)


def _optional_float(name: str) -> float | None:
    """Read a float env var; unset or blank means ``None``."""
    raw = os.environ.get(name, "").strip()
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number of seconds, got {raw!r}") from None


def _int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def _optional_path(name: str) -> Path | None:
    raw = os.environ.get(name, "").strip()
    return Path(raw).expanduser() if raw else None


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Summarize API
    # ------------------------------------------------------------------
    api_base_url: str = field(
        default_factory=lambda: os.environ.get("SUMMARIZER_API_URL", "http://localhost:3000")
    )
    summarize_path: str = field(
        default_factory=lambda: os.environ.get("SUMMARIZE_PATH", "/api/summarize")
    )
    # None disables the client-side timeout; the wait is then bounded only
    # by the server closing the connection.
    request_timeout: float | None = field(
        default_factory=lambda: _optional_float("REQUEST_TIMEOUT")
    )

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------
    urdu_preview_words: int = field(
        default_factory=lambda: _int("URDU_PREVIEW_WORDS", 15)
    )

    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------
    log_level: str = field(
        default_factory=lambda: os.environ.get("LOG_LEVEL", "INFO").upper()
    )
    log_path: Path | None = field(default_factory=lambda: _optional_path("LOG_PATH"))

    # ------------------------------------------------------------------
    # Web page
    # ------------------------------------------------------------------
    web_host: str = field(
        default_factory=lambda: os.environ.get("WEB_HOST", "127.0.0.1")
    )
    web_port: int = field(
        default_factory=lambda: _int("WEB_PORT", 8000)
    )

    @property
    def summarize_url(self) -> str:
        """Absolute URL of the summarize endpoint."""
        return self.api_base_url.rstrip("/") + "/" + self.summarize_path.lstrip("/")


# Module-level singleton; import this everywhere:
#   from blog_summarizer.config import settings
settings = Settings()
