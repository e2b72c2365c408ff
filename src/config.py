"""
Service configuration from environment variables.

Values are read from the process environment, optionally populated from
.env.local (local dev, highest priority) or .env by load_environment().
Scoring weights are fixed constants in src.ranking and are not configurable.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).parent.parent


def load_environment(root: Path = PROJECT_ROOT) -> Optional[Path]:
    """
    Load .env.local first (highest priority), then .env as fallback.

    Returns:
        Path of the loaded file, or None if only system env vars are used
    """
    for candidate in (root / ".env.local", root / ".env"):
        if candidate.exists():
            load_dotenv(candidate, override=True)
            return candidate
    return None


def _get_int(name: str, default: int, minimum: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")
    if value < minimum:
        raise ValueError(f"{name} must be >= {minimum}, got {value}")
    return value


def _get_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    value = raw.strip().lower()
    if value in ("true", "1", "yes"):
        return True
    if value in ("false", "0", "no"):
        return False
    raise ValueError(f"{name} must be true or false, got {raw!r}")


@dataclass(frozen=True)
class Settings:
    """Runtime settings for the HTTP service"""
    recommend_limit: int = 3
    trending_limit: int = 5
    keyword_cache_enabled: bool = False
    keyword_cache_size: int = 10000
    log_level: str = "INFO"
    log_file: str = "logs/content-ranking.log"
    port: int = 8080

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Build settings from environment variables.

        Config (env vars):
            RECOMMEND_LIMIT: Default number of recommendations (default: 3)
            TRENDING_LIMIT: Default number of trending documents (default: 5)
            KEYWORD_CACHE_ENABLED: "true" to memoize keyword sets (default: false)
            KEYWORD_CACHE_SIZE: Max cached documents (default: 10000)
            LOG_LEVEL: Console log level (default: INFO)
            LOG_FILE: Log file base path (default: logs/content-ranking.log)
            PORT: HTTP port (default: 8080)

        Raises:
            ValueError: If a variable is present but invalid
        """
        log_level = os.getenv("LOG_LEVEL", "INFO").strip().upper()
        if not isinstance(logging.getLevelName(log_level), int):
            raise ValueError(f"LOG_LEVEL must be a logging level name, got {log_level!r}")

        return cls(
            recommend_limit=_get_int("RECOMMEND_LIMIT", 3, minimum=1),
            trending_limit=_get_int("TRENDING_LIMIT", 5, minimum=1),
            keyword_cache_enabled=_get_bool("KEYWORD_CACHE_ENABLED", False),
            keyword_cache_size=_get_int("KEYWORD_CACHE_SIZE", 10000, minimum=1),
            log_level=log_level,
            log_file=os.getenv("LOG_FILE", "logs/content-ranking.log"),
            port=_get_int("PORT", 8080, minimum=1),
        )

    @property
    def console_level(self) -> int:
        return getattr(logging, self.log_level, logging.INFO)
