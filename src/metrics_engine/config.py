"""Environment-variable-based configuration for the metrics engine."""

from __future__ import annotations

import logging
import os

from metrics_engine.models.enums import STRETCHING_AUTO_EXCLUDE_MIN_ACTIVITIES

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "")
    if not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("Ignoring invalid %s=%r, using %d", name, raw, default)
        return default


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.environ.get(name, "").strip().lower()
    if not raw:
        return default
    return raw in ("1", "true", "yes", "on")


LOG_LEVEL: str = os.environ.get("METRICS_LOG_LEVEL", "INFO").upper()
CACHE_MAX_ENTRIES: int = _env_int("METRICS_CACHE_MAX_ENTRIES", 256)
EXCLUDE_STRETCHING: bool = _env_bool("METRICS_EXCLUDE_STRETCHING")
STRETCHING_AUTO_EXCLUDE_MIN: int = _env_int(
    "METRICS_STRETCHING_AUTO_EXCLUDE_MIN", STRETCHING_AUTO_EXCLUDE_MIN_ACTIVITIES
)


def configure_logging(level: str | None = None) -> None:
    """Install a basic root handler for entry points embedding the engine."""
    logging.basicConfig(level=(level or LOG_LEVEL), format=LOG_FORMAT)
