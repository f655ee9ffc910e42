"""
Settings for the wordboard app

This module provides functions to:
- Resolve the project root and the database URL (from .env or default)
- Read board defaults (density, animation speed range)
- Read the list page size and log level

Malformed numeric values fall back to the defaults instead of failing startup.
"""

import logging
import math
import os
from typing import Tuple

from dotenv import load_dotenv

from .board.weights import MAX_DENSITY

# Load environment variables from .env if present (project root)
load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_DATABASE_FILE = "wordboard.db"
DEFAULT_DENSITY = 1.0
DEFAULT_SPEED_RANGE = (14.0, 28.0)
DEFAULT_PAGE_LIMIT = 20
MAX_PAGE_LIMIT = 100


def project_root() -> str:
    """Return absolute path to the repo root based on this file location."""
    # wordboard/app/config.py -> go up 2 levels to repo root
    return os.path.abspath(os.path.join(os.path.dirname(__file__), "..", ".."))


def database_url() -> str:
    """Resolve the SQLAlchemy URL from env; relative SQLite paths live under the repo root."""
    url = os.getenv("DATABASE_URL")
    if not url:
        return "sqlite:///" + os.path.join(project_root(), DEFAULT_DATABASE_FILE)
    prefix = "sqlite:///"
    if url.startswith(prefix):
        path = url[len(prefix):]
        if path and path != ":memory:" and not os.path.isabs(path):
            return prefix + os.path.join(project_root(), path)
    return url


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r (not a number), using %s", name, raw, default)
        return default
    if not math.isfinite(value):
        logger.warning("Ignoring %s=%r (not finite), using %s", name, raw, default)
        return default
    return value


def board_density() -> float:
    density = _float_env("BOARD_DENSITY", DEFAULT_DENSITY)
    if not 0 <= density <= MAX_DENSITY:
        logger.warning("BOARD_DENSITY=%s is outside 0..%s, clamping", density, MAX_DENSITY)
        density = max(0.0, min(MAX_DENSITY, density))
    return density


def speed_range() -> Tuple[float, float]:
    """Return (min, max) animation seconds for the board."""
    return (
        _float_env("BOARD_SPEED_MIN", DEFAULT_SPEED_RANGE[0]),
        _float_env("BOARD_SPEED_MAX", DEFAULT_SPEED_RANGE[1]),
    )


def page_limit() -> int:
    limit = int(_float_env("LIST_PAGE_LIMIT", DEFAULT_PAGE_LIMIT))
    return max(1, min(MAX_PAGE_LIMIT, limit))


def log_level() -> str:
    return os.getenv("LOG_LEVEL", "INFO").upper()
