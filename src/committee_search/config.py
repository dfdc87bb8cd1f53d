"""Service settings, read once at import time.

Each value comes from a ``PARL_*`` environment variable (a ``.env`` file in the
working directory is loaded first) and falls back to the default below.

Usage::

    from committee_search.config import BASE_URL, TIMEOUT_SECONDS

    client = ParlamentClient(base_url=BASE_URL, timeout_seconds=TIMEOUT_SECONDS)
"""

from __future__ import annotations

import logging
import os

from dotenv import load_dotenv

load_dotenv()

LOGGER = logging.getLogger(__name__)


def _env(key: str, fallback: str = "") -> str:
    return os.getenv(key, fallback)


# ── Remote service ───────────────────────────────────────────────────────────
BASE_URL: str = _env("PARL_BASE_URL", "http://ws.parlament.ch/").rstrip("/") + "/"
TIMEOUT_SECONDS: float = float(_env("PARL_TIMEOUT_SECONDS", "20"))

# ── Web server ───────────────────────────────────────────────────────────────
HOST: str = _env("PARL_HOST", "0.0.0.0").strip() or "0.0.0.0"
PORT: int = int(_env("PARL_PORT", "8080"))
LOG_LEVEL: str = _env("PARL_LOG_LEVEL", "INFO").upper().strip() or "INFO"

# When true, the app starts with an empty index and never contacts the service.
SKIP_REFRESH: bool = _env("PARL_SKIP_REFRESH") == "1"

if SKIP_REFRESH:
    LOGGER.warning("PARL_SKIP_REFRESH=1: committee index will stay empty.")
