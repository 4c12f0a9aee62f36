from __future__ import annotations

import os

DEFAULT_TIMEOUT_SECONDS = 10.0


def listing_api_url() -> str | None:
    """Base URL of the remote marketplace API, or None to read from Postgres."""
    url = os.getenv("LISTING_API_URL", "").strip()
    return url.rstrip("/") or None


def listing_api_timeout() -> float:
    raw = os.getenv("LISTING_API_TIMEOUT")

    if not raw:
        return DEFAULT_TIMEOUT_SECONDS

    try:
        timeout = float(raw)
    except ValueError:
        raise RuntimeError(f"LISTING_API_TIMEOUT must be a number of seconds, got {raw!r}")

    if timeout <= 0:
        raise RuntimeError("LISTING_API_TIMEOUT must be > 0")

    return timeout
