from __future__ import annotations

import httpx

from vehicle_search.infra.http.config import listing_api_timeout

# Created on first use and shared by every request, so connections are pooled
_client: httpx.Client | None = None


def get_http_client() -> httpx.Client:
    """Get or create the marketplace API client."""
    global _client
    if _client is None or _client.is_closed:
        _client = httpx.Client(timeout=listing_api_timeout())
    return _client


def close_http_client() -> None:
    global _client
    if _client is not None:
        _client.close()
        _client = None
