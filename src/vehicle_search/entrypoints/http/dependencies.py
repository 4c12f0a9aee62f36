"""
Dependency injection for FastAPI routes.

Listing stores and use cases are built per request; only the pooled
resources (database engine, HTTP client) outlive a request.
"""

from __future__ import annotations

from typing import Generator

from fastapi import Depends

from vehicle_search.adapters.http_listing_store import HttpListingStore
from vehicle_search.adapters.postgres_listing_store import PostgresListingStore
from vehicle_search.infra.db.session import get_session
from vehicle_search.infra.http.client import get_http_client
from vehicle_search.infra.http.config import listing_api_url
from vehicle_search.ports.listing_store import ListingStore
from vehicle_search.use_cases.browse_listings import CountListingsByType, FeaturedListings
from vehicle_search.use_cases.search_listings import SearchListings


def get_listing_store() -> Generator[ListingStore, None, None]:
    """
    Provides the listing store for a single request.

    LISTING_API_URL selects the marketplace API, reached through the shared
    HTTP client; otherwise listings are read from Postgres through a
    per-request session that is closed afterwards.
    """
    api_url = listing_api_url()

    if api_url:
        yield HttpListingStore(api_url, client=get_http_client())
        return

    with get_session() as session:
        yield PostgresListingStore(session=session)


def get_search_listings_use_case(
    store: ListingStore = Depends(get_listing_store),
) -> SearchListings:
    return SearchListings(listing_store=store)


def get_featured_listings_use_case(
    store: ListingStore = Depends(get_listing_store),
) -> FeaturedListings:
    return FeaturedListings(listing_store=store)


def get_count_by_type_use_case(
    store: ListingStore = Depends(get_listing_store),
) -> CountListingsByType:
    return CountListingsByType(listing_store=store)
