"""Home screen use cases: featured listings and per-type counts."""

from __future__ import annotations

from vehicle_search.domain.criteria import Criteria
from vehicle_search.domain.listing import Listing
from vehicle_search.ports.listing_store import ListingStore
from vehicle_search.search.engine import FEATURED_LIMIT, TypeCounts, search, tally_by_type


class FeaturedListings:
    """First listings of the default ranking: promoted first, newest approval next."""

    def __init__(self, listing_store: ListingStore) -> None:
        self._listing_store = listing_store

    def execute(self, limit: int = FEATURED_LIMIT) -> list[Listing]:
        page = search(self._listing_store.list_approved(), Criteria(), limit=limit)
        return page.listings


class CountListingsByType:
    """Number of approved listings per vehicle type, optionally narrowed by criteria."""

    def __init__(self, listing_store: ListingStore) -> None:
        self._listing_store = listing_store

    def execute(self, criteria: Criteria | None = None) -> TypeCounts:
        return tally_by_type(self._listing_store.list_approved(), criteria)
