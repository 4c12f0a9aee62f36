from __future__ import annotations

from collections.abc import Iterable

from vehicle_search.domain.listing import Listing
from vehicle_search.ports.listing_store import ListingStore


class InMemoryListingStore(ListingStore):
    """
    Canonical contract implementation for tests.

    - Stores listings in insertion order
    - Hands out a copy so callers cannot mutate the store
    """

    def __init__(self, listings: Iterable[Listing]) -> None:
        self._listings = list(listings)

    def list_approved(self) -> list[Listing]:
        return list(self._listings)
