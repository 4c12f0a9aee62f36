from __future__ import annotations

from abc import ABC, abstractmethod

from vehicle_search.domain.listing import Listing


class ListingStore(ABC):
    """
    Port for the external listing store.

    The store only supplies raw listings; filtering and ranking happen in
    the search engine so every adapter produces identical result pages.

    Contract:
        - Returns approved listings only, in the store's natural order
        - Raises ListingStoreError when the store cannot be read
    """

    @abstractmethod
    def list_approved(self) -> list[Listing]:
        """Return every approved listing."""
        ...
