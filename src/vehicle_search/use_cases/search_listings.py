from __future__ import annotations

import logging
from dataclasses import dataclass, field

from vehicle_search.domain.criteria import Criteria, Paging
from vehicle_search.domain.listing import Listing
from vehicle_search.ports.listing_store import ListingStore
from vehicle_search.search.engine import search

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SearchListingsRequest:
    criteria: Criteria = field(default_factory=Criteria)
    paging: Paging = field(default_factory=Paging)


@dataclass(frozen=True, slots=True)
class SearchListingsResponse:
    listings: list[Listing]
    matched_count: int  # Matches before paging


class SearchListings:
    """
    Search approved listings with criteria and pagination.

    Paging is validated here; criteria never fail validation because every
    malformed value already degrades to "no constraint". Filtering and
    ranking are delegated to the search engine, not to the store.
    """

    def __init__(self, listing_store: ListingStore) -> None:
        self._listing_store = listing_store

    def execute(self, request: SearchListingsRequest) -> SearchListingsResponse:
        """
        Execute listing search.

        Args:
            request: Criteria and paging

        Returns:
            Response with the requested page and the total matched count

        Raises:
            PagingValidationError: If paging parameters are invalid
            ListingStoreError: If the listing store cannot be read
        """
        request.paging.validate()

        listings = self._listing_store.list_approved()
        page = search(
            listings,
            request.criteria,
            limit=request.paging.limit,
            offset=request.paging.offset,
        )

        logger.debug(
            "Listing search completed",
            extra={
                "available": len(listings),
                "matched": page.matched_count,
                "returned": len(page.listings),
                "active_filters": request.criteria.active_filter_count(),
            },
        )

        return SearchListingsResponse(listings=page.listings, matched_count=page.matched_count)
