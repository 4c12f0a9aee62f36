from __future__ import annotations

from collections.abc import Mapping

from vehicle_search.domain.criteria import Criteria, Paging
from vehicle_search.domain.listing import Listing
from vehicle_search.entrypoints.http.dtos.listing_search import (
    ListingResponseDTO,
    ListingSearchResponseDTO,
    PagingQueryDTO,
)
from vehicle_search.search.url_codec import decode, encode
from vehicle_search.use_cases.search_listings import (
    SearchListingsRequest,
    SearchListingsResponse,
)


class ListingSearchMapper:
    """Maps between REST query strings/DTOs and domain models for listing search."""

    @staticmethod
    def to_domain_criteria(query_params: Mapping[str, str]) -> Criteria:
        """
        Decodes search criteria from the raw query string.

        Unlike paging, criteria are never rejected: malformed values are
        dropped by the codec and simply impose no constraint.
        """
        return decode(query_params)

    @staticmethod
    def to_domain_request(
        query_params: Mapping[str, str], paging: PagingQueryDTO
    ) -> SearchListingsRequest:
        return SearchListingsRequest(
            criteria=ListingSearchMapper.to_domain_criteria(query_params),
            paging=Paging(offset=paging.offset, limit=paging.limit),
        )

    @staticmethod
    def to_listing_response(listing: Listing) -> ListingResponseDTO:
        """
        Converts domain Listing to REST response DTO.

        Handles Decimal -> str conversion at the boundary.
        """
        return ListingResponseDTO(
            id=listing.id,
            title=listing.title,
            brand=listing.brand,
            model=listing.model,
            description=listing.description,
            type=listing.vehicle_type,
            fuel_type=listing.fuel_type,
            transmission=listing.transmission,
            year=listing.year,
            price=str(listing.price) if listing.price is not None else None,
            mileage=listing.mileage,
            location=listing.location,
            is_promoted=listing.is_promoted,
            created_at=listing.created_at,
            approved_at=listing.approved_at,
        )

    @staticmethod
    def to_response(
        result: SearchListingsResponse,
        criteria: Criteria,
        offset: int,
        limit: int,
    ) -> ListingSearchResponseDTO:
        return ListingSearchResponseDTO(
            listings=[ListingSearchMapper.to_listing_response(item) for item in result.listings],
            matched_count=result.matched_count,
            offset=offset,
            limit=limit,
            criteria=encode(criteria),
            active_filter_count=criteria.active_filter_count(),
        )
