from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from vehicle_search.entrypoints.http.dependencies import (
    get_count_by_type_use_case,
    get_featured_listings_use_case,
    get_search_listings_use_case,
)
from vehicle_search.entrypoints.http.dtos.listing_search import (
    FeaturedListingsResponseDTO,
    ListingSearchResponseDTO,
    PagingQueryDTO,
    TypeCountsResponseDTO,
)
from vehicle_search.entrypoints.http.error_responses import ErrorResponse
from vehicle_search.entrypoints.http.mappers.listing_search_mapper import ListingSearchMapper
from vehicle_search.use_cases.browse_listings import CountListingsByType, FeaturedListings
from vehicle_search.use_cases.search_listings import SearchListings


router = APIRouter(tags=["Listings"])

_UPSTREAM_ERROR = {502: {"model": ErrorResponse, "description": "Listing store unavailable"}}


@router.get(
    "/listings",
    response_model=ListingSearchResponseDTO,
    summary="Search listings",
    description="""
    Search approved listings. Promoted listings always come first, then the
    selected sort order applies.

    ## Criteria
    `q`, `type`, `brand`, `fuelType`, `transmission`, `condition` (`new`|`used`),
    `location`, `minPrice`, `maxPrice`, `minYear`, `maxYear`, `minMileage`,
    `maxMileage`, `sortBy` (`approvedAt`, `createdAt`, `price`, `year`,
    `mileage`, `isPremium`), `sortOrder` (`asc`|`desc`).

    - All filters use AND semantics
    - Text query: case-insensitive substring of title, brand, model or description
    - Malformed values are ignored rather than rejected
    - Default order: `approvedAt` descending

    ## Example
    ```
    GET /v1/listings?type=car&minPrice=10000&sortBy=price&sortOrder=asc&limit=10
    ```
    """,
    responses={422: {"model": ErrorResponse, "description": "Invalid paging"}, **_UPSTREAM_ERROR},
)
def search_listings(
    request: Request,
    paging: Annotated[PagingQueryDTO, Query()],
    use_case: SearchListings = Depends(get_search_listings_use_case),
) -> ListingSearchResponseDTO:
    """Search listings endpoint following parse → execute → map → return pattern."""
    search_request = ListingSearchMapper.to_domain_request(request.query_params, paging)

    result = use_case.execute(search_request)

    return ListingSearchMapper.to_response(
        result=result,
        criteria=search_request.criteria,
        offset=paging.offset,
        limit=paging.limit,
    )


@router.get(
    "/listings/featured",
    response_model=FeaturedListingsResponseDTO,
    summary="Featured listings",
    description="Home screen selection: the first listings of the default ranking.",
    responses=_UPSTREAM_ERROR,
)
def featured_listings(
    use_case: FeaturedListings = Depends(get_featured_listings_use_case),
) -> FeaturedListingsResponseDTO:
    listings = use_case.execute()
    return FeaturedListingsResponseDTO(
        listings=[ListingSearchMapper.to_listing_response(item) for item in listings],
    )


@router.get(
    "/listings/type-counts",
    response_model=TypeCountsResponseDTO,
    summary="Listings per vehicle type",
    description="Counts approved listings per vehicle type. Accepts the same criteria as search.",
    responses=_UPSTREAM_ERROR,
)
def listing_type_counts(
    request: Request,
    use_case: CountListingsByType = Depends(get_count_by_type_use_case),
) -> TypeCountsResponseDTO:
    criteria = ListingSearchMapper.to_domain_criteria(request.query_params)
    result = use_case.execute(criteria)
    return TypeCountsResponseDTO(counts=result.counts, total=result.total)
