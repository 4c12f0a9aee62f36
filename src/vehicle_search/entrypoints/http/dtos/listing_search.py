from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from vehicle_search.domain.criteria import MAX_PAGE_LIMIT


class ListingResponseDTO(BaseModel):
    id: str
    title: str | None
    brand: str | None
    model: str | None
    description: str | None
    type: str | None
    fuel_type: str | None
    transmission: str | None
    year: int | None
    price: str | None
    mileage: int | None
    location: str | None
    is_promoted: bool
    created_at: datetime | None
    approved_at: datetime | None


class PagingQueryDTO(BaseModel):
    """Pagination query parameters (the search criteria are read separately)."""

    offset: int = Field(
        default=0,
        description="Number of results to skip",
        examples=[0],
        ge=0,
    )
    limit: int = Field(
        default=20,
        description="Maximum number of results to return",
        examples=[20],
        ge=1,
        le=MAX_PAGE_LIMIT,
    )


class ListingSearchResponseDTO(BaseModel):
    listings: list[ListingResponseDTO]
    matched_count: int = Field(description="Listings matching the filters before paging")
    offset: int
    limit: int
    criteria: dict[str, str] = Field(
        description="Canonical query parameters for a shareable link to this search",
    )
    active_filter_count: int

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "listings": [],
                "matched_count": 0,
                "offset": 0,
                "limit": 20,
                "criteria": {"type": "car", "sortBy": "price", "sortOrder": "asc"},
                "active_filter_count": 1,
            }
        }
    )


class FeaturedListingsResponseDTO(BaseModel):
    listings: list[ListingResponseDTO]


class TypeCountsResponseDTO(BaseModel):
    counts: dict[str, int] = Field(description="Approved listings per vehicle type")
    total: int = Field(description="All matching listings, including types outside the known set")
