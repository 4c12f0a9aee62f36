from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Callable

from vehicle_search.adapters.in_memory_listing_store import InMemoryListingStore
from vehicle_search.domain.criteria import Criteria
from vehicle_search.domain.listing import Listing
from vehicle_search.search.engine import TypeCounts
from vehicle_search.use_cases.browse_listings import CountListingsByType, FeaturedListings


def test_featured_listings_returns_first_eight_of_default_ranking(
    make_listing: Callable[..., Listing],
) -> None:
    start = datetime(2026, 1, 1, tzinfo=timezone.utc)
    listings = [
        make_listing(str(i), approved_at=start + timedelta(days=i), is_promoted=(i == 0))
        for i in range(12)
    ]

    featured = FeaturedListings(InMemoryListingStore(listings)).execute()

    assert len(featured) == 8
    # Oldest listing is promoted, so it still leads; then newest approvals
    assert [item.id for item in featured] == ["0", "11", "10", "9", "8", "7", "6", "5"]


def test_featured_listings_custom_limit(listings: list[Listing]) -> None:
    featured = FeaturedListings(InMemoryListingStore(listings)).execute(limit=2)

    assert [item.id for item in featured] == ["5", "2"]


def test_count_by_type_use_case(listings: list[Listing]) -> None:
    use_case = CountListingsByType(InMemoryListingStore(listings))

    assert use_case.execute().counts["car"] == 3
    assert use_case.execute(Criteria(brand="honda")) == TypeCounts(
        counts={"car": 1, "bike": 0, "van": 0, "truck": 0, "other": 0},
        total=1,
    )


def test_count_by_type_total_includes_unknown_types(
    listings: list[Listing], make_listing: Callable[..., Listing]
) -> None:
    store = InMemoryListingStore([*listings, make_listing("6", vehicle_type="tuk-tuk")])

    result = CountListingsByType(store).execute()

    assert sum(result.counts.values()) == 5
    assert result.total == 6


def test_count_by_type_empty_store() -> None:
    result = CountListingsByType(InMemoryListingStore([])).execute()

    assert set(result.counts) == {"car", "bike", "van", "truck", "other"}
    assert sum(result.counts.values()) == 0
    assert result.total == 0
