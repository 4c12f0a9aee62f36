from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date

from vehicle_search.domain.criteria import Criteria
from vehicle_search.domain.listing import Listing, VehicleType
from vehicle_search.search.predicates import matches, matches_category
from vehicle_search.search.ranking import ranking_key

# Number of listings shown on the home screen
FEATURED_LIMIT = 8


@dataclass(frozen=True)
class SearchPage:
    """Ordered listings plus how many matched before truncation."""

    listings: list[Listing]
    matched_count: int


def search(
    listings: Iterable[Listing],
    criteria: Criteria,
    limit: int | None = None,
    *,
    offset: int = 0,
    today: date | None = None,
) -> SearchPage:
    """
    Filter, rank and truncate a listing collection.

    - Keeps listings matching every active criterion, in input order
    - Stable-sorts them promoted first, then by the criteria's sort key
    - Skips ``offset`` entries and keeps at most ``limit``

    The input is never mutated and nothing is kept between calls.
    matched_count is the number of matches before offset/limit.
    """
    matched = [listing for listing in listings if matches(listing, criteria, today=today)]
    ordered = sorted(matched, key=ranking_key(criteria.sort_key, criteria.sort_direction))

    start = max(offset, 0)
    if limit is None:
        page = ordered[start:]
    else:
        page = ordered[start : start + max(limit, 0)]

    return SearchPage(listings=page, matched_count=len(matched))


@dataclass(frozen=True)
class TypeCounts:
    """Per-type counts of known vehicle types; total covers every match, known type or not."""

    counts: dict[str, int]
    total: int


def tally_by_type(
    listings: Iterable[Listing],
    criteria: Criteria | None = None,
    *,
    today: date | None = None,
) -> TypeCounts:
    criteria = criteria or Criteria()
    counts = {vehicle_type.value: 0 for vehicle_type in VehicleType}
    total = 0

    for listing in listings:
        if not matches(listing, criteria, today=today):
            continue
        total += 1
        for vehicle_type in counts:
            if matches_category(listing.vehicle_type, vehicle_type):
                counts[vehicle_type] += 1
                break

    return TypeCounts(counts=counts, total=total)


def count_by_type(
    listings: Iterable[Listing],
    criteria: Criteria | None = None,
    *,
    today: date | None = None,
) -> dict[str, int]:
    """Matching listings per vehicle type; every known type is reported, even at zero."""
    return tally_by_type(listings, criteria, today=today).counts
