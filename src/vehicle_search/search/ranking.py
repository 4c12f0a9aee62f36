"""
Two-tier listing order.

Tier 1: promoted listings always come before the rest, whatever the user
picked. Tier 2: among listings with the same promoted status, the
user-selected sort key and direction decide.
"""

from __future__ import annotations

from datetime import datetime, timezone
from functools import cmp_to_key
from typing import Any, Callable

from vehicle_search.domain.criteria import (
    DEFAULT_SORT_DIRECTION,
    DEFAULT_SORT_KEY,
    SortDirection,
    SortKey,
    parse_decimal,
)
from vehicle_search.domain.listing import Listing


def _instant(value: object) -> float | None:
    if not isinstance(value, datetime):
        return None
    # Naive timestamps are stored in UTC
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.timestamp()


_SORT_VALUES: dict[SortKey, Callable[[Listing], Any]] = {
    SortKey.APPROVED_AT: lambda listing: _instant(listing.ranking_instant),
    SortKey.CREATED_AT: lambda listing: _instant(listing.created_at),
    SortKey.PRICE: lambda listing: parse_decimal(listing.price),
    SortKey.YEAR: lambda listing: parse_decimal(listing.year),
    SortKey.MILEAGE: lambda listing: parse_decimal(listing.mileage),
    # Tier 1 already separated promoted listings
    SortKey.PROMOTED: lambda listing: 0,
}


def _compare_values(left: Any, right: Any) -> int:
    if isinstance(left, str) and isinstance(right, str):
        left, right = left.lower(), right.lower()
    return (left > right) - (left < right)


def compare(
    a: Listing,
    b: Listing,
    sort_key: SortKey = DEFAULT_SORT_KEY,
    sort_direction: SortDirection = DEFAULT_SORT_DIRECTION,
) -> int:
    """
    Compare two listings, returning -1, 0 or 1.

    Listings without a value for the sort key go after those that have one,
    in both directions.
    """
    a_promoted, b_promoted = bool(a.is_promoted), bool(b.is_promoted)
    if a_promoted != b_promoted:
        return -1 if a_promoted else 1

    value_of = _SORT_VALUES[SortKey.parse(sort_key)]
    a_value, b_value = value_of(a), value_of(b)
    if a_value is None or b_value is None:
        if a_value is None and b_value is None:
            return 0
        return 1 if a_value is None else -1

    result = _compare_values(a_value, b_value)
    return -result if SortDirection.parse(sort_direction) is SortDirection.DESC else result


def ranking_key(
    sort_key: SortKey = DEFAULT_SORT_KEY,
    sort_direction: SortDirection = DEFAULT_SORT_DIRECTION,
):
    """Key function for ``sorted`` (stable) built from :func:`compare`."""
    return cmp_to_key(lambda a, b: compare(a, b, sort_key, sort_direction))
