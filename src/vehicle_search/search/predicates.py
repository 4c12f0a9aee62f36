"""
Per-listing filter predicates.

Each predicate tests one listing against one criterion and treats an
absent criterion as satisfied. A listing that lacks the field a criterion
refers to fails that criterion instead of raising.
"""

from __future__ import annotations

from datetime import date

from vehicle_search.domain.criteria import (
    ConditionBucket,
    Criteria,
    NumericRange,
    as_text,
    parse_decimal,
)
from vehicle_search.domain.listing import Listing


def _lower(value: object) -> str | None:
    if value is None:
        return None
    return as_text(value).lower()


def matches_query(listing: Listing, query: str) -> bool:
    needle = as_text(query).strip().lower()
    if not needle:
        return True
    haystacks = (listing.title, listing.brand, listing.model, listing.description)
    return any(needle in text for text in map(_lower, haystacks) if text is not None)


def matches_category(value: object, wanted: str | None) -> bool:
    """Case-insensitive exact match; None means "any"."""
    if wanted is None:
        return True
    actual = _lower(value)
    return actual is not None and actual.strip() == wanted.strip().lower()


def matches_range(value: object, bounds: NumericRange) -> bool:
    lower, upper = bounds.lower, bounds.upper
    if lower is None and upper is None:
        return True

    number = parse_decimal(value)
    if number is None:
        return False
    if lower is not None and number < lower:
        return False
    if upper is not None and number > upper:
        return False
    return True


def matches_condition(
    year: object, bucket: ConditionBucket | None, *, today: date | None = None
) -> bool:
    """
    "new" means built this year or last year, "used" anything older.

    The current year is read at call time so long-lived processes roll over
    correctly on January 1st.
    """
    if bucket is None:
        return True

    model_year = parse_decimal(year)
    if model_year is None:
        return False

    cutoff = (today or date.today()).year - 1
    if bucket is ConditionBucket.NEW:
        return model_year >= cutoff
    return model_year < cutoff


def matches_location(listing: Listing, location: str | None) -> bool:
    if location is None:
        return True
    actual = _lower(listing.location)
    return actual is not None and location.strip().lower() in actual


def matches(listing: Listing, criteria: Criteria, *, today: date | None = None) -> bool:
    """True when the listing satisfies every active criterion (AND semantics)."""
    return (
        matches_query(listing, criteria.query)
        and matches_category(listing.vehicle_type, criteria.vehicle_type)
        and matches_category(listing.brand, criteria.brand)
        and matches_category(listing.fuel_type, criteria.fuel_type)
        and matches_category(listing.transmission, criteria.transmission)
        and matches_condition(listing.year, criteria.condition, today=today)
        and matches_location(listing, criteria.location)
        and matches_range(listing.price, criteria.price)
        and matches_range(listing.year, criteria.year)
        and matches_range(listing.mileage, criteria.mileage)
    )
