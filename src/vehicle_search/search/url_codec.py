"""
Criteria <-> flat string map, for shareable search links.

Default and empty values are left out of the encoded map so links stay
short; decoding a missing key restores the default. ``decode(encode(c))``
reproduces ``c`` exactly.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from urllib.parse import parse_qs, urlencode

from vehicle_search.domain.criteria import (
    DEFAULT_SORT_DIRECTION,
    DEFAULT_SORT_KEY,
    Criteria,
    NumericRange,
)

logger = logging.getLogger(__name__)

# Query-string key -> Criteria attribute, for plain string fields
_TEXT_KEYS = {
    "q": "query",
    "type": "vehicle_type",
    "brand": "brand",
    "fuelType": "fuel_type",
    "transmission": "transmission",
    "location": "location",
}

# Suffix used in minX/maxX keys -> Criteria range attribute
_RANGE_KEYS = {
    "Price": "price",
    "Year": "year",
    "Mileage": "mileage",
}

RECOGNIZED_KEYS = frozenset(
    [*_TEXT_KEYS, "condition", "sortBy", "sortOrder"]
    + [f"{side}{suffix}" for suffix in _RANGE_KEYS for side in ("min", "max")]
)


def encode(criteria: Criteria) -> dict[str, str]:
    params: dict[str, str] = {}

    for key, attr in _TEXT_KEYS.items():
        value = getattr(criteria, attr)
        if value:
            params[key] = value

    if criteria.condition is not None:
        params["condition"] = criteria.condition.value

    for suffix, attr in _RANGE_KEYS.items():
        bounds: NumericRange = getattr(criteria, attr)
        if bounds.min is not None:
            params[f"min{suffix}"] = bounds.min
        if bounds.max is not None:
            params[f"max{suffix}"] = bounds.max

    if criteria.sort_key is not DEFAULT_SORT_KEY:
        params["sortBy"] = criteria.sort_key.value
    if criteria.sort_direction is not DEFAULT_SORT_DIRECTION:
        params["sortOrder"] = criteria.sort_direction.value

    return params


def _single(value: object) -> str | None:
    # parse_qs and multi-dicts may hand over every occurrence; the last one wins
    if isinstance(value, (list, tuple)):
        value = value[-1] if value else None
    if value is None:
        return None
    return str(value)


def decode(params: Mapping[str, object]) -> Criteria:
    """
    Build criteria from a flat map. Unknown keys are ignored and
    unrecognized values fall back to "no constraint" or the default sort.
    """
    values = {key: _single(params.get(key)) for key in RECOGNIZED_KEYS}

    text_fields = {attr: values[key] for key, attr in _TEXT_KEYS.items()}
    range_fields = {
        attr: NumericRange(min=values[f"min{suffix}"], max=values[f"max{suffix}"])
        for suffix, attr in _RANGE_KEYS.items()
    }

    criteria = Criteria(
        **text_fields,
        **range_fields,
        condition=values["condition"],
        sort_key=values["sortBy"] or DEFAULT_SORT_KEY,
        sort_direction=values["sortOrder"] or DEFAULT_SORT_DIRECTION,
    )

    for key, raw, parsed in (
        ("sortBy", values["sortBy"], criteria.sort_key),
        ("sortOrder", values["sortOrder"], criteria.sort_direction),
    ):
        if raw and raw.strip() and raw.strip().lower() != parsed.value.lower():
            logger.debug("Unrecognized sort value, using default", extra={"key": key, "value": raw})

    return criteria


def to_query_string(criteria: Criteria) -> str:
    return urlencode(encode(criteria))


def from_query_string(query_string: str) -> Criteria:
    return decode(parse_qs(query_string.lstrip("?")))
