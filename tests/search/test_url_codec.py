"""Tests for the Criteria <-> query-string codec."""

from __future__ import annotations

import logging

import pytest

from vehicle_search.domain.criteria import (
    ConditionBucket,
    Criteria,
    NumericRange,
    SortDirection,
    SortKey,
)
from vehicle_search.search.url_codec import (
    RECOGNIZED_KEYS,
    decode,
    encode,
    from_query_string,
    to_query_string,
)

ROUND_TRIP_CASES = [
    Criteria(),
    Criteria(vehicle_type="car", sort_key=SortKey.PRICE, sort_direction=SortDirection.ASC),
    Criteria(query="  civic  "),
    Criteria(
        query="corolla",
        vehicle_type="car",
        brand="Toyota",
        fuel_type="hybrid",
        transmission="cvt",
        condition=ConditionBucket.USED,
        location="Colombo",
        price=NumericRange(min="10000", max="25000"),
        year=NumericRange(min="2015"),
        mileage=NumericRange(max="abc"),
        sort_key=SortKey.MILEAGE,
        sort_direction=SortDirection.DESC,
    ),
    Criteria(sort_key=SortKey.PROMOTED),
    Criteria(price=NumericRange(max="0")),
]


# ==============================================================================
# encode
# ==============================================================================


def test_default_criteria_encodes_to_empty_map() -> None:
    assert encode(Criteria()) == {}


def test_encode_uses_public_key_names() -> None:
    criteria = Criteria(
        query="civic",
        vehicle_type="car",
        fuel_type="petrol",
        condition="new",
        price=NumericRange(min="1000", max="5000"),
        mileage=NumericRange(min="10"),
        sort_key=SortKey.YEAR,
        sort_direction=SortDirection.ASC,
    )

    assert encode(criteria) == {
        "q": "civic",
        "type": "car",
        "fuelType": "petrol",
        "condition": "new",
        "minPrice": "1000",
        "maxPrice": "5000",
        "minMileage": "10",
        "sortBy": "year",
        "sortOrder": "asc",
    }


def test_ranges_encode_each_bound_independently() -> None:
    encoded = encode(Criteria(year=NumericRange(max="2020")))

    assert encoded == {"maxYear": "2020"}


def test_encoded_keys_are_all_recognized() -> None:
    encoded = encode(ROUND_TRIP_CASES[3])

    assert set(encoded) <= RECOGNIZED_KEYS


# ==============================================================================
# decode
# ==============================================================================


def test_decode_empty_map_gives_defaults() -> None:
    assert decode({}) == Criteria()


def test_decode_ignores_unknown_keys() -> None:
    assert decode({"color": "red", "page": "3"}) == Criteria()


def test_decode_treats_all_and_blank_as_absent() -> None:
    assert decode({"type": "all", "brand": "", "minPrice": ""}) == Criteria()


def test_decode_unknown_sort_falls_back_to_default(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="vehicle_search.search.url_codec"):
        criteria = decode({"sortBy": "color", "sortOrder": "up"})

    assert criteria.sort_key is SortKey.APPROVED_AT
    assert criteria.sort_direction is SortDirection.DESC
    assert "Unrecognized sort value" in caplog.text


def test_decode_keeps_malformed_bounds_as_text() -> None:
    criteria = decode({"minPrice": "abc"})

    assert criteria.price.min == "abc"
    assert criteria.price.lower is None


def test_decode_takes_last_of_repeated_values() -> None:
    assert decode({"brand": ["Honda", "Toyota"]}).brand == "Toyota"


# ==============================================================================
# Round trip
# ==============================================================================


@pytest.mark.parametrize("criteria", ROUND_TRIP_CASES)
def test_decode_encode_round_trip(criteria: Criteria) -> None:
    assert decode(encode(criteria)) == criteria


def test_round_trip_example() -> None:
    original = Criteria(vehicle_type="car", sort_key="price", sort_direction="asc")

    encoded = encode(original)

    assert encoded == {"type": "car", "sortBy": "price", "sortOrder": "asc"}
    assert decode(encoded) == original


@pytest.mark.parametrize("criteria", ROUND_TRIP_CASES)
def test_query_string_round_trip(criteria: Criteria) -> None:
    assert from_query_string(to_query_string(criteria)) == criteria


def test_from_query_string_accepts_leading_question_mark() -> None:
    criteria = from_query_string("?q=van&maxMileage=100000&sortOrder=asc")

    assert criteria == Criteria(
        query="van", mileage=NumericRange(max="100000"), sort_direction=SortDirection.ASC
    )
