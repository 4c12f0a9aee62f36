"""
Test suite for HttpListingStore and raw record parsing.

The marketplace API is simulated with httpx.MockTransport.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Callable

import httpx
import pytest

from vehicle_search.adapters.http_listing_store import HttpListingStore, parse_listing_record
from vehicle_search.domain.errors import ListingStoreError

BASE_URL = "https://api.example.test/api/"

RAW_RECORD: dict[str, Any] = {
    "id": 17,
    "title": "Honda Civic EX",
    "brand": "Honda",
    "model": "Civic",
    "year": 2022,
    "price": 23500.5,
    "type": "car",
    "fuelType": "petrol",
    "transmission": "automatic",
    "condition": "USED",
    "mileage": 18000,
    "description": "Service history available",
    "images": ["a.jpg"],
    "contactInfo": {"phone": "0771234567", "email": "a@b.test", "location": "Kandy"},
    "status": "approved",
    "userId": "u-1",
    "createdAt": "2026-02-01T10:00:00.000Z",
    "updatedAt": "2026-02-02T10:00:00.000Z",
    "approvedAt": "2026-02-02T09:30:00Z",
    "isPremium": True,
}


def _store(handler: Callable[[httpx.Request], httpx.Response]) -> HttpListingStore:
    client = httpx.Client(transport=httpx.MockTransport(handler))
    return HttpListingStore(BASE_URL, client=client)


# ==============================================================================
# parse_listing_record
# ==============================================================================


def test_parse_full_record() -> None:
    listing = parse_listing_record(RAW_RECORD)

    assert listing is not None
    assert listing.id == "17"
    assert listing.vehicle_type == "car"
    assert listing.fuel_type == "petrol"
    assert listing.price == Decimal("23500.5")
    assert listing.location == "Kandy"
    assert listing.is_promoted is True
    assert listing.created_at == datetime(2026, 2, 1, 10, 0, tzinfo=timezone.utc)
    assert listing.approved_at == datetime(2026, 2, 2, 9, 30, tzinfo=timezone.utc)
    assert listing.condition == "USED"


def test_parse_contact_info_json_string() -> None:
    record = {**RAW_RECORD, "contactInfo": json.dumps({"location": "Galle"})}

    listing = parse_listing_record(record)

    assert listing is not None
    assert listing.location == "Galle"


@pytest.mark.parametrize(
    ("field", "value", "attribute"),
    [
        ("price", "call me", "price"),
        ("year", "twenty", "year"),
        ("year", 2020.5, "year"),
        ("mileage", None, "mileage"),
        ("createdAt", "yesterday", "created_at"),
        ("approvedAt", "", "approved_at"),
        ("contactInfo", "{not json", "contact"),
        ("contactInfo", ["Colombo"], "contact"),
        ("title", {"en": "Civic"}, "title"),
    ],
)
def test_malformed_optional_values_become_none(field: str, value: Any, attribute: str) -> None:
    listing = parse_listing_record({**RAW_RECORD, field: value})

    assert listing is not None
    assert getattr(listing, attribute) is None


@pytest.mark.parametrize(("raw", "expected"), [("true", True), ("0", False), (0, False), (None, False)])
def test_premium_flag_coercion(raw: Any, expected: bool) -> None:
    listing = parse_listing_record({**RAW_RECORD, "isPremium": raw})

    assert listing is not None
    assert listing.is_promoted is expected


def test_numeric_strings_are_accepted() -> None:
    listing = parse_listing_record({**RAW_RECORD, "price": "15000.00", "year": "2019"})

    assert listing is not None
    assert listing.price == Decimal("15000.00")
    assert listing.year == 2019


@pytest.mark.parametrize("record", [{"title": "no id"}, {"id": None}, "not a dict", None])
def test_unusable_records_are_rejected(record: Any) -> None:
    assert parse_listing_record(record) is None


def test_minimal_record() -> None:
    listing = parse_listing_record({"id": "abc"})

    assert listing is not None
    assert listing.is_promoted is False
    assert listing.contact is None


# ==============================================================================
# HttpListingStore
# ==============================================================================


def test_list_approved_requests_approved_vehicles() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"vehicles": [RAW_RECORD]})

    listings = _store(handler).list_approved()

    assert [item.id for item in listings] == ["17"]
    assert seen[0].url.path == "/api/vehicles"
    assert seen[0].url.params["status"] == "approved"


def test_list_approved_accepts_bare_list() -> None:
    store = _store(lambda request: httpx.Response(200, json=[RAW_RECORD]))

    assert len(store.list_approved()) == 1


def test_list_approved_skips_malformed_records() -> None:
    payload = {"vehicles": [RAW_RECORD, {"title": "missing id"}, 42, {**RAW_RECORD, "id": 18}]}
    store = _store(lambda request: httpx.Response(200, json=payload))

    assert [item.id for item in store.list_approved()] == ["17", "18"]


def test_list_approved_raises_on_http_error_status() -> None:
    store = _store(lambda request: httpx.Response(503, json={"error": "down"}))

    with pytest.raises(ListingStoreError) as exc_info:
        store.list_approved()

    assert exc_info.value.context == {"status_code": 503}


def test_list_approved_raises_on_transport_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(ListingStoreError):
        _store(handler).list_approved()


@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(200, content=b"<html>"),
        httpx.Response(200, json={"vehicles": "nope"}),
        httpx.Response(200, json={"data": []}),
    ],
)
def test_list_approved_raises_on_invalid_payload(response: httpx.Response) -> None:
    store = _store(lambda request: response)

    with pytest.raises(ListingStoreError):
        store.list_approved()


def test_close_closes_the_client() -> None:
    client = httpx.Client(transport=httpx.MockTransport(lambda request: httpx.Response(200)))
    store = HttpListingStore(BASE_URL, client=client)

    store.close()

    assert client.is_closed
