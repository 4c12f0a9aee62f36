from __future__ import annotations

from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Callable

import pytest

from vehicle_search.domain.listing import ContactInfo, Listing


def build_listing(id: str, **overrides: Any) -> Listing:
    """Listing with sensible defaults; any field can be overridden."""
    values: dict[str, Any] = {
        "title": f"Listing {id}",
        "brand": "Toyota",
        "model": "Corolla",
        "description": "",
        "vehicle_type": "car",
        "fuel_type": "petrol",
        "transmission": "automatic",
        "year": 2018,
        "price": Decimal("10000"),
        "mileage": 50_000,
        "contact": ContactInfo(location="Colombo"),
        "is_promoted": False,
        "created_at": datetime(2026, 1, 1, tzinfo=timezone.utc),
        "approved_at": None,
    }
    if "location" in overrides:
        location = overrides.pop("location")
        values["contact"] = ContactInfo(location=location) if location is not None else None
    values.update(overrides)
    return Listing(id=id, **values)


@pytest.fixture()
def make_listing() -> Callable[..., Listing]:
    return build_listing


@pytest.fixture()
def listings() -> list[Listing]:
    """A mixed marketplace: cars, bikes, a van, promoted and regular."""
    return [
        build_listing(
            "1",
            title="Toyota Corolla 1.8",
            brand="Toyota",
            model="Corolla",
            year=2018,
            price=Decimal("12000"),
            mileage=80_000,
            location="Colombo 05",
            created_at=datetime(2026, 3, 1, tzinfo=timezone.utc),
            approved_at=datetime(2026, 3, 2, tzinfo=timezone.utc),
        ),
        build_listing(
            "2",
            title="Honda Civic Sport",
            brand="Honda",
            model="Civic",
            year=2025,
            price=Decimal("28000"),
            mileage=3_000,
            location="Kandy",
            is_promoted=True,
            created_at=datetime(2026, 2, 1, tzinfo=timezone.utc),
            approved_at=datetime(2026, 2, 3, tzinfo=timezone.utc),
        ),
        build_listing(
            "3",
            title="Yamaha MT-07",
            brand="Yamaha",
            model="MT-07",
            vehicle_type="bike",
            transmission="manual",
            year=2021,
            price=Decimal("6500"),
            mileage=12_000,
            location="Galle",
            description="Low mileage naked bike",
            created_at=datetime(2026, 4, 1, tzinfo=timezone.utc),
        ),
        build_listing(
            "4",
            title="Ford Transit",
            brand="Ford",
            model="Transit",
            vehicle_type="van",
            fuel_type="diesel",
            transmission="manual",
            year=2015,
            price=Decimal("9000"),
            mileage=210_000,
            location=None,
            created_at=datetime(2026, 1, 15, tzinfo=timezone.utc),
            approved_at=datetime(2026, 4, 10, tzinfo=timezone.utc),
        ),
        build_listing(
            "5",
            title="BMW 320i M Sport",
            brand="BMW",
            model="320i",
            year=2026,
            price=Decimal("41000"),
            mileage=0,
            location="Colombo 07",
            is_promoted=True,
            created_at=datetime(2026, 5, 1, tzinfo=timezone.utc),
            approved_at=datetime(2026, 5, 2, tzinfo=timezone.utc),
        ),
    ]
