#!/usr/bin/env python3
"""
Seed the listings table with deterministic random data.

Features:
- Deterministic: fixed seed → same dataset every run
- Idempotent: safe to run multiple times (clears before seeding)
- Mixed statuses and promoted flags so search ranking can be eyeballed

Usage:
    python scripts/seed_listings.py
"""

from __future__ import annotations

import random
import sys
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from vehicle_search.domain.listing import FuelType, StoredCondition, Transmission, VehicleType
from vehicle_search.infra.db.models.listing import ListingRow
from vehicle_search.infra.db.session import get_session


# ==============================================================================
# Configuration
# ==============================================================================

RANDOM_SEED = 42
NUM_LISTINGS = 60
PROMOTED_SHARE = 0.15
NOW = datetime(2026, 10, 1, tzinfo=timezone.utc)


# ==============================================================================
# Catalog data
# ==============================================================================

# Vehicle type -> (brand -> models), with a base price band per type
CATALOG = {
    VehicleType.CAR: {
        "price_band": (Decimal("4000"), Decimal("45000")),
        "brands": {
            "Toyota": ["Corolla", "Camry", "Yaris", "RAV4"],
            "Honda": ["Civic", "Accord", "CR-V"],
            "Volkswagen": ["Golf", "Polo", "Passat"],
            "BMW": ["320i", "X3", "530d"],
        },
    },
    VehicleType.BIKE: {
        "price_band": (Decimal("1500"), Decimal("18000")),
        "brands": {
            "Yamaha": ["MT-07", "R6", "Tenere 700"],
            "Honda": ["CB500F", "Africa Twin"],
            "Ducati": ["Monster", "Scrambler"],
        },
    },
    VehicleType.VAN: {
        "price_band": (Decimal("8000"), Decimal("40000")),
        "brands": {
            "Ford": ["Transit", "Transit Custom"],
            "Mercedes-Benz": ["Sprinter", "Vito"],
        },
    },
    VehicleType.TRUCK: {
        "price_band": (Decimal("15000"), Decimal("90000")),
        "brands": {
            "Volvo": ["FH16", "FM"],
            "Scania": ["R450", "P280"],
        },
    },
}

LOCATIONS = ["Colombo", "Kandy", "Galle", "Negombo", "Jaffna", "Kurunegala", None]
STATUSES = ["approved", "approved", "approved", "pending", "rejected"]


# ==============================================================================
# Generation
# ==============================================================================


def generate_listing() -> ListingRow:
    vehicle_type = random.choice(list(CATALOG))
    entry = CATALOG[vehicle_type]
    brand = random.choice(list(entry["brands"]))
    model = random.choice(entry["brands"][brand])

    year = random.randint(NOW.year - 15, NOW.year)
    age = NOW.year - year

    band_min, band_max = entry["price_band"]
    base = band_min + (band_max - band_min) * Decimal(random.random())
    # Roughly 7% value lost per year of age
    price = (base * Decimal(0.93) ** age).quantize(Decimal("1"))

    mileage = 0 if age == 0 else random.randint(5_000, 22_000) * age
    condition = StoredCondition.BRANDNEW if age == 0 else StoredCondition.USED

    if vehicle_type is VehicleType.BIKE:
        transmission = Transmission.MANUAL
    else:
        transmission = random.choice(list(Transmission))
    fuel_type = random.choices(
        [FuelType.PETROL, FuelType.DIESEL, FuelType.HYBRID, FuelType.ELECTRIC],
        weights=[5, 3, 1, 1 if year >= NOW.year - 4 else 0],
        k=1,
    )[0]

    status = random.choice(STATUSES)
    created_at = NOW - timedelta(days=random.randint(1, 120), minutes=random.randint(0, 1440))
    approved_at = None
    if status == "approved" and random.random() > 0.1:
        approved_at = created_at + timedelta(hours=random.randint(1, 72))

    return ListingRow(
        title=f"{year} {brand} {model}",
        brand=brand,
        model=model,
        description=f"{condition.value.title()} {brand} {model}, {mileage:,} km.",
        vehicle_type=vehicle_type.value,
        fuel_type=fuel_type.value,
        transmission=transmission.value,
        condition=condition.value,
        year=year,
        price=price,
        mileage=mileage,
        location=random.choice(LOCATIONS),
        status=status,
        is_promoted=random.random() < PROMOTED_SHARE,
        created_at=created_at,
        approved_at=approved_at,
    )


def seed_listings(num_listings: int = NUM_LISTINGS, seed: int = RANDOM_SEED) -> None:
    random.seed(seed)

    print(f"Seeding database with {num_listings} listings (seed={seed})...")

    with get_session() as session:
        deleted_count = session.query(ListingRow).delete()
        print(f"   Deleted {deleted_count} existing listings")

        listings = [generate_listing() for _ in range(num_listings)]
        session.add_all(listings)
        session.flush()

        approved = sum(1 for row in listings if row.status == "approved")
        promoted = sum(1 for row in listings if row.is_promoted)
        print(f"Seeded {len(listings)} listings ({approved} approved, {promoted} promoted)")

        for i, row in enumerate(listings[:5], 1):
            flag = " [promoted]" if row.is_promoted else ""
            print(f"   {i}. {row.title} - {row.price:,} ({row.vehicle_type}, {row.status}){flag}")


if __name__ == "__main__":
    try:
        seed_listings()
    except Exception as e:
        print(f"Error seeding database: {e}", file=sys.stderr)
        sys.exit(1)
