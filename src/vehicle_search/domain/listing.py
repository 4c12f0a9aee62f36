from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum


class VehicleType(str, Enum):
    CAR = "car"
    BIKE = "bike"
    VAN = "van"
    TRUCK = "truck"
    OTHER = "other"


class FuelType(str, Enum):
    PETROL = "petrol"
    DIESEL = "diesel"
    ELECTRIC = "electric"
    HYBRID = "hybrid"
    OTHER = "other"


class Transmission(str, Enum):
    MANUAL = "manual"
    AUTOMATIC = "automatic"
    CVT = "cvt"


class StoredCondition(str, Enum):
    """Condition declared by the seller.

    Informational only: the "new"/"used" search filter is derived from the
    model year, not from this field.
    """

    USED = "USED"
    BRANDNEW = "BRANDNEW"
    REFURBISHED = "REFURBISHED"


@dataclass(frozen=True, slots=True)
class ContactInfo:
    location: str | None = None
    phone: str | None = None
    email: str | None = None


@dataclass(frozen=True)
class Listing:
    """
    A vehicle-for-sale record as supplied by the listing store.

    Values are passed through as-is: out-of-range prices or years are not
    rejected here, and every optional field may be None.
    """

    id: str
    title: str | None = None
    brand: str | None = None
    model: str | None = None
    description: str | None = None
    vehicle_type: str | None = None
    fuel_type: str | None = None
    transmission: str | None = None
    year: int | None = None
    price: Decimal | None = None
    mileage: int | None = None
    contact: ContactInfo | None = None
    is_promoted: bool = False
    created_at: datetime | None = None
    approved_at: datetime | None = None
    condition: str | None = None

    @property
    def location(self) -> str | None:
        return self.contact.location if self.contact else None

    @property
    def ranking_instant(self) -> datetime | None:
        """Approval time, falling back to creation time when never approved."""
        return self.approved_at or self.created_at
