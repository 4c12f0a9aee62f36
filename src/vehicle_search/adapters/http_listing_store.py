"""ListingStore backed by the marketplace REST API."""

from __future__ import annotations

import json
import logging
from datetime import datetime
from decimal import Decimal
from typing import Any

import httpx
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from vehicle_search.domain.criteria import parse_decimal
from vehicle_search.domain.errors import ListingStoreError
from vehicle_search.domain.listing import ContactInfo, Listing
from vehicle_search.ports.listing_store import ListingStore

logger = logging.getLogger(__name__)

_TRUTHY = {"true", "1", "yes"}


def _text_or_none(value: Any) -> str | None:
    if value is None or isinstance(value, (dict, list)):
        return None
    return str(value)


class ContactInfoRecord(BaseModel):
    model_config = ConfigDict(extra="ignore")

    location: str | None = None
    phone: str | None = None
    email: str | None = None

    @field_validator("location", "phone", "email", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> str | None:
        return _text_or_none(value)


class ListingRecord(BaseModel):
    """
    Raw vehicle record as served by ``GET /vehicles``.

    Unknown keys are ignored. Malformed optional values become None rather
    than failing the whole record; only a missing id rejects it.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: str
    title: str | None = None
    brand: str | None = None
    model: str | None = None
    description: str | None = None
    vehicle_type: str | None = Field(default=None, alias="type")
    fuel_type: str | None = Field(default=None, alias="fuelType")
    transmission: str | None = None
    condition: str | None = None
    year: int | None = None
    price: Decimal | None = None
    mileage: int | None = None
    contact_info: ContactInfoRecord | None = Field(default=None, alias="contactInfo")
    is_premium: bool = Field(default=False, alias="isPremium")
    created_at: datetime | None = Field(default=None, alias="createdAt")
    approved_at: datetime | None = Field(default=None, alias="approvedAt")

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: Any) -> Any:
        # Numeric ids are common; anything else is left for pydantic to reject
        if isinstance(value, (int, str)) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator(
        "title", "brand", "model", "description", "vehicle_type", "fuel_type",
        "transmission", "condition",
        mode="before",
    )
    @classmethod
    def _coerce_text(cls, value: Any) -> str | None:
        return _text_or_none(value)

    @field_validator("price", mode="before")
    @classmethod
    def _coerce_price(cls, value: Any) -> Decimal | None:
        return parse_decimal(value)

    @field_validator("year", "mileage", mode="before")
    @classmethod
    def _coerce_int(cls, value: Any) -> int | None:
        number = parse_decimal(value)
        if number is None or number != number.to_integral_value():
            return None
        return int(number)

    @field_validator("contact_info", mode="before")
    @classmethod
    def _coerce_contact(cls, value: Any) -> Any:
        # Older API versions send the contact block as a JSON string
        if isinstance(value, str):
            try:
                value = json.loads(value)
            except ValueError:
                return None
        return value if isinstance(value, dict) else None

    @field_validator("is_premium", mode="before")
    @classmethod
    def _coerce_flag(cls, value: Any) -> bool:
        if isinstance(value, str):
            return value.strip().lower() in _TRUTHY
        return bool(value)

    @field_validator("created_at", "approved_at", mode="before")
    @classmethod
    def _coerce_timestamp(cls, value: Any) -> datetime | None:
        if isinstance(value, datetime):
            return value
        if not isinstance(value, str) or not value.strip():
            return None
        try:
            return datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
        except ValueError:
            return None

    def to_domain(self) -> Listing:
        contact = None
        if self.contact_info is not None:
            contact = ContactInfo(
                location=self.contact_info.location,
                phone=self.contact_info.phone,
                email=self.contact_info.email,
            )

        return Listing(
            id=self.id,
            title=self.title,
            brand=self.brand,
            model=self.model,
            description=self.description,
            vehicle_type=self.vehicle_type,
            fuel_type=self.fuel_type,
            transmission=self.transmission,
            year=self.year,
            price=self.price,
            mileage=self.mileage,
            contact=contact,
            is_promoted=self.is_premium,
            created_at=self.created_at,
            approved_at=self.approved_at,
            condition=self.condition,
        )


def parse_listing_record(record: Any) -> Listing | None:
    """Parse one raw API record, or return None when it cannot be used."""
    if not isinstance(record, dict):
        return None
    try:
        return ListingRecord.model_validate(record).to_domain()
    except ValidationError:
        return None


class HttpListingStore(ListingStore):
    """
    Reads approved listings from the marketplace API.

    - One ``GET {base_url}/vehicles?status=approved`` per call, no caching
    - Records that cannot be parsed are skipped and logged
    - Transport failures and non-2xx answers raise ListingStoreError
    """

    def __init__(
        self,
        base_url: str,
        client: httpx.Client | None = None,
        timeout: float = 10.0,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._client = client or httpx.Client(timeout=timeout)

    def list_approved(self) -> list[Listing]:
        url = f"{self._base_url}/vehicles"

        try:
            response = self._client.get(url, params={"status": "approved"})
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPStatusError as exc:
            logger.error(
                "Listing API returned an error",
                extra={"url": url, "status_code": exc.response.status_code},
            )
            raise ListingStoreError(
                "Listing store is unavailable", status_code=exc.response.status_code
            ) from exc
        except httpx.HTTPError as exc:
            logger.error("Listing API request failed", exc_info=exc, extra={"url": url})
            raise ListingStoreError("Listing store is unavailable") from exc
        except ValueError as exc:
            logger.error("Listing API returned invalid JSON", extra={"url": url})
            raise ListingStoreError("Listing store returned an invalid response") from exc

        records = payload.get("vehicles") if isinstance(payload, dict) else payload
        if not isinstance(records, list):
            raise ListingStoreError("Listing store returned an invalid response")

        listings = []
        for record in records:
            listing = parse_listing_record(record)
            if listing is None:
                logger.warning("Skipping malformed listing record", extra={"url": url})
                continue
            listings.append(listing)

        return listings

    def close(self) -> None:
        self._client.close()
