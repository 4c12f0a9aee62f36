"""PostgreSQL implementation of ListingStore."""

from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from vehicle_search.domain.errors import ListingStoreError
from vehicle_search.domain.listing import ContactInfo, Listing
from vehicle_search.infra.db.models.listing import ListingRow
from vehicle_search.ports.listing_store import ListingStore

logger = logging.getLogger(__name__)

APPROVED_STATUS = "approved"


class PostgresListingStore(ListingStore):
    """
    PostgreSQL implementation of ListingStore.

    - Selects approved rows only, oldest first
    - Converts ListingRow (infrastructure) to Listing (domain)
    - Leaves filtering and ranking to the search engine
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def list_approved(self) -> list[Listing]:
        query = (
            select(ListingRow)
            .where(ListingRow.status == APPROVED_STATUS)
            .order_by(ListingRow.created_at, ListingRow.id)
        )

        try:
            rows = self._session.execute(query).scalars().all()
        except SQLAlchemyError as exc:
            logger.error("Failed to load listings", exc_info=exc)
            raise ListingStoreError("Listing store is unavailable") from exc

        return [self._to_domain(row) for row in rows]

    def _to_domain(self, row: ListingRow) -> Listing:
        """
        Convert database model (ListingRow) to domain entity (Listing).

        Contact columns are folded back into the nested ContactInfo.
        """
        return Listing(
            id=str(row.id),
            title=row.title,
            brand=row.brand,
            model=row.model,
            description=row.description,
            vehicle_type=row.vehicle_type,
            fuel_type=row.fuel_type,
            transmission=row.transmission,
            year=row.year,
            price=row.price,  # Already Decimal from NUMERIC column
            mileage=row.mileage,
            contact=ContactInfo(
                location=row.location,
                phone=row.contact_phone,
                email=row.contact_email,
            ),
            is_promoted=bool(row.is_promoted),
            created_at=row.created_at,
            approved_at=row.approved_at,
            condition=row.condition,
        )
