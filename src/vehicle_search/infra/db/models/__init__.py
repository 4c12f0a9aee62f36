from vehicle_search.infra.db.models.base import Base
from vehicle_search.infra.db.models.listing import ListingRow

__all__ = ["Base", "ListingRow"]
