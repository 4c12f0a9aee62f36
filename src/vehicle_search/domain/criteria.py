from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from enum import Enum

from vehicle_search.domain.errors import PagingValidationError


_ALL = "all"

MAX_PAGE_LIMIT = 200


class SortKey(str, Enum):
    APPROVED_AT = "approvedAt"
    CREATED_AT = "createdAt"
    PRICE = "price"
    YEAR = "year"
    MILEAGE = "mileage"
    PROMOTED = "isPremium"

    @classmethod
    def parse(cls, value: object) -> SortKey:
        """Lenient lookup; unknown values fall back to the default key."""
        return _parse_enum(cls, value) or DEFAULT_SORT_KEY


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"

    @classmethod
    def parse(cls, value: object) -> SortDirection:
        return _parse_enum(cls, value) or DEFAULT_SORT_DIRECTION


class ConditionBucket(str, Enum):
    """Year-derived condition: "new" covers this year and last year."""

    NEW = "new"
    USED = "used"

    @classmethod
    def parse(cls, value: object) -> ConditionBucket | None:
        return _parse_enum(cls, value)


DEFAULT_SORT_KEY = SortKey.APPROVED_AT
DEFAULT_SORT_DIRECTION = SortDirection.DESC


def _parse_enum(enum_cls, value):
    if isinstance(value, enum_cls):
        return value
    if not isinstance(value, str):
        return None
    wanted = value.strip().lower()
    for member in enum_cls:
        if member.value.lower() == wanted:
            return member
    return None


def parse_decimal(value: object) -> Decimal | None:
    """
    Parse a numeric bound leniently.

    Returns None for anything that is not a finite number, so a malformed
    bound behaves exactly like an absent one.
    """
    if value is None or isinstance(value, bool):
        return None
    try:
        number = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        return None
    if not number.is_finite():
        return None
    return number


def as_text(value: object) -> str:
    """Caller value as plain text; enum members contribute their value."""
    if value is None:
        return ""
    if isinstance(value, Enum):
        value = value.value
    return str(value)


def _blank_to_none(value: object) -> str | None:
    text = as_text(value)
    return text if text.strip() else None


def _categorical(value: object) -> str | None:
    value = _blank_to_none(value)
    if value is None or value.strip().lower() == _ALL:
        return None
    return value


@dataclass(frozen=True, slots=True)
class NumericRange:
    """
    Inclusive range whose bounds keep the caller's raw text.

    Either bound may be absent independently; a bound that does not parse
    as a number imposes no constraint.
    """

    min: str | None = None
    max: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "min", _blank_to_none(self.min))
        object.__setattr__(self, "max", _blank_to_none(self.max))

    @property
    def lower(self) -> Decimal | None:
        return parse_decimal(self.min)

    @property
    def upper(self) -> Decimal | None:
        return parse_decimal(self.max)

    @property
    def is_set(self) -> bool:
        return self.min is not None or self.max is not None


@dataclass(frozen=True, slots=True)
class Criteria:
    """
    Everything the user asked for in one search: filters plus sort order.

    Construct a fresh instance per search. Empty strings and the "all"
    sentinel are normalized to None so absence always means "no constraint".
    """

    query: str = ""
    vehicle_type: str | None = None
    brand: str | None = None
    fuel_type: str | None = None
    transmission: str | None = None
    condition: ConditionBucket | None = None
    location: str | None = None
    price: NumericRange = field(default_factory=NumericRange)
    year: NumericRange = field(default_factory=NumericRange)
    mileage: NumericRange = field(default_factory=NumericRange)
    sort_key: SortKey = DEFAULT_SORT_KEY
    sort_direction: SortDirection = DEFAULT_SORT_DIRECTION

    def __post_init__(self) -> None:
        object.__setattr__(self, "query", as_text(self.query))
        for name in ("vehicle_type", "brand", "fuel_type", "transmission"):
            object.__setattr__(self, name, _categorical(getattr(self, name)))
        object.__setattr__(self, "location", _blank_to_none(self.location))
        object.__setattr__(self, "condition", ConditionBucket.parse(self.condition))
        object.__setattr__(self, "sort_key", SortKey.parse(self.sort_key))
        object.__setattr__(self, "sort_direction", SortDirection.parse(self.sort_direction))

    def active_filter_count(self) -> int:
        """Number of active filters; a range counts once whichever bounds are set."""
        active = [
            bool(self.query.strip()),
            self.vehicle_type is not None,
            self.brand is not None,
            self.fuel_type is not None,
            self.transmission is not None,
            self.condition is not None,
            self.location is not None,
            self.price.is_set,
            self.year.is_set,
            self.mileage.is_set,
        ]
        return sum(active)

    def has_active_filters(self) -> bool:
        """True when any filter is set or the sort differs from the default."""
        return (
            self.active_filter_count() > 0
            or self.sort_key is not DEFAULT_SORT_KEY
            or self.sort_direction is not DEFAULT_SORT_DIRECTION
        )

    def cleared(self) -> Criteria:
        """Reset every filter and the sort order, as the "clear filters" action does."""
        return Criteria()


@dataclass(frozen=True, slots=True)
class Paging:
    offset: int = 0
    limit: int = 20

    def validate(self) -> None:
        """
        Validate paging parameters.

        Raises:
            PagingValidationError: If paging parameters are invalid
        """
        if self.offset < 0:
            raise PagingValidationError("offset must be >= 0")
        if self.limit <= 0:
            raise PagingValidationError("limit must be > 0")
        if self.limit > MAX_PAGE_LIMIT:
            raise PagingValidationError(f"limit must be <= {MAX_PAGE_LIMIT}")
