"""Filter predicates, ordering and pagination over catalog listings."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Iterable, Sequence

from ..models.listing import FurnishingStatus
from ..schemas.filters import FilterModel, SortOption
from ..schemas.listing import Listing

Predicate = Callable[[FilterModel, Listing], bool]


@dataclass(slots=True)
class SearchResult:
    items: list[Listing]
    total: int
    page: int
    limit: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.limit) if self.limit else 0


def _bound(value: float | None) -> float | None:
    if value is None or not math.isfinite(value):
        return None
    return value


def in_range(value: float | None, low: float | None, high: float | None) -> bool:
    """Inclusive range check; an inverted range admits nothing."""

    low, high = _bound(low), _bound(high)
    if low is None and high is None:
        return True
    if low is not None and high is not None and low > high:
        return False
    if value is None:
        return False
    if low is not None and value < low:
        return False
    if high is not None and value > high:
        return False
    return True


def _fold(text: str | None) -> str:
    # Dotted capital I folds to "i" followed by a combining dot above.
    return (text or "").casefold().replace("i\u0307", "i")


def _match_type(filters: FilterModel, listing: Listing) -> bool:
    return filters.type is None or listing.type == filters.type


def _match_category(filters: FilterModel, listing: Listing) -> bool:
    if filters.category is None:
        return True
    return filters.category in (listing.category.main.value, listing.category.sub)


def _match_location(filters: FilterModel, listing: Listing) -> bool:
    location = listing.location
    if filters.country is not None and location.country != filters.country:
        return False
    # A state without its country, or a district without its city, is ignored.
    if filters.country is not None and filters.state is not None and location.state != filters.state:
        return False
    if filters.city is not None and location.city != filters.city:
        return False
    if filters.city is not None and filters.district is not None and location.district != filters.district:
        return False
    return True


def _match_price(filters: FilterModel, listing: Listing) -> bool:
    return in_range(listing.price, filters.min_price, filters.max_price)


def _match_size(filters: FilterModel, listing: Listing) -> bool:
    return in_range(listing.specs.net_size, filters.min_size, filters.max_size)


def _match_gross_size(filters: FilterModel, listing: Listing) -> bool:
    return in_range(listing.specs.gross_size, filters.min_gross_size, filters.max_gross_size)


def _match_specs(filters: FilterModel, listing: Listing) -> bool:
    specs = listing.specs
    if filters.rooms is not None and specs.rooms != filters.rooms:
        return False
    if filters.furnishing is not None and specs.furnishing != filters.furnishing:
        return False
    if filters.heating_type is not None and specs.heating != filters.heating_type:
        return False
    if filters.bathrooms is not None and (specs.bathrooms is None or specs.bathrooms < filters.bathrooms):
        return False
    if filters.balcony_count is not None and specs.balcony_count != filters.balcony_count:
        return False
    if filters.kitchen_type is not None:
        interior = listing.interior_features
        if interior is None or interior.kitchen_type != filters.kitchen_type:
            return False
    return True


def _match_details(filters: FilterModel, listing: Listing) -> bool:
    details = listing.property_details
    if filters.usage_status is not None and details.usage_status != filters.usage_status:
        return False
    if filters.deed_status is not None and details.deed_status != filters.deed_status:
        return False
    if filters.from_who is not None and details.from_who != filters.from_who:
        return False
    max_fee = _bound(filters.max_monthly_fee)
    # Listings without a monthly fee never exceed the ceiling.
    if max_fee is not None and details.monthly_fee and details.monthly_fee > max_fee:
        return False
    return True


TOGGLE_CHECKS: dict[str, Callable[[Listing], bool]] = {
    "has_parking": lambda l: bool(l.building_features and l.building_features.has_car_park),
    "has_elevator": lambda l: bool(l.building_features and l.building_features.has_elevator),
    "is_furnished": lambda l: l.specs.furnishing is FurnishingStatus.FURNISHED,
    "has_balcony": lambda l: bool(l.exterior_features and l.exterior_features.has_balcony),
    "in_site": lambda l: l.property_details.in_site,
    "credit_eligible": lambda l: l.property_details.credit_eligible,
    "exchange_available": lambda l: l.property_details.exchange_available,
    "has_pool": lambda l: bool(l.building_features and l.building_features.has_pool),
    "has_gym": lambda l: bool(l.building_features and l.building_features.has_gym),
    "has_security": lambda l: bool(l.building_features and l.building_features.has_security),
    "has_garden": lambda l: bool(l.exterior_features and l.exterior_features.has_garden),
    "has_sea_view": lambda l: bool(l.exterior_features and l.exterior_features.has_sea_view),
}


def _match_toggles(filters: FilterModel, listing: Listing) -> bool:
    for name, check in TOGGLE_CHECKS.items():
        if getattr(filters, name) and not check(listing):
            return False
    return True


def _match_search(filters: FilterModel, listing: Listing) -> bool:
    token = _fold(filters.search).strip()
    if not token:
        return True
    fields = (listing.title, listing.location.city, listing.location.district, listing.id)
    return any(token in _fold(value) for value in fields)


PREDICATES: tuple[Predicate, ...] = (
    _match_type,
    _match_category,
    _match_location,
    _match_price,
    _match_size,
    _match_gross_size,
    _match_specs,
    _match_details,
    _match_toggles,
    _match_search,
)


def matches(filters: FilterModel, listing: Listing) -> bool:
    """Return True when the listing satisfies every present filter field."""

    return all(predicate(filters, listing) for predicate in PREDICATES)


_SORT_KEYS: dict[SortOption, tuple[Callable[[Listing], object], bool]] = {
    SortOption.NEWEST: (lambda l: l.created_at, True),
    SortOption.OLDEST: (lambda l: l.created_at, False),
    SortOption.PRICE_HIGH: (lambda l: l.price, True),
    SortOption.PRICE_LOW: (lambda l: l.price, False),
    SortOption.SIZE_HIGH: (lambda l: l.specs.net_size, True),
}


def sort_listings(listings: Iterable[Listing], sort: SortOption = SortOption.NEWEST) -> list[Listing]:
    """Order listings; ties keep their input order."""

    key, descending = _SORT_KEYS[sort]
    return sorted(listings, key=key, reverse=descending)  # type: ignore[arg-type]


def paginate(items: Sequence[Listing], page: int, limit: int) -> list[Listing]:
    """Return one 1-based page; pages past the end are empty."""

    if page < 1 or limit < 1:
        return []
    start = (page - 1) * limit
    return list(items[start : start + limit])


def search_catalog(
    listings: Iterable[Listing],
    filters: FilterModel,
    *,
    sort: SortOption = SortOption.NEWEST,
    page: int = 1,
    limit: int = 10,
) -> SearchResult:
    """Filter, sort and paginate a listing collection."""

    matched = [listing for listing in listings if matches(filters, listing)]
    ordered = sort_listings(matched, sort)
    return SearchResult(items=paginate(ordered, page, limit), total=len(ordered), page=page, limit=limit)
