"""Schemas for catalog search filters."""
from __future__ import annotations

import enum

from pydantic import Field, field_validator

from ..data.categories import ALL_CATEGORY_VALUES
from ..models.listing import (
    DeedStatus,
    FromWho,
    FurnishingStatus,
    HeatingType,
    KitchenType,
    PropertyType,
    RoomType,
    UsageStatus,
)
from .listing import CamelModel

TOGGLE_FIELDS: tuple[str, ...] = (
    "has_parking",
    "has_elevator",
    "is_furnished",
    "has_balcony",
    "in_site",
    "credit_eligible",
    "exchange_available",
    "has_pool",
    "has_gym",
    "has_security",
    "has_garden",
    "has_sea_view",
)

TEXT_FIELDS: tuple[str, ...] = ("category", "country", "state", "city", "district", "search")


class SortOption(str, enum.Enum):
    NEWEST = "newest"
    OLDEST = "oldest"
    PRICE_HIGH = "price-high"
    PRICE_LOW = "price-low"
    SIZE_HIGH = "size-high"


class FilterModel(CamelModel):
    """What the user is searching for. Every field is optional; ``None`` means no constraint.

    Field order is the wire order of the serialized query string.
    """

    type: PropertyType | None = None
    category: str | None = None
    country: str | None = None
    state: str | None = None
    city: str | None = None
    district: str | None = None
    min_price: float | None = None
    max_price: float | None = None
    search: str | None = None
    rooms: RoomType | None = None
    min_size: float | None = None
    max_size: float | None = None
    furnishing: FurnishingStatus | None = None
    kitchen_type: KitchenType | None = None
    heating_type: HeatingType | None = None
    usage_status: UsageStatus | None = None
    deed_status: DeedStatus | None = None
    from_who: FromWho | None = None
    max_monthly_fee: float | None = None
    min_gross_size: float | None = None
    max_gross_size: float | None = None
    bathrooms: int | None = Field(default=None, ge=0)
    balcony_count: int | None = Field(default=None, ge=0)

    has_parking: bool | None = None
    has_elevator: bool | None = None
    is_furnished: bool | None = None
    has_balcony: bool | None = None
    in_site: bool | None = None
    credit_eligible: bool | None = None
    exchange_available: bool | None = None
    has_pool: bool | None = None
    has_gym: bool | None = None
    has_security: bool | None = None
    has_garden: bool | None = None
    has_sea_view: bool | None = None

    @field_validator(*TEXT_FIELDS, mode="before")
    @classmethod
    def _blank_text_is_absent(cls, value: object) -> object:
        if isinstance(value, str):
            value = value.strip()
            return value or None
        return value

    @field_validator("category")
    @classmethod
    def _unknown_category_is_absent(cls, value: str | None) -> str | None:
        return value if value in ALL_CATEGORY_VALUES else None

    @field_validator(*TOGGLE_FIELDS)
    @classmethod
    def _false_toggle_is_absent(cls, value: bool | None) -> bool | None:
        """A toggle either requires the capability or says nothing about it."""

        return True if value else None


class RouteResponse(CamelModel):
    path: str
    query: str
    url: str
