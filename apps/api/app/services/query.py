"""Mapping between the filter model and flat, URL-safe query parameters.

Deserialization never fails: a value that cannot be parsed for its field is
dropped and the constraint it carried is ignored.
"""
from __future__ import annotations

import enum
import logging
import math
from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Union
from urllib.parse import urlencode

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
from ..schemas.filters import TOGGLE_FIELDS, FilterModel, RouteResponse, SortOption

logger = logging.getLogger(__name__)

QueryInput = Union[Mapping[str, str], Iterable[tuple[str, str]]]

SALE_ROUTE = "/for-sale"
RENT_ROUTE = "/for-rent"
ALL_ROUTE = "/all"

ROUTES: dict[PropertyType, str] = {
    PropertyType.SALE: SALE_ROUTE,
    PropertyType.RENT: RENT_ROUTE,
}

TRUE_TOKEN = "true"


class FieldKind(str, enum.Enum):
    TEXT = "text"
    CATEGORY = "category"
    ENUM = "enum"
    NUMBER = "number"
    INTEGER = "integer"
    TOGGLE = "toggle"


@dataclass(frozen=True, slots=True)
class QueryField:
    name: str
    kind: FieldKind
    choices: type[enum.Enum] | None = None

    @property
    def key(self) -> str:
        return FilterModel.model_fields[self.name].alias or self.name


QUERY_FIELDS: tuple[QueryField, ...] = (
    QueryField("type", FieldKind.ENUM, PropertyType),
    QueryField("category", FieldKind.CATEGORY),
    QueryField("country", FieldKind.TEXT),
    QueryField("state", FieldKind.TEXT),
    QueryField("city", FieldKind.TEXT),
    QueryField("district", FieldKind.TEXT),
    QueryField("min_price", FieldKind.NUMBER),
    QueryField("max_price", FieldKind.NUMBER),
    QueryField("search", FieldKind.TEXT),
    QueryField("rooms", FieldKind.ENUM, RoomType),
    QueryField("min_size", FieldKind.NUMBER),
    QueryField("max_size", FieldKind.NUMBER),
    QueryField("furnishing", FieldKind.ENUM, FurnishingStatus),
    QueryField("kitchen_type", FieldKind.ENUM, KitchenType),
    QueryField("heating_type", FieldKind.ENUM, HeatingType),
    QueryField("usage_status", FieldKind.ENUM, UsageStatus),
    QueryField("deed_status", FieldKind.ENUM, DeedStatus),
    QueryField("from_who", FieldKind.ENUM, FromWho),
    QueryField("max_monthly_fee", FieldKind.NUMBER),
    QueryField("min_gross_size", FieldKind.NUMBER),
    QueryField("max_gross_size", FieldKind.NUMBER),
    QueryField("bathrooms", FieldKind.INTEGER),
    QueryField("balcony_count", FieldKind.INTEGER),
) + tuple(QueryField(name, FieldKind.TOGGLE) for name in TOGGLE_FIELDS)


def serialize_filters(filters: FilterModel) -> list[tuple[str, str]]:
    """Return the ordered query pairs for every present, valid filter field."""

    pairs: list[tuple[str, str]] = []
    for field in QUERY_FIELDS:
        value = getattr(filters, field.name)
        if value is None:
            continue
        encoded = _encode(field, value)
        if encoded is not None:
            pairs.append((field.key, encoded))
    return pairs


def deserialize_filters(params: QueryInput) -> FilterModel:
    """Parse query parameters back into a filter model; unknown keys are ignored."""

    raw = _first_values(params)
    parsed: dict[str, Any] = {}
    for field in QUERY_FIELDS:
        if field.key not in raw:
            continue
        value = _decode(field, raw[field.key])
        if value is None:
            logger.debug("Ignoring query parameter %s=%r", field.key, raw[field.key])
            continue
        parsed[field.name] = value
    return FilterModel(**parsed)


def select_route(filters: FilterModel) -> str:
    """Pick the result space addressed by the transaction type."""

    if filters.type is None:
        return ALL_ROUTE
    return ROUTES[filters.type]


def build_search_url(filters: FilterModel) -> RouteResponse:
    """Return the shareable path and query string for a search."""

    path = select_route(filters)
    query = urlencode(serialize_filters(filters))
    url = f"{path}?{query}" if query else path
    return RouteResponse(path=path, query=query, url=url)


def parse_sort(raw: str | None) -> SortOption:
    if raw:
        try:
            return SortOption(raw)
        except ValueError:
            logger.debug("Unknown sort option %r, using newest", raw)
    return SortOption.NEWEST


def parse_positive_int(raw: str | None, default: int, maximum: int | None = None) -> int:
    value = _parse_integer(raw) if raw is not None else None
    if value is None or value < 1:
        return default
    if maximum is not None:
        return min(value, maximum)
    return value


def _first_values(params: QueryInput) -> dict[str, str]:
    if hasattr(params, "multi_items"):
        items: Iterable[tuple[str, str]] = params.multi_items()  # type: ignore[union-attr]
    elif isinstance(params, Mapping):
        items = params.items()
    else:
        items = params
    values: dict[str, str] = {}
    for key, value in items:
        values.setdefault(key, value)
    return values


def _encode(field: QueryField, value: Any) -> str | None:
    if field.kind is FieldKind.TOGGLE:
        return TRUE_TOKEN if value is True else None
    if field.kind is FieldKind.ENUM:
        return value.value if isinstance(value, enum.Enum) else str(value)
    if field.kind is FieldKind.NUMBER:
        return _format_number(value)
    if field.kind is FieldKind.INTEGER:
        return str(int(value))
    text = str(value).strip()
    return text or None


def _decode(field: QueryField, raw: str) -> Any:
    text = raw.strip()
    if not text:
        return None
    if field.kind is FieldKind.TOGGLE:
        return True if text == TRUE_TOKEN else None
    if field.kind is FieldKind.ENUM:
        try:
            return field.choices(text)  # type: ignore[misc]
        except ValueError:
            return None
    if field.kind is FieldKind.NUMBER:
        return _parse_number(text)
    if field.kind is FieldKind.INTEGER:
        value = _parse_integer(text)
        return value if value is not None and value >= 0 else None
    if field.kind is FieldKind.CATEGORY:
        return text if text in ALL_CATEGORY_VALUES else None
    return text


def _format_number(value: float) -> str | None:
    number = float(value)
    if not math.isfinite(number):
        return None
    if number.is_integer():
        return str(int(number))
    return repr(number)


def _parse_number(text: str) -> float | None:
    try:
        number = float(text)
    except ValueError:
        return None
    return number if math.isfinite(number) else None


def _parse_integer(text: str) -> int | None:
    try:
        return int(text.strip())
    except ValueError:
        return None
