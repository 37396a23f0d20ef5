"""Country -> state -> city -> district option lookups and cascading selection."""
from __future__ import annotations

import enum
from dataclasses import dataclass, replace
from types import MappingProxyType
from typing import Mapping

from ..data import locations as data
from ..schemas.filters import FilterModel
from ..schemas.locations import LocationOption, LocationOptionsResponse


class LocationLevel(str, enum.Enum):
    COUNTRY = "country"
    STATE = "state"
    CITY = "city"
    DISTRICT = "district"


LEVELS: tuple[LocationLevel, ...] = tuple(LocationLevel)

Options = tuple[LocationOption, ...]


def _options(pairs: list[tuple[str, str]]) -> Options:
    return tuple(LocationOption(value=value, label=label) for value, label in pairs)


@dataclass(frozen=True, slots=True)
class _LocationIndex:
    """Read-only option lists keyed by parent path."""

    countries: Options
    states: Mapping[str, Options]
    cities_by_country: Mapping[str, Options]
    cities_by_state: Mapping[tuple[str, str], Options]
    districts: Mapping[tuple[str, str], Options]

    @classmethod
    def build(cls) -> "_LocationIndex":
        countries = _options(sorted(data.COUNTRIES.items(), key=lambda item: item[1]))
        states = {
            country: _options(list(subdivisions.items()))
            for country, subdivisions in data.STATES.items()
        }

        cities_by_state: dict[tuple[str, str], Options] = {}
        cities_by_country: dict[str, Options] = {}
        for country, subdivisions in data.STATES.items():
            if country == "TR":
                continue
            collected: list[str] = []
            for state_code in subdivisions:
                names = data.CITIES_BY_STATE.get((country, state_code), ())
                cities_by_state[(country, state_code)] = _options([(name, name) for name in names])
                collected.extend(names)
            cities_by_country[country] = _options([(name, name) for name in collected])

        # Turkish provinces are listed as cities whatever state is selected.
        provinces = _options([(name, name) for name in data.TURKISH_PROVINCES.values()])
        cities_by_country["TR"] = provinces
        for plate_code in data.TURKISH_PROVINCES:
            cities_by_state[("TR", plate_code)] = provinces

        districts = {
            ("TR", city): _options([(name, name) for name in names])
            for city, names in data.TURKISH_DISTRICTS.items()
        }

        return cls(
            countries=countries,
            states=MappingProxyType(states),
            cities_by_country=MappingProxyType(cities_by_country),
            cities_by_state=MappingProxyType(cities_by_state),
            districts=MappingProxyType(districts),
        )


_INDEX = _LocationIndex.build()


def countries() -> list[LocationOption]:
    """Return every supported country."""

    return list(_INDEX.countries)


def states(country: str | None) -> list[LocationOption]:
    """Return the states of a country, or an empty list for an unknown country."""

    if not country:
        return []
    return list(_INDEX.states.get(country, ()))


def cities(country: str | None, state: str | None = None) -> list[LocationOption]:
    """Return the cities of a state, or of the whole country when no state is given."""

    if not country:
        return []
    if state:
        return list(_INDEX.cities_by_state.get((country, state), ()))
    return list(_INDEX.cities_by_country.get(country, ()))


def districts(country: str | None, city: str | None) -> list[LocationOption]:
    """Return the districts of a city; only Turkish provinces carry districts."""

    if not country or not city:
        return []
    return list(_INDEX.districts.get((country, city), ()))


def format_location(
    country: str | None,
    state: str | None = None,
    city: str | None = None,
    district: str | None = None,
) -> str:
    """Render a location path as ``district, city, state, country`` display text."""

    country_name = data.COUNTRIES.get(country or "", "")
    state_name = data.STATES.get(country or "", {}).get(state or "", "") if state else ""
    parts = [district or "", city or "", state_name, country_name]
    return ", ".join(part for part in parts if part)


@dataclass(frozen=True, slots=True)
class LocationSelection:
    """Current choice of a cascading location selector."""

    country: str | None = None
    state: str | None = None
    city: str | None = None
    district: str | None = None

    def choose(self, level: LocationLevel, value: str | None) -> "LocationSelection":
        """Select ``value`` at ``level`` and reset every level below it."""

        return replace(self, **_cascade_update(level, value))

    def options(self) -> dict[LocationLevel, list[LocationOption]]:
        return {
            LocationLevel.COUNTRY: countries(),
            LocationLevel.STATE: states(self.country),
            LocationLevel.CITY: cities(self.country, self.state),
            LocationLevel.DISTRICT: districts(self.country, self.city),
        }

    def to_response(self) -> LocationOptionsResponse:
        options = self.options()
        return LocationOptionsResponse(
            country=self.country,
            state=self.state,
            city=self.city,
            district=self.district,
            countries=options[LocationLevel.COUNTRY],
            states=options[LocationLevel.STATE],
            cities=options[LocationLevel.CITY],
            districts=options[LocationLevel.DISTRICT],
            label=format_location(self.country, self.state, self.city, self.district),
        )


def apply_location_change(filters: FilterModel, level: LocationLevel, value: str | None) -> FilterModel:
    """Return a copy of ``filters`` with ``level`` changed and its dependent levels cleared."""

    return filters.model_copy(update=_cascade_update(level, value))


def _cascade_update(level: LocationLevel, value: str | None) -> dict[str, str | None]:
    value = value.strip() if isinstance(value, str) else value
    update: dict[str, str | None] = {level.value: value or None}
    for child in LEVELS[LEVELS.index(level) + 1 :]:
        update[child.value] = None
    return update
