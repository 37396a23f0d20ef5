"""Location selector endpoints."""
from __future__ import annotations

from fastapi import APIRouter

from ..schemas.locations import LocationOption, LocationOptionsResponse
from ..services import locations as locations_service
from ..services.locations import LocationLevel, LocationSelection

router = APIRouter()


@router.get("/countries", response_model=list[LocationOption])
async def list_countries() -> list[LocationOption]:
    return locations_service.countries()


@router.get("/states", response_model=list[LocationOption])
async def list_states(country: str | None = None) -> list[LocationOption]:
    return locations_service.states(country)


@router.get("/cities", response_model=list[LocationOption])
async def list_cities(country: str | None = None, state: str | None = None) -> list[LocationOption]:
    return locations_service.cities(country, state)


@router.get("/districts", response_model=list[LocationOption])
async def list_districts(country: str | None = None, city: str | None = None) -> list[LocationOption]:
    return locations_service.districts(country, city)


@router.get("/options", response_model=LocationOptionsResponse)
async def selection_options(
    country: str | None = None,
    state: str | None = None,
    city: str | None = None,
    district: str | None = None,
) -> LocationOptionsResponse:
    """Return every option list for a selection path; levels without a parent are dropped."""

    selection = LocationSelection().choose(LocationLevel.COUNTRY, country)
    if selection.country:
        selection = selection.choose(LocationLevel.STATE, state).choose(LocationLevel.CITY, city)
    if selection.city:
        selection = selection.choose(LocationLevel.DISTRICT, district)
    return selection.to_response()
