"""Schemas for location selector endpoints."""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class LocationOption(BaseModel):
    model_config = ConfigDict(frozen=True)

    value: str
    label: str


class LocationOptionsResponse(BaseModel):
    country: str | None = None
    state: str | None = None
    city: str | None = None
    district: str | None = None
    countries: list[LocationOption] = Field(default_factory=list)
    states: list[LocationOption] = Field(default_factory=list)
    cities: list[LocationOption] = Field(default_factory=list)
    districts: list[LocationOption] = Field(default_factory=list)
    label: str = ""


class CategoryNode(BaseModel):
    main: str
    subs: list[str]
