"""Search helper endpoints: shareable URLs, query parsing and the category tree."""
from __future__ import annotations

from fastapi import APIRouter, Request

from ..data.categories import SUB_CATEGORY_OPTIONS
from ..schemas.filters import FilterModel, RouteResponse
from ..schemas.locations import CategoryNode
from ..services import query

router = APIRouter()


@router.post("/url", response_model=RouteResponse)
async def build_url(filters: FilterModel) -> RouteResponse:
    """Turn a filter model into the route and query string of its result page."""

    return query.build_search_url(filters)


@router.get("/filters", response_model=FilterModel, response_model_exclude_none=True)
async def parse_filters(request: Request) -> FilterModel:
    """Echo the filter model a query string deserializes to."""

    return query.deserialize_filters(request.query_params)


@router.get("/categories", response_model=list[CategoryNode])
async def list_categories() -> list[CategoryNode]:
    return [CategoryNode(main=main.value, subs=list(subs)) for main, subs in SUB_CATEGORY_OPTIONS.items()]
