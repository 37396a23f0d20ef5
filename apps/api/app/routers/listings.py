"""Catalog listing endpoints."""
from __future__ import annotations

from fastapi import APIRouter, Depends, Request, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.config import settings
from ..db.session import get_session
from ..models.listing import PropertyType
from ..schemas.listing import Listing, ListingInput, ListingSearchResponse
from ..services import listings as listings_service
from ..services import query

router = APIRouter()


async def _search(
    request: Request,
    session: AsyncSession,
    *,
    space: PropertyType | None = None,
    combined: bool = False,
) -> ListingSearchResponse:
    params = request.query_params
    filters = query.deserialize_filters(params)
    if combined:
        filters = filters.model_copy(update={"type": None})

    return await listings_service.search_listings(
        filters,
        session,
        sort=query.parse_sort(params.get("sort")),
        page=query.parse_positive_int(params.get("page"), 1),
        limit=query.parse_positive_int(params.get("limit"), settings.default_page_size, settings.max_page_size),
        space=space,
    )


@router.get("", response_model=ListingSearchResponse)
async def search_listings(
    request: Request,
    session: AsyncSession = Depends(get_session),
) -> ListingSearchResponse:
    """Search listings with the query-string filter contract."""

    return await _search(request, session)


@router.get("/for-sale", response_model=ListingSearchResponse)
async def search_for_sale(
    request: Request,
    session: AsyncSession = Depends(get_session),
) -> ListingSearchResponse:
    """Search the sale-only result space."""

    return await _search(request, session, space=PropertyType.SALE)


@router.get("/for-rent", response_model=ListingSearchResponse)
async def search_for_rent(
    request: Request,
    session: AsyncSession = Depends(get_session),
) -> ListingSearchResponse:
    """Search the rent-only result space."""

    return await _search(request, session, space=PropertyType.RENT)


@router.get("/all", response_model=ListingSearchResponse)
async def search_all(
    request: Request,
    session: AsyncSession = Depends(get_session),
) -> ListingSearchResponse:
    """Search sale and rent listings together."""

    return await _search(request, session, combined=True)


@router.get("/slug/{slug}", response_model=Listing)
async def get_listing_by_slug(slug: str, session: AsyncSession = Depends(get_session)) -> Listing:
    """Resolve a public slug to its listing."""

    return await listings_service.get_listing_by_slug(slug, session)


@router.get("/{listing_id}", response_model=Listing)
async def get_listing(listing_id: str, session: AsyncSession = Depends(get_session)) -> Listing:
    """Return one listing."""

    return await listings_service.get_listing(listing_id, session)


@router.post("", response_model=Listing, status_code=status.HTTP_201_CREATED)
async def create_listing(
    payload: ListingInput,
    session: AsyncSession = Depends(get_session),
) -> Listing:
    """Create a listing; id, slug and timestamps are generated."""

    return await listings_service.create_listing(payload, session)


@router.put("/{listing_id}", response_model=Listing)
async def replace_listing(
    listing_id: str,
    payload: ListingInput,
    session: AsyncSession = Depends(get_session),
) -> Listing:
    """Replace a listing's full record."""

    return await listings_service.replace_listing(listing_id, payload, session)


@router.delete("/{listing_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_listing(listing_id: str, session: AsyncSession = Depends(get_session)) -> Response:
    """Remove a listing from the catalog."""

    await listings_service.delete_listing(listing_id, session)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
