"""Listing lifecycle and catalog search over the persistence layer."""
from __future__ import annotations

import logging
from datetime import datetime, timezone

from fastapi import HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.listing import PropertyType
from ..repositories import listings as listings_repo
from ..schemas.filters import FilterModel, SortOption
from ..schemas.listing import Listing, ListingInput, ListingSearchResponse
from . import matching, query, slugs

logger = logging.getLogger(__name__)


async def search_listings(
    filters: FilterModel,
    session: AsyncSession,
    *,
    sort: SortOption = SortOption.NEWEST,
    page: int = 1,
    limit: int = 10,
    space: PropertyType | None = None,
) -> ListingSearchResponse:
    """Search one result space.

    ``space`` pins the transaction type for the sale-only and rent-only routes;
    without it the type filter, if any, selects the space.
    """

    if space is not None:
        filters = filters.model_copy(update={"type": space})

    candidates = await listings_repo.list_listings(session, listing_type=filters.type, prefilter=filters)
    result = matching.search_catalog(candidates, filters, sort=sort, page=page, limit=limit)

    return ListingSearchResponse(
        items=result.items,
        total=result.total,
        page=result.page,
        limit=result.limit,
        total_pages=result.total_pages,
        route=query.select_route(filters),
    )


async def get_listing(listing_id: str, session: AsyncSession) -> Listing:
    listing = await listings_repo.get_by_id(session, listing_id)
    if listing is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Listing not found")
    return listing


async def get_listing_by_slug(slug: str, session: AsyncSession) -> Listing:
    listing = await listings_repo.get_by_slug(session, slug)
    if listing is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Listing not found")
    return listing


async def create_listing(payload: ListingInput, session: AsyncSession) -> Listing:
    """Assign identity, slug and timestamps, then persist the listing."""

    now = datetime.now(timezone.utc)
    listing_id = slugs.generate_listing_id()

    try:
        async with session.begin():
            slug = await _resolve_slug(session, payload, listing_id)
            listing = Listing.model_validate(
                {
                    **payload.model_dump(),
                    "id": listing_id,
                    "slug": slug,
                    "created_at": now,
                    "updated_at": now,
                    "view_count": 0,
                }
            )
            await listings_repo.add(session, listing)
    except IntegrityError as exc:
        logger.warning("Listing %s rejected: slug or id already in use", listing_id)
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Listing slug already in use") from exc

    logger.info("Created listing %s with slug %s", listing.id, listing.slug)
    return listing


async def replace_listing(listing_id: str, payload: ListingInput, session: AsyncSession) -> Listing:
    """Replace a listing's full record.

    The slug follows title and type edits only while the listing is unpublished.
    """

    try:
        async with session.begin():
            current = await listings_repo.get_by_id(session, listing_id)
            if current is None:
                raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Listing not found")

            slug = current.slug
            renamed = payload.title != current.title or payload.type != current.type
            if renamed and not current.is_published:
                slug = await _resolve_slug(session, payload, listing_id, own_slug=current.slug)

            listing = Listing.model_validate(
                {
                    **payload.model_dump(),
                    "id": current.id,
                    "slug": slug,
                    "created_at": current.created_at,
                    "updated_at": datetime.now(timezone.utc),
                    "view_count": current.view_count,
                }
            )
            await listings_repo.replace(session, listing)
    except IntegrityError as exc:
        logger.warning("Listing %s update rejected: slug already in use", listing_id)
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Listing slug already in use") from exc

    if slug != current.slug:
        logger.info("Listing %s slug changed from %s to %s", listing_id, current.slug, slug)
    logger.info("Updated listing %s", listing_id)
    return listing


async def delete_listing(listing_id: str, session: AsyncSession) -> None:
    async with session.begin():
        removed = await listings_repo.remove(session, listing_id)
    if not removed:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Listing not found")
    logger.info("Deleted listing %s", listing_id)


async def _resolve_slug(
    session: AsyncSession,
    payload: ListingInput,
    listing_id: str,
    own_slug: str | None = None,
) -> str:
    base = slugs.generate_slug(payload.type, payload.title)
    taken = await listings_repo.slugs_like(session, base)
    taken.discard(own_slug)
    return slugs.unique_slug(base, listing_id, taken)
