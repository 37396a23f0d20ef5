"""Data access helpers for catalog listings."""
from __future__ import annotations

import math
from typing import Sequence

from sqlalchemy import Select, delete, false, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.listing import Listing as ListingRow
from ..models.listing import PropertyType
from ..schemas.filters import FilterModel
from ..schemas.listing import Listing


async def list_listings(
    session: AsyncSession,
    *,
    listing_type: PropertyType | None = None,
    prefilter: FilterModel | None = None,
) -> list[Listing]:
    """Return the listings of one result space in insertion order.

    ``prefilter`` narrows the rows with the cheap equality and range constraints
    the database can answer; the matching engine still evaluates every row.
    """

    stmt: Select[tuple[ListingRow]] = select(ListingRow)
    if listing_type is not None:
        stmt = stmt.where(ListingRow.type == listing_type)
    if prefilter is not None:
        stmt = _apply_prefilter(stmt, prefilter)
    stmt = stmt.order_by(ListingRow.created_at.asc(), ListingRow.id.asc())

    rows: Sequence[ListingRow] = (await session.execute(stmt)).scalars().all()
    return [to_schema(row) for row in rows]


async def get_by_id(session: AsyncSession, listing_id: str) -> Listing | None:
    """Return a listing by identifier."""

    row = await session.get(ListingRow, listing_id)
    return to_schema(row) if row is not None else None


async def get_by_slug(session: AsyncSession, slug: str) -> Listing | None:
    """Return a listing by its slug."""

    stmt = select(ListingRow).where(ListingRow.slug == slug)
    row = (await session.execute(stmt)).scalar_one_or_none()
    return to_schema(row) if row is not None else None


async def slugs_like(session: AsyncSession, base: str) -> set[str]:
    """Return stored slugs equal to ``base`` or extending it with a suffix."""

    stmt = select(ListingRow.slug).where(
        or_(ListingRow.slug == base, ListingRow.slug.startswith(f"{base}-", autoescape=True))
    )
    return set((await session.execute(stmt)).scalars().all())


async def add(session: AsyncSession, listing: Listing) -> None:
    """Stage a new listing row and flush it so uniqueness is checked."""

    row = ListingRow(id=listing.id)
    _apply(row, listing)
    session.add(row)
    await session.flush()


async def replace(session: AsyncSession, listing: Listing) -> bool:
    """Overwrite every column of an existing listing; False when it does not exist."""

    row = await session.get(ListingRow, listing.id)
    if row is None:
        return False
    _apply(row, listing)
    session.add(row)
    await session.flush()
    return True


async def remove(session: AsyncSession, listing_id: str) -> bool:
    """Hard-delete a listing; False when nothing was removed."""

    result = await session.execute(delete(ListingRow).where(ListingRow.id == listing_id))
    return bool(result.rowcount)


def to_schema(row: ListingRow) -> Listing:
    """Rebuild the listing document from its row."""

    return Listing.model_validate(
        {
            "id": row.id,
            "slug": row.slug,
            "type": row.type,
            "status": row.status,
            "category": {"main": row.category_main, "sub": row.category_sub},
            "title": row.title,
            "description": row.description or "",
            "price": row.price,
            "currency": row.currency,
            "location": row.location_json or {},
            "specs": row.specs_json or {},
            "interiorFeatures": row.interior_json,
            "exteriorFeatures": row.exterior_json,
            "buildingFeatures": row.building_json,
            "propertyDetails": row.details_json or {},
            "landDetails": row.land_json,
            "agent": row.agent_json,
            "images": list(row.images or []),
            "virtualTour": row.virtual_tour,
            "panoramicImages": row.panoramic_json or [],
            "viewCount": row.view_count or 0,
            "isFeatured": row.is_featured,
            "isSponsored": row.is_sponsored,
            "sahibindenLink": row.sahibinden_link,
            "hurriyetEmlakLink": row.hurriyet_emlak_link,
            "emlakJetLink": row.emlak_jet_link,
            "createdAt": row.created_at,
            "updatedAt": row.updated_at,
        }
    )


def _dump(model) -> dict | None:
    if model is None:
        return None
    return model.model_dump(mode="json", by_alias=True)


def _apply(row: ListingRow, listing: Listing) -> None:
    row.slug = listing.slug
    row.type = listing.type
    row.status = listing.status
    row.category_main = listing.category.main.value
    row.category_sub = listing.category.sub
    row.title = listing.title
    row.description = listing.description
    row.price = listing.price
    row.currency = listing.currency
    row.location_json = _dump(listing.location) or {}
    row.specs_json = _dump(listing.specs) or {}
    row.interior_json = _dump(listing.interior_features)
    row.exterior_json = _dump(listing.exterior_features)
    row.building_json = _dump(listing.building_features)
    row.details_json = _dump(listing.property_details) or {}
    row.land_json = _dump(listing.land_details)
    row.agent_json = _dump(listing.agent)
    row.images = list(listing.images)
    row.virtual_tour = listing.virtual_tour
    row.panoramic_json = [_dump(image) for image in listing.panoramic_images]
    row.view_count = listing.view_count
    row.is_featured = listing.is_featured
    row.is_sponsored = listing.is_sponsored
    row.sahibinden_link = listing.sahibinden_link
    row.hurriyet_emlak_link = listing.hurriyet_emlak_link
    row.emlak_jet_link = listing.emlak_jet_link
    row.created_at = listing.created_at
    row.updated_at = listing.updated_at


def _apply_prefilter(stmt: Select[tuple[ListingRow]], filters: FilterModel) -> Select[tuple[ListingRow]]:
    if filters.type is not None:
        stmt = stmt.where(ListingRow.type == filters.type)
    if filters.city is not None:
        stmt = stmt.where(ListingRow.location_json["city"].astext == filters.city)

    low = filters.min_price if filters.min_price is not None and math.isfinite(filters.min_price) else None
    high = filters.max_price if filters.max_price is not None and math.isfinite(filters.max_price) else None
    if low is not None and high is not None and low > high:
        return stmt.where(false())
    if low is not None:
        stmt = stmt.where(ListingRow.price >= low)
    if high is not None:
        stmt = stmt.where(ListingRow.price <= high)
    return stmt
