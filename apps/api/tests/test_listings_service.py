"""Service-level tests for the listing lifecycle and catalog search."""
from __future__ import annotations

from datetime import datetime, timezone
from unittest.mock import AsyncMock

import pytest
from fastapi import HTTPException
from sqlalchemy.exc import IntegrityError

from app.data.listings import DEMO_LISTINGS
from app.models.listing import PropertyType
from app.repositories import listings as listings_repo
from app.schemas.filters import FilterModel, SortOption
from app.schemas.listing import Listing, ListingInput
from app.services import listings as listings_service
from app.services import slugs


class DummySession:
    """Minimal session stub supporting async transaction context."""

    def __init__(self) -> None:
        self.begin_called = False

    def begin(self):  # noqa: D401 - mimic SQLAlchemy's async begin
        session = self

        class _Tx:
            async def __aenter__(self_inner):
                session.begin_called = True
                return session

            async def __aexit__(self_inner, exc_type, exc, tb):
                return False

        return _Tx()


def _payload(**overrides) -> ListingInput:
    data = {
        "type": "sale",
        "category": {"main": "Konut", "sub": "Villa"},
        "title": "Bahçeli Villa",
        "price": 12_000_000,
        "location": {"country": "TR", "state": "07", "city": "Antalya"},
        "specs": {"netSize": 240},
    }
    data.update(overrides)
    return ListingInput.model_validate(data)


def _stored(status: str = "active", **overrides) -> Listing:
    data = {
        **_payload().model_dump(),
        "id": "IW1757000000009xyz",
        "slug": "satilik-emlak-bahceli-villa",
        "status": status,
        "created_at": datetime(2025, 9, 1, tzinfo=timezone.utc),
        "view_count": 42,
    }
    data.update(overrides)
    return Listing.model_validate(data)


@pytest.fixture()
def fixed_id(monkeypatch):
    monkeypatch.setattr(slugs, "generate_listing_id", lambda: "IW1757000000000AbC")
    return "IW1757000000000AbC"


@pytest.mark.asyncio
async def test_create_listing_assigns_identity(monkeypatch, fixed_id):
    session = DummySession()
    add_mock = AsyncMock()
    monkeypatch.setattr(listings_repo, "slugs_like", AsyncMock(return_value=set()))
    monkeypatch.setattr(listings_repo, "add", add_mock)

    listing = await listings_service.create_listing(_payload(), session)

    assert session.begin_called
    assert listing.id == fixed_id
    assert listing.slug == "satilik-emlak-bahceli-villa"
    assert listing.created_at == listing.updated_at
    assert listing.view_count == 0
    add_mock.assert_awaited_once_with(session, listing)


@pytest.mark.asyncio
async def test_create_listing_suffixes_taken_slug(monkeypatch, fixed_id):
    session = DummySession()
    monkeypatch.setattr(
        listings_repo,
        "slugs_like",
        AsyncMock(return_value={"satilik-emlak-bahceli-villa", "satilik-emlak-bahceli-villa-2"}),
    )
    monkeypatch.setattr(listings_repo, "add", AsyncMock())

    listing = await listings_service.create_listing(_payload(), session)

    assert listing.slug == "satilik-emlak-bahceli-villa-iw1757000000000abc"


@pytest.mark.asyncio
async def test_create_listing_conflict(monkeypatch, fixed_id):
    session = DummySession()
    monkeypatch.setattr(listings_repo, "slugs_like", AsyncMock(return_value=set()))
    monkeypatch.setattr(
        listings_repo,
        "add",
        AsyncMock(side_effect=IntegrityError("INSERT INTO listings", {}, Exception("duplicate key"))),
    )

    with pytest.raises(HTTPException) as exc:
        await listings_service.create_listing(_payload(), session)

    assert exc.value.status_code == 409


@pytest.mark.asyncio
async def test_replace_keeps_slug_of_published_listing(monkeypatch):
    session = DummySession()
    slugs_like = AsyncMock(return_value=set())
    replace_mock = AsyncMock(return_value=True)
    monkeypatch.setattr(listings_repo, "get_by_id", AsyncMock(return_value=_stored("active")))
    monkeypatch.setattr(listings_repo, "slugs_like", slugs_like)
    monkeypatch.setattr(listings_repo, "replace", replace_mock)

    listing = await listings_service.replace_listing(
        "IW1757000000009xyz", _payload(title="Havuzlu Villa"), session
    )

    assert listing.slug == "satilik-emlak-bahceli-villa"
    assert listing.title == "Havuzlu Villa"
    assert listing.view_count == 42
    assert listing.created_at == datetime(2025, 9, 1, tzinfo=timezone.utc)
    slugs_like.assert_not_awaited()
    replace_mock.assert_awaited_once()


@pytest.mark.asyncio
async def test_replace_regenerates_slug_while_passive(monkeypatch):
    session = DummySession()
    monkeypatch.setattr(listings_repo, "get_by_id", AsyncMock(return_value=_stored("passive")))
    monkeypatch.setattr(
        listings_repo, "slugs_like", AsyncMock(return_value={"satilik-emlak-bahceli-villa"})
    )
    monkeypatch.setattr(listings_repo, "replace", AsyncMock(return_value=True))

    listing = await listings_service.replace_listing(
        "IW1757000000009xyz", _payload(type="rent", status="passive"), session
    )

    assert listing.slug == "kiralik-emlak-bahceli-villa"
    assert listing.type is PropertyType.RENT


@pytest.mark.asyncio
async def test_replace_passive_listing_keeps_own_slug(monkeypatch):
    session = DummySession()
    current = _stored("passive", title="Eski Villa", slug="satilik-emlak-eski-villa")
    monkeypatch.setattr(listings_repo, "get_by_id", AsyncMock(return_value=current))
    monkeypatch.setattr(
        listings_repo, "slugs_like", AsyncMock(return_value={"satilik-emlak-bahceli-villa"})
    )
    monkeypatch.setattr(listings_repo, "replace", AsyncMock(return_value=True))

    listing = await listings_service.replace_listing("IW1757000000009xyz", _payload(), session)

    assert listing.slug == "satilik-emlak-bahceli-villa-iw1757000000009xyz"


@pytest.mark.asyncio
async def test_replace_missing_listing(monkeypatch):
    session = DummySession()
    monkeypatch.setattr(listings_repo, "get_by_id", AsyncMock(return_value=None))

    with pytest.raises(HTTPException) as exc:
        await listings_service.replace_listing("missing", _payload(), session)

    assert exc.value.status_code == 404


@pytest.mark.asyncio
async def test_get_listing_not_found(monkeypatch):
    monkeypatch.setattr(listings_repo, "get_by_id", AsyncMock(return_value=None))
    monkeypatch.setattr(listings_repo, "get_by_slug", AsyncMock(return_value=None))

    with pytest.raises(HTTPException) as by_id:
        await listings_service.get_listing("missing", AsyncMock())
    with pytest.raises(HTTPException) as by_slug:
        await listings_service.get_listing_by_slug("missing", AsyncMock())

    assert by_id.value.status_code == 404
    assert by_slug.value.status_code == 404


@pytest.mark.asyncio
async def test_delete_listing(monkeypatch):
    session = DummySession()
    remove = AsyncMock(side_effect=[True, False])
    monkeypatch.setattr(listings_repo, "remove", remove)

    await listings_service.delete_listing("IW1", session)
    with pytest.raises(HTTPException) as exc:
        await listings_service.delete_listing("IW1", session)

    assert exc.value.status_code == 404
    assert remove.await_count == 2


@pytest.mark.asyncio
async def test_search_pins_result_space(monkeypatch):
    catalog = [Listing.model_validate(document) for document in DEMO_LISTINGS]
    list_mock = AsyncMock(return_value=catalog)
    monkeypatch.setattr(listings_repo, "list_listings", list_mock)

    response = await listings_service.search_listings(
        FilterModel(type=PropertyType.SALE, city="İstanbul"),
        AsyncMock(),
        sort=SortOption.PRICE_HIGH,
        space=PropertyType.RENT,
    )

    assert response.route == "/for-rent"
    assert [item.id for item in response.items] == ["IW1757000000003ghi"]
    assert response.total == 1
    assert response.total_pages == 1
    assert list_mock.await_args.kwargs["listing_type"] is PropertyType.RENT


@pytest.mark.asyncio
async def test_search_without_type_addresses_all(monkeypatch):
    catalog = [Listing.model_validate(document) for document in DEMO_LISTINGS]
    monkeypatch.setattr(listings_repo, "list_listings", AsyncMock(return_value=catalog))

    response = await listings_service.search_listings(FilterModel(), AsyncMock(), page=2, limit=2)

    assert response.route == "/all"
    assert response.total == len(DEMO_LISTINGS)
    assert response.total_pages == 3
    assert [item.id for item in response.items] == ["IW1757000000003ghi", "IW1757000000002def"]
