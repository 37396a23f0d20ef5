from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from app.models.listing import DeedStatus, ListingStatus, MainCategory
from app.schemas.listing import Listing, ListingInput


def _payload(**overrides):
    payload = {
        "type": "sale",
        "category": {"main": "Konut", "sub": "Villa"},
        "title": "Bahçeli Villa",
        "price": 12_000_000,
        "location": {"country": "TR", "state": "07", "city": "Antalya", "district": "Kaş"},
        "specs": {"netSize": 240, "rooms": "5+1"},
    }
    payload.update(overrides)
    return payload


def test_defaults_fill_feature_bundles() -> None:
    listing = ListingInput.model_validate(_payload())

    assert listing.interior_features is not None
    assert listing.building_features is not None
    assert listing.building_features.has_pool is False
    assert listing.land_details is None
    assert listing.currency == "TRY"
    assert listing.status is ListingStatus.ACTIVE


def test_sub_category_must_belong_to_main() -> None:
    with pytest.raises(ValidationError):
        ListingInput.model_validate(_payload(category={"main": "Arsa", "sub": "Villa"}))


def test_unknown_main_category_is_rejected() -> None:
    with pytest.raises(ValidationError):
        ListingInput.model_validate(_payload(category={"main": "Castle", "sub": "Villa"}))


def test_land_listing_gets_land_details() -> None:
    listing = ListingInput.model_validate(
        _payload(category={"main": "Arsa", "sub": "Tarla"}, specs={"netSize": 5_000})
    )

    assert listing.category.main is MainCategory.LAND
    assert listing.is_land
    assert listing.land_details is not None
    assert listing.interior_features is None


def test_land_listing_rejects_feature_bundles() -> None:
    with pytest.raises(ValidationError):
        ListingInput.model_validate(
            _payload(category={"main": "Arsa", "sub": "Tarla"}, buildingFeatures={"hasPool": True})
        )


def test_land_details_only_for_land() -> None:
    with pytest.raises(ValidationError):
        ListingInput.model_validate(_payload(landDetails={"zoningStatus": "İmarlı"}))


@pytest.mark.parametrize(
    "location",
    [
        {"country": "", "state": "34", "city": "İstanbul"},
        {"country": "TR", "city": "", "district": "Kadıköy"},
        {"country": "TR", "city": "İstanbul", "neighborhood": "Moda"},
    ],
)
def test_location_levels_require_parent(location) -> None:
    with pytest.raises(ValidationError):
        ListingInput.model_validate(_payload(location=location))


def test_non_positive_price_and_size_are_rejected() -> None:
    with pytest.raises(ValidationError):
        ListingInput.model_validate(_payload(price=0))
    with pytest.raises(ValidationError):
        ListingInput.model_validate(_payload(specs={"netSize": 0}))


def test_listing_dumps_camel_case() -> None:
    listing = Listing.model_validate(
        {
            **_payload(),
            "id": "IW1",
            "slug": "satilik-emlak-bahceli-villa",
            "createdAt": datetime(2025, 9, 1, tzinfo=timezone.utc),
            "status": "passive",
        }
    )

    dumped = listing.model_dump(mode="json", by_alias=True)

    assert dumped["specs"]["netSize"] == 240
    assert dumped["buildingFeatures"]["has24HourSecurity"] is False
    assert dumped["propertyDetails"]["monthlyFee"] is None
    assert dumped["path"] == "/satilik-emlak-bahceli-villa"
    assert not listing.is_published


def test_detached_deed_status_is_accepted() -> None:
    listing = ListingInput.model_validate(_payload(propertyDetails={"deedStatus": "Müstakil Tapulu"}))

    assert listing.property_details.deed_status is DeedStatus.DETACHED_DEED


def test_panoramas_and_portal_links_are_carried() -> None:
    listing = ListingInput.model_validate(
        _payload(
            panoramicImages=[
                {"url": "https://cdn.example/pano.jpg", "title": "Salon", "hotspots": [{"text": "Mutfak", "yaw": 90}]}
            ],
            sahibindenLink="https://www.sahibinden.com/ilan/123",
            emlakJetLink="https://www.emlakjet.com/ilan/456",
        )
    )

    dumped = listing.model_dump(mode="json", by_alias=True)

    assert listing.panoramic_images[0].hotspots[0].pitch == 0
    assert dumped["panoramicImages"][0]["hotspots"][0]["yaw"] == 90
    assert dumped["sahibindenLink"] == "https://www.sahibinden.com/ilan/123"
    assert dumped["hurriyetEmlakLink"] is None
