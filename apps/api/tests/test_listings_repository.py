"""Row and document mapping of the listings repository."""
from __future__ import annotations

from app.data.listings import DEMO_LISTINGS
from app.repositories import listings as listings_repo
from app.schemas.listing import Listing


def test_row_mapping_keeps_panoramas_and_portal_links() -> None:
    listing = Listing.model_validate(
        {
            **DEMO_LISTINGS[0],
            "panoramicImages": [
                {
                    "url": "https://cdn.example/pano.jpg",
                    "title": "Teras",
                    "hotspots": [{"text": "Havuz", "yaw": 45, "pitch": -10}],
                }
            ],
            "hurriyetEmlakLink": "https://www.hurriyetemlak.com/ilan/789",
        }
    )
    row = listings_repo.ListingRow(id=listing.id)

    listings_repo._apply(row, listing)
    restored = listings_repo.to_schema(row)

    assert row.panoramic_json[0]["hotspots"][0] == {"text": "Havuz", "yaw": 45.0, "pitch": -10.0}
    assert row.hurriyet_emlak_link == "https://www.hurriyetemlak.com/ilan/789"
    assert restored == listing


def test_land_listing_row_has_no_feature_bundles() -> None:
    land = Listing.model_validate(DEMO_LISTINGS[3])
    row = listings_repo.ListingRow(id=land.id)

    listings_repo._apply(row, land)

    assert row.building_json is None
    assert row.land_json["zoningStatus"] == "Konut İmarlı"
    assert listings_repo.to_schema(row).land_details == land.land_details
