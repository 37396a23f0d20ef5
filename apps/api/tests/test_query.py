import pytest
from starlette.datastructures import QueryParams

from app.data.listings import DEMO_LISTINGS
from app.models.listing import DeedStatus, FurnishingStatus, PropertyType, RoomType
from app.schemas.filters import FilterModel, SortOption
from app.schemas.listing import Listing
from app.services import matching, query


@pytest.fixture()
def demo_listings() -> list[Listing]:
    return [Listing.model_validate(document) for document in DEMO_LISTINGS]


def test_serialize_uses_wire_keys_in_order() -> None:
    filters = FilterModel(
        has_pool=True,
        bathrooms=2,
        rooms=RoomType.R3_1,
        search="deniz",
        max_price=2_500_000.5,
        min_price=100_000,
        city="İstanbul",
        category="Daire",
        type=PropertyType.SALE,
    )

    assert query.serialize_filters(filters) == [
        ("type", "sale"),
        ("category", "Daire"),
        ("city", "İstanbul"),
        ("minPrice", "100000"),
        ("maxPrice", "2500000.5"),
        ("search", "deniz"),
        ("rooms", "3+1"),
        ("bathrooms", "2"),
        ("hasPool", "true"),
    ]


def test_round_trip_preserves_filters() -> None:
    filters = FilterModel(
        type=PropertyType.RENT,
        country="TR",
        state="34",
        city="İstanbul",
        district="Beşiktaş",
        min_size=45.5,
        furnishing=FurnishingStatus.PARTIALLY_FURNISHED,
        max_monthly_fee=5_000,
        balcony_count=0,
        in_site=True,
        has_gym=True,
    )

    assert query.deserialize_filters(query.serialize_filters(filters)) == filters


def test_detached_deed_status_survives_the_url() -> None:
    filters = FilterModel(deed_status=DeedStatus.DETACHED_DEED)

    assert query.serialize_filters(filters) == [("deedStatus", "Müstakil Tapulu")]
    assert query.deserialize_filters({"deedStatus": "Müstakil Tapulu"}).deed_status is DeedStatus.DETACHED_DEED
    assert query.deserialize_filters(query.serialize_filters(filters)) == filters


def test_unknown_category_is_dropped_before_serializing() -> None:
    filters = FilterModel(category="Apartman Dairesi", city="Ankara")

    assert filters.category is None
    assert query.serialize_filters(filters) == [("city", "Ankara")]
    assert query.deserialize_filters(query.serialize_filters(filters)) == filters


def test_filters_match_the_same_listings_after_the_url(demo_listings) -> None:
    filters = FilterModel(category="Apartman Dairesi", deed_status=DeedStatus.CONDOMINIUM)
    restored = query.deserialize_filters(query.serialize_filters(filters))

    direct = [listing.id for listing in demo_listings if matching.matches(filters, listing)]
    via_url = [listing.id for listing in demo_listings if matching.matches(restored, listing)]

    assert direct == via_url == ["IW1757000000001abc", "IW1757000000002def"]


def test_false_toggles_and_blank_text_are_not_serialized() -> None:
    filters = FilterModel(has_parking=False, search="   ", city="")

    assert filters == FilterModel()
    assert query.serialize_filters(filters) == []


def test_non_finite_numbers_are_not_serialized() -> None:
    filters = FilterModel(min_price=float("inf"), max_price=float("nan"))

    assert query.serialize_filters(filters) == []


def test_malformed_and_unknown_parameters_are_ignored() -> None:
    filters = query.deserialize_filters(
        {
            "minPrice": "abc",
            "maxPrice": "inf",
            "rooms": "9+9",
            "hasPool": "yes",
            "category": "Castle",
            "bathrooms": "-1",
            "city": "  ",
            "utm_source": "newsletter",
        }
    )

    assert filters == FilterModel()


def test_valid_parameters_survive_next_to_malformed_ones() -> None:
    filters = query.deserialize_filters({"minPrice": "abc", "maxPrice": "750000", "hasElevator": "true"})

    assert filters.min_price is None
    assert filters.max_price == 750_000
    assert filters.has_elevator is True


def test_first_value_wins_for_repeated_keys() -> None:
    params = QueryParams("city=Ankara&city=%C4%B0zmir&type=rent")

    filters = query.deserialize_filters(params)

    assert filters.city == "Ankara"
    assert filters.type is PropertyType.RENT


def test_route_follows_transaction_type() -> None:
    assert query.select_route(FilterModel(type=PropertyType.SALE)) == "/for-sale"
    assert query.select_route(FilterModel(type=PropertyType.RENT)) == "/for-rent"
    assert query.select_route(FilterModel()) == "/all"


def test_build_search_url() -> None:
    response = query.build_search_url(FilterModel(type=PropertyType.RENT, city="İstanbul"))

    assert response.path == "/for-rent"
    assert response.query == "type=rent&city=%C4%B0stanbul"
    assert response.url == "/for-rent?type=rent&city=%C4%B0stanbul"


def test_build_search_url_without_filters() -> None:
    response = query.build_search_url(FilterModel())

    assert (response.path, response.query, response.url) == ("/all", "", "/all")


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("price-low", SortOption.PRICE_LOW), ("bogus", SortOption.NEWEST), (None, SortOption.NEWEST)],
)
def test_parse_sort(raw, expected) -> None:
    assert query.parse_sort(raw) is expected


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("5", 5), ("0", 10), ("-3", 10), ("abc", 10), (None, 10), ("500", 100)],
)
def test_parse_positive_int(raw, expected) -> None:
    assert query.parse_positive_int(raw, 10, maximum=100) == expected
