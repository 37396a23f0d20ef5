import re

import pytest

from app.models.listing import PropertyType
from app.services import slugs

SLUG_SHAPE = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")


def test_sale_title_is_transliterated() -> None:
    assert slugs.generate_slug(PropertyType.SALE, "Deniz Manzaralı Müstakil Ev") == (
        "satilik-emlak-deniz-manzarali-mustakil-ev"
    )


def test_rent_prefix_and_dotted_capital_i() -> None:
    assert slugs.generate_slug("rent", "İSTANBUL Şişli Ofis") == "kiralik-emlak-istanbul-sisli-ofis"


@pytest.mark.parametrize(
    "title",
    [
        "  Çok   Güzel -- Daire!!  ",
        "3+1 Daire, Kadıköy / Moda",
        "ÂLÎ ÛSTA'nın Evi",
        "---",
        "Villa 🏖 with pool",
    ],
)
def test_slug_shape(title: str) -> None:
    slug = slugs.generate_slug(PropertyType.SALE, title)

    assert SLUG_SHAPE.match(slug)
    assert slug.startswith("satilik-emlak")
    assert slug == slugs.generate_slug(PropertyType.SALE, title)


def test_title_without_slug_characters_yields_prefix() -> None:
    assert slugs.generate_slug(PropertyType.RENT, "!!! ???") == "kiralik-emlak"
    assert slugs.generate_slug(PropertyType.SALE, "") == "satilik-emlak"


def test_punctuation_and_spaces_collapse() -> None:
    assert slugs.slugify("3+1 Daire,  Kadıköy / Moda") == "31-daire-kadikoy-moda"


def test_unique_slug_keeps_free_base() -> None:
    assert slugs.unique_slug("satilik-emlak-villa", "IW1abc", set()) == "satilik-emlak-villa"


def test_unique_slug_suffixes_listing_id_on_collision() -> None:
    taken = {"satilik-emlak-villa"}

    assert slugs.unique_slug("satilik-emlak-villa", "IW1757000000001ABC", taken) == (
        "satilik-emlak-villa-iw1757000000001abc"
    )


def test_generate_listing_id_format() -> None:
    listing_id = slugs.generate_listing_id()

    assert re.fullmatch(r"IW\d{13}[0-9a-z]{3}", listing_id)


def test_listing_path_prefers_stored_slug() -> None:
    path = slugs.listing_path("IW1", PropertyType.SALE, "Deniz Evi", slug="satilik-emlak-deniz-evi")

    assert path == "/satilik-emlak-deniz-evi"


def test_listing_path_falls_back_to_legacy_route() -> None:
    assert slugs.listing_path("IW1", PropertyType.RENT, "Deniz Evi") == "/kiralik/deniz-evi-IW1"
    assert slugs.listing_path("IW1", PropertyType.SALE, "***") == "/satilik/IW1"
