"""Category tree: the allowed sub categories for each main category."""
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from ..models.listing import MainCategory

# Tuples keep the display order used by option lists.
SUB_CATEGORY_OPTIONS: Mapping[MainCategory, tuple[str, ...]] = MappingProxyType(
    {
        MainCategory.RESIDENTIAL: ("Daire", "Rezidans", "Villa", "Müstakil Ev", "Dubleks", "Tripleks"),
        MainCategory.COMMERCIAL: (
            "Ofis",
            "Büro",
            "Plaza",
            "İş Merkezi",
            "Dükkan",
            "Mağaza",
            "Depo",
            "Fabrika",
            "Atölye",
            "Çiftlik",
        ),
        MainCategory.LAND: ("Arsa", "İmarlı Arsa", "Tarla", "Bağ-Bahçe"),
        MainCategory.BUILDING: ("Apartman", "İş Hanı", "Plaza"),
        MainCategory.TOURISM: ("Otel", "Apart Otel", "Tatil Köyü"),
        MainCategory.TIMESHARE: ("Otel", "Apart", "Villa"),
    }
)

SUB_CATEGORIES: Mapping[MainCategory, frozenset[str]] = MappingProxyType(
    {main: frozenset(subs) for main, subs in SUB_CATEGORY_OPTIONS.items()}
)

ALL_CATEGORY_VALUES: frozenset[str] = frozenset(
    {main.value for main in MainCategory}.union(*SUB_CATEGORIES.values())
)


def is_valid_sub(main: MainCategory, sub: str) -> bool:
    """Return True when ``sub`` belongs to ``main``'s option set."""

    return sub in SUB_CATEGORIES.get(main, frozenset())
