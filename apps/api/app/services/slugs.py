"""Listing identifiers and SEO slugs."""
from __future__ import annotations

import re
import secrets
import string
import time
from typing import Container

from ..models.listing import PropertyType

SLUG_PREFIXES: dict[PropertyType, str] = {
    PropertyType.SALE: "satilik-emlak",
    PropertyType.RENT: "kiralik-emlak",
}

# Legacy URL spaces used before slugs were stored on the listing.
LEGACY_PATH_PREFIXES: dict[PropertyType, str] = {
    PropertyType.SALE: "satilik",
    PropertyType.RENT: "kiralik",
}

TRANSLITERATION: dict[str, str] = {
    "ı": "i",
    "İ": "i",
    "ğ": "g",
    "Ğ": "g",
    "ü": "u",
    "Ü": "u",
    "ş": "s",
    "Ş": "s",
    "ö": "o",
    "Ö": "o",
    "ç": "c",
    "Ç": "c",
    "â": "a",
    "Â": "a",
    "î": "i",
    "Î": "i",
    "û": "u",
    "Û": "u",
}
_TRANSLATION_TABLE = str.maketrans(TRANSLITERATION)

_DISALLOWED = re.compile(r"[^a-z0-9\s-]")
_WHITESPACE = re.compile(r"\s+")
_HYPHENS = re.compile(r"-{2,}")

_ID_PREFIX = "IW"
_ID_SUFFIX_ALPHABET = string.digits + string.ascii_lowercase


def slugify(text: str) -> str:
    """Turn free text into lowercase ASCII words joined by single hyphens."""

    # Transliterate before lowercasing: "İ".lower() yields "i" plus a combining dot.
    text = text.translate(_TRANSLATION_TABLE).lower()
    text = _DISALLOWED.sub("", text)
    text = _WHITESPACE.sub("-", text.strip())
    text = _HYPHENS.sub("-", text)
    return text.strip("-")


def generate_slug(listing_type: PropertyType | str, title: str) -> str:
    """Return the deterministic slug for a listing type and title.

    >>> generate_slug("sale", "Deniz Manzaralı Müstakil Ev")
    'satilik-emlak-deniz-manzarali-mustakil-ev'
    """

    prefix = SLUG_PREFIXES[PropertyType(listing_type)]
    title_slug = slugify(title)
    if not title_slug:
        return prefix
    return f"{prefix}-{title_slug}"


def unique_slug(base: str, listing_id: str, taken: Container[str]) -> str:
    """Return ``base`` unless another listing holds it, then suffix the listing id."""

    if base not in taken:
        return base
    suffix = slugify(listing_id)
    return f"{base}-{suffix}" if suffix else base


def generate_listing_id() -> str:
    """Return an agency-style listing id such as ``IW1718030000000k3z``."""

    millis = int(time.time() * 1000)
    suffix = "".join(secrets.choice(_ID_SUFFIX_ALPHABET) for _ in range(3))
    return f"{_ID_PREFIX}{millis}{suffix}"


def listing_path(listing_id: str, listing_type: PropertyType | str, title: str, slug: str | None = None) -> str:
    """Return the public detail path of a listing."""

    if slug:
        return f"/{slug}"
    prefix = LEGACY_PATH_PREFIXES[PropertyType(listing_type)]
    title_slug = slugify(title)
    tail = f"{title_slug}-{listing_id}" if title_slug else listing_id
    return f"/{prefix}/{tail}"
