"""Listing model and catalog enumerations."""
from __future__ import annotations

import enum

from sqlalchemy import Boolean, Enum, Float, Integer, String, Text
from sqlalchemy.dialects.postgresql import ARRAY, JSONB
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, TimestampMixin


class PropertyType(str, enum.Enum):
    SALE = "sale"
    RENT = "rent"


class ListingStatus(str, enum.Enum):
    ACTIVE = "active"
    PASSIVE = "passive"
    SOLD = "sold"
    RENTED = "rented"


class MainCategory(str, enum.Enum):
    RESIDENTIAL = "Konut"
    COMMERCIAL = "İş Yeri"
    LAND = "Arsa"
    BUILDING = "Bina"
    TOURISM = "Turistik Tesis"
    TIMESHARE = "Devremülk"


class RoomType(str, enum.Enum):
    STUDIO = "Stüdyo"
    R1_0 = "1+0"
    R1_1 = "1+1"
    R2_0 = "2+0"
    R2_1 = "2+1"
    R3_1 = "3+1"
    R3_2 = "3+2"
    R4_1 = "4+1"
    R4_2 = "4+2"
    R5_1 = "5+1"
    R5_2 = "5+2"
    R6_PLUS = "6+ Oda"


class HeatingType(str, enum.Enum):
    COMBI_GAS = "Kombi Doğalgaz"
    CENTRAL_GAS = "Merkezi Doğalgaz"
    UNDERFLOOR = "Yerden Isıtma"
    CENTRAL_METERED = "Merkezi (Pay Ölçer)"
    AIR_CONDITIONING = "Klima"
    FIREPLACE = "Şömine"
    STOVE = "Soba"
    NONE = "Isıtma Yok"


class FurnishingStatus(str, enum.Enum):
    FURNISHED = "Furnished"
    UNFURNISHED = "Unfurnished"
    PARTIALLY_FURNISHED = "Partially Furnished"


class KitchenType(str, enum.Enum):
    OPEN = "Açık"
    CLOSED = "Kapalı"
    AMERICAN = "Amerikan"


class Facade(str, enum.Enum):
    NORTH = "Kuzey"
    SOUTH = "Güney"
    EAST = "Doğu"
    WEST = "Batı"
    SOUTH_EAST = "Güneydoğu"
    SOUTH_WEST = "Güneybatı"
    NORTH_EAST = "Kuzeydoğu"
    NORTH_WEST = "Kuzeybatı"


class UsageStatus(str, enum.Enum):
    EMPTY = "Boş"
    TENANTED = "Kiracılı"
    OWNER_OCCUPIED = "Mülk Sahibi"
    NEWLY_BUILT = "Yeni Yapılmış"


class DeedStatus(str, enum.Enum):
    CONDOMINIUM = "Kat Mülkiyeti"
    CONSTRUCTION_SERVITUDE = "Kat İrtifakı"
    LAND_DEED = "Arsa Tapulu"
    SHARED_DEED = "Hisseli Tapu"
    DETACHED_DEED = "Müstakil Tapulu"


class FromWho(str, enum.Enum):
    OWNER = "Sahibinden"
    AGENCY = "Emlak Ofisinden"
    BANK = "Bankadan"
    CONTRACTOR = "Müteahhitten"
    MUNICIPALITY = "Belediyeden"


class ZoningStatus(str, enum.Enum):
    FIELD = "Tarla"
    ZONED = "İmarlı"
    COMMERCIAL = "Ticari İmarlı"
    RESIDENTIAL = "Konut İmarlı"
    INDUSTRIAL = "Sanayi İmarlı"
    TOURISM = "Turizm İmarlı"
    UNSPECIFIED = "Belirtilmemiş"


class CreditEligibility(str, enum.Enum):
    ELIGIBLE = "Uygun"
    NOT_ELIGIBLE = "Uygun Değil"
    UNKNOWN = "Bilinmiyor"


class Listing(TimestampMixin, Base):
    """Catalog listing stored as a document-like row.

    Nested bundles (location, specs, features, details) are kept as JSONB so the
    row mirrors the listing document one-to-one.
    """

    __tablename__ = "listings"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    slug: Mapped[str] = mapped_column(String, unique=True, index=True, nullable=False)
    type: Mapped[PropertyType] = mapped_column(
        Enum(PropertyType, name="property_type", values_callable=lambda e: [m.value for m in e]),
        index=True,
        nullable=False,
    )
    status: Mapped[ListingStatus] = mapped_column(
        Enum(ListingStatus, name="listing_status", values_callable=lambda e: [m.value for m in e]),
        default=ListingStatus.ACTIVE,
        nullable=False,
    )
    category_main: Mapped[str] = mapped_column(String, nullable=False)
    category_sub: Mapped[str] = mapped_column(String, nullable=False)
    title: Mapped[str] = mapped_column(String, nullable=False)
    description: Mapped[str] = mapped_column(Text, default="", nullable=False)
    price: Mapped[float] = mapped_column(Float, nullable=False)
    currency: Mapped[str] = mapped_column(String(3), default="TRY", nullable=False)

    location_json: Mapped[dict] = mapped_column(JSONB, default=dict, nullable=False)
    specs_json: Mapped[dict] = mapped_column(JSONB, default=dict, nullable=False)
    interior_json: Mapped[dict | None] = mapped_column(JSONB)
    exterior_json: Mapped[dict | None] = mapped_column(JSONB)
    building_json: Mapped[dict | None] = mapped_column(JSONB)
    details_json: Mapped[dict] = mapped_column(JSONB, default=dict, nullable=False)
    land_json: Mapped[dict | None] = mapped_column(JSONB)
    agent_json: Mapped[dict | None] = mapped_column(JSONB)

    images: Mapped[list[str]] = mapped_column(ARRAY(String), default=list, nullable=False)
    virtual_tour: Mapped[str | None] = mapped_column(String)
    panoramic_json: Mapped[list] = mapped_column(JSONB, default=list, nullable=False)
    view_count: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    is_featured: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    is_sponsored: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    sahibinden_link: Mapped[str | None] = mapped_column(String)
    hurriyet_emlak_link: Mapped[str | None] = mapped_column(String)
    emlak_jet_link: Mapped[str | None] = mapped_column(String)

