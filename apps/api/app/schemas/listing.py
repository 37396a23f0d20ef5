"""Schemas for catalog listings."""
from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator
from pydantic.alias_generators import to_camel

from ..data.categories import is_valid_sub
from ..models.listing import (
    CreditEligibility,
    DeedStatus,
    Facade,
    FromWho,
    FurnishingStatus,
    HeatingType,
    KitchenType,
    ListingStatus,
    MainCategory,
    PropertyType,
    RoomType,
    UsageStatus,
    ZoningStatus,
)
from ..services.slugs import listing_path


class CamelModel(BaseModel):
    """Base model exchanging camelCase keys with clients and the document store."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Category(CamelModel):
    main: MainCategory
    sub: str

    @model_validator(mode="after")
    def _check_sub(self) -> "Category":
        if not is_valid_sub(self.main, self.sub):
            raise ValueError(f"'{self.sub}' is not a valid sub category of '{self.main.value}'")
        return self


class Coordinates(CamelModel):
    lat: float = Field(ge=-90, le=90)
    lng: float = Field(ge=-180, le=180)


class Location(CamelModel):
    """Hierarchical address; a level may only be set when its parent is."""

    country: str = "TR"
    state: str | None = None
    city: str = ""
    district: str | None = None
    neighborhood: str | None = None
    address: str | None = None
    coordinates: Coordinates | None = None

    @model_validator(mode="after")
    def _check_hierarchy(self) -> "Location":
        if self.state and not self.country:
            raise ValueError("state requires a country")
        if self.district and not self.city:
            raise ValueError("district requires a city")
        if self.neighborhood and not self.district:
            raise ValueError("neighborhood requires a district")
        return self


class Specs(CamelModel):
    net_size: float = Field(gt=0)
    gross_size: float | None = Field(default=None, gt=0)
    rooms: RoomType | None = None
    bathrooms: int | None = Field(default=None, ge=0)
    age: int | None = Field(default=None, ge=0)
    floor: int | None = None
    total_floors: int | None = Field(default=None, ge=0)
    heating: HeatingType | None = None
    furnishing: FurnishingStatus | None = None
    balcony_count: int | None = Field(default=None, ge=0)


class InteriorFeatures(CamelModel):
    kitchen_type: KitchenType | None = None
    has_built_in_kitchen: bool = False
    has_built_in_wardrobe: bool = False
    has_laminate: bool = False
    has_parquet: bool = False
    has_ceramic: bool = False
    has_marble: bool = False
    has_wallpaper: bool = False
    has_painted_walls: bool = False
    has_spot_lighting: bool = False
    has_hilton_bathroom: bool = False
    has_jacuzzi: bool = False
    has_shower_cabin: bool = False
    has_american_door: bool = False
    has_steel_door: bool = False
    has_intercom: bool = False


class ExteriorFeatures(CamelModel):
    facade: Facade | None = None
    has_balcony: bool = False
    has_terrace: bool = False
    has_garden: bool = False
    has_garden_use: bool = False
    has_sea_view: bool = False
    has_city_view: bool = False
    has_nature_view: bool = False
    has_pool_view: bool = False


class BuildingFeatures(CamelModel):
    has_elevator: bool = False
    has_car_park: bool = False
    has_closed_car_park: bool = False
    has_open_car_park: bool = False
    has_security: bool = False
    has_24_hour_security: bool = False
    has_camera_system: bool = False
    has_concierge: bool = False
    has_pool: bool = False
    has_gym: bool = False
    has_sauna: bool = False
    has_turkish_bath: bool = False
    has_playground: bool = False
    has_basketball_court: bool = False
    has_tennis_court: bool = False
    has_generator: bool = False
    has_fire_escape: bool = False
    has_fire_detector: bool = False
    has_water_booster: bool = False
    has_satellite_system: bool = False
    has_wifi: bool = False


class PropertyDetails(CamelModel):
    usage_status: UsageStatus | None = None
    deed_status: DeedStatus | None = None
    from_who: FromWho | None = None
    is_settlement: bool = False
    credit_eligible: bool = False
    exchange_available: bool = False
    in_site: bool = False
    monthly_fee: float | None = Field(default=None, ge=0)
    has_debt: bool = False
    debt_amount: float | None = Field(default=None, ge=0)
    is_rent_guaranteed: bool = False
    rent_guarantee_amount: float | None = Field(default=None, ge=0)
    is_new_building: bool = False
    is_suitable_for_office: bool = False
    has_business_license: bool = False


class LandDetails(CamelModel):
    zoning_status: ZoningStatus | None = None
    price_per_square_meter: float | None = Field(default=None, gt=0)
    block_number: str | None = None
    parcel_number: str | None = None
    sheet_number: str | None = None
    floor_area_ratio: str | None = None
    building_height: str | None = None
    credit_eligibility: CreditEligibility | None = None


class PanoramaHotspot(CamelModel):
    text: str = ""
    yaw: float = 0
    pitch: float = 0


class PanoramicImage(CamelModel):
    url: str
    title: str | None = None
    hotspots: list[PanoramaHotspot] = Field(default_factory=list)


class AgentContact(CamelModel):
    id: str | None = None
    name: str
    phone: str
    email: str
    photo: str | None = None
    company: str | None = None
    is_owner: bool = False


class ListingInput(CamelModel):
    """Writable listing fields; identity and timestamps are assigned by the service."""

    type: PropertyType
    category: Category
    title: str = Field(min_length=1)
    description: str = ""
    price: float = Field(gt=0)
    currency: str = Field(default="TRY", min_length=3, max_length=3)
    location: Location
    specs: Specs
    interior_features: InteriorFeatures | None = None
    exterior_features: ExteriorFeatures | None = None
    building_features: BuildingFeatures | None = None
    property_details: PropertyDetails = Field(default_factory=PropertyDetails)
    land_details: LandDetails | None = None
    images: list[str] = Field(default_factory=list)
    virtual_tour: str | None = None
    panoramic_images: list[PanoramicImage] = Field(default_factory=list)
    is_featured: bool = False
    is_sponsored: bool = False
    status: ListingStatus = ListingStatus.ACTIVE
    agent: AgentContact | None = None
    sahibinden_link: str | None = None
    hurriyet_emlak_link: str | None = None
    emlak_jet_link: str | None = None

    @property
    def is_land(self) -> bool:
        return self.category.main is MainCategory.LAND

    @model_validator(mode="after")
    def _check_bundles(self) -> "ListingInput":
        """Land carries land details only; everything else carries the three feature bundles."""

        if self.is_land:
            if any(
                bundle is not None
                for bundle in (self.interior_features, self.exterior_features, self.building_features)
            ):
                raise ValueError("land listings do not carry interior, exterior or building features")
            if self.land_details is None:
                self.land_details = LandDetails()
            return self

        if self.land_details is not None:
            raise ValueError("land details are only valid for the 'Arsa' category")
        if self.interior_features is None:
            self.interior_features = InteriorFeatures()
        if self.exterior_features is None:
            self.exterior_features = ExteriorFeatures()
        if self.building_features is None:
            self.building_features = BuildingFeatures()
        return self


class Listing(ListingInput):
    id: str
    slug: str
    created_at: datetime
    updated_at: datetime | None = None
    view_count: int = 0

    @property
    def is_published(self) -> bool:
        return self.status is not ListingStatus.PASSIVE

    @computed_field
    @property
    def path(self) -> str:
        """Public detail page of the listing."""

        return listing_path(self.id, self.type, self.title, self.slug)


class ListingSearchResponse(CamelModel):
    items: list[Listing]
    total: int
    page: int
    limit: int
    total_pages: int
    route: str
