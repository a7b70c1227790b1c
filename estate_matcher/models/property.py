"""Property listing model."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal

from estate_matcher.models.base import Address
from estate_matcher.models.enums import PropertyType


@dataclass
class Property:
    """Listed property from the search dataset.

    Only ``price``, ``weekly_rent`` and ``annual_maintenance`` feed the
    investment analysis; everything else is for display.
    """

    property_id: str
    address: Address
    property_type: PropertyType
    price: Decimal
    bedrooms: int
    bathrooms: int
    car_spaces: int
    weekly_rent: Decimal  # Estimated market rent
    annual_maintenance: Decimal
    median_price: Decimal = Decimal("0")  # Suburb median
    land_size_sqm: float = 0.0
    building_area_sqm: float = 0.0
    year_built: int = 0
    energy_rating: str = ""
    facilities: list[str] = field(default_factory=list)
    agent_name: str = ""
    agency: str = ""
    agency_contact: str = ""
    nearby_schools_km: float = 0.0
    nearby_transport_km: float = 0.0
    external_id: str = ""  # Id in the source dataset
    created_at: datetime | None = None
