"""Normalize raw dataset rows into typed property and client records.

Source datasets spell the same field several ways (``"Price (AUD)"``,
``"price"``, ``"purchasePrice"``...). Keys are matched after lower-casing
and dropping everything but letters and digits, so ``"Car Spaces"``,
``"car_spaces"`` and ``"carSpaces"`` are the same field.
"""

from __future__ import annotations

import re
from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Mapping

from estate_matcher.exceptions import InvalidRecordError
from estate_matcher.models.base import Address
from estate_matcher.models.client import Client
from estate_matcher.models.enums import InvestmentGoal, PropertyType
from estate_matcher.models.property import Property

PROPERTY_KEYS: dict[str, tuple[str, ...]] = {
    "property_id": ("property_id", "Property ID", "id"),
    "external_id": ("external_id", "source_id", "listing_id"),
    "price": ("price", "Price (AUD)", "purchase_price", "purchasePrice"),
    "street": ("street", "address", "Full Address"),
    "suburb": ("suburb", "Suburb", "locality"),
    "state": ("state", "State"),
    "postcode": ("postcode", "Post Code", "zip"),
    "property_type": ("property_type", "Property Type", "type"),
    "bedrooms": ("bedrooms", "beds"),
    "bathrooms": ("bathrooms", "baths"),
    "car_spaces": ("car_spaces", "Car Spaces", "parking"),
    "weekly_rent": (
        "weekly_rent",
        "Estimated Rental Value (Weekly)",
        "estimatedRentalValueWeekly",
        "rent_weekly",
    ),
    "annual_maintenance": (
        "annual_maintenance",
        "Maintenance Cost (Annual)",
        "maintenanceCostAnnual",
    ),
    "median_price": ("median_price", "Suburb Median Price", "medianPrice"),
    "land_size_sqm": ("land_size_sqm", "Land Size (m²)", "landSize"),
    "building_area_sqm": ("building_area_sqm", "Building Area (m²)", "buildingArea"),
    "year_built": ("year_built", "Year Built"),
    "energy_rating": ("energy_rating", "Energy Rating"),
    "facilities": ("facilities", "Facilities"),
    "agent_name": ("agent_name", "Agent Name"),
    "agency": ("agency", "Agency"),
    "agency_contact": ("agency_contact", "Agency Contact"),
    "nearby_schools_km": ("nearby_schools_km", "Nearby Schools (km)", "nearbySchools"),
    "nearby_transport_km": ("nearby_transport_km", "Nearby Transport (km)", "nearbyTransport"),
    "created_at": ("created_at", "createdAt"),
}

CLIENT_KEYS: dict[str, tuple[str, ...]] = {
    "client_id": ("client_id", "id"),
    "name": ("name", "Client Name", "full_name"),
    "email": ("email", "Email"),
    "budget": ("budget", "Investment Budget"),
    "min_budget": ("min_budget", "minBudget"),
    "max_budget": ("max_budget", "maxBudget"),
    "deposit": ("deposit",),
    "salary": ("salary", "Annual Salary", "income"),
    "investment_goal": ("investment_goal", "Investment Goal", "goal"),
    "investment_period": ("investment_period", "Investment Period", "period_years"),
    "preferred_location": ("preferred_location", "Preferred Location", "location"),
    "status": ("status",),
    "bedrooms": ("bedrooms",),
    "notes": ("notes",),
    "created_at": ("created_at", "createdAt"),
    "updated_at": ("updated_at", "updatedAt"),
}


def normalize_key(key: str) -> str:
    """Lower-case a key and drop everything but ASCII letters and digits."""
    return re.sub(r"[^a-z0-9]", "", key.lower())


def normalize_property(
    raw: Mapping[str, Any],
    *,
    suburb: str | None = None,
    state: str | None = None,
    default_id: str | None = None,
) -> Property:
    """Build a ``Property`` from a raw dataset row.

    Parameters
    ----------
    raw : Mapping[str, Any]
        Dataset row with any supported key spelling.
    suburb : str | None
        Overrides the row's suburb (datasets pinned to one area).
    state : str | None
        Overrides the row's state.
    default_id : str | None
        Id used when the row has neither an id nor an external id.

    Returns
    -------
    Property
        Normalized record.

    Raises
    ------
    InvalidRecordError
        If the row has no id or no positive price.
    """
    row = _RowView(raw, PROPERTY_KEYS)

    external_id = row.text("external_id")
    property_id = row.text("property_id") or external_id or default_id
    if not property_id:
        raise InvalidRecordError(f"Property row has no id: {dict(raw)!r}")

    price = row.money("price")
    if price is None or price <= 0:
        raise InvalidRecordError(f"Property {property_id} has no usable price")

    nested = row.raw("street")
    if isinstance(nested, Mapping):
        address = Address(
            street=str(nested.get("street", "")),
            suburb=suburb or str(nested.get("suburb", "")),
            state=state or str(nested.get("state", "")),
            postcode=str(nested.get("postcode", "")),
            country=str(nested.get("country", "AU")),
        )
    else:
        address = Address(
            street=row.text("street"),
            suburb=suburb or row.text("suburb"),
            state=state or row.text("state"),
            postcode=row.text("postcode"),
        )

    return Property(
        property_id=property_id,
        address=address,
        property_type=parse_property_type(row.text("property_type")),
        price=price,
        bedrooms=row.integer("bedrooms"),
        bathrooms=row.integer("bathrooms"),
        car_spaces=row.integer("car_spaces"),
        weekly_rent=row.money("weekly_rent") or Decimal("0"),
        annual_maintenance=row.money("annual_maintenance") or Decimal("0"),
        median_price=row.money("median_price") or Decimal("0"),
        land_size_sqm=row.number("land_size_sqm"),
        building_area_sqm=row.number("building_area_sqm"),
        year_built=row.integer("year_built"),
        energy_rating=row.text("energy_rating"),
        facilities=row.text_list("facilities"),
        agent_name=row.text("agent_name"),
        agency=row.text("agency"),
        agency_contact=row.text("agency_contact"),
        nearby_schools_km=row.number("nearby_schools_km"),
        nearby_transport_km=row.number("nearby_transport_km"),
        external_id=external_id,
        created_at=row.timestamp("created_at"),
    )


def normalize_client(raw: Mapping[str, Any]) -> Client:
    """Build a ``Client`` from a raw or previously serialized row.

    Raises
    ------
    InvalidRecordError
        If the row has no id or no name.
    """
    row = _RowView(raw, CLIENT_KEYS)

    client_id = row.text("client_id")
    name = row.text("name")
    if not client_id or not name:
        raise InvalidRecordError(f"Client row needs an id and a name: {dict(raw)!r}")

    return Client(
        client_id=client_id,
        name=name,
        email=row.text("email"),
        budget=row.money("budget") or Decimal("0"),
        salary=row.money("salary") or Decimal("0"),
        investment_goal=parse_investment_goal(row.text("investment_goal")),
        investment_period=row.integer("investment_period"),
        preferred_location=row.text("preferred_location"),
        deposit=row.money("deposit"),
        min_budget=row.money("min_budget"),
        max_budget=row.money("max_budget"),
        status=row.text("status"),
        bedrooms=row.text("bedrooms"),
        notes=row.text("notes"),
        created_at=row.timestamp("created_at"),
        updated_at=row.timestamp("updated_at"),
    )


def parse_property_type(value: str) -> PropertyType:
    """Map free-text property types onto ``PropertyType`` (unknown -> OTHER)."""
    text = value.strip().lower()
    if not text:
        return PropertyType.OTHER
    for member in PropertyType:
        if text == member.value.lower() or text == member.name.lower():
            return member
    for member in PropertyType:
        if member.value.lower() in text:
            return member
    return PropertyType.OTHER


def parse_investment_goal(value: str) -> InvestmentGoal:
    """Map free-text goals onto ``InvestmentGoal`` (unknown -> Mixed Portfolio)."""
    text = value.strip().lower()
    for member in InvestmentGoal:
        if text == member.value.lower() or text == member.name.lower():
            return member
    if "capital" in text or "growth" in text:
        return InvestmentGoal.CAPITAL_APPRECIATION
    if "yield" in text or "rental" in text or "income" in text:
        return InvestmentGoal.RENTAL_YIELD
    return InvestmentGoal.MIXED_PORTFOLIO


class _RowView:
    """Typed accessors over a raw row using fallback key spellings."""

    def __init__(self, raw: Mapping[str, Any], keys: dict[str, tuple[str, ...]]) -> None:
        self._values = {normalize_key(str(k)): v for k, v in raw.items()}
        self._keys = keys

    def raw(self, field: str) -> Any:
        for candidate in self._keys[field]:
            value = self._values.get(normalize_key(candidate))
            if value is not None and value != "":
                return value
        return None

    def text(self, field: str) -> str:
        value = self.raw(field)
        return "" if value is None else str(value).strip()

    def text_list(self, field: str) -> list[str]:
        value = self.raw(field)
        if value is None:
            return []
        if isinstance(value, (list, tuple)):
            return [str(v).strip() for v in value if str(v).strip()]
        return [part.strip() for part in re.split(r"[,;|]", str(value)) if part.strip()]

    def money(self, field: str) -> Decimal | None:
        value = self.raw(field)
        if value is None:
            return None
        if isinstance(value, (int, float, Decimal)) and not isinstance(value, bool):
            amount = Decimal(str(value))
        else:
            cleaned = re.sub(r"[$,\s]|AUD", "", str(value))
            try:
                amount = Decimal(cleaned)
            except InvalidOperation:
                return None
        # "nan" and "inf" cells count as missing
        return amount if amount.is_finite() else None

    def number(self, field: str) -> float:
        amount = self.money(field)
        return float(amount) if amount is not None else 0.0

    def integer(self, field: str) -> int:
        return int(self.number(field))

    def timestamp(self, field: str) -> datetime | None:
        value = self.raw(field)
        if isinstance(value, datetime):
            return value
        if value is None:
            return None
        try:
            return datetime.fromisoformat(str(value))
        except ValueError:
            return None
