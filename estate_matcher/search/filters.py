"""Location, budget and attribute filters over the property catalogue."""

import re
from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable

from estate_matcher.models import Property, PropertyType

_LOCATION_SEPARATORS = re.compile(r"[,/]|\band\b|\bfrom\b")


def tokenize_preferred_location(text: str) -> list[str]:
    """Split a free-text location preference into lower-case suburb tokens.

    ``"East Suburbs, Botany and Mascot"`` gives
    ``["east suburbs", "botany", "mascot"]``.
    """
    parts = _LOCATION_SEPARATORS.split(text.lower())
    return [part.strip() for part in parts if part.strip()]


def filter_by_location(properties: Iterable[Property], preferred_location: str) -> list[Property]:
    """Properties whose suburb contains any token of ``preferred_location``.

    An empty preference, or one mentioning "anywhere", matches everything.
    """
    properties = list(properties)
    tokens = tokenize_preferred_location(preferred_location)
    if not tokens or "anywhere" in preferred_location.lower():
        return properties

    return [
        prop
        for prop in properties
        if any(token in prop.address.suburb.lower() for token in tokens)
    ]


def filter_by_budget(properties: Iterable[Property], budget: Decimal | float) -> list[Property]:
    """Properties priced at or below ``budget``."""
    limit = Decimal(str(budget))
    return [prop for prop in properties if prop.price <= limit]


@dataclass
class PropertyFilter:
    """Catalogue browsing filter; ``None`` fields are not applied."""

    max_price: Decimal | float | None = None
    min_bedrooms: int | None = None
    property_type: PropertyType | None = None

    def matches(self, prop: Property) -> bool:
        if self.max_price is not None and prop.price > Decimal(str(self.max_price)):
            return False
        if self.min_bedrooms is not None and prop.bedrooms < self.min_bedrooms:
            return False
        if self.property_type is not None and prop.property_type != self.property_type:
            return False
        return True

    def apply(self, properties: Iterable[Property]) -> list[Property]:
        return [prop for prop in properties if self.matches(prop)]
