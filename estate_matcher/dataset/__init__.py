"""Raw dataset loading and normalization."""

from estate_matcher.dataset.loader import load_clients, load_properties
from estate_matcher.dataset.normalizer import (
    normalize_client,
    normalize_key,
    normalize_property,
    parse_investment_goal,
    parse_property_type,
)

__all__ = [
    "load_clients",
    "load_properties",
    "normalize_client",
    "normalize_key",
    "normalize_property",
    "parse_investment_goal",
    "parse_property_type",
]
