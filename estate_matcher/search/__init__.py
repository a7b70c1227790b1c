"""Property search: filters, batch analysis and ranking."""

from estate_matcher.search.filters import (
    PropertyFilter,
    filter_by_budget,
    filter_by_location,
    tokenize_preferred_location,
)
from estate_matcher.search.ranking import (
    PropertyWithAnalysis,
    analyze_properties,
    filter_with_priority,
    rank_properties,
)

__all__ = [
    "PropertyFilter",
    "PropertyWithAnalysis",
    "analyze_properties",
    "filter_by_budget",
    "filter_by_location",
    "filter_with_priority",
    "rank_properties",
    "tokenize_preferred_location",
]
