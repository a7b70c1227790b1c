"""Enumeration types for CRM entities."""

from enum import Enum


class InvestmentGoal(str, Enum):
    CAPITAL_APPRECIATION = "Capital Appreciation"
    RENTAL_YIELD = "Rental Yield"
    MIXED_PORTFOLIO = "Mixed Portfolio"


class PropertyType(str, Enum):
    HOUSE = "House"
    APARTMENT = "Apartment"
    UNIT = "Unit"
    TOWNHOUSE = "Townhouse"
    VILLA = "Villa"
    LAND = "Land"
    OTHER = "Other"


class PriorityType(str, Enum):
    COMPOSITE_SCORE = "composite-score"
    BREAK_EVEN = "break-even"


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"


class ReportFormat(str, Enum):
    CSV = "csv"
    HTML = "html"
    JSON = "json"
