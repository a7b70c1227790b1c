"""Domain models for the agent CRM and investment analysis."""

from estate_matcher.models.agent import Agent
from estate_matcher.models.analysis import (
    AmortizationRow,
    AnalysisAssumptions,
    CashFlowPoint,
    ProjectionPoint,
    PropertyAnalysis,
    PropertyFinancialInput,
)
from estate_matcher.models.base import Address
from estate_matcher.models.client import Client
from estate_matcher.models.enums import (
    InvestmentGoal,
    PriorityType,
    PropertyType,
    ReportFormat,
    SortOrder,
)
from estate_matcher.models.property import Property

__all__ = [
    "Address",
    "Agent",
    "AmortizationRow",
    "AnalysisAssumptions",
    "CashFlowPoint",
    "Client",
    "InvestmentGoal",
    "PriorityType",
    "ProjectionPoint",
    "Property",
    "PropertyAnalysis",
    "PropertyFinancialInput",
    "PropertyType",
    "ReportFormat",
    "SortOrder",
]
