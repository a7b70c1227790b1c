"""Client model for the agent CRM."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from estate_matcher.models.enums import InvestmentGoal


@dataclass
class Client:
    """Buyer or investor managed by an agent."""

    client_id: str
    name: str
    email: str
    budget: Decimal
    salary: Decimal  # Annual household income
    investment_goal: InvestmentGoal
    investment_period: int  # Years
    preferred_location: str
    deposit: Decimal | None = None
    min_budget: Decimal | None = None
    max_budget: Decimal | None = None
    status: str = ""
    bedrooms: str = ""
    notes: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None
