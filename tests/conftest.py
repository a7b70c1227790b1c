"""Pytest configuration and fixtures."""

from decimal import Decimal

import pytest

from estate_matcher.finance import analyze
from estate_matcher.models import (
    Address,
    AnalysisAssumptions,
    Client,
    InvestmentGoal,
    Property,
    PropertyAnalysis,
    PropertyFinancialInput,
    PropertyType,
)


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def sample_input() -> PropertyFinancialInput:
    """600k property renting at $500/week with $3,000 maintenance."""
    return PropertyFinancialInput(
        purchase_price=600_000,
        weekly_rent=500,
        annual_maintenance_cost=3_000,
        property_id="prop-001",
    )


@pytest.fixture
def sample_assumptions() -> AnalysisAssumptions:
    """6% over 30 years, 4% growth, 80% LVR."""
    return AnalysisAssumptions(
        loan_rate=0.06,
        loan_period_years=30,
        appreciation_rate=0.04,
        loan_to_value_ratio=0.8,
    )


@pytest.fixture
def sample_analysis(
    sample_input: PropertyFinancialInput,
    sample_assumptions: AnalysisAssumptions,
) -> PropertyAnalysis:
    """Analysis of the sample input under the sample assumptions."""
    return analyze(sample_input, sample_assumptions)


@pytest.fixture
def sample_property() -> Property:
    """Sample listing matching ``sample_input``."""
    return Property(
        property_id="prop-001",
        address=Address(
            street="12 Harbour Street",
            suburb="Mascot",
            state="NSW",
            postcode="2020",
        ),
        property_type=PropertyType.APARTMENT,
        price=Decimal("600000"),
        bedrooms=2,
        bathrooms=1,
        car_spaces=1,
        weekly_rent=Decimal("500"),
        annual_maintenance=Decimal("3000"),
        median_price=Decimal("650000"),
        year_built=2012,
        energy_rating="6 Star",
    )


@pytest.fixture
def sample_client() -> Client:
    """Investor with a 100k deposit and 170k household income."""
    return Client(
        client_id="client-001",
        name="Minh Nguyen",
        email="minh@example.com",
        budget=Decimal("700000"),
        salary=Decimal("170000"),
        investment_goal=InvestmentGoal.RENTAL_YIELD,
        investment_period=10,
        preferred_location="Botany, Mascot",
        deposit=Decimal("100000"),
    )


@pytest.fixture
def make_property():
    """Factory for minimal listings used by search and store tests."""

    def _make(
        property_id: str,
        price: int,
        weekly_rent: int,
        suburb: str = "Mascot",
        bedrooms: int = 2,
        property_type: PropertyType = PropertyType.APARTMENT,
    ) -> Property:
        return Property(
            property_id=property_id,
            address=Address(street="1 Test Street", suburb=suburb, state="NSW", postcode="2000"),
            property_type=property_type,
            price=Decimal(price),
            bedrooms=bedrooms,
            bathrooms=1,
            car_spaces=1,
            weekly_rent=Decimal(weekly_rent),
            annual_maintenance=Decimal("2000"),
        )

    return _make
