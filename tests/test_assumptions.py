"""Tests for client-derived financing assumptions."""

from dataclasses import replace
from decimal import Decimal

import pytest

from estate_matcher.config import FinancingDefaults, LendingPolicy
from estate_matcher.finance import (
    appreciation_rate_for_goal,
    assumptions_for_client,
    financial_input_from_property,
    loan_period_for_client,
    loan_to_value_for_client,
)
from estate_matcher.models import Client, InvestmentGoal, Property


class TestAppreciationRate:
    """Tests for appreciation_rate_for_goal."""

    def test_capital_appreciation(self) -> None:
        """Test growth-focused goal."""
        assert appreciation_rate_for_goal(InvestmentGoal.CAPITAL_APPRECIATION) == 0.05

    def test_rental_yield(self) -> None:
        """Test yield-focused goal."""
        assert appreciation_rate_for_goal(InvestmentGoal.RENTAL_YIELD) == 0.035

    def test_mixed_uses_default(self) -> None:
        """Test other goals get the default rate."""
        assert appreciation_rate_for_goal(InvestmentGoal.MIXED_PORTFOLIO) == 0.04
        assert appreciation_rate_for_goal("Something Else") == 0.04

    def test_label_lookup(self) -> None:
        """Test plain labels work like enum members."""
        assert appreciation_rate_for_goal("Capital Appreciation") == 0.05

    def test_custom_policy(self) -> None:
        """Test policy table overrides the built-in rates."""
        policy = LendingPolicy(goal_appreciation={"Rental Yield": 0.02}, default_appreciation=0.03)

        assert appreciation_rate_for_goal(InvestmentGoal.RENTAL_YIELD, policy) == 0.02
        assert appreciation_rate_for_goal(InvestmentGoal.CAPITAL_APPRECIATION, policy) == 0.03


class TestLoanToValue:
    """Tests for loan_to_value_for_client."""

    def test_deposit_sets_lvr(self, sample_client: Client) -> None:
        """Test deposit of 100k on 700k borrows the rest."""
        assert loan_to_value_for_client(sample_client, 700_000) == pytest.approx(6 / 7)

    def test_small_deposit_capped(self, sample_client: Client) -> None:
        """Test LVR never exceeds the policy maximum."""
        client = replace(sample_client, deposit=Decimal("1000"))
        assert loan_to_value_for_client(client, 1_000_000) == 0.95

    def test_deposit_above_price(self, sample_client: Client) -> None:
        """Test a deposit covering the price means no loan."""
        client = replace(sample_client, deposit=Decimal("900000"))
        assert loan_to_value_for_client(client, 700_000) == 0.0

    @pytest.mark.parametrize(
        ("price", "expected"),
        [
            (350_000, 0.95),
            (400_000, 0.95),
            (500_000, 0.90),
            (700_000, 0.80),
            (900_000, 0.70),
        ],
    )
    def test_income_tiers(self, sample_client: Client, price: float, expected: float) -> None:
        """Test price-to-salary ratio picks the LVR without a deposit."""
        client = replace(sample_client, deposit=None, salary=Decimal("100000"))
        assert loan_to_value_for_client(client, price) == expected

    def test_no_salary_uses_default(self, sample_client: Client) -> None:
        """Test missing salary and deposit fall back to the default."""
        client = replace(sample_client, deposit=None, salary=Decimal("0"))
        assert loan_to_value_for_client(client, 500_000) == 0.8
        assert loan_to_value_for_client(client, 500_000, default_lvr=0.7) == 0.7

    def test_non_positive_price(self, sample_client: Client) -> None:
        """Test zero price returns the default."""
        assert loan_to_value_for_client(sample_client, 0) == 0.8


class TestLoanPeriod:
    """Tests for loan_period_for_client."""

    @pytest.mark.parametrize(("period", "expected"), [(5, 25), (10, 25), (28, 28), (40, 30)])
    def test_clamped(self, sample_client: Client, period: int, expected: int) -> None:
        """Test investment period is clamped to 25-30 years."""
        client = replace(sample_client, investment_period=period)
        assert loan_period_for_client(client) == expected


class TestAssumptionsForClient:
    """Tests for assumptions_for_client."""

    def test_derived_fields(self, sample_client: Client) -> None:
        """Test LVR, term and growth come from the client."""
        assumptions = assumptions_for_client(sample_client, 700_000)

        assert assumptions.loan_to_value_ratio == pytest.approx(6 / 7)
        assert assumptions.loan_period_years == 25
        assert assumptions.appreciation_rate == 0.035
        assert assumptions.loan_rate == 0.07

    def test_defaults_carry_through(self, sample_client: Client) -> None:
        """Test rate, refund and interest-only come from the defaults."""
        defaults = FinancingDefaults(loan_rate=0.055, tax_refund=4_000, interest_only=True)
        assumptions = assumptions_for_client(sample_client, 700_000, defaults)

        assert assumptions.loan_rate == 0.055
        assert assumptions.tax_refund == 4_000
        assert assumptions.interest_only is True


class TestFinancialInputFromProperty:
    """Tests for financial_input_from_property."""

    def test_converts_money(self, sample_property: Property) -> None:
        """Test Decimal listing figures become floats."""
        financial_input = financial_input_from_property(sample_property)

        assert financial_input.purchase_price == 600_000.0
        assert financial_input.weekly_rent == 500.0
        assert financial_input.annual_maintenance_cost == 3_000.0
        assert financial_input.property_id == "prop-001"
        assert financial_input.council_rates is None
