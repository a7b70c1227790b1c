"""Derive analyzer inputs and assumptions from CRM records."""

from __future__ import annotations

from estate_matcher.config import FinancingDefaults, LendingPolicy
from estate_matcher.models.analysis import AnalysisAssumptions, PropertyFinancialInput
from estate_matcher.models.client import Client
from estate_matcher.models.enums import InvestmentGoal
from estate_matcher.models.property import Property

DEFAULT_POLICY = LendingPolicy()


def appreciation_rate_for_goal(
    goal: InvestmentGoal | str,
    policy: LendingPolicy = DEFAULT_POLICY,
) -> float:
    """Capital growth rate matching a client's stated investment goal.

    Parameters
    ----------
    goal : InvestmentGoal | str
        Investment goal or its label.
    policy : LendingPolicy
        Goal-to-rate table.

    Returns
    -------
    float
        Annual appreciation rate; unknown goals get the policy default.
    """
    label = goal.value if isinstance(goal, InvestmentGoal) else str(goal)
    return policy.goal_appreciation.get(label, policy.default_appreciation)


def loan_to_value_for_client(
    client: Client,
    price: float,
    policy: LendingPolicy = DEFAULT_POLICY,
    default_lvr: float = 0.8,
) -> float:
    """Fraction of ``price`` a client would borrow.

    A positive deposit fixes the LVR at ``1 - deposit / price`` (capped at
    the policy maximum). Without one, the price-to-salary ratio picks a
    tier from the policy.
    """
    if price <= 0:
        return default_lvr

    deposit = float(client.deposit) if client.deposit is not None else 0.0
    if deposit > 0:
        return min(policy.max_lvr, max(0.0, 1 - deposit / price))

    salary = float(client.salary)
    if salary <= 0:
        return default_lvr

    ratio = price / salary
    for max_ratio, lvr in policy.income_lvr_tiers:
        if ratio <= max_ratio:
            return lvr
    return policy.fallback_lvr


def loan_period_for_client(client: Client, policy: LendingPolicy = DEFAULT_POLICY) -> int:
    """Client's investment period clamped to the lender's term range."""
    return min(policy.max_loan_period, max(policy.min_loan_period, client.investment_period))


def assumptions_for_client(
    client: Client,
    price: float,
    defaults: FinancingDefaults | None = None,
    policy: LendingPolicy = DEFAULT_POLICY,
) -> AnalysisAssumptions:
    """Financing assumptions for ``client`` buying at ``price``.

    Parameters
    ----------
    client : Client
        Buyer profile (deposit, salary, goal, period).
    price : float
        Purchase price of the property under consideration.
    defaults : FinancingDefaults | None
        Source of loan rate, tax refund and interest-only settings.
    policy : LendingPolicy
        LVR tiers, loan term range and goal appreciation table.

    Returns
    -------
    AnalysisAssumptions
        Assumptions tailored to the client.
    """
    defaults = defaults or FinancingDefaults()
    return defaults.to_assumptions(
        loan_period_years=loan_period_for_client(client, policy),
        appreciation_rate=appreciation_rate_for_goal(client.investment_goal, policy),
        loan_to_value_ratio=loan_to_value_for_client(
            client, price, policy, default_lvr=defaults.loan_to_value_ratio
        ),
    )


def financial_input_from_property(prop: Property) -> PropertyFinancialInput:
    """Analyzer input from a listing's price, rent and maintenance estimate."""
    return PropertyFinancialInput(
        purchase_price=float(prop.price),
        weekly_rent=float(prop.weekly_rent),
        annual_maintenance_cost=float(prop.annual_maintenance),
        property_id=prop.property_id,
    )
