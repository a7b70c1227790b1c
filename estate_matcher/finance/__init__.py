"""Investment analysis: amortization, the analyzer and chart projections."""

from estate_matcher.finance.amortization import (
    amortization_schedule,
    monthly_payment,
    remaining_balance,
)
from estate_matcher.finance.analyzer import (
    SENTINEL,
    ResolvedOutgoings,
    analyze,
    composite_score,
)
from estate_matcher.finance.assumptions import (
    appreciation_rate_for_goal,
    assumptions_for_client,
    financial_input_from_property,
    loan_period_for_client,
    loan_to_value_for_client,
)
from estate_matcher.finance.projections import monthly_cash_flow_series, value_debt_projection

__all__ = [
    "SENTINEL",
    "ResolvedOutgoings",
    "amortization_schedule",
    "analyze",
    "appreciation_rate_for_goal",
    "assumptions_for_client",
    "composite_score",
    "financial_input_from_property",
    "loan_period_for_client",
    "loan_to_value_for_client",
    "monthly_cash_flow_series",
    "monthly_payment",
    "remaining_balance",
    "value_debt_projection",
]
