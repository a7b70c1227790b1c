"""Investment analysis calculator.

Turns a property's price, rent and running costs plus a set of financing
assumptions into a ``PropertyAnalysis``: loan split, mortgage payment,
cash flow, yields, break-even period, 5/10 year projections and ROI, and
a composite 0-100 investment score.

Degenerate ratios never raise:

- zero down payment gives a net yield and ROI of 0;
- zero rental income gives a debt-service ratio of 999 and a break-even
  period of 999 years.

Break-even uses the shortfall policy: if rent (plus any tax refund)
covers the annual outgoings and mortgage the period is 0, otherwise it is
the number of months of rent needed to cover the annual shortfall.

The score is additive: 50 points plus tiered bonuses for gross yield,
5-year ROI, debt-service ratio and monthly cash flow, clamped to 0-100.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from estate_matcher.config import OutgoingRates
from estate_matcher.exceptions import InvalidInputError
from estate_matcher.finance.amortization import monthly_payment, remaining_balance
from estate_matcher.models.analysis import (
    AnalysisAssumptions,
    PropertyAnalysis,
    PropertyFinancialInput,
)

logger = logging.getLogger(__name__)

# Stand-in for "never" where a ratio would divide by zero rental income
SENTINEL = 999

WEEKS_PER_YEAR = 52
MONTHS_PER_YEAR = 12
PROJECTION_HORIZON_YEARS = 10

# (threshold, points), first match wins
GROSS_YIELD_TIERS = ((5.0, 15), (4.0, 10), (3.0, 5))
ROI_YEAR5_TIERS = ((25.0, 15), (15.0, 10), (10.0, 5))
DEBT_SERVICE_TIERS = ((0.5, 10), (0.6, 5))
CASH_FLOW_TIERS = ((0.0, 10), (-200.0, 5))
BASE_SCORE = 50

DEFAULT_OUTGOING_RATES = OutgoingRates()


@dataclass(frozen=True)
class ResolvedOutgoings:
    """Annual ownership costs after applying percentage-of-price fallbacks."""

    maintenance: float
    council_rates: float
    insurance: float
    body_corp: float
    water: float
    other: float

    @classmethod
    def resolve(
        cls,
        financial_input: PropertyFinancialInput,
        rates: OutgoingRates = DEFAULT_OUTGOING_RATES,
    ) -> "ResolvedOutgoings":
        """Use itemized values where supplied, else estimate from price.

        Insurance is always estimated from price.
        """
        price = financial_input.purchase_price
        return cls(
            maintenance=financial_input.annual_maintenance_cost,
            council_rates=_override_or(financial_input.council_rates, price * rates.council_rates),
            insurance=price * rates.insurance,
            body_corp=_override_or(financial_input.body_corp, price * rates.body_corp),
            water=_override_or(financial_input.water, 0.0),
            other=_override_or(financial_input.other, 0.0),
        )

    @property
    def total(self) -> float:
        return (
            self.maintenance
            + self.council_rates
            + self.insurance
            + self.body_corp
            + self.water
            + self.other
        )


def analyze(
    financial_input: PropertyFinancialInput,
    assumptions: AnalysisAssumptions | None = None,
    *,
    outgoing_rates: OutgoingRates | None = None,
) -> PropertyAnalysis:
    """Compute the investment metrics for one property.

    Parameters
    ----------
    financial_input : PropertyFinancialInput
        Price, weekly rent, maintenance and optional itemized outgoings.
    assumptions : AnalysisAssumptions | None
        Financing assumptions. Defaults to ``AnalysisAssumptions()``.
    outgoing_rates : OutgoingRates | None
        Percentage-of-price estimates for outgoings not itemized.

    Returns
    -------
    PropertyAnalysis
        A new, immutable analysis record.

    Raises
    ------
    InvalidInputError
        If an input is negative, non-finite or out of range.
    """
    assumptions = assumptions or AnalysisAssumptions()
    rates = outgoing_rates or DEFAULT_OUTGOING_RATES
    _validate(financial_input, assumptions)

    price = financial_input.purchase_price
    loan_rate = assumptions.loan_rate
    tax_refund = assumptions.tax_refund

    # Financing split
    loan_amount = price * assumptions.loan_to_value_ratio
    down_payment = price - loan_amount

    outgoings = ResolvedOutgoings.resolve(financial_input, rates)

    # Mortgage
    monthly_rate = loan_rate / MONTHS_PER_YEAR
    number_of_payments = assumptions.loan_period_years * MONTHS_PER_YEAR
    monthly_interest = loan_amount * loan_rate / MONTHS_PER_YEAR
    if assumptions.interest_only:
        monthly_mortgage = monthly_interest
    else:
        monthly_mortgage = monthly_payment(loan_amount, monthly_rate, number_of_payments)
    # First-period split, not a full schedule
    monthly_principal = max(0.0, monthly_mortgage - monthly_interest)

    # Cash flow
    annual_rental_income = financial_input.weekly_rent * WEEKS_PER_YEAR
    monthly_rental_income = annual_rental_income / MONTHS_PER_YEAR
    monthly_expenses = outgoings.total / MONTHS_PER_YEAR + monthly_mortgage
    monthly_net_cash_flow = (
        monthly_rental_income + tax_refund / MONTHS_PER_YEAR - monthly_expenses
    )
    annual_net_cash_flow = monthly_net_cash_flow * MONTHS_PER_YEAR

    # Yields
    gross_rent = annual_rental_income / price
    gross_yield = gross_rent * 100
    net_yield = _percent_of(annual_net_cash_flow, down_payment)

    total_annual_expenses = outgoings.total + monthly_mortgage * MONTHS_PER_YEAR
    break_even_months = _break_even_months(
        annual_rental_income, tax_refund, total_annual_expenses
    )
    break_even_years = break_even_months / MONTHS_PER_YEAR

    # Appreciation
    projected_value_year5 = price * (1 + assumptions.appreciation_rate) ** 5
    projected_value_year10 = price * (1 + assumptions.appreciation_rate) ** PROJECTION_HORIZON_YEARS
    capital_gain_year5 = projected_value_year5 - price
    capital_gain_year10 = projected_value_year10 - price

    # ROI
    remaining_year1 = _remaining_loan(loan_amount, monthly_rate, number_of_payments, 1, assumptions)
    remaining_year5 = _remaining_loan(loan_amount, monthly_rate, number_of_payments, 5, assumptions)
    remaining_year10 = _remaining_loan(loan_amount, monthly_rate, number_of_payments, 10, assumptions)
    total_return_year5 = capital_gain_year5 + annual_net_cash_flow * 5 + (loan_amount - remaining_year5)
    total_return_year10 = capital_gain_year10 + annual_net_cash_flow * 10 + (loan_amount - remaining_year10)
    roi_year5 = _percent_of(total_return_year5, down_payment)
    roi_year10 = _percent_of(total_return_year10, down_payment)

    if annual_rental_income > 0:
        debt_service_ratio = monthly_mortgage * MONTHS_PER_YEAR / annual_rental_income
    else:
        logger.debug("No rental income for %r, using sentinel ratios", financial_input.property_id)
        debt_service_ratio = float(SENTINEL)

    investment_score = composite_score(
        gross_yield=gross_yield,
        roi_year5=roi_year5,
        debt_service_ratio=debt_service_ratio,
        monthly_net_cash_flow=monthly_net_cash_flow,
    )

    logger.debug(
        "Analyzed %r: price=%.0f gross_yield=%.2f roi5=%.2f score=%.0f",
        financial_input.property_id,
        price,
        gross_yield,
        roi_year5,
        investment_score,
    )

    return PropertyAnalysis(
        property_id=financial_input.property_id,
        purchase_price=price,
        loan_amount=loan_amount,
        loan_rate=loan_rate,
        loan_period=assumptions.loan_period_years,
        annual_rental_income=annual_rental_income,
        monthly_rental_income=monthly_rental_income,
        annual_maintenance_cost=outgoings.maintenance,
        annual_rates=outgoings.council_rates,
        annual_insurance=outgoings.insurance,
        annual_body_corp=outgoings.body_corp,
        annual_water=outgoings.water,
        annual_other=outgoings.other,
        annual_interest=monthly_interest * MONTHS_PER_YEAR,
        annual_principal=monthly_principal * MONTHS_PER_YEAR,
        appreciation_rate=assumptions.appreciation_rate,
        tax_refund=tax_refund,
        interest_only=assumptions.interest_only,
        down_payment=down_payment,
        monthly_mortgage=monthly_mortgage,
        monthly_principal=monthly_principal,
        monthly_interest=monthly_interest,
        monthly_expenses=monthly_expenses,
        total_annual_expenses=total_annual_expenses,
        monthly_net_cash_flow=monthly_net_cash_flow,
        annual_net_cash_flow=annual_net_cash_flow,
        gross_rent=gross_rent,
        gross_yield=gross_yield,
        net_yield=net_yield,
        break_even_months=break_even_months,
        break_even_years=break_even_years,
        remaining_loan_year1=remaining_year1,
        remaining_loan_year5=remaining_year5,
        remaining_loan_year10=remaining_year10,
        projected_value_year5=projected_value_year5,
        projected_value_year10=projected_value_year10,
        capital_gain_year5=capital_gain_year5,
        capital_gain_year10=capital_gain_year10,
        roi_year5=roi_year5,
        roi_year10=roi_year10,
        debt_service_ratio=debt_service_ratio,
        investment_score=investment_score,
    )


def composite_score(
    gross_yield: float,
    roi_year5: float,
    debt_service_ratio: float,
    monthly_net_cash_flow: float,
) -> float:
    """Additive 0-100 score from yield, ROI, debt service and cash flow.

    Parameters
    ----------
    gross_yield : float
        Gross yield in percent.
    roi_year5 : float
        Five-year ROI in percent.
    debt_service_ratio : float
        Annual mortgage / annual rent.
    monthly_net_cash_flow : float
        Signed monthly cash flow.

    Returns
    -------
    float
        Score clamped to [0, 100].
    """
    score = BASE_SCORE
    score += _tier_above(gross_yield, GROSS_YIELD_TIERS)
    score += _tier_above(roi_year5, ROI_YEAR5_TIERS)
    score += _tier_below(debt_service_ratio, DEBT_SERVICE_TIERS)
    score += _tier_above(monthly_net_cash_flow, CASH_FLOW_TIERS)
    return float(min(100, max(0, score)))


def _tier_above(value: float, tiers: tuple[tuple[float, int], ...]) -> int:
    for threshold, points in tiers:
        if value > threshold:
            return points
    return 0


def _tier_below(value: float, tiers: tuple[tuple[float, int], ...]) -> int:
    for threshold, points in tiers:
        if value < threshold:
            return points
    return 0


def _break_even_months(
    annual_rental_income: float,
    tax_refund: float,
    total_annual_expenses: float,
) -> int:
    """Months of rent needed to cover the annual shortfall."""
    if annual_rental_income <= 0:
        return SENTINEL * MONTHS_PER_YEAR

    shortfall = total_annual_expenses - annual_rental_income - tax_refund
    if shortfall <= 0:
        return 0
    return math.ceil(shortfall / (annual_rental_income / MONTHS_PER_YEAR))


def _remaining_loan(
    loan_amount: float,
    monthly_rate: float,
    number_of_payments: int,
    years: int,
    assumptions: AnalysisAssumptions,
) -> float:
    """Balance owed ``years`` into the loan."""
    if assumptions.interest_only:
        return loan_amount
    payments_made = min(years * MONTHS_PER_YEAR, number_of_payments)
    return remaining_balance(loan_amount, monthly_rate, number_of_payments, payments_made)


def _percent_of(amount: float, base: float) -> float:
    """``amount / base`` in percent, 0 when the base is zero."""
    if base <= 0:
        return 0.0
    return amount / base * 100


def _override_or(value: float | None, fallback: float) -> float:
    return fallback if value is None else value


def _validate(financial_input: PropertyFinancialInput, assumptions: AnalysisAssumptions) -> None:
    """Fail fast on inputs that would produce nonsense or NaN."""
    price = financial_input.purchase_price
    if not _is_number(price) or price <= 0:
        raise InvalidInputError(f"purchase_price must be a finite positive amount, got {price}")

    non_negative = {
        "weekly_rent": financial_input.weekly_rent,
        "annual_maintenance_cost": financial_input.annual_maintenance_cost,
        "council_rates": financial_input.council_rates,
        "body_corp": financial_input.body_corp,
        "water": financial_input.water,
        "other": financial_input.other,
        "loan_rate": assumptions.loan_rate,
        "tax_refund": assumptions.tax_refund,
    }
    for name, value in non_negative.items():
        if value is None:
            continue
        if not _is_number(value) or value < 0:
            raise InvalidInputError(f"{name} must be finite and >= 0, got {value}")

    period = assumptions.loan_period_years
    if not isinstance(period, int) or isinstance(period, bool) or period <= 0:
        raise InvalidInputError(
            f"loan_period_years must be a positive integer, got {period!r}"
        )

    lvr = assumptions.loan_to_value_ratio
    if not _is_number(lvr) or not 0 <= lvr <= 1:
        raise InvalidInputError(f"loan_to_value_ratio must be between 0 and 1, got {lvr}")

    growth = assumptions.appreciation_rate
    if not _is_number(growth) or growth <= -1:
        raise InvalidInputError(f"appreciation_rate must be finite and > -1, got {growth}")
    try:
        horizon_value = price * (1 + growth) ** PROJECTION_HORIZON_YEARS
    except OverflowError:
        horizon_value = math.inf
    if not math.isfinite(horizon_value):
        raise InvalidInputError(
            f"appreciation_rate {growth} overflows the {PROJECTION_HORIZON_YEARS}-year projection"
        )


def _is_number(value: object) -> bool:
    return (
        isinstance(value, (int, float))
        and not isinstance(value, bool)
        and math.isfinite(value)
    )
