"""Chart data series derived from a finished analysis."""

from __future__ import annotations

from estate_matcher.finance.amortization import remaining_balance
from estate_matcher.models.analysis import CashFlowPoint, ProjectionPoint, PropertyAnalysis

MONTH_LABELS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def value_debt_projection(
    analysis: PropertyAnalysis,
    years: tuple[int, ...] = (0, 1, 5, 10),
) -> list[ProjectionPoint]:
    """Projected property value against outstanding loan for each year.

    Parameters
    ----------
    analysis : PropertyAnalysis
        Source analysis (price, loan, rate, term, appreciation).
    years : tuple[int, ...]
        Year offsets to project.

    Returns
    -------
    list[ProjectionPoint]
        One point per requested year, in the given order.
    """
    monthly_rate = analysis.loan_rate / 12
    number_of_payments = analysis.loan_period * 12

    points = []
    for year in years:
        value = analysis.purchase_price * (1 + analysis.appreciation_rate) ** year
        if analysis.interest_only:
            debt = analysis.loan_amount
        else:
            payments_made = min(year * 12, number_of_payments)
            debt = remaining_balance(
                analysis.loan_amount, monthly_rate, number_of_payments, payments_made
            )
        points.append(ProjectionPoint(year=year, value=value, debt=debt))
    return points


def monthly_cash_flow_series(analysis: PropertyAnalysis, months: int = 12) -> list[CashFlowPoint]:
    """Monthly rental income against total monthly expenses.

    The analysis is a steady-state projection, so every month carries the
    same figures; the series exists for bar-chart rendering.
    """
    income = analysis.monthly_rental_income + analysis.tax_refund / 12
    return [
        CashFlowPoint(
            month=MONTH_LABELS[i % 12],
            income=income,
            expenses=analysis.monthly_expenses,
        )
        for i in range(months)
    ]
