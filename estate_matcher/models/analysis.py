"""Investment analysis models: calculator inputs, assumptions and results."""

from dataclasses import dataclass


@dataclass(frozen=True)
class PropertyFinancialInput:
    """Price, rent and cost figures the analyzer consumes.

    Itemized outgoings left as ``None`` fall back to percentage-of-price
    estimates (see ``OutgoingRates``).
    """

    purchase_price: float
    weekly_rent: float
    annual_maintenance_cost: float
    council_rates: float | None = None
    body_corp: float | None = None
    water: float | None = None
    other: float | None = None
    property_id: str = ""


@dataclass(frozen=True)
class AnalysisAssumptions:
    """Financing assumptions for one analysis run."""

    loan_rate: float = 0.07  # Annual nominal
    loan_period_years: int = 30
    appreciation_rate: float = 0.04  # Annual, compounding
    loan_to_value_ratio: float = 0.8
    tax_refund: float = 0.0  # Annual inflow
    interest_only: bool = False


@dataclass(frozen=True)
class PropertyAnalysis:
    """Financial metrics for a property under a set of assumptions.

    Percentages (yields, ROI) are expressed as percent values, e.g.
    ``4.33`` for 4.33%. Ratios (gross rent, debt service) are plain
    fractions.
    """

    property_id: str
    purchase_price: float
    loan_amount: float
    loan_rate: float
    loan_period: int
    annual_rental_income: float
    monthly_rental_income: float
    annual_maintenance_cost: float
    annual_rates: float
    annual_insurance: float
    annual_body_corp: float
    annual_water: float
    annual_other: float
    annual_interest: float
    annual_principal: float
    appreciation_rate: float
    tax_refund: float
    interest_only: bool

    down_payment: float
    monthly_mortgage: float
    monthly_principal: float
    monthly_interest: float
    monthly_expenses: float
    total_annual_expenses: float
    monthly_net_cash_flow: float
    annual_net_cash_flow: float
    gross_rent: float
    gross_yield: float
    net_yield: float
    break_even_months: int
    break_even_years: float
    remaining_loan_year1: float
    remaining_loan_year5: float
    remaining_loan_year10: float
    projected_value_year5: float
    projected_value_year10: float
    capital_gain_year5: float
    capital_gain_year10: float
    roi_year5: float
    roi_year10: float
    debt_service_ratio: float
    investment_score: float

    @property
    def annual_mortgage(self) -> float:
        """Twelve monthly mortgage payments."""
        return self.monthly_mortgage * 12

    @property
    def annual_outgoings(self) -> float:
        """Annual non-mortgage ownership costs."""
        return self.total_annual_expenses - self.annual_mortgage


@dataclass(frozen=True)
class AmortizationRow:
    """One month of a level-payment amortization schedule."""

    period: int  # 1, 2, 3, ...
    payment: float
    principal: float
    interest: float
    balance: float  # Owed after this payment


@dataclass(frozen=True)
class ProjectionPoint:
    """Property value against outstanding debt at a year offset."""

    year: int
    value: float
    debt: float

    @property
    def equity(self) -> float:
        return self.value - self.debt


@dataclass(frozen=True)
class CashFlowPoint:
    """Income against expenses for one month of a chart series."""

    month: str
    income: float
    expenses: float

    @property
    def net(self) -> float:
        return self.income - self.expenses
