"""Tests for chart projection series."""

from dataclasses import replace

import pytest

from estate_matcher.finance import analyze, monthly_cash_flow_series, value_debt_projection
from estate_matcher.models import AnalysisAssumptions, PropertyAnalysis, PropertyFinancialInput


class TestValueDebtProjection:
    """Tests for value_debt_projection."""

    def test_default_years(self, sample_analysis: PropertyAnalysis) -> None:
        """Test points for years 0, 1, 5 and 10."""
        points = value_debt_projection(sample_analysis)
        assert [p.year for p in points] == [0, 1, 5, 10]

    def test_year_zero(self, sample_analysis: PropertyAnalysis) -> None:
        """Test starting value and debt."""
        point = value_debt_projection(sample_analysis, years=(0,))[0]

        assert point.value == pytest.approx(600_000)
        assert point.debt == pytest.approx(480_000)
        assert point.equity == pytest.approx(120_000)

    def test_matches_analysis(self, sample_analysis: PropertyAnalysis) -> None:
        """Test year 5 and 10 agree with the analysis."""
        points = {p.year: p for p in value_debt_projection(sample_analysis)}

        assert points[5].value == pytest.approx(sample_analysis.projected_value_year5)
        assert points[5].debt == pytest.approx(sample_analysis.remaining_loan_year5)
        assert points[10].debt == pytest.approx(sample_analysis.remaining_loan_year10)

    def test_interest_only_debt_constant(self, sample_input: PropertyFinancialInput) -> None:
        """Test interest-only debt never falls."""
        analysis = analyze(sample_input, AnalysisAssumptions(interest_only=True))
        assert {p.debt for p in value_debt_projection(analysis)} == {analysis.loan_amount}

    def test_beyond_term(self, sample_analysis: PropertyAnalysis) -> None:
        """Test debt is zero past the end of the loan."""
        points = value_debt_projection(sample_analysis, years=(30, 40))
        assert [p.debt for p in points] == pytest.approx([0.0, 0.0], abs=1e-6)


class TestMonthlyCashFlowSeries:
    """Tests for monthly_cash_flow_series."""

    def test_twelve_months(self, sample_analysis: PropertyAnalysis) -> None:
        """Test a year of labelled points."""
        series = monthly_cash_flow_series(sample_analysis)

        assert len(series) == 12
        assert series[0].month == "Jan"
        assert series[-1].month == "Dec"

    def test_net_matches_analysis(self, sample_analysis: PropertyAnalysis) -> None:
        """Test each month's net equals the monthly net cash flow."""
        for point in monthly_cash_flow_series(sample_analysis):
            assert point.net == pytest.approx(sample_analysis.monthly_net_cash_flow)
            assert point.expenses == pytest.approx(sample_analysis.monthly_expenses)

    def test_includes_tax_refund(
        self,
        sample_input: PropertyFinancialInput,
        sample_assumptions: AnalysisAssumptions,
    ) -> None:
        """Test refund is spread over monthly income."""
        analysis = analyze(sample_input, replace(sample_assumptions, tax_refund=1_200))
        point = monthly_cash_flow_series(analysis, months=1)[0]

        assert point.income == pytest.approx(26_000 / 12 + 100)

    def test_labels_wrap(self, sample_analysis: PropertyAnalysis) -> None:
        """Test series longer than a year repeat month labels."""
        series = monthly_cash_flow_series(sample_analysis, months=14)
        assert series[12].month == "Jan"
