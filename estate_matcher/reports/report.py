"""Client-facing investment reports in CSV and HTML."""

from __future__ import annotations

import csv
import io
from dataclasses import dataclass
from html import escape

from estate_matcher.models.analysis import PropertyAnalysis
from estate_matcher.models.client import Client
from estate_matcher.models.property import Property
from estate_matcher.reports.formatting import (
    format_currency,
    format_percent,
    investment_rating,
    yield_rating,
)

REPORT_TITLE = "Investment Property Analysis Report"
DISCLAIMER = (
    "This report contains projections based on current market data and "
    "assumptions. Past performance does not guarantee future results. Please "
    "consult with a qualified financial advisor before making investment decisions."
)


@dataclass
class ReportData:
    """Everything a report renders. ``generated_date`` is display text."""

    client: Client
    property: Property
    analysis: PropertyAnalysis
    generated_date: str


def generate_csv_report(data: ReportData) -> str:
    """Render the report as two-column CSV sections.

    Parameters
    ----------
    data : ReportData
        Client, property, analysis and generation date.

    Returns
    -------
    str
        CSV text, newline separated.
    """
    client, prop, analysis = data.client, data.property, data.analysis

    rows: list[list[object]] = [
        [REPORT_TITLE],
        [f"Generated: {data.generated_date}"],
        [],
        ["CLIENT INFORMATION"],
        ["Client Name", client.name],
        ["Client Email", client.email],
        ["Annual Salary", client.salary],
        ["Investment Budget", client.budget],
        ["Investment Goal", client.investment_goal.value],
        [],
        ["PROPERTY DETAILS"],
        ["Address", prop.address.street],
        ["Suburb", prop.address.suburb],
        ["State", prop.address.state],
        ["Postcode", prop.address.postcode],
        ["Property Type", prop.property_type.value],
        ["Year Built", prop.year_built],
        ["Bedrooms", prop.bedrooms],
        ["Bathrooms", prop.bathrooms],
        ["Car Spaces", prop.car_spaces],
        [],
        ["FINANCIAL METRICS"],
        ["Purchase Price", _num(analysis.purchase_price)],
        ["Weekly Rental Income", prop.weekly_rent],
        ["Annual Rental Income", _num(analysis.annual_rental_income)],
        ["Gross Yield %", _num(analysis.gross_yield)],
        ["Net Yield %", _num(analysis.net_yield)],
        ["Loan Amount", _num(analysis.loan_amount)],
        ["Down Payment", _num(analysis.down_payment)],
        ["Monthly Mortgage", _num(analysis.monthly_mortgage)],
        ["Monthly Net Cash Flow", _num(analysis.monthly_net_cash_flow)],
        ["Annual Net Cash Flow", _num(analysis.annual_net_cash_flow)],
        ["Debt Service Ratio", _num(analysis.debt_service_ratio)],
        ["Break-even (years)", _num(analysis.break_even_years)],
        [],
        ["EXPENSE BREAKDOWN"],
        ["Mortgage (Annual)", _num(analysis.annual_mortgage)],
        ["Maintenance", _num(analysis.annual_maintenance_cost)],
        ["Rates", _num(analysis.annual_rates)],
        ["Insurance", _num(analysis.annual_insurance)],
        ["Body Corp", _num(analysis.annual_body_corp)],
        ["Water", _num(analysis.annual_water)],
        ["Other", _num(analysis.annual_other)],
        ["Total Annual Expenses", _num(analysis.total_annual_expenses)],
        [],
        ["PROJECTIONS"],
        ["5-Year Value", _num(analysis.projected_value_year5)],
        ["5-Year Capital Gain", _num(analysis.capital_gain_year5)],
        ["5-Year ROI %", _num(analysis.roi_year5)],
        ["10-Year Value", _num(analysis.projected_value_year10)],
        ["10-Year Capital Gain", _num(analysis.capital_gain_year10)],
        ["10-Year ROI %", _num(analysis.roi_year10)],
        [],
        ["INVESTMENT SCORE"],
        ["Score", _num(analysis.investment_score)],
        ["Rating", investment_rating(analysis.investment_score).label],
    ]

    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerows(rows)
    return buffer.getvalue()


def generate_html_report(data: ReportData) -> str:
    """Render the report as a standalone HTML document.

    All record text is HTML-escaped.
    """
    client, prop, analysis = data.client, data.property, data.analysis
    rating = investment_rating(analysis.investment_score)

    client_section = _section(
        "Client Information",
        _table(
            [
                ("Client Name", client.name),
                ("Email", client.email),
                ("Annual Salary", format_currency(float(client.salary))),
                ("Investment Budget", format_currency(float(client.budget))),
                ("Investment Goal", client.investment_goal.value),
            ]
        ),
    )

    property_section = _section(
        "Property Details",
        f"<h3>{escape(prop.address.street)}</h3>\n"
        f"<p>{escape(prop.address.suburb)}, {escape(prop.address.state)} "
        f"{escape(prop.address.postcode)}</p>\n"
        + _table(
            [
                ("Property Type", prop.property_type.value),
                ("Year Built", str(prop.year_built)),
                ("Energy Rating", prop.energy_rating),
                ("Bedrooms", str(prop.bedrooms)),
                ("Bathrooms", str(prop.bathrooms)),
                ("Car Spaces", str(prop.car_spaces)),
            ]
        ),
    )

    key_metrics = _section(
        "Key Financial Metrics",
        _table(
            [
                ("Purchase Price", format_currency(analysis.purchase_price)),
                (
                    "Gross Yield",
                    f"{format_percent(analysis.gross_yield)} ({yield_rating(analysis.gross_yield)})",
                ),
                ("5-Year ROI", format_percent(analysis.roi_year5)),
                ("10-Year ROI", format_percent(analysis.roi_year10)),
                ("Investment Score", f"{analysis.investment_score:.0f} / 100 ({rating.label})"),
            ]
        ),
    )

    lvr_label = f"Loan Amount ({analysis.loan_amount / analysis.purchase_price:.0%} LVR)"
    cash_flow_section = _section(
        "Investment Analysis",
        _table(
            [
                ("Weekly Rental Income", format_currency(float(prop.weekly_rent))),
                ("Annual Rental Income", format_currency(analysis.annual_rental_income)),
                (lvr_label, format_currency(analysis.loan_amount)),
                ("Down Payment", format_currency(analysis.down_payment)),
                ("Monthly Mortgage", format_currency(analysis.monthly_mortgage)),
                ("Monthly Net Cash Flow", format_currency(analysis.monthly_net_cash_flow)),
                ("Annual Net Cash Flow", format_currency(analysis.annual_net_cash_flow)),
                ("Debt Service Ratio", format_percent(analysis.debt_service_ratio * 100)),
                ("Break-even", f"{analysis.break_even_years:.1f} years"),
            ]
        ),
    )

    expense_section = _section(
        "Annual Expense Breakdown",
        _table(
            [
                ("Mortgage Payments", format_currency(analysis.annual_mortgage)),
                ("Maintenance & Repairs", format_currency(analysis.annual_maintenance_cost)),
                ("Council Rates", format_currency(analysis.annual_rates)),
                ("Insurance", format_currency(analysis.annual_insurance)),
                ("Body Corporate", format_currency(analysis.annual_body_corp)),
                ("Water", format_currency(analysis.annual_water)),
                ("Other", format_currency(analysis.annual_other)),
                ("Total Annual Expenses", format_currency(analysis.total_annual_expenses)),
            ]
        ),
    )

    projection_rows = "\n".join(
        f"<tr><td>{years} Years</td><td>{format_currency(value)}</td>"
        f"<td>{format_currency(gain)}</td><td>{format_percent(roi)}</td></tr>"
        for years, value, gain, roi in (
            (5, analysis.projected_value_year5, analysis.capital_gain_year5, analysis.roi_year5),
            (10, analysis.projected_value_year10, analysis.capital_gain_year10, analysis.roi_year10),
        )
    )
    projection_section = _section(
        "Long-term Value Projections",
        "<table>\n<thead><tr><th>Period</th><th>Projected Value</th>"
        "<th>Capital Gain</th><th>Total ROI</th></tr></thead>\n"
        f"<tbody>\n{projection_rows}\n</tbody>\n</table>",
    )

    body = "\n".join(
        [
            client_section,
            property_section,
            key_metrics,
            cash_flow_section,
            expense_section,
            projection_section,
        ]
    )
    return (
        "<!DOCTYPE html>\n"
        '<html>\n<head>\n<meta charset="UTF-8">\n'
        f"<title>{REPORT_TITLE}</title>\n"
        "</head>\n<body>\n"
        f"<header><h1>{REPORT_TITLE}</h1>"
        f"<p>Generated on {escape(data.generated_date)}</p></header>\n"
        f"{body}\n"
        f"<footer><p>{DISCLAIMER}</p></footer>\n"
        "</body>\n</html>\n"
    )


def _num(value: float) -> str:
    """Two-decimal number for CSV cells."""
    return f"{value:.2f}"


def _section(title: str, content: str) -> str:
    return f'<section>\n<h2>{escape(title)}</h2>\n{content}\n</section>'


def _table(rows: list[tuple[str, str]]) -> str:
    cells = "\n".join(
        f"<tr><td>{escape(label)}</td><td>{escape(value)}</td></tr>"
        for label, value in rows
    )
    return f"<table>\n{cells}\n</table>"
