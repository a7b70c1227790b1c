#!/usr/bin/env python3
"""Run the investment analysis for a single property from the command line.

Financing flags default to the LOAN_RATE, LOAN_PERIOD_YEARS,
APPRECIATION_RATE, LOAN_TO_VALUE_RATIO and INTEREST_ONLY environment
variables.

Usage:
    python scripts/analyze_property.py --price 600000 --rent 500 --maintenance 3000
    python scripts/analyze_property.py --price 750000 --rent 620 --loan-rate 0.06 --format json
"""

import argparse
import csv
import json
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from estate_matcher.config import EstateMatcherConfig
from estate_matcher.exceptions import EstateMatcherError
from estate_matcher.finance import analyze, monthly_cash_flow_series, value_debt_projection
from estate_matcher.logging import get_logger, setup_logging
from estate_matcher.models import PropertyAnalysis, PropertyFinancialInput
from estate_matcher.reports import format_currency, format_percent, investment_rating, yield_rating
from estate_matcher.reports.serialization import to_dict

logger = get_logger(__name__)


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Analyze a property investment")
    parser.add_argument("--price", type=float, required=True, help="Purchase price")
    parser.add_argument("--rent", type=float, default=0.0, help="Weekly rent")
    parser.add_argument("--maintenance", type=float, default=0.0, help="Annual maintenance")
    parser.add_argument("--council-rates", type=float, default=None, help="Annual council rates")
    parser.add_argument("--body-corp", type=float, default=None, help="Annual body corporate")
    parser.add_argument("--water", type=float, default=None, help="Annual water")
    parser.add_argument("--other", type=float, default=None, help="Other annual costs")
    parser.add_argument("--loan-rate", type=float, default=None, help="Annual loan rate")
    parser.add_argument("--period", type=int, default=None, help="Loan period (years)")
    parser.add_argument("--appreciation", type=float, default=None, help="Annual growth rate")
    parser.add_argument("--lvr", type=float, default=None, help="Loan-to-value ratio")
    parser.add_argument("--tax-refund", type=float, default=None, help="Annual tax refund")
    parser.add_argument("--interest-only", action="store_true", help="Interest-only loan")
    parser.add_argument(
        "--format",
        choices=["text", "json", "csv"],
        default="text",
        help="Output format",
    )
    return parser.parse_args()


def build_assumptions(args: argparse.Namespace, config: EstateMatcherConfig):
    overrides = {
        "loan_rate": args.loan_rate,
        "loan_period_years": args.period,
        "appreciation_rate": args.appreciation,
        "loan_to_value_ratio": args.lvr,
        "tax_refund": args.tax_refund,
    }
    overrides = {k: v for k, v in overrides.items() if v is not None}
    if args.interest_only:
        overrides["interest_only"] = True
    return config.financing.to_assumptions(**overrides)


def print_text(analysis: PropertyAnalysis) -> None:
    """Print a human-readable summary."""
    rating = investment_rating(analysis.investment_score)
    rows = [
        ("Purchase price", format_currency(analysis.purchase_price)),
        ("Loan amount", format_currency(analysis.loan_amount)),
        ("Down payment", format_currency(analysis.down_payment)),
        ("Monthly mortgage", format_currency(analysis.monthly_mortgage)),
        ("Monthly net cash flow", format_currency(analysis.monthly_net_cash_flow)),
        (
            "Gross yield",
            f"{format_percent(analysis.gross_yield)} ({yield_rating(analysis.gross_yield)})",
        ),
        ("Net yield", format_percent(analysis.net_yield)),
        ("Break-even", f"{analysis.break_even_years:.1f} years"),
        ("Debt service ratio", f"{analysis.debt_service_ratio:.2f}"),
        ("5-year value", format_currency(analysis.projected_value_year5)),
        ("5-year ROI", format_percent(analysis.roi_year5)),
        ("10-year value", format_currency(analysis.projected_value_year10)),
        ("10-year ROI", format_percent(analysis.roi_year10)),
        ("Investment score", f"{analysis.investment_score:.0f} / 100 ({rating.label})"),
    ]
    print("=" * 60)
    print("Investment Analysis")
    print("=" * 60)
    for label, value in rows:
        print(f"{label + ':':24}{value}")

    print("\nValue vs. debt")
    for point in value_debt_projection(analysis):
        print(
            f"  Year {point.year:>2}: value {format_currency(point.value):>12}  "
            f"debt {format_currency(point.debt):>12}  equity {format_currency(point.equity):>12}"
        )


def print_csv(analysis: PropertyAnalysis) -> None:
    writer = csv.writer(sys.stdout, lineterminator="\n")
    writer.writerow(["metric", "value"])
    for key, value in to_dict(analysis).items():
        writer.writerow([key, value])


def main() -> int:
    args = parse_args()
    try:
        config = EstateMatcherConfig.from_env()
        setup_logging(config.log_level)

        financial_input = PropertyFinancialInput(
            purchase_price=args.price,
            weekly_rent=args.rent,
            annual_maintenance_cost=args.maintenance,
            council_rates=args.council_rates,
            body_corp=args.body_corp,
            water=args.water,
            other=args.other,
        )
        analysis = analyze(
            financial_input,
            build_assumptions(args, config),
            outgoing_rates=config.outgoings,
        )
    except EstateMatcherError as exc:
        logger.error("Analysis failed: %s", exc)
        return 1

    if args.format == "json":
        payload = {
            "analysis": to_dict(analysis),
            "value_debt_projection": [to_dict(p) for p in value_debt_projection(analysis)],
            "monthly_cash_flow": [to_dict(p) for p in monthly_cash_flow_series(analysis)],
        }
        print(json.dumps(payload, indent=2))
    elif args.format == "csv":
        print_csv(analysis)
    else:
        print_text(analysis)
    return 0


if __name__ == "__main__":
    sys.exit(main())
