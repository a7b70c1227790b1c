#!/usr/bin/env python3
"""Generate a sample CRM dataset with analyses and reports.

Writes properties.json, clients.json and analyses.json to the output
folder, plus one HTML report for each client's best listing.

Usage:
    python scripts/generate_sample_data.py
    python scripts/generate_sample_data.py --clients 50 --properties 500 --seed 7
"""

import argparse
import sys
from datetime import date
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from estate_matcher.config import EstateMatcherConfig
from estate_matcher.logging import get_logger, setup_logging
from estate_matcher.models import PriorityType, ReportFormat
from estate_matcher.reports import ReportData, ReportFileSink
from estate_matcher.scenarios import ClientShortlistScenario

logger = get_logger(__name__)


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate a sample CRM dataset")
    parser.add_argument("--clients", type=int, default=10, help="Number of clients")
    parser.add_argument("--properties", type=int, default=100, help="Number of properties")
    parser.add_argument("--shortlist", type=int, default=5, help="Listings kept per client")
    parser.add_argument("--seed", type=int, default=None, help="Random seed (default: SEED or 42)")
    parser.add_argument(
        "--priority",
        choices=[p.value for p in PriorityType],
        default=PriorityType.COMPOSITE_SCORE.value,
        help="Shortlist ranking",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=None,
        help="Output folder (default: REPORTS_DIR)",
    )
    parser.add_argument("--no-reports", action="store_true", help="Skip HTML reports")
    return parser.parse_args()


def main() -> None:
    """Generate all sample data files."""
    args = parse_args()
    config = EstateMatcherConfig.from_env()
    setup_logging(config.log_level)

    seed = args.seed if args.seed is not None else (config.seed if config.seed is not None else 42)
    output_dir = args.output_dir or config.output.reports_dir
    logger.info("Generating sample data into %s (seed=%d)", output_dir, seed)

    scenario = ClientShortlistScenario(
        num_clients=args.clients,
        num_properties=args.properties,
        shortlist_size=args.shortlist,
        seed=seed,
        priority=PriorityType(args.priority),
        config=config,
    )
    shortlists = scenario.generate()
    store = scenario.store

    sink = ReportFileSink(output_dir, pretty=config.output.pretty_json)
    sink.write_batch("properties", store.list_properties())
    sink.write_batch("clients", store.list_clients())
    sink.write_batch(
        "analyses",
        [item.analysis for items in shortlists.values() for item in items],
    )

    if not args.no_reports:
        generated = date.today().strftime("%d %B %Y")
        for client_id, items in shortlists.items():
            if not items:
                continue
            best = items[0]
            sink.write_report(
                ReportData(
                    client=store.get_client(client_id),
                    property=best.property,
                    analysis=best.analysis,
                    generated_date=generated,
                ),
                ReportFormat.HTML,
            )

    sink.close()

    print("\n" + "=" * 60)
    print("Summary")
    print("=" * 60)
    for name, count in store.summary().items():
        print(f"{name + ':':18}{count}")
    matched = sum(1 for items in shortlists.values() if items)
    print(f"{'shortlisted:':18}{matched}")
    print(f"\nAll files saved to: {output_dir}")
    print("=" * 60)


if __name__ == "__main__":
    main()
