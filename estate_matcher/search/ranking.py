"""Analyze and rank candidate properties for a client."""

from __future__ import annotations

import logging
import multiprocessing as mp
from dataclasses import dataclass
from decimal import Decimal
from functools import partial
from typing import Iterable

from estate_matcher.config import OutgoingRates
from estate_matcher.finance.analyzer import analyze
from estate_matcher.finance.assumptions import financial_input_from_property
from estate_matcher.models import (
    AnalysisAssumptions,
    PriorityType,
    Property,
    PropertyAnalysis,
    SortOrder,
)
from estate_matcher.search.filters import filter_by_budget, filter_by_location

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PropertyWithAnalysis:
    """A listing paired with its investment analysis."""

    property: Property
    analysis: PropertyAnalysis


def analyze_properties(
    properties: Iterable[Property],
    assumptions: AnalysisAssumptions | None = None,
    workers: int | None = None,
    outgoing_rates: OutgoingRates | None = None,
) -> list[PropertyWithAnalysis]:
    """Run the investment analysis for every property.

    Parameters
    ----------
    properties : Iterable[Property]
        Listings to analyze.
    assumptions : AnalysisAssumptions | None
        Financing assumptions shared by all listings.
    workers : int | None
        Process count; more than 1 fans the work out over a
        ``multiprocessing.Pool``.
    outgoing_rates : OutgoingRates | None
        Percentage-of-price fallbacks for unitemized outgoings.

    Returns
    -------
    list[PropertyWithAnalysis]
        Results in input order.
    """
    properties = list(properties)
    job = partial(_analyze_one, assumptions=assumptions, outgoing_rates=outgoing_rates)

    if workers and workers > 1 and len(properties) > 1:
        logger.debug("Analyzing %d properties over %d workers", len(properties), workers)
        with mp.Pool(processes=workers) as pool:
            analyses = pool.map(job, properties)
    else:
        analyses = [job(prop) for prop in properties]

    return [
        PropertyWithAnalysis(property=prop, analysis=analysis)
        for prop, analysis in zip(properties, analyses)
    ]


def rank_properties(
    items: Iterable[PropertyWithAnalysis],
    priority: PriorityType = PriorityType.COMPOSITE_SCORE,
    sort_order: SortOrder = SortOrder.DESC,
) -> list[PropertyWithAnalysis]:
    """Order analyzed properties by priority.

    ``DESC`` puts the best first: highest score, or shortest break-even.
    ``ASC`` reverses that. Ties keep their input order.
    """
    if priority == PriorityType.COMPOSITE_SCORE:
        return sorted(
            items,
            key=lambda item: item.analysis.investment_score,
            reverse=sort_order == SortOrder.DESC,
        )
    return sorted(
        items,
        key=lambda item: item.analysis.break_even_years,
        reverse=sort_order == SortOrder.ASC,
    )


def filter_with_priority(
    properties: Iterable[Property],
    preferred_location: str,
    budget: Decimal | float,
    priority: PriorityType = PriorityType.COMPOSITE_SCORE,
    sort_order: SortOrder = SortOrder.DESC,
    assumptions: AnalysisAssumptions | None = None,
    workers: int | None = None,
    outgoing_rates: OutgoingRates | None = None,
) -> list[PropertyWithAnalysis]:
    """Location and budget filter, then analyze and rank the survivors."""
    candidates = filter_by_budget(filter_by_location(properties, preferred_location), budget)
    logger.info(
        "%d properties match location %r within budget %s",
        len(candidates),
        preferred_location,
        budget,
    )
    analyzed = analyze_properties(
        candidates, assumptions, workers=workers, outgoing_rates=outgoing_rates
    )
    return rank_properties(analyzed, priority, sort_order)


def _analyze_one(
    prop: Property,
    assumptions: AnalysisAssumptions | None,
    outgoing_rates: OutgoingRates | None,
) -> PropertyAnalysis:
    return analyze(
        financial_input_from_property(prop),
        assumptions,
        outgoing_rates=outgoing_rates,
    )
