"""End-to-end scenarios over generated CRM data."""

from estate_matcher.scenarios.shortlist import ClientShortlistScenario

__all__ = ["ClientShortlistScenario"]
