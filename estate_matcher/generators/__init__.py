"""Faker-based synthetic data generators."""

from estate_matcher.generators.base import BaseGenerator
from estate_matcher.generators.client import ClientGenerator
from estate_matcher.generators.property import PropertyGenerator

__all__ = ["BaseGenerator", "ClientGenerator", "PropertyGenerator"]
