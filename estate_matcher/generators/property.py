"""Synthetic property listings."""

from __future__ import annotations

import random
from datetime import datetime, timedelta
from decimal import Decimal
from typing import Iterator

from estate_matcher.generators.base import BaseGenerator
from estate_matcher.models import Address, Property, PropertyType


class PropertyGenerator(BaseGenerator):
    """Generate synthetic property listings around a pool of suburbs."""

    PROPERTY_TYPES = [
        PropertyType.APARTMENT,
        PropertyType.UNIT,
        PropertyType.TOWNHOUSE,
        PropertyType.HOUSE,
        PropertyType.VILLA,
    ]
    TYPE_WEIGHTS = [0.35, 0.15, 0.15, 0.30, 0.05]

    # Price bands by type (AUD, thousands)
    PRICE_BANDS = {
        PropertyType.APARTMENT: (450, 1200),
        PropertyType.UNIT: (400, 900),
        PropertyType.TOWNHOUSE: (700, 1600),
        PropertyType.HOUSE: (900, 3000),
        PropertyType.VILLA: (600, 1300),
    }

    BEDROOMS = {
        PropertyType.APARTMENT: (1, 3),
        PropertyType.UNIT: (1, 2),
        PropertyType.TOWNHOUSE: (2, 4),
        PropertyType.HOUSE: (3, 5),
        PropertyType.VILLA: (2, 3),
    }

    FACILITIES = [
        "Air conditioning",
        "Balcony",
        "Built-in wardrobes",
        "Dishwasher",
        "Garden",
        "Gym",
        "Pool",
        "Secure parking",
        "Solar panels",
        "Study",
    ]

    ENERGY_RATINGS = ["3 Star", "4 Star", "5 Star", "6 Star", "7 Star"]

    def __init__(
        self,
        seed: int | None = None,
        num_suburbs: int = 12,
        state: str | None = None,
    ) -> None:
        """Initialize property generator.

        Parameters
        ----------
        seed : int | None
            Random seed for reproducibility.
        num_suburbs : int
            Size of the suburb pool listings are spread over.
        state : str | None
            Pin every listing to one state; random per suburb otherwise.
        """
        super().__init__(seed)
        self.state = state
        self.suburbs = self._suburb_pool(num_suburbs)
        self._agencies = [f"{self.fake.last_name()} Real Estate" for _ in range(5)]

    def generate(self) -> Property:
        """Generate a single property.

        Returns
        -------
        Property
            Generated property.
        """
        return self._generate_one()

    def generate_batch(self, count: int) -> Iterator[Property]:
        """Generate multiple properties.

        Parameters
        ----------
        count : int
            Number of properties to generate.

        Yields
        ------
        Property
            Generated properties.
        """
        for _ in range(count):
            yield self._generate_one()

    def _generate_one(self) -> Property:
        property_type = random.choices(self.PROPERTY_TYPES, weights=self.TYPE_WEIGHTS, k=1)[0]
        low, high = self.PRICE_BANDS[property_type]
        price = random.randint(low, high) * 1000

        # Gross yield between 3% and 5.5%, rent rounded to $5
        gross_yield = random.uniform(0.03, 0.055)
        weekly_rent = round(price * gross_yield / 52 / 5) * 5
        maintenance = round(price * random.uniform(0.003, 0.01))
        median_price = round(price * random.uniform(0.85, 1.15), -3)

        bedrooms = random.randint(*self.BEDROOMS[property_type])
        suburb, state, postcode = random.choice(self.suburbs)
        is_house = property_type == PropertyType.HOUSE

        return Property(
            property_id=self.fake.uuid4(),
            address=Address(
                street=self.fake.street_address(),
                suburb=suburb,
                state=state,
                postcode=postcode,
            ),
            property_type=property_type,
            price=Decimal(price),
            bedrooms=bedrooms,
            bathrooms=max(1, bedrooms - random.randint(0, 2)),
            car_spaces=random.randint(0, 2) + (1 if is_house else 0),
            weekly_rent=Decimal(weekly_rent),
            annual_maintenance=Decimal(maintenance),
            median_price=Decimal(str(int(median_price))),
            land_size_sqm=round(random.uniform(300, 900), 1) if is_house else 0.0,
            building_area_sqm=round(random.uniform(45, 90) + bedrooms * 25, 1),
            year_built=random.randint(1950, 2024),
            energy_rating=random.choice(self.ENERGY_RATINGS),
            facilities=random.sample(self.FACILITIES, k=random.randint(1, 4)),
            agent_name=self.fake.name(),
            agency=random.choice(self._agencies),
            agency_contact=self.fake.phone_number(),
            nearby_schools_km=round(random.uniform(0.2, 3.0), 1),
            nearby_transport_km=round(random.uniform(0.1, 2.5), 1),
            external_id=f"P{random.randint(100000, 999999)}",
            created_at=datetime.now() - timedelta(days=random.randint(0, 90)),
        )

    def _suburb_pool(self, count: int) -> list[tuple[str, str, str]]:
        """Distinct (suburb, state, postcode) triples."""
        pool: dict[str, tuple[str, str, str]] = {}
        attempts = 0
        while len(pool) < count and attempts < count * 20:
            attempts += 1
            suburb = self.fake.city()
            if suburb not in pool:
                pool[suburb] = (suburb, self.state or self.fake.state_abbr(), self.fake.postcode())
        return list(pool.values())
