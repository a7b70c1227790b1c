"""Synthetic CRM clients."""

from __future__ import annotations

import random
from datetime import datetime, timedelta
from decimal import Decimal
from typing import Iterator

from estate_matcher.generators.base import BaseGenerator
from estate_matcher.models import Client, InvestmentGoal


class ClientGenerator(BaseGenerator):
    """Generate synthetic buyers and investors."""

    GOALS = list(InvestmentGoal)
    GOAL_WEIGHTS = [0.40, 0.35, 0.25]

    INVESTMENT_PERIODS = [5, 10, 15, 20, 25, 30]
    STATUSES = ["Investment", "First Home Buyer", "Upgrader", "Downsizer"]

    def __init__(
        self,
        seed: int | None = None,
        suburbs: list[str] | None = None,
    ) -> None:
        """Initialize client generator.

        Parameters
        ----------
        seed : int | None
            Random seed for reproducibility.
        suburbs : list[str] | None
            Suburbs preferred locations are drawn from; clients are open to
            anywhere when empty.
        """
        super().__init__(seed)
        self.suburbs = list(suburbs or [])

    def generate(self) -> Client:
        """Generate a single client."""
        return self._generate_one()

    def generate_batch(self, count: int) -> Iterator[Client]:
        """Generate multiple clients.

        Parameters
        ----------
        count : int
            Number of clients to generate.

        Yields
        ------
        Client
            Generated clients.
        """
        for _ in range(count):
            yield self._generate_one()

    def _generate_one(self) -> Client:
        # Log-normal household income, ~120k median
        salary = random.lognormvariate(mu=11.7, sigma=0.35)
        salary = round(max(50_000, min(salary, 400_000)), -3)

        budget = round(salary * random.uniform(4, 8), -4)
        min_budget = round(budget * 0.9, -4)

        # Some clients have not settled on a deposit yet
        deposit = None
        if random.random() > 0.15:
            deposit = Decimal(str(int(round(budget * random.uniform(0.1, 0.25), -3))))

        name = self.fake.name()
        created_at = datetime.now() - timedelta(days=random.randint(0, 365))

        return Client(
            client_id=self.fake.uuid4(),
            name=name,
            email=self.fake.email(),
            budget=Decimal(str(int(budget))),
            salary=Decimal(str(int(salary))),
            investment_goal=random.choices(self.GOALS, weights=self.GOAL_WEIGHTS, k=1)[0],
            investment_period=random.choice(self.INVESTMENT_PERIODS),
            preferred_location=self._preferred_location(),
            deposit=deposit,
            min_budget=Decimal(str(int(min_budget))),
            max_budget=Decimal(str(int(budget))),
            status=random.choice(self.STATUSES),
            bedrooms=f"{random.randint(1, 4)} bedrooms",
            created_at=created_at,
        )

    def _preferred_location(self) -> str:
        if not self.suburbs or random.random() < 0.1:
            return "Anywhere"
        picks = random.sample(self.suburbs, k=min(len(self.suburbs), random.randint(1, 3)))
        return ", ".join(picks)
