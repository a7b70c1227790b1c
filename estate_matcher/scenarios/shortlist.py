"""Client shortlist scenario: generate a CRM and rank listings per client."""

from __future__ import annotations

import logging

from estate_matcher.config import EstateMatcherConfig
from estate_matcher.finance.analyzer import analyze
from estate_matcher.finance.assumptions import assumptions_for_client, financial_input_from_property
from estate_matcher.generators import ClientGenerator, PropertyGenerator
from estate_matcher.models import Client, PriorityType, SortOrder
from estate_matcher.search import (
    PropertyWithAnalysis,
    filter_by_budget,
    filter_by_location,
    rank_properties,
)
from estate_matcher.store import CrmDataStore, KeyValueStorage

logger = logging.getLogger(__name__)


class ClientShortlistScenario:
    """Generate clients and listings, then shortlist listings for each client.

    This scenario creates:
    - A property catalogue spread over a pool of suburbs
    - Clients whose preferred locations name some of those suburbs
    - Per client, the best listings within budget and location, analyzed
      with assumptions derived from the client's deposit, salary, goal
      and investment period
    """

    def __init__(
        self,
        num_clients: int = 20,
        num_properties: int = 200,
        shortlist_size: int = 5,
        seed: int | None = None,
        *,
        priority: PriorityType = PriorityType.COMPOSITE_SCORE,
        config: EstateMatcherConfig | None = None,
        storage: KeyValueStorage | None = None,
    ) -> None:
        """Initialize client shortlist scenario.

        Parameters
        ----------
        num_clients : int
            Number of clients to generate.
        num_properties : int
            Number of listings to generate.
        shortlist_size : int
            Maximum listings kept per client.
        seed : int | None
            Random seed for reproducibility.
        priority : PriorityType
            Ranking used for the shortlist.
        config : EstateMatcherConfig | None
            Financing defaults, lending policy and outgoing rates.
        storage : KeyValueStorage | None
            Backend for the generated clients (in-memory when omitted).
        """
        self.num_clients = num_clients
        self.num_properties = num_properties
        self.shortlist_size = shortlist_size
        self.seed = seed
        self.priority = priority
        self.config = config or EstateMatcherConfig()

        self.store = CrmDataStore(storage)
        self._property_gen = PropertyGenerator(seed=seed)
        self._client_gen = ClientGenerator(
            seed=seed,
            suburbs=[suburb for suburb, _state, _postcode in self._property_gen.suburbs],
        )

    def generate(self) -> dict[str, list[PropertyWithAnalysis]]:
        """Generate the CRM data and every client's shortlist.

        Returns
        -------
        dict[str, list[PropertyWithAnalysis]]
            Ranked shortlist per client id (possibly empty).
        """
        logger.info(
            "Starting client shortlist scenario: %d clients, %d properties",
            self.num_clients,
            self.num_properties,
        )

        self.store.add_properties(list(self._property_gen.generate_batch(self.num_properties)))
        for client in self._client_gen.generate_batch(self.num_clients):
            self.store.add_client(client)

        shortlists = {
            client.client_id: self.shortlist_for(client) for client in self.store.list_clients()
        }

        empty = sum(1 for items in shortlists.values() if not items)
        logger.info(
            "Shortlisted properties for %d clients (%d with no match)",
            len(shortlists),
            empty,
        )
        return shortlists

    def shortlist_for(self, client: Client) -> list[PropertyWithAnalysis]:
        """Best listings for one client, analyzed with client-specific assumptions."""
        candidates = filter_by_budget(
            filter_by_location(self.store.list_properties(), client.preferred_location),
            client.budget,
        )

        analyzed = []
        for prop in candidates:
            assumptions = assumptions_for_client(
                client,
                float(prop.price),
                defaults=self.config.financing,
                policy=self.config.lending,
            )
            analysis = analyze(
                financial_input_from_property(prop),
                assumptions,
                outgoing_rates=self.config.outgoings,
            )
            analyzed.append(PropertyWithAnalysis(property=prop, analysis=analysis))

        ranked = rank_properties(analyzed, self.priority, SortOrder.DESC)
        logger.debug(
            "Client %s: %d candidates, keeping %d",
            client.client_id,
            len(candidates),
            min(len(ranked), self.shortlist_size),
        )
        return ranked[: self.shortlist_size]
