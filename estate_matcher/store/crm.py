"""CRM data store: agent session, client list and property catalogue."""

import logging
from dataclasses import replace
from datetime import datetime

from estate_matcher.dataset.normalizer import normalize_client
from estate_matcher.exceptions import (
    AuthenticationError,
    ClientNotFoundError,
    DuplicateEntityError,
    PropertyNotFoundError,
)
from estate_matcher.models import Agent, Client, Property
from estate_matcher.reports.serialization import to_dict
from estate_matcher.store.storage import InMemoryStorage, KeyValueStorage

logger = logging.getLogger(__name__)

CLIENTS_KEY = "clients"
AGENT_KEY = "agent"


class CrmDataStore:
    """Agent-facing store backed by a key/value storage.

    Clients and the agent session are persisted in ``storage``; the
    property catalogue is static reference data held in memory.

    Parameters
    ----------
    storage : KeyValueStorage | None
        Persistence backend (in-memory when omitted). Stored clients are
        loaded on construction.
    """

    def __init__(self, storage: KeyValueStorage | None = None) -> None:
        self.storage = storage if storage is not None else InMemoryStorage()
        self.clients: dict[str, Client] = {}
        self.properties: dict[str, Property] = {}
        self._load_clients()

    # Agent session

    def login(self, email: str, password: str) -> Agent:
        """Demo login: any non-empty email and password is accepted.

        Raises
        ------
        AuthenticationError
            If either credential is blank.
        """
        if not email.strip() or not password.strip():
            raise AuthenticationError("Email and password are required")

        email = email.strip()
        agent = Agent(email=email, name=email.split("@")[0], logged_in_at=datetime.now())
        self.storage.put(AGENT_KEY, to_dict(agent))
        logger.info("Agent %s logged in", agent.email)
        return agent

    def current_agent(self) -> Agent | None:
        """Logged-in agent, or None."""
        data = self.storage.get(AGENT_KEY)
        if not data:
            return None
        logged_in_at = data.get("logged_in_at")
        return Agent(
            email=data["email"],
            name=data.get("name") or data["email"].split("@")[0],
            logged_in_at=datetime.fromisoformat(logged_in_at) if logged_in_at else datetime.now(),
        )

    def require_agent(self) -> Agent:
        """Logged-in agent, raising AuthenticationError when there is none."""
        agent = self.current_agent()
        if agent is None:
            raise AuthenticationError("No agent is logged in")
        return agent

    def logout(self) -> None:
        self.storage.delete(AGENT_KEY)
        logger.info("Agent logged out")

    # Clients

    def add_client(self, client: Client) -> Client:
        """Add a new client and persist the client list.

        Raises
        ------
        DuplicateEntityError
            If the client id is already taken.
        """
        if client.client_id in self.clients:
            raise DuplicateEntityError(f"Client {client.client_id} already exists")

        if client.created_at is None:
            client.created_at = datetime.now()
        self.clients[client.client_id] = client
        self._save_clients()
        logger.info("Added client %s (%s)", client.client_id, client.name)
        return client

    def update_client(self, client_id: str, **changes: object) -> Client:
        """Replace fields of an existing client.

        Raises
        ------
        ClientNotFoundError
            If the client does not exist.
        """
        current = self.get_client(client_id)
        changes.pop("client_id", None)
        changes.setdefault("updated_at", datetime.now())
        updated = replace(current, **changes)
        self.clients[client_id] = updated
        self._save_clients()
        logger.info("Updated client %s: %s", client_id, ", ".join(sorted(changes)))
        return updated

    def get_client(self, client_id: str) -> Client:
        if client_id not in self.clients:
            raise ClientNotFoundError(f"Client {client_id} not found")
        return self.clients[client_id]

    def delete_client(self, client_id: str) -> None:
        """Remove a client (ClientNotFoundError if absent)."""
        self.get_client(client_id)
        del self.clients[client_id]
        self._save_clients()
        logger.info("Deleted client %s", client_id)

    def list_clients(self) -> list[Client]:
        """Clients in insertion order."""
        return list(self.clients.values())

    # Properties

    def add_property(self, prop: Property) -> None:
        """Add a property to the catalogue (replacing one with the same id)."""
        if prop.created_at is None:
            prop.created_at = datetime.now()
        self.properties[prop.property_id] = prop

    def add_properties(self, properties: list[Property]) -> None:
        for prop in properties:
            self.add_property(prop)
        logger.info("Catalogue holds %d properties", len(self.properties))

    def get_property(self, property_id: str) -> Property:
        if property_id not in self.properties:
            raise PropertyNotFoundError(f"Property {property_id} not found")
        return self.properties[property_id]

    def list_properties(self) -> list[Property]:
        return list(self.properties.values())

    def summary(self) -> dict[str, int]:
        """Get summary counts of stored entities."""
        return {
            "clients": len(self.clients),
            "properties": len(self.properties),
        }

    def _load_clients(self) -> None:
        for raw in self.storage.get(CLIENTS_KEY) or []:
            client = normalize_client(raw)
            self.clients[client.client_id] = client
        if self.clients:
            logger.info("Loaded %d clients from storage", len(self.clients))

    def _save_clients(self) -> None:
        self.storage.put(CLIENTS_KEY, [to_dict(c) for c in self.clients.values()])
