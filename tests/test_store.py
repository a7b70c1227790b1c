"""Tests for storage backends and the CRM data store."""

import json
from dataclasses import replace
from decimal import Decimal
from pathlib import Path

import pytest

from estate_matcher.exceptions import (
    AuthenticationError,
    ClientNotFoundError,
    DuplicateEntityError,
    PropertyNotFoundError,
    StorageError,
)
from estate_matcher.models import Client, Property
from estate_matcher.store import (
    AGENT_KEY,
    CLIENTS_KEY,
    CrmDataStore,
    InMemoryStorage,
    JsonFileStorage,
)


@pytest.fixture
def store() -> CrmDataStore:
    """Create a fresh in-memory store for each test."""
    return CrmDataStore()


class TestInMemoryStorage:
    """Tests for InMemoryStorage."""

    def test_put_get_delete(self) -> None:
        """Test basic key/value operations."""
        storage = InMemoryStorage()
        storage.put("a", [1, 2])

        assert storage.get("a") == [1, 2]
        assert storage.keys() == ["a"]

        storage.delete("a")
        assert storage.get("a") is None
        assert storage.get("a", "fallback") == "fallback"

    def test_delete_missing_is_noop(self) -> None:
        """Test deleting an absent key does nothing."""
        InMemoryStorage().delete("missing")


class TestJsonFileStorage:
    """Tests for JsonFileStorage."""

    def test_persists_across_instances(self, tmp_path: Path) -> None:
        """Test values survive reopening the file."""
        path = tmp_path / "nested" / "crm.json"
        JsonFileStorage(path).put("clients", [{"id": "1"}])

        assert json.loads(path.read_text(encoding="utf-8")) == {"clients": [{"id": "1"}]}
        assert JsonFileStorage(path).get("clients") == [{"id": "1"}]

    def test_delete_rewrites_file(self, tmp_path: Path) -> None:
        """Test delete removes the key on disk."""
        path = tmp_path / "crm.json"
        storage = JsonFileStorage(path)
        storage.put("agent", {"email": "a@b.c"})
        storage.delete("agent")

        assert json.loads(path.read_text(encoding="utf-8")) == {}

    def test_missing_file_starts_empty(self, tmp_path: Path) -> None:
        """Test a new path has no keys and is not created until written."""
        storage = JsonFileStorage(tmp_path / "crm.json")

        assert storage.keys() == []
        assert not (tmp_path / "crm.json").exists()

    def test_corrupt_file(self, tmp_path: Path) -> None:
        """Test invalid JSON raises StorageError."""
        path = tmp_path / "crm.json"
        path.write_text("{oops", encoding="utf-8")

        with pytest.raises(StorageError):
            JsonFileStorage(path)

    def test_non_object_file(self, tmp_path: Path) -> None:
        """Test a JSON list is rejected."""
        path = tmp_path / "crm.json"
        path.write_text("[]", encoding="utf-8")

        with pytest.raises(StorageError):
            JsonFileStorage(path)


class TestAgentSession:
    """Tests for the demo login."""

    def test_login(self, store: CrmDataStore) -> None:
        """Test any non-empty credentials log in."""
        agent = store.login("sam.lee@agency.com.au", "secret")

        assert agent.name == "sam.lee"
        assert store.current_agent().email == "sam.lee@agency.com.au"
        assert store.storage.get(AGENT_KEY)["email"] == "sam.lee@agency.com.au"

    @pytest.mark.parametrize(("email", "password"), [("", "x"), ("a@b.c", ""), ("  ", "  ")])
    def test_blank_credentials(self, store: CrmDataStore, email: str, password: str) -> None:
        """Test blank email or password is rejected."""
        with pytest.raises(AuthenticationError):
            store.login(email, password)

    def test_logout(self, store: CrmDataStore) -> None:
        """Test logout clears the session."""
        store.login("a@b.c", "pw")
        store.logout()

        assert store.current_agent() is None
        with pytest.raises(AuthenticationError):
            store.require_agent()

    def test_session_persists(self, tmp_path: Path) -> None:
        """Test a new store sees the stored session."""
        path = tmp_path / "crm.json"
        CrmDataStore(JsonFileStorage(path)).login("a@b.c", "pw")

        agent = CrmDataStore(JsonFileStorage(path)).require_agent()
        assert agent.email == "a@b.c"
        assert agent.name == "a"


class TestClients:
    """Tests for client CRUD."""

    def test_add_and_get(self, store: CrmDataStore, sample_client: Client) -> None:
        """Test adding a client stamps created_at."""
        store.add_client(sample_client)

        assert store.get_client("client-001") is sample_client
        assert sample_client.created_at is not None
        assert store.summary()["clients"] == 1

    def test_duplicate(self, store: CrmDataStore, sample_client: Client) -> None:
        """Test duplicate ids are rejected."""
        store.add_client(sample_client)

        with pytest.raises(DuplicateEntityError):
            store.add_client(replace(sample_client))

    def test_update(self, store: CrmDataStore, sample_client: Client) -> None:
        """Test update replaces fields and stamps updated_at."""
        store.add_client(sample_client)
        updated = store.update_client("client-001", budget=Decimal("800000"), client_id="ignored")

        assert updated.budget == Decimal("800000")
        assert updated.client_id == "client-001"
        assert updated.updated_at is not None
        assert store.get_client("client-001").budget == Decimal("800000")

    def test_update_missing(self, store: CrmDataStore) -> None:
        """Test updating an unknown client raises."""
        with pytest.raises(ClientNotFoundError):
            store.update_client("nope", name="X")

    def test_delete(self, store: CrmDataStore, sample_client: Client) -> None:
        """Test delete removes the client."""
        store.add_client(sample_client)
        store.delete_client("client-001")

        assert store.list_clients() == []
        with pytest.raises(ClientNotFoundError):
            store.delete_client("client-001")

    def test_list_order(self, store: CrmDataStore, sample_client: Client) -> None:
        """Test clients list in insertion order."""
        store.add_client(replace(sample_client, client_id="b"))
        store.add_client(replace(sample_client, client_id="a"))

        assert [c.client_id for c in store.list_clients()] == ["b", "a"]

    def test_clients_persist(self, tmp_path: Path, sample_client: Client) -> None:
        """Test clients reload from storage on construction."""
        path = tmp_path / "crm.json"
        CrmDataStore(JsonFileStorage(path)).add_client(sample_client)

        reloaded = CrmDataStore(JsonFileStorage(path)).get_client("client-001")

        assert reloaded.name == sample_client.name
        assert reloaded.deposit == Decimal("100000")
        assert reloaded.investment_goal == sample_client.investment_goal
        assert reloaded.created_at == sample_client.created_at

    def test_clients_key(self, store: CrmDataStore, sample_client: Client) -> None:
        """Test clients are stored as JSON-safe dicts."""
        store.add_client(sample_client)
        stored = store.storage.get(CLIENTS_KEY)

        assert stored[0]["client_id"] == "client-001"
        assert stored[0]["budget"] == "700000"


class TestProperties:
    """Tests for the property catalogue."""

    def test_add_and_get(self, store: CrmDataStore, sample_property: Property) -> None:
        """Test catalogue lookups."""
        store.add_property(sample_property)

        assert store.get_property("prop-001") is sample_property
        assert sample_property.created_at is not None

    def test_missing(self, store: CrmDataStore) -> None:
        """Test unknown property ids raise."""
        with pytest.raises(PropertyNotFoundError):
            store.get_property("nope")

    def test_add_properties(self, store: CrmDataStore, make_property) -> None:
        """Test bulk add and listing."""
        store.add_properties([make_property("a", 500_000, 400), make_property("b", 600_000, 450)])

        assert [p.property_id for p in store.list_properties()] == ["a", "b"]
        assert store.summary() == {"clients": 0, "properties": 2}

    def test_properties_not_persisted(self, store: CrmDataStore, sample_property: Property) -> None:
        """Test the catalogue stays out of storage."""
        store.add_property(sample_property)
        assert store.storage.keys() == []
