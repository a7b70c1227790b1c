"""Persistence backends and the CRM data store."""

from estate_matcher.store.crm import AGENT_KEY, CLIENTS_KEY, CrmDataStore
from estate_matcher.store.storage import InMemoryStorage, JsonFileStorage, KeyValueStorage

__all__ = [
    "AGENT_KEY",
    "CLIENTS_KEY",
    "CrmDataStore",
    "InMemoryStorage",
    "JsonFileStorage",
    "KeyValueStorage",
]
