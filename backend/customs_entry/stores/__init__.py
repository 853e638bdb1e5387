from customs_entry.stores.base import (
    COLLECTIONS,
    DECLARATIONS,
    EXPORTERS,
    IMPORTERS,
    MASTER_BILL,
    TARIFFS,
    DocumentStore,
    default_snapshot,
)
from customs_entry.stores.json_file import JsonFileDocumentStore
from customs_entry.stores.memory import InMemoryDocumentStore
from customs_entry.stores.sql import SqlDocumentStore

__all__ = [
    "COLLECTIONS",
    "DECLARATIONS",
    "EXPORTERS",
    "IMPORTERS",
    "MASTER_BILL",
    "TARIFFS",
    "DocumentStore",
    "InMemoryDocumentStore",
    "JsonFileDocumentStore",
    "SqlDocumentStore",
    "default_snapshot",
]
