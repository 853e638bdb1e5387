"""Whole-document store contract.

Every collection is read and written as one snapshot. Callers read the
snapshots they need at the start of an operation, mutate their copies and
write them back; there is no partial write path.
"""

from typing import Any, Callable, Protocol

from customs_entry.errors import StoreError

DECLARATIONS = "declarations"
IMPORTERS = "importers"
EXPORTERS = "exporters"
TARIFFS = "tariffs"
MASTER_BILL = "master_bill"

_DEFAULTS: dict[str, Callable[[], Any]] = {
    DECLARATIONS: list,
    IMPORTERS: list,
    EXPORTERS: list,
    TARIFFS: list,
    MASTER_BILL: lambda: None,
}

COLLECTIONS = tuple(_DEFAULTS)


class DocumentStore(Protocol):
    async def read(self, collection: str) -> Any:
        """Return a private copy of the collection snapshot."""
        ...

    async def write(self, collection: str, snapshot: Any) -> None:
        """Replace the collection snapshot; durable once awaited."""
        ...


def check_collection(collection: str) -> None:
    if collection not in _DEFAULTS:
        raise StoreError(f"Unknown collection '{collection}'")


def default_snapshot(collection: str) -> Any:
    """Snapshot returned for a collection that was never written."""
    check_collection(collection)
    return _DEFAULTS[collection]()
