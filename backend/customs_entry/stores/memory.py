import copy
from typing import Any

from customs_entry.stores.base import check_collection, default_snapshot


class InMemoryDocumentStore:
    """Dict-backed store. Reads and writes deep-copy so snapshots never alias."""

    def __init__(self, initial: dict[str, Any] | None = None):
        self._data: dict[str, Any] = {}
        for collection, snapshot in (initial or {}).items():
            check_collection(collection)
            self._data[collection] = copy.deepcopy(snapshot)

    async def read(self, collection: str) -> Any:
        check_collection(collection)
        if collection not in self._data:
            return default_snapshot(collection)
        return copy.deepcopy(self._data[collection])

    async def write(self, collection: str, snapshot: Any) -> None:
        check_collection(collection)
        self._data[collection] = copy.deepcopy(snapshot)
