"""File-backed store: one <collection>.json document per collection."""

import json
import logging
import os
from typing import Any

import aiofiles
import aiofiles.os

from customs_entry.errors import StoreError
from customs_entry.stores.base import check_collection, default_snapshot

logger = logging.getLogger("customs.stores.json")


class JsonFileDocumentStore:
    def __init__(self, directory: str):
        self.directory = directory

    def _path(self, collection: str) -> str:
        return os.path.join(self.directory, f"{collection}.json")

    async def read(self, collection: str) -> Any:
        check_collection(collection)
        path = self._path(collection)
        if not await aiofiles.os.path.exists(path):
            return default_snapshot(collection)

        try:
            async with aiofiles.open(path, "r", encoding="utf-8") as f:
                raw = await f.read()
            return json.loads(raw) if raw.strip() else default_snapshot(collection)
        except (OSError, ValueError) as e:
            logger.error("Failed to read %s: %s", path, e)
            raise StoreError(f"Failed to read collection '{collection}'") from e

    async def write(self, collection: str, snapshot: Any) -> None:
        check_collection(collection)
        path = self._path(collection)
        tmp_path = f"{path}.tmp"

        try:
            await aiofiles.os.makedirs(self.directory, exist_ok=True)
            async with aiofiles.open(tmp_path, "w", encoding="utf-8") as f:
                await f.write(json.dumps(snapshot, indent=2))
            # Swap in the complete file so readers never see a half-written one
            await aiofiles.os.replace(tmp_path, path)
        except (OSError, TypeError, ValueError) as e:
            logger.error("Failed to write %s: %s", path, e)
            raise StoreError(f"Failed to write collection '{collection}'") from e
