"""SQLAlchemy-backed store: each collection is one JSON row in document_store."""

import copy
import logging
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm.attributes import flag_modified

from customs_entry.errors import StoreError
from customs_entry.models.document_store import StoredDocument
from customs_entry.stores.base import check_collection, default_snapshot

logger = logging.getLogger("customs.stores.sql")


class SqlDocumentStore:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def read(self, collection: str) -> Any:
        check_collection(collection)
        try:
            row = await self.db.get(StoredDocument, collection)
        except SQLAlchemyError as e:
            logger.error("Failed to read collection %s: %s", collection, e)
            raise StoreError(f"Failed to read collection '{collection}'") from e

        if row is None:
            return default_snapshot(collection)
        return copy.deepcopy(row.data)

    async def write(self, collection: str, snapshot: Any) -> None:
        check_collection(collection)
        data = copy.deepcopy(snapshot)
        try:
            row = await self.db.get(StoredDocument, collection)
            if row is None:
                self.db.add(StoredDocument(collection=collection, data=data, version=1))
            else:
                row.data = data
                row.version += 1
                flag_modified(row, "data")
            await self.db.flush()
        except SQLAlchemyError as e:
            logger.error("Failed to write collection %s: %s", collection, e)
            raise StoreError(f"Failed to write collection '{collection}'") from e
