"""DeclarationService: lifecycle of declarations and their tariff lines.

Every operation reads the snapshots it needs once, mutates its copies and
writes them back. Party reconciliation runs before the items are priced, and
the party collections are written before the declarations.
"""

import logging
from typing import Callable

from customs_entry.cost_allocator.freight import apply_charges
from customs_entry.errors import DeclarationNotFoundError, PayloadValidationError
from customs_entry.reconciliation_engine.service import EntityReconciler, PartyRegistry, new_id
from customs_entry.schemas.declaration import Declaration, DeclarationPayload, Item
from customs_entry.stores.base import DECLARATIONS, DocumentStore

logger = logging.getLogger("customs.declarations")


def _index_of(declarations: list[Declaration], declaration_id: str) -> int | None:
    return next((i for i, d in enumerate(declarations) if d.id == declaration_id), None)


class DeclarationService:
    def __init__(
        self,
        store: DocumentStore,
        reconciler: EntityReconciler | None = None,
        id_factory: Callable[[], str] = new_id,
    ):
        self.store = store
        self.id_factory = id_factory
        self.reconciler = reconciler or EntityReconciler(id_factory)

    async def _load(self) -> list[Declaration]:
        rows = await self.store.read(DECLARATIONS)
        return [Declaration.model_validate(row) for row in rows or []]

    async def _save(self, declarations: list[Declaration]) -> None:
        await self.store.write(DECLARATIONS, [d.to_document() for d in declarations])

    def _with_ids(self, items: list[Item]) -> list[Item]:
        return [
            item if item.id else item.model_copy(update={"id": self.id_factory()})
            for item in items
        ]

    def _replace_items(self, existing: list[Item], incoming: list[Item]) -> list[Item]:
        """Wholesale replace of an item list.

        Items whose id is already persisted are overwritten in place, in their
        persisted order. Every other incoming item is new and gets a fresh id,
        appended in incoming order. Persisted items missing from ``incoming``
        are dropped.
        """
        persisted_ids = {item.id for item in existing if item.id}
        overwrites = {item.id: item for item in incoming if item.id in persisted_ids}

        kept = [overwrites[item.id] for item in existing if item.id in overwrites]
        added = [
            item.model_copy(update={"id": self.id_factory()})
            for item in incoming
            if item.id not in overwrites
        ]
        return kept + added

    async def list_declarations(self, transport_mode: str | None = None) -> list[Declaration]:
        declarations = await self._load()
        if transport_mode:
            declarations = [d for d in declarations if d.transport_mode == transport_mode]
        return declarations

    async def get_declaration(self, declaration_id: str) -> Declaration:
        declarations = await self._load()
        index = _index_of(declarations, declaration_id)
        if index is None:
            raise DeclarationNotFoundError(declaration_id)
        return declarations[index]

    async def create_declaration(self, payload: DeclarationPayload) -> Declaration:
        declarations = await self._load()
        registry = await PartyRegistry.load(self.store)

        importer, exporter = self.reconciler.resolve(registry, payload.importer, payload.exporter)
        items = apply_charges(self._with_ids(payload.items or []), payload.valuation)

        declaration = Declaration(
            id=self.id_factory(),
            transport_mode=payload.transport_mode,
            bill_number=payload.bill_number,
            importer=importer,
            exporter=exporter,
            packages=payload.packages,
            valuation=payload.valuation,
            items=items,
        )
        declarations.append(declaration)

        await registry.save(self.store)
        await self._save(declarations)

        logger.info(
            "Created declaration %s (bill=%s, items=%d)",
            declaration.id, declaration.bill_number, len(items),
        )
        return declaration

    async def update_declaration(self, declaration_id: str, payload: DeclarationPayload) -> Declaration:
        """Replace a declaration's details.

        Without an item list the persisted items are kept, ids included, and
        only their freight and insurance are recomputed from the new valuation.
        """
        declarations = await self._load()
        index = _index_of(declarations, declaration_id)
        if index is None:
            raise DeclarationNotFoundError(declaration_id)

        registry = await PartyRegistry.load(self.store)
        importer, exporter = self.reconciler.resolve(registry, payload.importer, payload.exporter)

        current = declarations[index]
        if payload.items is None:
            items = current.items
        else:
            items = self._replace_items(current.items, payload.items)

        declarations[index] = Declaration(
            id=declaration_id,
            transport_mode=payload.transport_mode,
            bill_number=payload.bill_number,
            importer=importer,
            exporter=exporter,
            packages=payload.packages,
            valuation=payload.valuation,
            items=apply_charges(items, payload.valuation),
        )

        await registry.save(self.store)
        await self._save(declarations)

        logger.info("Updated declaration %s", declaration_id)
        return declarations[index]

    async def replace_items(self, declaration_id: str, items: list[Item] | None) -> Declaration:
        if not isinstance(items, list):
            raise PayloadValidationError('Request body must contain an "items" array.')

        declarations = await self._load()
        index = _index_of(declarations, declaration_id)
        if index is None:
            raise DeclarationNotFoundError(declaration_id)

        declaration = declarations[index]
        replaced = self._replace_items(declaration.items, items)
        declaration.items = apply_charges(replaced, declaration.valuation)

        await self._save(declarations)

        logger.info("Replaced items of declaration %s (%d items)", declaration_id, len(replaced))
        return declaration

    async def delete_declaration(self, declaration_id: str) -> None:
        declarations = await self._load()
        remaining = [d for d in declarations if d.id != declaration_id]
        if len(remaining) == len(declarations):
            raise DeclarationNotFoundError(declaration_id)

        await self._save(remaining)
        logger.info("Deleted declaration %s", declaration_id)

    async def delete_declarations(self, ids: list[str] | None) -> int:
        """Delete every declaration in ``ids``; unknown ids are ignored.

        Returns the number actually removed.
        """
        if not isinstance(ids, list) or not ids:
            raise PayloadValidationError("Please provide an array of declaration IDs to delete.")

        declarations = await self._load()
        targets = set(ids)
        remaining = [d for d in declarations if d.id not in targets]
        deleted_count = len(declarations) - len(remaining)

        await self._save(remaining)

        logger.info("Bulk deleted %d of %d requested declarations", deleted_count, len(targets))
        return deleted_count
