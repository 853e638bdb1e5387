from customs_entry.reconciliation_engine.service import PartyRegistry
from customs_entry.schemas.party import Exporter, Importer
from customs_entry.stores.base import DocumentStore


async def list_importers(store: DocumentStore) -> list[Importer]:
    registry = await PartyRegistry.load(store)
    return registry.importers


async def list_exporters(store: DocumentStore, importer_id: str | None = None) -> list[Exporter]:
    """All exporters, or only those first associated with ``importer_id``."""
    registry = await PartyRegistry.load(store)
    return registry.exporters_for(importer_id)
