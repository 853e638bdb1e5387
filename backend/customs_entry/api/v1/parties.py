from fastapi import APIRouter, Depends, Query

from customs_entry.dependencies import get_document_store
from customs_entry.schemas.party import Exporter, Importer
from customs_entry.services.party_service import list_exporters, list_importers
from customs_entry.stores import DocumentStore

router = APIRouter()


@router.get("/importers", response_model=list[Importer])
async def get_importers(
    store: DocumentStore = Depends(get_document_store),
) -> list[Importer]:
    return await list_importers(store)


@router.get("/exporters", response_model=list[Exporter])
async def get_exporters(
    importer_id: str | None = Query(None, alias="importerId"),
    store: DocumentStore = Depends(get_document_store),
) -> list[Exporter]:
    return await list_exporters(store, importer_id)


@router.get("/exporters/by-importer/{importer_id}", response_model=list[Exporter])
async def get_exporters_by_importer(
    importer_id: str,
    store: DocumentStore = Depends(get_document_store),
) -> list[Exporter]:
    """Exporters first associated with the given importer."""
    return await list_exporters(store, importer_id)
