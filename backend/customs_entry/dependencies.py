from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from customs_entry.config import settings
from customs_entry.database import get_db
from customs_entry.services.customs_document_service import CustomsDocumentService
from customs_entry.services.declaration_service import DeclarationService
from customs_entry.stores import DocumentStore, JsonFileDocumentStore, SqlDocumentStore

# Re-export get_db for use in Depends()
get_db = get_db


def get_document_store(db: AsyncSession = Depends(get_db)) -> DocumentStore:
    if settings.store_backend == "json":
        return JsonFileDocumentStore(settings.store_dir)
    return SqlDocumentStore(db)


def get_declaration_service(
    store: DocumentStore = Depends(get_document_store),
) -> DeclarationService:
    return DeclarationService(store)


def get_customs_document_service(
    store: DocumentStore = Depends(get_document_store),
) -> CustomsDocumentService:
    return CustomsDocumentService(store, filename=settings.document_filename)
