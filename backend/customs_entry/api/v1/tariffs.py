from fastapi import APIRouter, Depends

from customs_entry.dependencies import get_document_store
from customs_entry.schemas.tariff import TariffDefinition
from customs_entry.services.tariff_service import list_tariffs
from customs_entry.stores import DocumentStore

router = APIRouter()


@router.get("", response_model=list[TariffDefinition])
async def get_tariffs(
    store: DocumentStore = Depends(get_document_store),
) -> list[TariffDefinition]:
    return await list_tariffs(store)
