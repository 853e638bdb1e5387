from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from customs_entry.config import settings
from customs_entry.dependencies import get_document_store
from customs_entry.errors import StoreError
from customs_entry.schemas.health import HealthResponse
from customs_entry.stores import DECLARATIONS, DocumentStore

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check(store: DocumentStore = Depends(get_document_store)) -> HealthResponse:
    store_status = "healthy"
    try:
        await store.read(DECLARATIONS)
    except StoreError:
        store_status = "unhealthy"

    return HealthResponse(
        status="healthy" if store_status == "healthy" else "degraded",
        store=store_status,
        store_backend=settings.store_backend,
        timestamp=datetime.now(timezone.utc),
        environment=settings.environment,
        version="0.1.0",
    )
