from fastapi import APIRouter

from customs_entry.api.v1 import (
    customs_documents,
    declarations,
    health,
    parties,
    tariffs,
)

api_router = APIRouter()

api_router.include_router(health.router, prefix="/v1", tags=["health"])
api_router.include_router(declarations.router, prefix="/v1/declarations", tags=["declarations"])
api_router.include_router(parties.router, prefix="/v1", tags=["parties"])
api_router.include_router(tariffs.router, prefix="/v1/tariffs", tags=["tariffs"])
api_router.include_router(customs_documents.router, prefix="/v1", tags=["customs-documents"])
