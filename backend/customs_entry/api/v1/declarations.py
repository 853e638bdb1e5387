"""
Declaration endpoints.

CRUD over declarations, bulk delete, and wholesale replacement of a
declaration's tariff line items.
"""

from fastapi import APIRouter, Depends, HTTPException, Query

from customs_entry.dependencies import get_declaration_service
from customs_entry.errors import DeclarationNotFoundError, PayloadValidationError
from customs_entry.schemas.declaration import (
    BulkDeleteRequest,
    BulkDeleteResponse,
    Declaration,
    DeclarationPayload,
    DeleteResponse,
    ItemsReplaceRequest,
)
from customs_entry.services.declaration_service import DeclarationService

router = APIRouter()


@router.get("", response_model=list[Declaration])
async def list_declarations(
    transport_mode: str | None = Query(None, alias="transportMode"),
    service: DeclarationService = Depends(get_declaration_service),
) -> list[Declaration]:
    return await service.list_declarations(transport_mode)


@router.post("", response_model=Declaration, status_code=201)
async def create_declaration(
    payload: DeclarationPayload,
    service: DeclarationService = Depends(get_declaration_service),
) -> Declaration:
    return await service.create_declaration(payload)


@router.delete("", response_model=BulkDeleteResponse)
async def delete_declarations(
    request: BulkDeleteRequest,
    service: DeclarationService = Depends(get_declaration_service),
) -> BulkDeleteResponse:
    """Delete several declarations; ids that do not exist are ignored."""
    try:
        deleted_count = await service.delete_declarations(request.ids)
    except PayloadValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))

    plural = "s" if deleted_count != 1 else ""
    return BulkDeleteResponse(
        message=f"Successfully deleted {deleted_count} declaration{plural}.",
        deleted_count=deleted_count,
    )


# ── Parameterized routes ──

@router.get("/{declaration_id}", response_model=Declaration)
async def get_declaration(
    declaration_id: str,
    service: DeclarationService = Depends(get_declaration_service),
) -> Declaration:
    try:
        return await service.get_declaration(declaration_id)
    except DeclarationNotFoundError:
        raise HTTPException(status_code=404, detail="Declaration not found.")


@router.put("/{declaration_id}", response_model=Declaration)
async def update_declaration(
    declaration_id: str,
    payload: DeclarationPayload,
    service: DeclarationService = Depends(get_declaration_service),
) -> Declaration:
    """Replace a declaration. Items are recomputed from the new valuation."""
    try:
        return await service.update_declaration(declaration_id, payload)
    except DeclarationNotFoundError:
        raise HTTPException(status_code=404, detail="Declaration not found.")


@router.put("/{declaration_id}/items", response_model=Declaration)
async def replace_items(
    declaration_id: str,
    request: ItemsReplaceRequest,
    service: DeclarationService = Depends(get_declaration_service),
) -> Declaration:
    """Replace the entire item list of a declaration."""
    try:
        return await service.replace_items(declaration_id, request.items)
    except PayloadValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except DeclarationNotFoundError:
        raise HTTPException(status_code=404, detail="Declaration not found.")


@router.delete("/{declaration_id}", response_model=DeleteResponse)
async def delete_declaration(
    declaration_id: str,
    service: DeclarationService = Depends(get_declaration_service),
) -> DeleteResponse:
    try:
        await service.delete_declaration(declaration_id)
    except DeclarationNotFoundError:
        raise HTTPException(status_code=404, detail="Declaration not found.")
    return DeleteResponse(message="Declaration deleted successfully.")
