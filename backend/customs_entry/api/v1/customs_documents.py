"""
Customs document endpoints.

Generating a document stores the submitted master bill as the current one and
returns the SAD entry XML as an attachment.
"""

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response

from customs_entry.dependencies import get_customs_document_service, get_document_store
from customs_entry.errors import PayloadValidationError
from customs_entry.schemas.master_bill import GenerateDocumentRequest, MasterBill
from customs_entry.services.customs_document_service import CustomsDocumentService
from customs_entry.services.master_bill_service import get_current_master_bill
from customs_entry.stores import DocumentStore

router = APIRouter()


@router.post("/customs-documents", response_class=Response)
async def generate_customs_document(
    request: GenerateDocumentRequest,
    service: CustomsDocumentService = Depends(get_customs_document_service),
) -> Response:
    try:
        document = await service.generate(request.master_bill, request.declaration_ids)
    except PayloadValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return Response(
        content=document.content,
        media_type="application/xml",
        headers={"Content-Disposition": f'attachment; filename="{document.filename}"'},
    )


@router.get("/master-bill", response_model=MasterBill)
async def get_master_bill(
    store: DocumentStore = Depends(get_document_store),
) -> MasterBill:
    master_bill = await get_current_master_bill(store)
    if master_bill is None:
        raise HTTPException(status_code=404, detail="No master bill found.")
    return master_bill
