"""Customs document generation.

Flow:
1. Select the declarations (all, or the requested ids in store order)
2. Build the next master bill version
3. Assemble the SAD entry tree and serialize it to XML
4. Persist the master bill once the document is complete
"""

import logging
from dataclasses import dataclass
from datetime import date

from customs_entry.document_assembler.builder import assemble
from customs_entry.document_assembler.serializer import serialize_document
from customs_entry.errors import PayloadValidationError
from customs_entry.schemas.declaration import Declaration
from customs_entry.schemas.master_bill import MasterBill, MasterBillPayload
from customs_entry.services.master_bill_service import next_master_bill, write_master_bill
from customs_entry.services.tariff_service import load_catalog
from customs_entry.stores.base import DECLARATIONS, DocumentStore

logger = logging.getLogger("customs.documents")


@dataclass
class GeneratedDocument:
    content: bytes
    filename: str
    master_bill: MasterBill
    declaration_count: int


class CustomsDocumentService:
    def __init__(self, store: DocumentStore, filename: str = "SADEntry.xml"):
        self.store = store
        self.filename = filename

    async def select_declarations(self, declaration_ids: list[str] | None = None) -> list[Declaration]:
        rows = await self.store.read(DECLARATIONS)
        declarations = [Declaration.model_validate(row) for row in rows or []]
        if declaration_ids is None:
            return declarations

        wanted = set(declaration_ids)
        return [d for d in declarations if d.id in wanted]

    async def generate(
        self,
        payload: MasterBillPayload,
        declaration_ids: list[str] | None = None,
        generated_on: date | None = None,
    ) -> GeneratedDocument:
        declarations = await self.select_declarations(declaration_ids)
        if not declarations:
            raise PayloadValidationError("No declarations selected for the customs document.")

        master_bill = await next_master_bill(self.store, payload)
        tariffs = await load_catalog(self.store)

        root = assemble(master_bill, declarations, tariffs, generated_on)
        content = serialize_document(root)
        await write_master_bill(self.store, master_bill)

        logger.info(
            "Generated %s for master bill %s (%d declarations, %d bytes)",
            self.filename, master_bill.id, len(declarations), len(content),
        )
        return GeneratedDocument(
            content=content,
            filename=self.filename,
            master_bill=master_bill,
            declaration_count=len(declarations),
        )
