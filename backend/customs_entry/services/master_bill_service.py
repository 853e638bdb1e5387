"""The current master bill: a single record, replaced on every document generation."""

import logging
from datetime import datetime, timezone

from customs_entry.reconciliation_engine.service import new_id
from customs_entry.schemas.master_bill import MasterBill, MasterBillPayload
from customs_entry.stores.base import MASTER_BILL, DocumentStore

logger = logging.getLogger("customs.master_bill")


async def get_current_master_bill(store: DocumentStore) -> MasterBill | None:
    row = await store.read(MASTER_BILL)
    if not row:
        return None
    return MasterBill.model_validate(row)


async def next_master_bill(store: DocumentStore, payload: MasterBillPayload) -> MasterBill:
    """Build the record that would replace the current one, without writing it."""
    previous = await get_current_master_bill(store)
    now = datetime.now(timezone.utc)

    return MasterBill(
        **payload.model_dump(),
        id=new_id(),
        version=previous.version + 1 if previous else 1,
        created_at=now,
        updated_at=now,
    )


async def write_master_bill(store: DocumentStore, master_bill: MasterBill) -> None:
    await store.write(MASTER_BILL, master_bill.to_document())
    logger.info("Saved master bill %s (version %d)", master_bill.id, master_bill.version)


async def save_master_bill(store: DocumentStore, payload: MasterBillPayload) -> MasterBill:
    """Overwrite the current master bill, bumping its version."""
    master_bill = await next_master_bill(store, payload)
    await write_master_bill(store, master_bill)
    return master_bill
