"""Tests for CustomsDocumentService and the master bill record."""

from datetime import date

import pytest
from lxml import etree

from customs_entry.errors import PayloadValidationError
from customs_entry.schemas.master_bill import MasterBillPayload
from customs_entry.schemas.tariff import TariffDefinition
from customs_entry.services.customs_document_service import CustomsDocumentService
from customs_entry.services.master_bill_service import get_current_master_bill, save_master_bill
from customs_entry.services.tariff_service import TariffCatalog, load_catalog
from customs_entry.stores import DECLARATIONS, TARIFFS


def _declaration(declaration_id: str, bill_number: str) -> dict:
    return {
        "id": declaration_id,
        "transportMode": "SEA",
        "billNumber": bill_number,
        "importer": {"id": "i1", "number": "IMP-1"},
        "exporter": {"id": "e1", "number": "EXP-1"},
        "items": [{"id": f"{declaration_id}-1", "code": "0101", "cost": "10.00"}],
    }


@pytest.fixture
async def seeded_store(store):
    await store.write(DECLARATIONS, [_declaration("a", "HBL-A"), _declaration("b", "HBL-B")])
    await store.write(TARIFFS, [{"code": "0101", "unit": "NO"}])
    return store


@pytest.fixture
def service(seeded_store) -> CustomsDocumentService:
    return CustomsDocumentService(seeded_store)


class TestSelectDeclarations:
    async def test_all_when_no_ids(self, service):
        selected = await service.select_declarations()
        assert [d.id for d in selected] == ["a", "b"]

    async def test_subset_keeps_store_order(self, service):
        selected = await service.select_declarations(["b", "a", "missing"])
        assert [d.id for d in selected] == ["a", "b"]


class TestGenerate:
    async def test_generates_document(self, service):
        document = await service.generate(MasterBillPayload(), generated_on=date(2026, 1, 2))

        assert document.filename == "SADEntry.xml"
        assert document.declaration_count == 2
        root = etree.fromstring(document.content)
        assert root.findtext("Date") == "2026-01-02"
        assert root.findtext("ConsolidatedShipment/ConsolidatedItem/Items/QtyUnit") == "NO"

    async def test_persists_master_bill(self, service, seeded_store):
        document = await service.generate(MasterBillPayload(), ["a"])

        current = await get_current_master_bill(seeded_store)
        assert current.id == document.master_bill.id
        assert current.version == 1

    async def test_empty_selection_is_rejected(self, service, seeded_store):
        with pytest.raises(PayloadValidationError):
            await service.generate(MasterBillPayload(), ["missing"])

        assert await get_current_master_bill(seeded_store) is None


class TestMasterBill:
    async def test_version_increments_and_timestamps_are_set(self, store):
        first = await save_master_bill(store, MasterBillPayload())
        second = await save_master_bill(store, MasterBillPayload())

        assert (first.version, second.version) == (1, 2)
        assert second.id != first.id
        assert second.created_at == second.updated_at


class TestTariffCatalog:
    def test_first_unit_wins_for_duplicate_codes(self):
        catalog = TariffCatalog([
            TariffDefinition(code="0101", unit=""),
            TariffDefinition(code="0101", unit="NO"),
            TariffDefinition(code="0101", unit="KG"),
        ])
        assert catalog.unit_for("0101") == "NO"
        assert catalog.unit_for("9999") is None
        assert len(catalog) == 1


class TestGenerateFailure:
    async def test_master_bill_is_not_written_when_serialization_fails(self, service, seeded_store, monkeypatch):
        def fail(root):
            raise ValueError("cannot serialize")

        monkeypatch.setattr(
            "customs_entry.services.customs_document_service.serialize_document", fail
        )

        with pytest.raises(ValueError):
            await service.generate(MasterBillPayload())

        assert await get_current_master_bill(seeded_store) is None


class TestSeededTariffs:
    async def test_catalog_reads_seeded_definitions(self, store):
        await store.write(TARIFFS, [
            {"id": "t1", "code": "94036000", "description": "Wooden furniture", "duty": "22", "unit": "NO"},
        ])

        catalog = await load_catalog(store)
        assert catalog.unit_for("94036000") == "NO"
