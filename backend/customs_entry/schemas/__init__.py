from customs_entry.schemas.declaration import (
    BulkDeleteRequest,
    BulkDeleteResponse,
    Declaration,
    DeclarationPayload,
    DeleteResponse,
    Item,
    ItemsReplaceRequest,
    Packages,
    Valuation,
)
from customs_entry.schemas.health import HealthResponse
from customs_entry.schemas.master_bill import (
    Consignment,
    Container,
    GenerateDocumentRequest,
    MasterBill,
    MasterBillPayload,
    Shipment,
)
from customs_entry.schemas.party import Exporter, Importer, PartyPayload
from customs_entry.schemas.tariff import TariffDefinition

__all__ = [
    "BulkDeleteRequest",
    "BulkDeleteResponse",
    "Consignment",
    "Container",
    "Declaration",
    "DeclarationPayload",
    "DeleteResponse",
    "Exporter",
    "GenerateDocumentRequest",
    "HealthResponse",
    "Importer",
    "Item",
    "ItemsReplaceRequest",
    "MasterBill",
    "MasterBillPayload",
    "Packages",
    "PartyPayload",
    "Shipment",
    "TariffDefinition",
    "Valuation",
]
