"""Pydantic schemas for the master bill and customs document generation."""

from datetime import datetime

from pydantic import Field

from customs_entry.schemas.common import CamelModel, Text
from customs_entry.schemas.declaration import Packages
from customs_entry.schemas.party import PartyPayload


class Consignment(CamelModel):
    departure_date: Text = ""
    arrival_date: Text = ""
    shipping_port: Text = ""
    transport_mode: Text = ""


class Shipment(CamelModel):
    vessel_code: Text = ""
    voyage_no: Text = ""
    shipping_agent: Text = ""
    bill_number: Text = ""


class Container(CamelModel):
    container_number: Text = ""
    container_type: Text = ""
    seal_number: Text = ""
    dock_receipt: Text = ""
    marks_numbers: Text = ""
    volume: Text = ""
    weight: Text = ""


class MasterBillPayload(CamelModel):
    consignment: Consignment = Field(default_factory=Consignment)
    shipment: Shipment = Field(default_factory=Shipment)
    packages: Packages = Field(default_factory=Packages)
    containers: list[Container] = Field(default_factory=list)
    exporter: PartyPayload = Field(default_factory=PartyPayload)


class MasterBill(MasterBillPayload):
    id: str
    version: int = 1
    created_at: datetime
    updated_at: datetime


class GenerateDocumentRequest(CamelModel):
    master_bill: MasterBillPayload = Field(default_factory=MasterBillPayload)
    # None selects every persisted declaration
    declaration_ids: list[str] | None = None
