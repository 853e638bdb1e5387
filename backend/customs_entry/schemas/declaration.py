"""Pydantic schemas for declarations and their tariff line items."""

from pydantic import AliasChoices, Field

from customs_entry.schemas.common import CamelModel, OptionalText, Text
from customs_entry.schemas.party import PartyPayload


class Packages(CamelModel):
    pkg_count: Text = ""
    pkg_type: Text = ""
    gross_wt: Text = ""
    gross_vol: Text = ""
    contents: Text = ""


class Valuation(CamelModel):
    net_cost: Text = ""
    net_freight: Text = ""
    net_insurance: Text = ""


class Item(CamelModel):
    """One tariff line. Freight and insurance are always computed server-side."""

    id: OptionalText = None
    code: Text = ""
    desc: Text = ""
    qty: Text = ""
    unit: Text = ""
    cost: Text = ""
    freight: Text = "0.00"
    insurance: Text = "0.00"
    inv_number: Text = ""
    procedure: Text = ""


class DeclarationPayload(CamelModel):
    transport_mode: Text = ""
    bill_number: Text = ""
    importer: PartyPayload = Field(default_factory=PartyPayload)
    exporter: PartyPayload = Field(default_factory=PartyPayload)
    packages: Packages = Field(default_factory=Packages)
    valuation: Valuation = Field(default_factory=Valuation)
    # "tariffs" is the legacy key for the same list
    items: list[Item] | None = Field(
        default=None, validation_alias=AliasChoices("items", "tariffs")
    )


class Declaration(DeclarationPayload):
    id: str
    items: list[Item] = Field(default_factory=list)


class ItemsReplaceRequest(CamelModel):
    items: list[Item] | None = Field(
        default=None, validation_alias=AliasChoices("items", "tariffs")
    )


class BulkDeleteRequest(CamelModel):
    ids: list[str] | None = None


class BulkDeleteResponse(CamelModel):
    message: str
    deleted_count: int


class DeleteResponse(CamelModel):
    message: str
