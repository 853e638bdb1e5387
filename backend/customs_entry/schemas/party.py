"""Pydantic schemas for importer/exporter parties."""

from pydantic import Field

from customs_entry.schemas.common import CamelModel, OptionalText, Text


class PartyPayload(CamelModel):
    """Importer or exporter block as submitted on a declaration or master bill.

    Fields stay None when absent: reconciliation only overwrites stored values
    with fields that were actually sent. ``number`` carries the tax number (tin).
    """

    id: OptionalText = None
    name: OptionalText = None
    number: OptionalText = None
    address: OptionalText = None
    city: OptionalText = None
    state: OptionalText = None
    postalcode: OptionalText = None
    country: OptionalText = None
    phone: OptionalText = None

    def has_identity(self) -> bool:
        return bool(self.id or self.number or self.name)


class Importer(CamelModel):
    id: str
    name: Text = ""
    tin: Text = ""


class Exporter(CamelModel):
    id: str
    name: Text = ""
    tin: Text = ""
    address: Text = ""
    city: Text = ""
    state: Text = ""
    postalcode: Text = ""
    country: Text = ""
    phone: Text = ""
    owning_importer_id: OptionalText = Field(default=None, alias="uid")
