"""Pure party-matching functions for reconciliation, no store dependency."""

from customs_entry.schemas.party import Exporter, Importer, PartyPayload

# Payload attribute -> Exporter attribute
EXPORTER_FIELDS = {
    "name": "name",
    "number": "tin",
    "address": "address",
    "city": "city",
    "state": "state",
    "postalcode": "postalcode",
    "country": "country",
    "phone": "phone",
}

DESCRIPTIVE_FIELDS = ("name", "address", "city", "state", "postalcode", "country", "phone")


def find_importer(importers: list[Importer], importer_id: str) -> Importer | None:
    return next((i for i in importers if i.id == importer_id), None)


def find_exporter(exporters: list[Exporter], exporter_id: str) -> Exporter | None:
    return next((e for e in exporters if e.id == exporter_id), None)


def find_exporter_by_tin(
    exporters: list[Exporter],
    tin: str,
    importer_id: str | None,
) -> Exporter | None:
    """Exporters are unique per (tin, owning importer)."""
    return next(
        (e for e in exporters if e.tin == tin and e.owning_importer_id == importer_id),
        None,
    )


def merge_present_fields(exporter: Exporter, payload: PartyPayload) -> list[str]:
    """Overwrite exporter fields with every payload field that was sent as a string.

    Returns the names of the fields that changed.
    """
    changed = []
    for source, target in EXPORTER_FIELDS.items():
        value = getattr(payload, source)
        if isinstance(value, str) and getattr(exporter, target) != value:
            setattr(exporter, target, value)
            changed.append(target)
    return changed


def refresh_descriptive_fields(exporter: Exporter, payload: PartyPayload) -> None:
    """Prefer non-empty incoming values, then the stored value, then ""."""
    for name in DESCRIPTIVE_FIELDS:
        incoming = getattr(payload, name)
        setattr(exporter, name, incoming or getattr(exporter, name) or "")


def build_exporter(
    exporter_id: str,
    payload: PartyPayload,
    importer_id: str | None,
) -> Exporter:
    return Exporter(
        id=exporter_id,
        name=payload.name or "",
        tin=payload.number or "",
        address=payload.address or "",
        city=payload.city or "",
        state=payload.state or "",
        postalcode=payload.postalcode or "",
        country=payload.country or "",
        phone=payload.phone or "",
        owning_importer_id=importer_id,
    )


def build_importer(importer_id: str, payload: PartyPayload) -> Importer:
    return Importer(id=importer_id, name=payload.name or "", tin=payload.number or "")
