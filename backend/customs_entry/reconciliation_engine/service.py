"""EntityReconciler: converges importer/exporter payloads onto stable parties.

Flow:
1. Load the importer and exporter collections once (PartyRegistry.load)
2. Resolve the importer, then the exporter against the resolved importer id
3. Write back only the collections that changed (PartyRegistry.save)

Importers:
- id sent: reuse the stored importer and overwrite its tin; an unknown id is
  registered as-is so later submissions converge on it
- no id: always a new importer

Exporters:
- id sent: merge the sent fields into the stored exporter, or register the id
  as a new exporter linked to the importer
- tin sent: reuse the exporter with the same (tin, importer), else create one
- name only: always a new exporter, no matching by name
"""

import logging
import uuid
from dataclasses import dataclass, field
from typing import Callable

from customs_entry.reconciliation_engine.matchers import (
    build_exporter,
    build_importer,
    find_exporter,
    find_exporter_by_tin,
    find_importer,
    merge_present_fields,
    refresh_descriptive_fields,
)
from customs_entry.schemas.party import Exporter, Importer, PartyPayload
from customs_entry.stores.base import EXPORTERS, IMPORTERS, DocumentStore

logger = logging.getLogger("customs.reconciler")


def new_id() -> str:
    return str(uuid.uuid4())


@dataclass
class PartyRegistry:
    """In-memory snapshot of the party collections for one operation."""

    importers: list[Importer] = field(default_factory=list)
    exporters: list[Exporter] = field(default_factory=list)
    dirty: set[str] = field(default_factory=set)

    @classmethod
    async def load(cls, store: DocumentStore) -> "PartyRegistry":
        importers = await store.read(IMPORTERS)
        exporters = await store.read(EXPORTERS)
        return cls(
            importers=[Importer.model_validate(i) for i in importers or []],
            exporters=[Exporter.model_validate(e) for e in exporters or []],
        )

    async def save(self, store: DocumentStore) -> None:
        if IMPORTERS in self.dirty:
            await store.write(IMPORTERS, [i.to_document() for i in self.importers])
        if EXPORTERS in self.dirty:
            await store.write(EXPORTERS, [e.to_document() for e in self.exporters])
        self.dirty.clear()

    def exporters_for(self, importer_id: str | None) -> list[Exporter]:
        if importer_id is None:
            return list(self.exporters)
        return [e for e in self.exporters if e.owning_importer_id == importer_id]


class EntityReconciler:
    """Resolves importer/exporter payloads to stable party ids."""

    def __init__(self, id_factory: Callable[[], str] = new_id):
        self.id_factory = id_factory

    def resolve_importer(self, registry: PartyRegistry, payload: PartyPayload) -> str | None:
        """Return the importer id for ``payload``, or None when it carries no identity."""
        if not payload.has_identity():
            return None

        if payload.id:
            existing = find_importer(registry.importers, payload.id)
            if existing is not None:
                # The tin is always taken from the latest request
                existing.tin = payload.number or ""
                registry.dirty.add(IMPORTERS)
                logger.debug("Reused importer %s", existing.id)
                return existing.id

            importer = build_importer(payload.id, payload)
            logger.info("Registered importer under supplied id %s", importer.id)
        else:
            importer = build_importer(self.id_factory(), payload)
            logger.info("Created importer %s (%s)", importer.id, importer.name)

        registry.importers.append(importer)
        registry.dirty.add(IMPORTERS)
        return importer.id

    def resolve_exporter(
        self,
        registry: PartyRegistry,
        payload: PartyPayload,
        importer_id: str | None,
    ) -> str | None:
        """Return the exporter id for ``payload`` linked to ``importer_id``."""
        if not payload.has_identity():
            return None

        if payload.id:
            existing = find_exporter(registry.exporters, payload.id)
            if existing is not None:
                changed = merge_present_fields(existing, payload)
                if existing.owning_importer_id is None and importer_id:
                    existing.owning_importer_id = importer_id
                    changed.append("uid")
                if changed:
                    registry.dirty.add(EXPORTERS)
                logger.debug("Reused exporter %s (updated: %s)", existing.id, changed or "none")
                return existing.id

            exporter = build_exporter(payload.id, payload, importer_id)
            logger.info("Registered exporter under supplied id %s", exporter.id)

        elif payload.number:
            existing = find_exporter_by_tin(registry.exporters, payload.number, importer_id)
            if existing is not None:
                refresh_descriptive_fields(existing, payload)
                registry.dirty.add(EXPORTERS)
                logger.debug("Matched exporter %s by tin", existing.id)
                return existing.id

            exporter = build_exporter(self.id_factory(), payload, importer_id)
            logger.info("Created exporter %s for tin %s", exporter.id, exporter.tin)

        else:
            exporter = build_exporter(self.id_factory(), payload, importer_id)
            logger.info("Created exporter %s (%s) without tin", exporter.id, exporter.name)

        registry.exporters.append(exporter)
        registry.dirty.add(EXPORTERS)
        return exporter.id

    def resolve(
        self,
        registry: PartyRegistry,
        importer: PartyPayload,
        exporter: PartyPayload,
    ) -> tuple[PartyPayload, PartyPayload]:
        """Resolve both parties, importer first, and return the references with ids set."""
        importer_id = self.resolve_importer(registry, importer)
        exporter_id = self.resolve_exporter(registry, exporter, importer_id)

        if importer_id is not None:
            importer = importer.model_copy(update={"id": importer_id})
        if exporter_id is not None:
            exporter = exporter.model_copy(update={"id": exporter_id})
        return importer, exporter
