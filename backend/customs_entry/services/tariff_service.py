"""Read-only tariff reference data."""

from customs_entry.schemas.tariff import TariffDefinition
from customs_entry.stores.base import TARIFFS, DocumentStore


class TariffCatalog:
    """Code -> unit lookup used to resolve a tariff line's display unit."""

    def __init__(self, definitions: list[TariffDefinition] | None = None):
        self._units: dict[str, str] = {}
        for definition in definitions or []:
            # First definition with a unit wins for duplicated codes
            if definition.code and definition.unit and definition.code not in self._units:
                self._units[definition.code] = definition.unit

    def unit_for(self, code: str) -> str | None:
        return self._units.get(code)

    def __len__(self) -> int:
        return len(self._units)


async def list_tariffs(store: DocumentStore) -> list[TariffDefinition]:
    rows = await store.read(TARIFFS)
    return [TariffDefinition.model_validate(row) for row in rows or []]


async def load_catalog(store: DocumentStore) -> TariffCatalog:
    return TariffCatalog(await list_tariffs(store))
