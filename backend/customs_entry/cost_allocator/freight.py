"""Freight and insurance charges for a declaration's tariff lines.

Shipment-level netFreight and netInsurance are spread over the lines in
proportion to each line's declared cost when the declaration has a positive
netCost, and in equal shares otherwise.
"""

import logging

from customs_entry.cost_allocator.allocation import (
    allocate_equally,
    allocate_proportional,
    parse_amount,
)
from customs_entry.schemas.declaration import Item, Valuation

logger = logging.getLogger("customs.cost_allocator.freight")


def apply_charges(items: list[Item], valuation: Valuation) -> list[Item]:
    """Return copies of ``items`` with freight and insurance recomputed."""
    if not items:
        return []

    if parse_amount(valuation.net_cost) > 0:
        weights = [item.cost for item in items]
        freight = allocate_proportional(valuation.net_freight, weights)
        insurance = allocate_proportional(valuation.net_insurance, weights)
        method = "proportional"
    else:
        freight = allocate_equally(valuation.net_freight, len(items))
        insurance = allocate_equally(valuation.net_insurance, len(items))
        method = "equal"

    logger.debug(
        "Allocated freight=%s insurance=%s over %d items (%s)",
        valuation.net_freight, valuation.net_insurance, len(items), method,
    )

    return [
        item.model_copy(update={"freight": f, "insurance": i})
        for item, f, i in zip(items, freight, insurance)
    ]
