from customs_entry.cost_allocator.allocation import (
    allocate_equally,
    allocate_proportional,
    format_cents,
    parse_amount,
    to_cents,
)
from customs_entry.cost_allocator.freight import apply_charges

__all__ = [
    "allocate_equally",
    "allocate_proportional",
    "apply_charges",
    "format_cents",
    "parse_amount",
    "to_cents",
]
