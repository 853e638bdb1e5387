"""Shared pydantic building blocks.

Inbound payloads are loosely typed (numbers where text is expected, nulls,
missing keys). Normalization happens once here, at validation time, so the
services and the document assembler can rely on plain strings.
"""

import math
from decimal import Decimal
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict
from pydantic.alias_generators import to_camel


def to_text(value: Any) -> str:
    """Coerce a scalar to text; None becomes ""."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if not math.isfinite(value):
            return ""
        return str(int(value)) if value.is_integer() else repr(value)
    if isinstance(value, (int, Decimal)):
        return str(value)
    return str(value)


def to_optional_text(value: Any) -> str | None:
    """Like to_text, but keeps None so "absent" stays distinguishable from ""."""
    if value is None:
        return None
    return to_text(value)


Text = Annotated[str, BeforeValidator(to_text)]
OptionalText = Annotated[str | None, BeforeValidator(to_optional_text)]


class CamelModel(BaseModel):
    """Snake_case attributes, camelCase on the wire and in the store."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_document(self) -> dict:
        """JSON-ready dict in the persisted (camelCase) shape."""
        return self.model_dump(mode="json", by_alias=True)
