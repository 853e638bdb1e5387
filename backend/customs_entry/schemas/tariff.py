from customs_entry.schemas.common import CamelModel, OptionalText, Text


class TariffDefinition(CamelModel):
    id: OptionalText = None
    code: Text = ""
    description: Text = ""
    duty: Text = ""
    unit: Text = ""
