"""Domain exceptions raised by the services and translated to HTTP errors by the API layer."""


class DeclarationNotFoundError(LookupError):
    """The targeted declaration id is not in the store."""

    def __init__(self, declaration_id: str):
        super().__init__(f"Declaration not found: {declaration_id}")
        self.declaration_id = declaration_id


class PayloadValidationError(ValueError):
    """A bulk payload is malformed; raised before anything is mutated."""


class StoreError(RuntimeError):
    """The document store could not be read or written."""
