from customs_entry.models.base import Base, TimestampMixin
from customs_entry.models.document_store import StoredDocument

__all__ = [
    "Base",
    "TimestampMixin",
    "StoredDocument",
]
