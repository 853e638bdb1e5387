"""ORM model for the whole-document store: one row per logical collection."""

from typing import Any

from sqlalchemy import JSON, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from customs_entry.models.base import Base, TimestampMixin


class StoredDocument(Base, TimestampMixin):
    __tablename__ = "document_store"

    collection: Mapped[str] = mapped_column(String(100), primary_key=True)
    data: Mapped[Any] = mapped_column(JSON, nullable=True)
    version: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
