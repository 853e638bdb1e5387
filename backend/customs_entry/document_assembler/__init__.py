from customs_entry.document_assembler.builder import assemble, discharge_port, resolve_unit
from customs_entry.document_assembler.serializer import serialize_document
from customs_entry.document_assembler.tree import XmlNode

__all__ = [
    "XmlNode",
    "assemble",
    "discharge_port",
    "resolve_unit",
    "serialize_document",
]
