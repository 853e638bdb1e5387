from lxml import etree

from customs_entry.document_assembler.tree import XmlNode


def to_element(node: XmlNode) -> etree._Element:
    el = etree.Element(node.tag, attrib=node.attributes)
    if node.text is not None:
        el.text = node.text
    for child in node.children:
        el.append(to_element(child))
    return el


def serialize_document(root: XmlNode, pretty_print: bool = True) -> bytes:
    """Render the tree as a UTF-8 XML document with an XML declaration."""
    return etree.tostring(
        to_element(root),
        encoding="UTF-8",
        xml_declaration=True,
        pretty_print=pretty_print,
    )
