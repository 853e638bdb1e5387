"""Typed intermediate tree for XML documents.

The assembler builds XmlNode trees; the serializer turns them into text. The
schema shape never deals with escaping or formatting.
"""

import re
from dataclasses import dataclass, field

# Characters outside the XML 1.0 Char production
_XML_ILLEGAL = re.compile("[^\u0009\u000A\u000D\u0020-\uD7FF\uE000-\uFFFD\U00010000-\U0010FFFF]")


@dataclass
class XmlNode:
    """An element with optional text, attributes and child elements."""

    tag: str
    text: str | None = None
    attributes: dict[str, str] = field(default_factory=dict)
    children: list["XmlNode"] = field(default_factory=list)

    def find(self, *path: str) -> "XmlNode | None":
        """First descendant reached by following ``path`` tag by tag."""
        node: XmlNode | None = self
        for tag in path:
            node = next((c for c in node.children if c.tag == tag), None)
            if node is None:
                return None
        return node

    def find_all(self, tag: str) -> list["XmlNode"]:
        return [c for c in self.children if c.tag == tag]

    def text_of(self, *path: str) -> str | None:
        node = self.find(*path)
        return node.text if node is not None else None


def element(tag: str, *children: XmlNode) -> XmlNode:
    return XmlNode(tag=tag, children=list(children))


def text_element(tag: str, value: str | None) -> XmlNode:
    return XmlNode(tag=tag, text=xml_text(value))


def xml_text(value: str | None) -> str:
    """Drop characters XML 1.0 cannot represent; None becomes ""."""
    if not value:
        return ""
    return _XML_ILLEGAL.sub("", value)
