"""Read-only node view over lxml trees.

lxml keeps character data in ``.text`` and ``.tail`` instead of separate
nodes. Traversal wants a DOM-like tree where text runs are children in
document order, so elements are wrapped lazily:

    <p>a<b>b</b>c</p>  ->  p[TEXT "a", b[TEXT "b"], TEXT "c"]
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from lxml import etree  # type: ignore

from ..core.logging import log


class NodeKind(Enum):
    ELEMENT = "element"
    TEXT = "text"
    COMMENT = "comment"
    OTHER = "other"  # processing instructions, entities


@dataclass(frozen=True)
class XmlNode:
    """A node of a parsed document.

    ``element`` is the wrapped lxml node; text nodes carry only ``value``.
    """

    kind: NodeKind
    element: etree._Element | None = None
    value: str | None = None

    @property
    def name(self) -> str | None:
        """Local tag name without namespace (elements only)."""
        if self.kind is not NodeKind.ELEMENT or self.element is None:
            return None
        return etree.QName(self.element).localname

    @property
    def text(self) -> str | None:
        """Character data of text and comment nodes."""
        if self.kind is NodeKind.TEXT:
            return self.value
        if self.kind is NodeKind.COMMENT and self.element is not None:
            return self.element.text
        return None

    @property
    def children(self) -> list["XmlNode"]:
        if self.kind is not NodeKind.ELEMENT or self.element is None:
            return []

        result: list[XmlNode] = []
        if self.element.text:
            result.append(text_node(self.element.text))
        for child in self.element:
            result.append(wrap(child))
            if child.tail:
                result.append(text_node(child.tail))
        return result

    def get(self, attribute: str, default: str | None = None) -> str | None:
        """Attribute lookup by (unqualified) name."""
        if self.kind is not NodeKind.ELEMENT or self.element is None:
            return default
        return self.element.get(attribute, default)

    def has_attribute(self, attribute: str, value: str) -> bool:
        return self.get(attribute) == value

    def text_content(self) -> str:
        """Concatenated text of the subtree, like DOM ``textContent``."""
        if self.kind is NodeKind.ELEMENT and self.element is not None:
            return "".join(self.element.itertext())
        return self.text or ""

    def element_children(self, name: str | None = None) -> list["XmlNode"]:
        """Direct element children, optionally only those called ``name``."""
        return [
            child
            for child in self.children
            if child.kind is NodeKind.ELEMENT and (name is None or child.name == name)
        ]


def text_node(value: str) -> XmlNode:
    return XmlNode(NodeKind.TEXT, value=value)


def wrap(element: etree._Element) -> XmlNode:
    """Wrap an lxml node (element, comment, PI or entity)."""
    if isinstance(element, etree._Comment):
        return XmlNode(NodeKind.COMMENT, element)
    if isinstance(element, (etree._ProcessingInstruction, etree._Entity)):
        return XmlNode(NodeKind.OTHER, element)
    return XmlNode(NodeKind.ELEMENT, element)


def _parser(recover: bool) -> etree.XMLParser:
    return etree.XMLParser(ns_clean=True, recover=recover)


def parse_document(content: bytes | str, recover: bool = False) -> XmlNode:
    """Parse XML content and return its root element."""
    if isinstance(content, str):
        content = content.encode("utf-8")
    root = etree.fromstring(content, _parser(recover))
    if root is None:
        raise etree.XMLSyntaxError("document has no root element", 0, 0, 0)
    return wrap(root)


def load_document(file_path: Path, recover: bool = False) -> XmlNode:
    """Parse an XML file and return its root element."""
    try:
        tree = etree.parse(str(file_path), _parser(recover))
    except etree.XMLSyntaxError as e:
        log.error("tree.load.error", file=str(file_path), error=str(e))
        raise

    root = tree.getroot()
    if root is None:
        raise etree.XMLSyntaxError(f"{file_path}: document has no root element", 0, 0, 0)
    return wrap(root)
