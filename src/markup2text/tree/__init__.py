"""Node-tree view over parsed documents."""

from .nodes import NodeKind, XmlNode, load_document, parse_document, text_node, wrap

__all__ = ["NodeKind", "XmlNode", "load_document", "parse_document", "text_node", "wrap"]
