"""Per-format node policies."""

from ..core.config import Settings
from ..extraction import NodePolicy
from ..tree import XmlNode
from .common import Labels
from .tei import TeiPolicy
from .xhtml import XhtmlPolicy


class UnsupportedDocumentError(Exception):
    """Raised when no policy handles the document's root element."""

    pass


POLICIES = {
    TeiPolicy.root_name: TeiPolicy,
    XhtmlPolicy.root_name: XhtmlPolicy,
}


def policy_for_root(root: XmlNode, settings: Settings | None = None) -> NodePolicy:
    """Pick the policy by the name of the document's root element."""
    policy_class = POLICIES.get(root.name or "")
    if policy_class is None:
        raise UnsupportedDocumentError(f'No converter for root element "{root.name}"')

    labels = Labels.from_settings(settings) if settings is not None else Labels()
    return policy_class(labels)


__all__ = [
    "POLICIES",
    "Labels",
    "TeiPolicy",
    "UnsupportedDocumentError",
    "XhtmlPolicy",
    "policy_for_root",
]
