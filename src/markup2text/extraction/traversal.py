"""Generic tree-to-token traversal.

The traversal is format-agnostic. A per-format policy decides for every node
whether to descend into it and may emit tokens right away or postpone one
token until the whole subtree below the node has been processed.

Output order for a node N:

    [tokens emitted by decide(N)] [output of N's children] [postponed token]

The traversal uses an explicit stack so that postponed tokens survive
arbitrarily deep trees without recursion.
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any, Protocol

from lxml import etree  # type: ignore

from ..tokens import PARAGRAPH_BOUNDARY, Token
from ..tree import wrap

Emit = Callable[[Token], None]


class ActionType(Enum):
    """What the traversal does with a node after the policy saw it."""

    SKIP = "skip"  # continue with the next sibling
    RECURSE = "recurse"  # process the children first


@dataclass(frozen=True)
class NodeAction:
    """Policy decision for one node plus an optional postponed token."""

    type: ActionType
    postponed_token: Token | None = None

    @classmethod
    def recurse(cls, postponed_token: Token | None = None) -> "NodeAction":
        return cls(ActionType.RECURSE, postponed_token)

    @classmethod
    def skip(cls, postponed_token: Token | None = None) -> "NodeAction":
        return cls(ActionType.SKIP, postponed_token)


SKIP = NodeAction(ActionType.SKIP)
SIMPLY_RECURSE = NodeAction(ActionType.RECURSE)
RECURSE_PARAGRAPH = NodeAction(ActionType.RECURSE, PARAGRAPH_BOUNDARY)


class TreeNode(Protocol):
    """What the traversal needs from a node."""

    @property
    def children(self) -> Sequence[Any]: ...


class NodePolicy(Protocol):
    """Per-format conversion of single nodes.

    ``decide`` is shallow: it never looks at the subtree itself, it only says
    whether the traversal should.
    """

    def decide(self, node: Any, emit: Emit) -> NodeAction: ...


@dataclass(frozen=True)
class _Frame:
    node: Any = None
    token: Token | None = None  # deferred token frames carry no node


def extract(root: TreeNode | None, policy: NodePolicy) -> list[Token]:
    """Walk the tree below ``root`` in document order and collect tokens."""
    tokens: list[Token] = []
    if root is None:
        return tokens

    emit = tokens.append
    stack: list[_Frame] = [_Frame(node=root)]
    while stack:
        frame = stack.pop()
        if frame.token is not None:
            tokens.append(frame.token)
            continue

        node = frame.node
        action = policy.decide(node, emit)
        postponed = action.postponed_token

        if action.type is ActionType.SKIP:
            # Nothing below to wait for
            if postponed is not None:
                tokens.append(postponed)
            continue

        if postponed is not None:
            stack.append(_Frame(token=postponed))
        stack.extend(_Frame(node=child) for child in reversed(node.children))

    return tokens


def extract_from_document(document: etree._ElementTree, policy: NodePolicy) -> list[Token]:
    """Extract the token sequence of a parsed lxml document."""
    return extract(wrap(document.getroot()), policy)
