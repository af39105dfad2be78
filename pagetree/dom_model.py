"""In-memory page tree: tags and the nodes that own them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Tuple

TEXT_TAG = "Text"
TEXT_ATTRIBUTE = "text"


@dataclass
class Tag:
    """Payload of a node: tag kind, closing flag and attributes."""

    name: str
    closable: bool = True
    attributes: Dict[str, str] = field(default_factory=dict)
    legal_parents: List[str] = field(default_factory=list)

    @property
    def is_text(self) -> bool:
        return self.name == TEXT_TAG

    def get_attribute(self, name: str) -> Optional[str]:
        return self.attributes.get(name)

    def set_attribute(self, name: str, value: str) -> None:
        self.attributes[name] = value


@dataclass(eq=False, repr=False)
class Node:
    """A tag plus its ordered, exclusively owned children."""

    tag: Tag
    children: List["Node"] = field(default_factory=list)

    def __eq__(self, other: object) -> bool:
        # Compared pairwise with a stack so deep trees stay off the call stack.
        if not isinstance(other, Node):
            return NotImplemented
        stack: List[Tuple[Node, Node]] = [(self, other)]
        while stack:
            left, right = stack.pop()
            if left.tag != right.tag or len(left.children) != len(right.children):
                return False
            stack.extend(zip(left.children, right.children))
        return True

    def __repr__(self) -> str:
        return f"Node(tag={self.tag!r}, children={len(self.children)})"

    def add_child(self, child: "Node") -> "Node":
        self.children.append(child)
        return child

    def iter_preorder(self) -> Iterator["Node"]:
        """Yield this node and its descendants in pre-order."""

        stack: List[Node] = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def count(self) -> int:
        return sum(1 for _ in self.iter_preorder())


def text_node(text: str) -> Node:
    """Build a text leaf holding ``text``."""

    return Node(Tag(name=TEXT_TAG, closable=False, attributes={TEXT_ATTRIBUTE: text}))
