"""Rebuild a page tree from flat records."""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional

from .dom_model import Node
from .records import FlatRecord

logger = logging.getLogger(__name__)


class FormatError(ValueError):
    """Raised when saved page data is malformed or inconsistent."""


def rebuild(records: Iterable[FlatRecord], *, strict_child_counts: bool = False) -> Node:
    """Reconstruct the tree described by ``records``.

    Edges come from ``parent_index`` alone; sibling order is the order in
    which records are consumed. Parents must precede their children, which
    holds for the pre-order sequence produced by ``flatten``.
    """

    root: Optional[Node] = None
    nodes: Dict[int, Node] = {}
    expected_children: Dict[int, int] = {}

    for position, record in enumerate(records):
        if record.node_index in nodes:
            raise FormatError(
                f"record {position}: duplicate node_index {record.node_index}"
            )

        node = Node(record.to_tag())
        if record.is_root:
            if root is not None:
                raise FormatError(
                    f"record {position}: more than one root (node_index {record.node_index})"
                )
            root = node
        else:
            parent = nodes.get(record.parent_index)
            if parent is None and root is None:
                raise FormatError(
                    f"record {position}: tag tree has no root record "
                    f"(parent_index {record.parent_index})"
                )
            if parent is None:
                raise FormatError(
                    f"record {position}: parent_index {record.parent_index} "
                    "does not reference an earlier node"
                )
            parent.add_child(node)

        nodes[record.node_index] = node
        expected_children[record.node_index] = record.number_of_children

    if not nodes:
        raise FormatError("tag tree is empty")

    mismatches = _child_count_mismatches(nodes, expected_children)
    if mismatches:
        message = "child count mismatch: " + "; ".join(mismatches)
        if strict_child_counts:
            raise FormatError(message)
        logger.warning(message)

    logger.debug("Rebuilt %d node(s)", len(nodes))
    return root


def _child_count_mismatches(
    nodes: Dict[int, Node], expected_children: Dict[int, int]
) -> List[str]:
    problems: List[str] = []
    for node_index, node in nodes.items():
        expected = expected_children[node_index]
        if len(node.children) != expected:
            problems.append(
                f"node {node_index} <{node.tag.name}> stores {expected}, "
                f"has {len(node.children)}"
            )
    return problems
