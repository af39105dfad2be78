"""Flatten a page tree into pre-order indexed records."""

from __future__ import annotations

import logging
from typing import List, Tuple

from .dom_model import Node
from .records import ROOT_PARENT_INDEX, FlatRecord

logger = logging.getLogger(__name__)


def flatten(root: Node) -> List[FlatRecord]:
    """Return one record per node, in pre-order, root first.

    Node indices are assigned from a counter starting at 0, so they form the
    range ``[0, N)`` and every parent index is smaller than its child's index.
    The tree itself is left untouched.
    """

    records: List[FlatRecord] = []
    # (node, parent index) pairs; children pushed reversed to pop in order.
    stack: List[Tuple[Node, int]] = [(root, ROOT_PARENT_INDEX)]
    while stack:
        node, parent_index = stack.pop()
        node_index = len(records)
        records.append(
            FlatRecord.from_tag(
                node.tag,
                child_count=len(node.children),
                node_index=node_index,
                parent_index=parent_index,
            )
        )
        for child in reversed(node.children):
            stack.append((child, node_index))

    logger.debug("Flattened %d node(s)", len(records))
    return records
