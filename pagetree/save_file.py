"""JSON save file for page work: the flattened tag tree plus CSS text."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import List, Tuple

from pydantic import BaseModel, Field, ValidationError

from .dom_model import Node
from .flatten import flatten
from .io_utils import stable_json_dumps, write_text
from .rebuild import FormatError, rebuild
from .records import FlatRecord

logger = logging.getLogger(__name__)


class SaveDocument(BaseModel):
    """Top-level save file payload."""

    tag_tree: List[FlatRecord] = Field(
        default_factory=list,
        description="Nodes in pre-order; the order is needed to restore sibling order.",
    )
    css_content: str = Field("", description="Stylesheet text saved alongside the page.")


def dump_document(root: Node, css_content: str = "") -> str:
    document = SaveDocument(tag_tree=flatten(root), css_content=css_content)
    return stable_json_dumps(document.model_dump(mode="json"))


def save_document(path: Path, root: Node, css_content: str = "") -> Path:
    """Write the page tree and CSS to ``path`` and return the path."""

    written = write_text(Path(path), dump_document(root, css_content))
    logger.debug("Saved page work to %s", written)
    return written


def parse_document(
    text: str, *, strict_child_counts: bool = False
) -> Tuple[Node, str]:
    """Parse save file text into ``(root, css_content)``."""

    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise FormatError(f"save file is not valid JSON: {exc}") from exc
    try:
        document = SaveDocument.model_validate(payload)
    except ValidationError as exc:
        raise FormatError(f"invalid save file: {exc}") from exc

    root = rebuild(document.tag_tree, strict_child_counts=strict_child_counts)
    return root, document.css_content


def load_document(
    path: Path, *, strict_child_counts: bool = False
) -> Tuple[Node, str]:
    """Load ``(root, css_content)`` from a save file; OS errors propagate."""

    text = Path(path).read_text(encoding="utf-8")
    root, css_content = parse_document(text, strict_child_counts=strict_child_counts)
    logger.debug("Loaded page work from %s", path)
    return root, css_content
