"""Markup rendering for page trees."""

from __future__ import annotations

from typing import Dict, List, Tuple

from .dom_model import TEXT_ATTRIBUTE, Node, Tag

DOCTYPE_DECLARATION = "<!doctype html>"


def _render_attrs(attrs: Dict[str, str]) -> str:
    # Empty values are left out of the markup entirely.
    parts = [f' {name} = "{value}"' for name, value in attrs.items() if value]
    return "".join(parts)


def _open_tag(tag: Tag) -> str:
    if tag.is_text:
        return (tag.get_attribute(TEXT_ATTRIBUTE) or "") + "\n"
    return f"<{tag.name}{_render_attrs(tag.attributes)}>\n"


def render(root: Node) -> str:
    """Render the tree rooted at ``root`` as markup, one construct per line.

    Each tag is opened, its children rendered in order, then closed when the
    tag is closable. Text nodes emit only their text and are never recursed.
    """

    parts: List[str] = []
    # (node, closing) entries: closing=True marks the end of a node's subtree.
    stack: List[Tuple[Node, bool]] = [(root, False)]
    while stack:
        node, closing = stack.pop()
        tag = node.tag
        if closing:
            parts.append(f"</{tag.name}>\n")
            continue
        parts.append(_open_tag(tag))
        if tag.is_text:
            continue
        if tag.closable:
            stack.append((node, True))
        for child in reversed(node.children):
            stack.append((child, False))
    return "".join(parts)


def render_page(root: Node, *, doctype: str = DOCTYPE_DECLARATION) -> str:
    """Render a full page: the document type line followed by the tree."""

    return f"{doctype}\n{render(root)}"
