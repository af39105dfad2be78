"""Save, reload and export HTML page trees."""

from .dom_model import TEXT_ATTRIBUTE, TEXT_TAG, Node, Tag
from .flatten import flatten
from .rebuild import FormatError, rebuild
from .records import ROOT_PARENT_INDEX, AttributeEntry, FlatRecord
from .render import DOCTYPE_DECLARATION, render, render_page

__version__ = "0.1.0"

__all__ = [
    "AttributeEntry",
    "DOCTYPE_DECLARATION",
    "FlatRecord",
    "FormatError",
    "Node",
    "ROOT_PARENT_INDEX",
    "TEXT_ATTRIBUTE",
    "TEXT_TAG",
    "Tag",
    "flatten",
    "rebuild",
    "render",
    "render_page",
]
