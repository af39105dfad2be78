"""Tag catalog: the tag kinds available for building pages."""

from __future__ import annotations

import copy
import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List

from pydantic import BaseModel, Field, ValidationError

from .dom_model import Tag
from .rebuild import FormatError

DEFAULT_ATTRIBUTE_VALUE = ""


class CatalogEntry(BaseModel):
    """Entry in the tag catalog file."""

    tag: str = Field(..., description="Tag kind name.")
    has_closing_tag: str = Field(
        ..., description='Textual flag, "true" or "false".'
    )
    attributes: List[str] = Field(
        default_factory=list, description="Attribute names editable on the tag."
    )
    legal_parents: List[str] = Field(
        default_factory=list, description="Tag kinds allowed to contain the tag."
    )

    @property
    def closable(self) -> bool:
        return self.has_closing_tag.lower() == "true"

    def to_tag(self) -> Tag:
        return Tag(
            name=self.tag,
            closable=self.closable,
            attributes={name: DEFAULT_ATTRIBUTE_VALUE for name in self.attributes},
            legal_parents=list(self.legal_parents),
        )


class CatalogFile(BaseModel):
    tags: List[CatalogEntry] = Field(default_factory=list)


@dataclass
class TagCatalog:
    """Prototype tags keyed by name."""

    prototypes: Dict[str, Tag] = field(default_factory=dict)

    def __contains__(self, name: object) -> bool:
        return name in self.prototypes

    def __len__(self) -> int:
        return len(self.prototypes)

    def names(self) -> List[str]:
        return list(self.prototypes)

    def add(self, tag: Tag) -> None:
        self.prototypes[tag.name] = tag

    def prototype(self, name: str) -> Tag:
        """Return an independent copy of the named prototype."""

        if name not in self.prototypes:
            raise KeyError(f"Unknown tag: {name}")
        return copy.deepcopy(self.prototypes[name])

    def can_contain(self, parent: str, child: str) -> bool:
        """Whether catalog metadata lists ``parent`` as a legal parent of ``child``."""

        if child not in self.prototypes:
            raise KeyError(f"Unknown tag: {child}")
        return parent in self.prototypes[child].legal_parents


def parse_catalog(payload: object) -> TagCatalog:
    try:
        catalog_file = CatalogFile.model_validate(payload)
    except ValidationError as exc:
        raise FormatError(f"invalid tag catalog: {exc}") from exc

    catalog = TagCatalog()
    for entry in catalog_file.tags:
        catalog.add(entry.to_tag())
    return catalog


def load_catalog(path: Path) -> TagCatalog:
    text = Path(path).read_text(encoding="utf-8")
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise FormatError(f"{path}: tag catalog is not valid JSON: {exc}") from exc
    return parse_catalog(payload)
