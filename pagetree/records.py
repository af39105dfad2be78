"""Flat record models used by the JSON save file."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field, StrictBool, field_validator

from .dom_model import Tag

ROOT_PARENT_INDEX = -1


class AttributeEntry(BaseModel):
    """Single attribute name/value pair as stored in the save file."""

    attribute_name: str = Field(..., description="Attribute name, e.g. class or href.")
    attribute_value: str = Field("", description="Attribute value; may be empty.")


class FlatRecord(BaseModel):
    """One node of the page tree, addressed by its pre-order index."""

    tag: str = Field(..., description="Tag kind name.")
    has_closing_tag: StrictBool = Field(
        ..., description="Whether rendering emits a matching closing tag."
    )
    legal_parents: List[str] = Field(
        default_factory=list, description="Tag kinds allowed to contain this tag."
    )
    attributes: List[AttributeEntry] = Field(default_factory=list)
    number_of_children: int = Field(
        ..., ge=0, description="Child count at save time, used as a consistency check."
    )
    node_index: int = Field(..., ge=0, description="Pre-order index of the node.")
    parent_index: int = Field(
        ...,
        ge=ROOT_PARENT_INDEX,
        description="node_index of the parent, or -1 for the root.",
    )

    model_config = ConfigDict(extra="ignore")

    @field_validator("attributes")
    @classmethod
    def _unique_attribute_names(cls, value: List[AttributeEntry]) -> List[AttributeEntry]:
        seen: set[str] = set()
        for entry in value:
            if entry.attribute_name in seen:
                raise ValueError(f"duplicate attribute name: {entry.attribute_name}")
            seen.add(entry.attribute_name)
        return value

    @property
    def is_root(self) -> bool:
        return self.parent_index == ROOT_PARENT_INDEX

    @classmethod
    def from_tag(
        cls, tag: Tag, *, child_count: int, node_index: int, parent_index: int
    ) -> "FlatRecord":
        return cls(
            tag=tag.name,
            has_closing_tag=tag.closable,
            legal_parents=list(tag.legal_parents),
            attributes=[
                AttributeEntry(attribute_name=name, attribute_value=value)
                for name, value in tag.attributes.items()
            ],
            number_of_children=child_count,
            node_index=node_index,
            parent_index=parent_index,
        )

    def to_tag(self) -> Tag:
        return Tag(
            name=self.tag,
            closable=self.has_closing_tag,
            attributes={entry.attribute_name: entry.attribute_value for entry in self.attributes},
            legal_parents=list(self.legal_parents),
        )
