from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class NodeType(StrEnum):
    FRAME = "FRAME"
    GROUP = "GROUP"
    TEXT = "TEXT"
    RECTANGLE = "RECTANGLE"
    ELLIPSE = "ELLIPSE"
    VECTOR = "VECTOR"
    INSTANCE = "INSTANCE"
    COMPONENT = "COMPONENT"
    COMPONENT_SET = "COMPONENT_SET"
    CANVAS = "CANVAS"
    SECTION = "SECTION"


NOTE_NAME = "Note"


class BoundingBox(BaseModel):
    model_config = ConfigDict(frozen=True)

    x: float = 0.0
    y: float = 0.0
    width: float
    height: float


class ComponentProperty(BaseModel):
    model_config = ConfigDict(frozen=True, extra="allow")

    value: Any = None
    type: str | None = None


class DesignNode(BaseModel):
    """A node of the raw design tree, as returned by the design tool's API.

    Only the fields the engine reads are declared; everything else is kept
    as extra data so the node can be handed back to the caller unchanged.
    """

    model_config = ConfigDict(frozen=True, extra="allow", populate_by_name=True)

    id: str | None = None
    name: str | None = None
    type: str | None = None
    visible: bool = True
    locked: bool = False
    opacity: float | None = None
    absolute_bounding_box: BoundingBox | None = Field(default=None, alias="absoluteBoundingBox")
    characters: str | None = None
    component_properties: dict[str, ComponentProperty] | None = Field(default=None, alias="componentProperties")
    reactions: list[Any] | None = None
    children: list[DesignNode] | None = None


DesignNode.model_rebuild()  # necessary for recursive types


def parse_node(data: Any) -> DesignNode | None:
    """Validate raw node data at the boundary; non-mappings yield ``None``."""
    if isinstance(data, DesignNode):
        return data
    if isinstance(data, Mapping):
        return DesignNode.model_validate(dict(data))
    return None


class SectionContext(BaseModel):
    model_config = ConfigDict(frozen=True)

    section_name: str
    section_id: str | None = None


class NodeMetadata(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str | None = None
    name: str
    type: str
    visible: bool = True
    locked: bool = False
    absolute_bounding_box: BoundingBox | None = None
    children: list[DesignNode] | None = None
    section: SectionContext | None = None


class ExpandedNodes(BaseModel):
    frames: list[NodeMetadata] = Field(default_factory=list)
    notes: list[NodeMetadata] = Field(default_factory=list)
    node_data_by_id: dict[str, DesignNode] = Field(default_factory=dict)
    section_context: SectionContext | None = None


class SemanticNode(BaseModel):
    """One element of the compacted screen, or a bare run of text when ``tag`` is ``None``."""

    model_config = ConfigDict(frozen=True)

    tag: str | None = None
    attributes: tuple[tuple[str, str], ...] = ()
    children: tuple[SemanticNode, ...] = ()
    text: str | None = None

    @property
    def is_text(self) -> bool:
        return self.tag is None

    @property
    def self_closing(self) -> bool:
        return self.tag is not None and not self.children and self.text is None


SemanticNode.model_rebuild()
