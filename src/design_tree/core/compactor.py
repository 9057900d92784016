"""Rewrite a screen's design tree into a compact semantic document.

The walk builds a tree of ``SemanticNode`` values first and serializes it
in one pass afterwards. Ids, coordinates and styles never reach the output;
component names become tags, component properties become attributes, and
text is emitted directly wherever a wrapping tag would add nothing.
"""

import logging
import re
from typing import Any

from design_tree.core.heuristics import (
    is_generic_wrapper,
    is_icon,
    is_interactive,
    should_skip,
)
from design_tree.core.names import to_attr_name, to_tag_name
from design_tree.core.serializer import render_document
from design_tree.models import DesignNode, NodeType, SemanticNode, parse_node

logger = logging.getLogger(__name__)

_TYPE_TAGS = {
    NodeType.FRAME: "Frame",
    NodeType.GROUP: "Group",
    NodeType.TEXT: "Text",
    NodeType.RECTANGLE: "Rectangle",
    NodeType.ELLIPSE: "Ellipse",
    NodeType.VECTOR: "Icon",
    NodeType.INSTANCE: "Component",
    NodeType.COMPONENT: "Component",
}

_COMPONENT_TYPES = (NodeType.INSTANCE, NodeType.COMPONENT, NodeType.COMPONENT_SET)
_TYPED_ATTRIBUTE_TYPES = (NodeType.INSTANCE, NodeType.COMPONENT)

# Names the design tool assigns on creation, e.g. "Rectangle 12".
_AUTO_NAME = re.compile(r"(Rectangle|Ellipse|Vector|Frame|Group)\s+\d+")
# Tags derived from placeholder text layer names, e.g. "_1" or "Text2".
_PLACEHOLDER_TAG = re.compile(r"_\d+|Text\d*")


class InvalidNodeDataError(ValueError):
    pass


def tag_name(node: DesignNode) -> str:
    if node.type in _COMPONENT_TYPES and node.name:
        return to_tag_name(node.name)

    if node.name and not _AUTO_NAME.fullmatch(node.name):
        return to_tag_name(node.name)

    node_type = node.type or ""
    return _TYPE_TAGS.get(node_type, node_type) or "Element"


def _attribute_value(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def attributes(node: DesignNode) -> tuple[tuple[str, str], ...]:
    attrs: list[tuple[str, str]] = []

    if node.type in _TYPED_ATTRIBUTE_TYPES:
        attrs.append(("type", str(node.type).lower()))

    if is_interactive(node):
        attrs.append(("interactive", "true"))

    for key, prop in (node.component_properties or {}).items():
        # An explicit null is kept; only a missing value is skipped.
        if "value" in prop.model_fields_set:
            attrs.append((to_attr_name(key), _attribute_value(prop.value)))

    return tuple(attrs)


def render_node(node: DesignNode) -> list[SemanticNode]:
    """Render one node into zero or more semantic nodes.

    Skipped nodes render to nothing and generic wrappers render to their
    children, which the caller splices in place of the wrapper.
    """
    if not node.visible or should_skip(node):
        return []

    tag = tag_name(node)
    attrs = attributes(node)

    if node.type == NodeType.TEXT and node.characters:
        text = node.characters.strip()
        if tag.replace("-", " ").lower() == text.lower() or _PLACEHOLDER_TAG.fullmatch(tag):
            return [SemanticNode(text=text)] if text else []
        return [SemanticNode(tag=tag, attributes=attrs, text=text)]

    # Icons are leaves; their vector paths are never surfaced.
    if is_icon(node):
        return [SemanticNode(tag=tag, attributes=attrs)]

    if node.children:
        children = _render_children(node.children)
        if is_generic_wrapper(node):
            return children
        if len(children) == 1 and children[0].is_text:
            return [SemanticNode(tag=tag, attributes=attrs, text=children[0].text)]
        return [SemanticNode(tag=tag, attributes=attrs, children=tuple(children))]

    return [SemanticNode(tag=tag, attributes=attrs)]


def _render_children(children: list[DesignNode]) -> list[SemanticNode]:
    return [rendered for child in children for rendered in render_node(child)]


def build_screen(node_data: Any) -> SemanticNode:
    node = parse_node(node_data)
    if node is None:
        raise InvalidNodeDataError("Invalid node data: expected object with node information")

    return SemanticNode(
        tag="Screen",
        attributes=(("name", node.name or ""), ("type", node.type or "")),
        children=tuple(_render_children(node.children or [])),
    )


def compact(node_data: Any) -> str:
    """Compact a screen subtree into its semantic document.

    Raises ``InvalidNodeDataError`` unless ``node_data`` is a mapping or a
    ``DesignNode``.
    """
    screen = build_screen(node_data)
    name = dict(screen.attributes)["name"]
    document = render_document(name, screen)

    if logger.isEnabledFor(logging.DEBUG):
        source = parse_node(node_data)
        input_size = len(source.model_dump_json(by_alias=True, exclude_none=True)) if source else 0
        logger.debug("Compacted screen %r: %d -> %d bytes", name, input_size, len(document))

    return document
