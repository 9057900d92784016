"""Expand pages, sections, frames and notes into addressable screens and notes."""

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from design_tree.core.heuristics import is_note
from design_tree.models import (
    NOTE_NAME,
    DesignNode,
    ExpandedNodes,
    NodeMetadata,
    NodeType,
    SectionContext,
    parse_node,
)

logger = logging.getLogger(__name__)


def node_metadata(node: DesignNode, section: SectionContext | None = None) -> NodeMetadata:
    return NodeMetadata(
        id=node.id,
        name=node.name or "Unnamed Layer",
        type=node.type or "UNKNOWN",
        visible=node.visible is not False,
        locked=node.locked is True,
        absolute_bounding_box=node.absolute_bounding_box,
        children=node.children,
        section=section,
    )


def expand(node_data: Any, node_id: str | None = None) -> ExpandedNodes:
    """Expand one node into its frames and notes.

    A page (CANVAS) yields its first-level frames and notes, pulling up the
    contents of any sections it holds. A SECTION yields its frames and notes
    plus a ``section_context``. A FRAME or a Note yields itself. Anything
    else yields an empty result.
    """
    node = parse_node(node_data)
    if node is None:
        logger.debug("Node %s has no data", node_id)
        return ExpandedNodes()

    logger.debug("Expanding node: %s (%s)", node.name or "Unnamed", node.type)

    if node.type == NodeType.CANVAS:
        expanded = _expand_children(node, section=None)
        logger.debug("Expanded CANVAS to %d frames, %d notes", len(expanded.frames), len(expanded.notes))
        return expanded

    if node.type == NodeType.SECTION:
        return _expand_section(node)

    if node.type == NodeType.FRAME:
        return ExpandedNodes(frames=[node_metadata(node)], node_data_by_id=_index([node]))

    if is_note(node):
        return ExpandedNodes(notes=[node_metadata(node)], node_data_by_id=_index([node]))

    logger.debug("Node type %s is not expandable - returning empty", node.type)
    return ExpandedNodes()


def expand_all(nodes_by_id: Mapping[str, Any] | Iterable[tuple[str, Any]]) -> ExpandedNodes:
    """Expand several top-level nodes and merge the results.

    Frames and notes are deduplicated by id in iteration order, so the
    first occurrence wins. The returned ``node_data_by_id`` holds every
    input node plus every child seen while expanding.
    """
    items = nodes_by_id.items() if isinstance(nodes_by_id, Mapping) else nodes_by_id

    frames: list[NodeMetadata] = []
    notes: list[NodeMetadata] = []
    seen_frame_ids: set[str | None] = set()
    seen_note_ids: set[str | None] = set()
    node_data_by_id: dict[str, DesignNode] = {}

    for node_id, node_data in items:
        node = parse_node(node_data)
        if node is not None:
            node_data_by_id[node_id] = node
            node_data_by_id.update(_index(node.children or []))

        expanded = expand(node, node_id)
        node_data_by_id.update(expanded.node_data_by_id)

        for frame in expanded.frames:
            if frame.id not in seen_frame_ids:
                seen_frame_ids.add(frame.id)
                frames.append(frame)

        for note in expanded.notes:
            if note.id not in seen_note_ids:
                seen_note_ids.add(note.id)
                notes.append(note)

    logger.info("Expansion complete: %d frames, %d notes", len(frames), len(notes))
    return ExpandedNodes(frames=frames, notes=notes, node_data_by_id=node_data_by_id)


def find_node(root: DesignNode, node_id: str) -> DesignNode | None:
    if root.id == node_id:
        return root
    for child in root.children or []:
        found = find_node(child, node_id)
        if found is not None:
            return found
    return None


def extract_frames_and_notes(document: DesignNode) -> list[NodeMetadata]:
    """Every FRAME and Note anywhere under ``document``, in pre-order."""
    results: list[NodeMetadata] = []

    def traverse(node: DesignNode) -> None:
        if node.type == NodeType.FRAME or is_note(node):
            results.append(node_metadata(node))
        for child in node.children or []:
            traverse(child)

    traverse(document)
    return results


def frames_and_notes_for_node(document: DesignNode, node_id: str | None = None) -> list[NodeMetadata]:
    if node_id is None:
        return extract_frames_and_notes(document)

    target = find_node(document, node_id)
    if target is None:
        logger.debug("Node %s not found in document", node_id)
        return []

    expanded = expand(target, node_id)
    return [*expanded.frames, *expanded.notes]


def separate_frames_and_notes(
    metadata: Iterable[NodeMetadata],
) -> tuple[list[NodeMetadata], list[NodeMetadata]]:
    frames: list[NodeMetadata] = []
    notes: list[NodeMetadata] = []
    for item in metadata:
        if item.type == NodeType.INSTANCE and item.name == NOTE_NAME:
            notes.append(item)
        elif item.type == NodeType.FRAME:
            frames.append(item)
    return frames, notes


def deduplicate_frames(frames: Iterable[NodeMetadata]) -> list[NodeMetadata]:
    seen: set[str | None] = set()
    unique: list[NodeMetadata] = []
    for frame in frames:
        if frame.id not in seen:
            seen.add(frame.id)
            unique.append(frame)
    return unique


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _index(nodes: Iterable[DesignNode]) -> dict[str, DesignNode]:
    return {node.id: node for node in nodes if node.id}


def _expand_section(node: DesignNode) -> ExpandedNodes:
    context = SectionContext(section_name=node.name or "Unnamed Section", section_id=node.id)
    expanded = _expand_children(node, section=context)
    logger.debug(
        'Expanded SECTION "%s" to %d frames, %d notes',
        context.section_name,
        len(expanded.frames),
        len(expanded.notes),
    )
    return expanded.model_copy(update={"section_context": context})


def _expand_children(node: DesignNode, section: SectionContext | None) -> ExpandedNodes:
    """Collect first-level frames and notes, flattening nested sections."""
    frames: list[NodeMetadata] = []
    notes: list[NodeMetadata] = []
    nodes: dict[str, DesignNode] = {}

    for child in node.children or []:
        if child.id:
            nodes[child.id] = child

        if child.type == NodeType.FRAME:
            frames.append(node_metadata(child, section))
        elif is_note(child):
            notes.append(node_metadata(child, section))
        elif child.type == NodeType.SECTION:
            nested = _expand_section(child)
            frames.extend(nested.frames)
            notes.extend(nested.notes)
            nodes.update(nested.node_data_by_id)

    return ExpandedNodes(frames=frames, notes=notes, node_data_by_id=nodes)
