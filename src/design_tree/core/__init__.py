from design_tree.core.compactor import (
    InvalidNodeDataError,
    attributes,
    build_screen,
    compact,
    render_node,
    tag_name,
)
from design_tree.core.expander import (
    deduplicate_frames,
    expand,
    expand_all,
    extract_frames_and_notes,
    find_node,
    frames_and_notes_for_node,
    node_metadata,
    separate_frames_and_notes,
)
from design_tree.core.heuristics import (
    is_decorative,
    is_generic_wrapper,
    is_icon,
    is_interactive,
    is_note,
    should_skip,
)
from design_tree.core.names import escape_xml, to_attr_name, to_tag_name
from design_tree.core.serializer import render_document, serialize

__all__ = [
    "InvalidNodeDataError",
    "attributes",
    "build_screen",
    "compact",
    "deduplicate_frames",
    "escape_xml",
    "expand",
    "expand_all",
    "extract_frames_and_notes",
    "find_node",
    "frames_and_notes_for_node",
    "is_decorative",
    "is_generic_wrapper",
    "is_icon",
    "is_interactive",
    "is_note",
    "node_metadata",
    "render_document",
    "render_node",
    "separate_frames_and_notes",
    "serialize",
    "should_skip",
    "tag_name",
    "to_attr_name",
    "to_tag_name",
]
