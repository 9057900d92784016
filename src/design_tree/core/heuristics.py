"""Pure predicates over node shape used by the compactor and expander."""

import re

from design_tree.models import NOTE_NAME, DesignNode, NodeType

_DECORATIVE_NAMES = frozenset({"background", "pixel", "divider"})
_GENERIC_WRAPPER_NAME = re.compile(r"(Frame|Group)\s+\d+")
_INTERACTIVE_NAME = re.compile(r"button|btn|click|action", re.IGNORECASE)

_MIN_OPACITY = 0.1
_SPACER_SIZE = 2
_ICON_SIZE = 48


def is_note(node: DesignNode) -> bool:
    return node.type == NodeType.INSTANCE and node.name == NOTE_NAME


def should_skip(node: DesignNode) -> bool:
    """Vectors are icon internals; decorative nodes carry no behavior."""
    return node.type == NodeType.VECTOR or is_decorative(node)


def is_decorative(node: DesignNode) -> bool:
    if not node.name:
        return False

    if node.opacity is not None and node.opacity < _MIN_OPACITY:
        return True

    box = node.absolute_bounding_box
    if box is not None:
        if (box.width <= _SPACER_SIZE and box.height <= _SPACER_SIZE) or box.width == 0 or box.height == 0:
            return True

    name = node.name.lower()
    return name.endswith("-wrapper") or name in _DECORATIVE_NAMES


def is_generic_wrapper(node: DesignNode) -> bool:
    if node.type in (NodeType.FRAME, NodeType.GROUP) and (
        not node.name or _GENERIC_WRAPPER_NAME.fullmatch(node.name)
    ):
        return True
    return node.type == NodeType.FRAME and node.name == "Text"


def is_icon(node: DesignNode) -> bool:
    if not node.name:
        return False

    box = node.absolute_bounding_box
    if box is not None and box.width <= _ICON_SIZE and box.height <= _ICON_SIZE and node.children:
        vector_count = sum(1 for child in node.children if child.type == NodeType.VECTOR)
        if vector_count > 0 and vector_count / len(node.children) > 0.5:
            return True

    return node.name.startswith(("Icon-", "icon-")) or "icon" in node.name.lower()


def is_interactive(node: DesignNode) -> bool:
    if node.name and _INTERACTIVE_NAME.search(node.name):
        return True
    return bool(node.reactions)
