from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from design_tree.core.compactor import compact
from design_tree.core.expander import expand_all
from design_tree.models import DesignNode, ExpandedNodes, NodeMetadata


@dataclass(frozen=True)
class CompactedScreen:
    metadata: NodeMetadata
    document: str
    input_bytes: int

    @property
    def output_bytes(self) -> int:
        return len(self.document.encode("utf-8"))

    @property
    def reduction(self) -> float:
        """Percentage of the raw payload size removed by compaction."""
        if self.input_bytes == 0:
            return 0.0
        return 100.0 * (1 - self.output_bytes / self.input_bytes)


def screen_node(expanded: ExpandedNodes, frame: NodeMetadata) -> DesignNode:
    """Resolve a frame's full subtree, falling back to the children carried by its metadata."""
    if frame.id and frame.id in expanded.node_data_by_id:
        return expanded.node_data_by_id[frame.id]
    return DesignNode(id=frame.id, name=frame.name, type=frame.type, children=frame.children)


def compact_screens(
    nodes_by_id: Mapping[str, Any] | Iterable[tuple[str, Any]],
) -> tuple[ExpandedNodes, list[CompactedScreen]]:
    """Expand the given top-level nodes and compact every screen found, in order.

    Returns the expansion result alongside one ``CompactedScreen`` per frame.
    """
    expanded = expand_all(nodes_by_id)
    screens: list[CompactedScreen] = []
    for frame in expanded.frames:
        node = screen_node(expanded, frame)
        screens.append(
            CompactedScreen(
                metadata=frame,
                document=compact(node),
                input_bytes=len(node.model_dump_json(by_alias=True, exclude_none=True).encode("utf-8")),
            )
        )
    return expanded, screens
