"""FastMCP server exposing design-tree tools."""

from __future__ import annotations

from typing import Any

from fastmcp import FastMCP

from design_tree.core.compactor import compact
from design_tree.core.expander import expand_all
from design_tree.models import NodeMetadata


def _summary(kind: str, item: NodeMetadata) -> dict[str, Any]:
    return {
        "kind": kind,
        "id": item.id,
        "name": item.name,
        "type": item.type,
        "section": item.section.section_name if item.section else None,
    }


async def expand_nodes(nodes: dict[str, Any]) -> list[dict[str, Any]]:
    """Expand pages, sections, frames and notes (keyed by node id) into screens and notes."""
    expanded = expand_all(nodes)
    return [_summary("screen", frame) for frame in expanded.frames] + [
        _summary("note", note) for note in expanded.notes
    ]


async def compact_screen(node: dict[str, Any]) -> str:
    """Compact one screen's node tree into semantic XML."""
    return compact(node)


def create_mcp_server() -> FastMCP:
    """Create a FastMCP server with the expansion and compaction tools."""

    mcp = FastMCP(
        "design-tree",
        instructions="Expand design files into screens and compact screen node trees into semantic XML.",
    )
    mcp.tool()(expand_nodes)
    mcp.tool()(compact_screen)
    return mcp
