"""Read raw design payloads saved from the design tool's REST API.

Three shapes are understood: a whole-file response (``{"document": ...}``),
a nodes response (``{"nodes": {id: {"document": ...}}}``) and a bare node.
"""

import json
import logging
from pathlib import Path
from typing import Any

from design_tree.core.expander import find_node
from design_tree.core.names import node_id_to_api_format
from design_tree.models import DesignNode, NodeType, parse_node

logger = logging.getLogger(__name__)


class PayloadError(ValueError):
    pass


def read_payload(path: str | Path) -> Any:
    file_path = Path(path)
    try:
        return json.loads(file_path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        raise PayloadError(f"File not found: {path}") from None
    except json.JSONDecodeError as exc:
        raise PayloadError(f"Invalid JSON in {path}: {exc}") from exc


def nodes_from_payload(payload: Any, node_id: str | None = None, source: str = "payload") -> dict[str, DesignNode]:
    """Return the top-level nodes of ``payload`` keyed by id, in document order.

    ``node_id`` may be given in URL form (``12-34``) or API form (``12:34``).
    """
    if not isinstance(payload, dict):
        raise PayloadError(f"Expected a JSON object in {source}")

    target_id = node_id_to_api_format(node_id) if node_id else None

    if isinstance(payload.get("nodes"), dict):
        nodes = {
            key: parse_node(entry["document"])
            for key, entry in payload["nodes"].items()
            if isinstance(entry, dict) and isinstance(entry.get("document"), dict)
        }
        if target_id is not None:
            nodes = {key: node for key, node in nodes.items() if key == target_id}
        return _non_empty({key: node for key, node in nodes.items() if node is not None}, source)

    if isinstance(payload.get("document"), dict):
        document = parse_node(payload["document"])
        assert document is not None
        if target_id is not None:
            found = find_node(document, target_id)
            return _non_empty({target_id: found} if found is not None else {}, source)
        pages = [child for child in document.children or [] if child.type == NodeType.CANVAS]
        return _non_empty({page.id or f"page-{index}": page for index, page in enumerate(pages)}, source)

    if "type" in payload:
        node = parse_node(payload)
        assert node is not None
        if target_id is not None:
            found = find_node(node, target_id)
            return _non_empty({target_id: found} if found is not None else {}, source)
        return {node.id or source: node}

    raise PayloadError(f"No design nodes found in {source}")


def load_nodes(path: str | Path, node_id: str | None = None) -> dict[str, DesignNode]:
    nodes = nodes_from_payload(read_payload(path), node_id, source=str(path))
    logger.debug("Loaded %d top-level node(s) from %s", len(nodes), path)
    return nodes


def _non_empty(nodes: dict[str, DesignNode], source: str) -> dict[str, DesignNode]:
    if not nodes:
        raise PayloadError(f"No matching design nodes found in {source}")
    return nodes
