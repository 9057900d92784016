from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from design_tree.core.expander import expand_all
from design_tree.core.loader import PayloadError, load_nodes
from design_tree.models import DesignNode, NodeMetadata

console = Console()


def _metadata_row(kind: str, item: NodeMetadata) -> tuple[Text, ...]:
    section = item.section.section_name if item.section else ""
    return tuple(Text(cell) for cell in (kind, item.id or "", item.name, item.type, section))


def expand(
    paths: Annotated[list[str], typer.Argument(help="JSON payloads saved from the design API.")],
    node_id: Annotated[str | None, typer.Option("--node-id", help="Only expand this node (12-34 or 12:34).")] = None,
) -> None:
    """List the screens and notes found in one or more design payloads."""
    nodes: dict[str, DesignNode] = {}
    try:
        for path in paths:
            for key, node in load_nodes(path, node_id).items():
                nodes.setdefault(key, node)
    except PayloadError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(1) from exc

    expanded = expand_all(nodes)

    table = Table(show_lines=False)
    for header in ("kind", "id", "name", "type", "section"):
        table.add_column(header)
    for frame in expanded.frames:
        table.add_row(*_metadata_row("screen", frame))
    for note in expanded.notes:
        table.add_row(*_metadata_row("note", note))
    console.print(table)
    console.print(f"({len(expanded.frames)} screens, {len(expanded.notes)} notes)")
