from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from design_tree.core.loader import PayloadError, load_nodes
from design_tree.core.names import screen_filename
from design_tree.core.pipeline import CompactedScreen, compact_screens

console = Console()


def _compact_path(path: str, node_id: str | None) -> list[CompactedScreen]:
    try:
        nodes = load_nodes(path, node_id)
    except PayloadError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(1) from exc
    _, screens = compact_screens(nodes)
    return screens


def compact(
    path: Annotated[str, typer.Argument(help="JSON payload saved from the design API.")],
    node_id: Annotated[str | None, typer.Option("--node-id", help="Only compact this node (12-34 or 12:34).")] = None,
    output_dir: Annotated[
        Path | None, typer.Option("--output-dir", help="Write one .xml file per screen into this directory.")
    ] = None,
) -> None:
    """Compact every screen in a design payload into semantic XML."""
    screens = _compact_path(path, node_id)
    if not screens:
        console.print("[yellow]No screens found.[/yellow]")
        return

    if output_dir is None:
        for screen in screens:
            typer.echo(screen.document)
        return

    output_dir.mkdir(parents=True, exist_ok=True)
    for index, screen in enumerate(screens):
        stem = screen_filename(screen.metadata.name, screen.metadata.id or f"screen-{index}")
        target = output_dir / f"{stem}.xml"
        target.write_text(screen.document, encoding="utf-8")
        console.print(f"[green]Wrote[/green] {escape(str(target))}")


def inspect(
    path: Annotated[str, typer.Argument(help="JSON payload saved from the design API.")],
    node_id: Annotated[str | None, typer.Option("--node-id", help="Only inspect this node (12-34 or 12:34).")] = None,
) -> None:
    """Show how much each screen shrinks when compacted."""
    screens = _compact_path(path, node_id)

    table = Table(show_lines=False)
    for header in ("screen", "input bytes", "output bytes", "reduction"):
        table.add_column(header)
    for screen in screens:
        table.add_row(
            Text(screen.metadata.name),
            str(screen.input_bytes),
            str(screen.output_bytes),
            f"{screen.reduction:.1f}%",
        )
    console.print(table)
    console.print(f"({len(screens)} screens)")
