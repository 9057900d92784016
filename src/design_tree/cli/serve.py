from typing import Annotated

import typer
from rich.console import Console

console = Console(stderr=True)


def serve(
    transport: Annotated[str, typer.Option(help="MCP transport (stdio, http, sse).")] = "stdio",
) -> None:
    """Start the MCP server."""
    from design_tree.mcp.server import create_mcp_server

    server = create_mcp_server()
    console.print(f"[green]Starting MCP server (transport: {transport})[/green]")
    server.run(transport=transport)  # type: ignore[arg-type]
