import logging
import os
from typing import Annotated

import typer

from design_tree.cli.compact import compact, inspect
from design_tree.cli.expand import expand
from design_tree.cli.serve import serve

app = typer.Typer(
    name="design-tree",
    help="Design Tree CLI: expand design files into screens and compact them for analysis.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)


@app.callback()
def configure(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging.")] = False,
) -> None:
    """Configure logging for all commands."""
    level = "DEBUG" if verbose else os.getenv("DESIGN_TREE_LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


app.command("expand")(expand)
app.command("compact")(compact)
app.command("inspect")(inspect)
app.command("serve")(serve)


def main() -> None:
    app()
