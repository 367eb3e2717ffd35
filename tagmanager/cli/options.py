"""Options shared by several commands."""

from pathlib import Path
from typing import List, Sequence

import click

from tagmanager.discovery import default_search_paths

root_option = click.option(
    "--root",
    "-r",
    "roots",
    multiple=True,
    type=click.Path(file_okay=False, path_type=Path),
    help="Directory to search for go.mod files (repeatable). "
    "Defaults to the current directory.",
)


def resolve_roots(roots: Sequence[Path]) -> List[Path]:
    return list(roots) if roots else default_search_paths()


def config_path_from(ctx: click.Context):
    """Configuration file chosen on the command line, if any."""
    obj = ctx.find_root().obj or {}
    return obj.get("CONFIG_PATH")
