"""cli command listing discovered packages"""

import sys

import click

from tagmanager.discovery import DiscoveryError, discover_packages
from tagmanager.git import GitClient

from tagmanager.cli.display import format_search_paths, print_packages
from tagmanager.cli.options import resolve_roots, root_option
from tagmanager.cli.utils.logging import logger


@click.command(name="list")
@root_option
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    default=False,
    help="Show detailed information (module path, go version, repository).",
)
def list_packages(roots, verbose):
    """List discovered Go packages."""
    search_paths = resolve_roots(roots)

    try:
        packages = discover_packages(search_paths, vcs=GitClient())
    except DiscoveryError as e:
        logger.error(f"Error: failed to discover packages: {e}")
        sys.exit(1)

    if not packages:
        logger.info("No Go packages found in the search paths.")
        logger.info(f"Searched in: {format_search_paths(search_paths)}")
        return

    logger.info(f"Discovered {len(packages)} Go packages:")
    logger.info(f"Search paths: {format_search_paths(search_paths)}")
    print_packages(packages, verbose=verbose)
