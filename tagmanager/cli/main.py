"""tag-manager CLI"""

from pathlib import Path

import click

from tagmanager import __version__
from tagmanager.cli.config import show_config
from tagmanager.cli.list import list_packages
from tagmanager.cli.update import update
from tagmanager.config import CONFIG_ENV_VAR

from .debug import add_debug_option


@click.group()
@click.version_option(__version__, prog_name="tag-manager")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    envvar=CONFIG_ENV_VAR,
    default=None,
    help="Configuration file to use instead of the per-user default.",
)
@click.pass_context
def cli(ctx, config_path):
    """
    Manage semantic-version tags for Go packages.

    \b
    The tool will:
    - Scan for go.mod files to discover packages
    - Support custom tag naming conventions via configuration
    - Provide interactive setup for new packages
    - Update major, minor, or patch versions with confirmation
    """
    ctx.ensure_object(dict)
    ctx.obj["CONFIG_PATH"] = config_path


cli.add_command(add_debug_option(list_packages))
cli.add_command(add_debug_option(show_config))
cli.add_command(add_debug_option(update))

add_debug_option(cli)

if __name__ == "__main__":
    cli(obj={})
