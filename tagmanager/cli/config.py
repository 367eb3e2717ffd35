"""cli command showing the current configuration"""

import sys

import click

from tagmanager.config import ConfigIOError, get_config_file, load_config

from tagmanager.cli.display import config_lines
from tagmanager.cli.options import config_path_from
from tagmanager.cli.utils.logging import logger


@click.command(name="config")
@click.pass_context
def show_config(ctx):
    """Show the current configuration and its file location."""
    config_path = config_path_from(ctx) or get_config_file()
    exists = config_path.exists()

    click.echo(click.style("=== Tag Manager Configuration ===", fg="cyan"))
    click.echo(f"Config file: {config_path}")
    if exists:
        click.echo(click.style("Status: ✓ Found", fg="green"))
    else:
        click.echo(
            click.style(
                "Status: ✗ Not found (will be created on first use)", fg="yellow"
            )
        )
    click.echo("")

    try:
        config = load_config(config_path, create=False)
    except ConfigIOError as e:
        logger.error(f"Error loading configuration: {e}")
        sys.exit(1)

    if not exists:
        click.echo("No configuration file found. Here are the defaults:")
        click.echo("")

    for line in config_lines(config):
        click.echo(line)
