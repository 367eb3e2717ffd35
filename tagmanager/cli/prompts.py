"""
Interactive prompts used by `tag-manager update`.

Every prompt returns an already-validated value; invalid input is
re-prompted rather than returned.
"""

from typing import Optional, Sequence

import click

from tagmanager.config import Config, PackageConfig, timestamp
from tagmanager.discovery import DiscoveredPackage
from tagmanager.release import example_tag
from tagmanager.versioning import BumpKind, TagFormatError, validate_tag_format

from .utils.logging import logger

BUMP_KIND_HELP = {
    BumpKind.MAJOR: "Breaking changes (e.g., v1.2.3 → v2.0.0)",
    BumpKind.MINOR: "New features (e.g., v1.2.3 → v1.3.0)",
    BumpKind.PATCH: "Bug fixes (e.g., v1.2.3 → v1.2.4)",
}

PLACEHOLDER_HELP = [
    ("{package-name}", "Package name"),
    ("{major}", "Major version number"),
    ("{minor}", "Minor version number"),
    ("{patch}", "Patch version number"),
    ("{version}", "Full version (e.g., v1.2.3)"),
]

FORMAT_EXAMPLES = [
    "{package-name}/v{major}.{minor}.{patch}",
    "{package-name}-{major}.{minor}.{patch}",
    "v{major}.{minor}.{patch}",
]


def select_option(count: int) -> int:
    """Ask for a number between 1 and count."""
    return click.prompt(
        "Select option (enter number)", type=click.IntRange(1, count)
    )


def confirm(message: str) -> bool:
    return click.confirm(message, default=False)


def select_package(packages: Sequence[DiscoveredPackage]) -> DiscoveredPackage:
    click.echo(click.style("\nAvailable packages:", fg="cyan"))
    for i, package in enumerate(packages, start=1):
        click.echo(f"{i}. {package.module_path} ({package.package_name})")
    return packages[select_option(len(packages)) - 1]


def select_bump_kind() -> BumpKind:
    click.echo(click.style("\nVersion types:", fg="cyan"))
    kinds = list(BumpKind)
    for i, kind in enumerate(kinds, start=1):
        click.echo(f"{i}. {kind} - {BUMP_KIND_HELP[kind]}")
    return kinds[select_option(len(kinds)) - 1]


def prompt_tag_format() -> str:
    """Ask for a custom tag format until a valid one is entered."""
    click.echo(click.style("\nCustom Tag Format Configuration:", fg="cyan"))
    click.echo("Available placeholders:")
    for placeholder, description in PLACEHOLDER_HELP:
        click.echo(f"  {placeholder} - {description}")
    click.echo(click.style("\nExamples:", fg="cyan"))
    for example in FORMAT_EXAMPLES:
        click.echo(f"  {example}")

    while True:
        tag_format = click.prompt(
            "Enter your custom tag format", default="", show_default=False
        )
        tag_format = tag_format.strip()
        try:
            validate_tag_format(tag_format)
        except TagFormatError as e:
            logger.warning(f"Invalid format: {e}. Please try again.")
            continue
        return tag_format


def configure_package(
    config: Config, package: DiscoveredPackage
) -> Optional[PackageConfig]:
    """
    Choose a tag format for a package and record it in the configuration.

    Returns None, leaving the configuration untouched, if the user does not
    save it.
    """
    click.echo(click.style("\nTag Format Options:", fg="cyan"))
    click.echo(f"1. Use default format: {config.defaults.tag_format}")
    click.echo("2. Define custom format")

    if select_option(2) == 1:
        tag_format = config.defaults.tag_format
        use_default = True
        logger.info(f"Using default tag format: {tag_format}")
    else:
        tag_format = prompt_tag_format()
        use_default = False
        logger.info(f"Using custom tag format: {tag_format}")

    example = example_tag(tag_format, package)
    click.echo(click.style(f"Example tag: {example}", fg="cyan"))

    if not confirm("Save this configuration?"):
        logger.info("Configuration cancelled.")
        return None

    package_config = PackageConfig(
        module_path=package.module_path,
        tag_format=tag_format,
        use_default=use_default,
        repository=package.repository,
        last_updated=timestamp(),
    )
    config.set_package_config(package_config)
    return package_config


def setup_package_config(
    config: Config, package: DiscoveredPackage
) -> Optional[PackageConfig]:
    """
    Return the package's configuration, setting it up interactively if needed.

    Already configured packages are kept unless the user asks to reconfigure.
    """
    click.echo(click.style("\n=== Package Configuration Setup ===", fg="cyan"))
    click.echo(f"Package: {package.module_path}")
    click.echo(f"Path: {package.path}")
    click.echo(f"Package Name: {package.package_name}")

    if config.is_configured(package.module_path):
        existing = config.get_package_config(package.module_path)
        click.echo(click.style("Package already configured:", fg="green"))
        click.echo(f"  Tag Format: {existing.tag_format}")
        click.echo(f"  Use Default: {str(existing.use_default).lower()}")
        if not confirm("Do you want to reconfigure this package?"):
            return existing

    return configure_package(config, package)
