"""Terminal rendering of packages, configuration and release plans."""

from typing import List, Optional, Sequence

import click
from rich.console import Console
from rich.table import Table

from tagmanager.config import Config
from tagmanager.discovery import DiscoveredPackage
from tagmanager.release import ReleasePlan

NO_TAGS = "(no tags)"
EMPTY = "-"


def _or_empty(value: Optional[str]) -> str:
    return value if value else EMPTY


def package_table(
    packages: Sequence[DiscoveredPackage], verbose: bool = False
) -> Table:
    """
    Table of discovered packages.

    Compact mode shows the short name and latest tag; verbose mode adds the
    module path, go version and repository.
    """
    table = Table(show_lines=False)
    table.add_column("#", justify="right")
    if verbose:
        table.add_column("Module")
    table.add_column("Package")
    if verbose:
        table.add_column("Go Version")
        table.add_column("Repository")
    table.add_column("Latest Tag")

    for i, package in enumerate(packages, start=1):
        latest_tag = package.latest_tag or NO_TAGS
        if verbose:
            table.add_row(
                str(i),
                package.module_path,
                package.package_name,
                _or_empty(package.go_version),
                _or_empty(package.repository),
                latest_tag,
            )
        else:
            table.add_row(str(i), package.package_name, latest_tag)
    return table


def print_packages(
    packages: Sequence[DiscoveredPackage],
    verbose: bool = False,
    console: Optional[Console] = None,
) -> None:
    console = console or Console()
    console.print(package_table(packages, verbose=verbose))


def format_search_paths(search_paths: Sequence) -> str:
    return ", ".join(str(p) for p in search_paths)


def config_lines(config: Config) -> List[str]:
    """Human-readable description of a configuration."""
    lines = [f"Default Tag Format: {config.defaults.tag_format}", ""]
    if not config.packages:
        lines.append("No packages configured yet.")
        lines.append(
            "Packages will be configured automatically when you run "
            "'tag-manager update'."
        )
        return lines

    lines.append(f"Configured Packages ({len(config.packages)}):")
    for module_path in sorted(config.packages):
        package_config = config.packages[module_path]
        lines.append("")
        lines.append(f"  Package: {module_path}")
        lines.append(f"    Tag Format: {package_config.tag_format}")
        lines.append(f"    Use Default: {str(package_config.use_default).lower()}")
        if package_config.repository:
            lines.append(f"    Repository: {package_config.repository}")
        if package_config.last_updated:
            lines.append(f"    Last Updated: {package_config.last_updated}")
    return lines


def plan_summary(plan: ReleasePlan) -> List[str]:
    package = plan.package
    return [
        click.style("=== Tag Update Summary ===", fg="green", bold=True),
        f"Package: {package.module_path}",
        f"Package Name: {package.package_name}",
        f"Tag Format: {plan.tag_format}",
        click.style(
            f"Current tag: {plan.current_tag or '(none, starting from v0.0.0)'}",
            fg="yellow",
        ),
        click.style(f"New tag: {plan.new_tag}", fg="cyan"),
        f"Version type: {plan.bump_kind}",
    ]
