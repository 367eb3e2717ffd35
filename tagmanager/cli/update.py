"""cli command creating the next version tag of a package"""

import sys

import click

from tagmanager.config import ConfigIOError, get_config_file, load_config, save_config
from tagmanager.discovery import DiscoveryError, discover_packages
from tagmanager.git import GitClient, GitError
from tagmanager.release import apply_release, find_current_tag, plan_release
from tagmanager.versioning import BumpKind, TagExistsError

from tagmanager.cli import prompts
from tagmanager.cli.display import format_search_paths, plan_summary
from tagmanager.cli.options import config_path_from, resolve_roots, root_option
from tagmanager.cli.utils.logging import logger


@click.command(name="update")
@root_option
@click.option(
    "--bump",
    "-b",
    type=click.Choice([kind.value for kind in BumpKind]),
    default=None,
    help="Version component to bump. Asked interactively when omitted.",
)
@click.option(
    "--push/--no-push",
    default=True,
    show_default=True,
    help="Push the new tag to origin.",
)
@click.option(
    "--yes",
    "-y",
    is_flag=True,
    default=False,
    help="Create the tag without asking for confirmation.",
)
@click.pass_context
def update(ctx, roots, bump, push, yes):
    """Create and push the next version tag for a package.

    You will be guided through selecting a package, its tag format and the
    version type interactively.
    """
    config_path = config_path_from(ctx) or get_config_file()
    try:
        config = load_config(config_path)
    except ConfigIOError as e:
        logger.error(f"Error: failed to load configuration: {e}")
        sys.exit(1)

    vcs = GitClient()
    search_paths = resolve_roots(roots)
    try:
        packages = discover_packages(search_paths, vcs=vcs)
    except DiscoveryError as e:
        logger.error(f"Error: failed to discover packages: {e}")
        sys.exit(1)

    if not packages:
        logger.info("No Go packages found in the search paths.")
        logger.info(f"Searched in: {format_search_paths(search_paths)}")
        return

    package = prompts.select_package(packages)

    package_config = prompts.setup_package_config(config, package)
    if package_config is None:
        return

    try:
        save_config(config, config_path)
    except ConfigIOError as e:
        logger.warning(f"Warning: failed to save configuration: {e}")

    bump_kind = BumpKind(bump) if bump else prompts.select_bump_kind()

    current_tag = find_current_tag(
        vcs, package.path, package_config.tag_format, package.package_name
    )
    plan = plan_release(package, package_config.tag_format, bump_kind, current_tag)

    click.echo("")
    for line in plan_summary(plan):
        click.echo(line)

    if not yes and not prompts.confirm("Do you want to update the tag?"):
        logger.info("Tag update cancelled.")
        return

    try:
        apply_release(vcs, plan, push=push)
    except TagExistsError as e:
        logger.error(f"Error: {e}. Choose another version type or tag format.")
        sys.exit(1)
    except GitError as e:
        logger.error(f"Error: failed to update tag: {e}")
        sys.exit(1)

    if push:
        logger.info(
            f"Successfully updated tag to {plan.new_tag} "
            f"for package {package.module_path}"
        )
    else:
        logger.info(
            f"Created tag {plan.new_tag} for package {package.module_path} (not pushed)"
        )
