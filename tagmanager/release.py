"""
Release planning: from a package and its tag format to the next tag.

This is the caller-side policy around the versioning primitives: which tag
counts as the current one, what to do when it cannot be parsed, and how the
new tag is created and pushed.
"""

import logging
import re
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Optional, Union

from tagmanager.discovery import DiscoveredPackage
from tagmanager.discovery.enrich import first_matching_tag
from tagmanager.git import DEFAULT_REMOTE, GitClient, GitError
from tagmanager.versioning import (
    PLACEHOLDERS,
    BumpKind,
    TagExistsError,
    TagParseError,
    VersionInfo,
    bump_version,
    parse_tag,
    render_tag,
)

logger = logging.getLogger(__name__)

# Example version used to preview a tag format
EXAMPLE_VERSION = (1, 2, 3)

_TOKEN_RE = re.compile("|".join(re.escape(p) for p in PLACEHOLDERS))


@dataclass(frozen=True)
class ReleasePlan:
    package: DiscoveredPackage
    tag_format: str
    bump_kind: BumpKind
    current_tag: Optional[str]
    current: VersionInfo
    new: VersionInfo
    new_tag: str


def fallback_version(package: DiscoveredPackage) -> VersionInfo:
    """The version assumed for a package that has no usable tag yet."""
    return VersionInfo.zero(package.package_name)


def current_version(
    package: DiscoveredPackage, current_tag: Optional[str]
) -> VersionInfo:
    """
    Version of a package according to its current tag.

    Tags that are missing or cannot be parsed count as v0.0.0. A tag that
    carries no package name (e.g. v1.2.3) takes the package's short name.
    """
    if not current_tag:
        return fallback_version(package)
    try:
        version = parse_tag(current_tag)
    except TagParseError as e:
        logger.debug(f"{e}; starting from v0.0.0")
        return fallback_version(package)
    if not version.package_name:
        version = replace(version, package_name=package.package_name)
    return version


def example_tag(tag_format: str, package: DiscoveredPackage) -> str:
    """Render a tag format for v1.2.3 of the package, for previews."""
    return render_tag(tag_format, VersionInfo(package.package_name, *EXAMPLE_VERSION))


def tag_glob(tag_format: str, package_name: str) -> str:
    """
    Turn a tag format into a `git tag --list` glob.

    {package-name} is replaced by the name, every numeric or version
    placeholder by `*`:

        {package-name}/v{major}.{minor}.{patch} -> mypkg/v*.*.*
    """

    def _glob(match: "re.Match[str]") -> str:
        if match.group(0) == "{package-name}":
            return package_name
        return "*"

    return _TOKEN_RE.sub(_glob, tag_format)


def find_current_tag(
    vcs: GitClient, path: Path, tag_format: str, package_name: str
) -> Optional[str]:
    """
    Most recent tag of a package.

    Tags following the package's own format are preferred, then tags
    scoped by package name. Returns None when nothing matches or git fails.
    """
    patterns = [tag_glob(tag_format, package_name)]
    for pattern in (f"{package_name}/*", f"{package_name}-*"):
        if pattern not in patterns:
            patterns.append(pattern)
    return first_matching_tag(vcs, path, patterns)


def plan_release(
    package: DiscoveredPackage,
    tag_format: str,
    bump_kind: Union[BumpKind, str],
    current_tag: Optional[str],
) -> ReleasePlan:
    """
    Compute the next tag of a package.

    Raises:
        InvalidBumpKindError: If bump_kind is not major, minor or patch
    """
    current = current_version(package, current_tag)
    new = bump_version(current, bump_kind)
    return ReleasePlan(
        package=package,
        tag_format=tag_format,
        bump_kind=BumpKind(bump_kind),
        current_tag=current_tag,
        current=current,
        new=new,
        new_tag=render_tag(tag_format, new),
    )


def release_message(plan: ReleasePlan) -> str:
    return f"Release {plan.new_tag} for {plan.package.module_path}"


def apply_release(
    vcs: GitClient,
    plan: ReleasePlan,
    push: bool = True,
    remote: str = DEFAULT_REMOTE,
) -> None:
    """
    Create the planned annotated tag and push it.

    Raises:
        TagExistsError: If the tag is already present in the repository
        TagCreationError: If git refuses to create the tag
        TagPushError: If the tag cannot be pushed
    """
    path = plan.package.path
    try:
        existing = vcs.list_tags(path, plan.new_tag)
    except GitError as e:
        logger.debug(f"Could not check for existing tag {plan.new_tag}: {e}")
        existing = []
    if plan.new_tag in existing:
        raise TagExistsError(plan.new_tag)

    vcs.create_tag(path, plan.new_tag, release_message(plan))
    logger.debug(f"Created tag {plan.new_tag}")
    if push:
        vcs.push_tag(path, plan.new_tag, remote)
        logger.debug(f"Pushed tag {plan.new_tag} to {remote}")
