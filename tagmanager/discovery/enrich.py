"""
Best-effort metadata lookups for discovered packages.

Each lookup returns None instead of raising: a missing remote, a repository
without tags or a failing git invocation only leaves the field empty.
"""

import logging
from pathlib import Path
from typing import List, Optional

from tagmanager.git import GitClient, GitError, parse_repo_url

logger = logging.getLogger(__name__)


def latest_tag_patterns(package_name: str) -> List[str]:
    """Tag globs tried, in order, when looking for a package's latest tag."""
    return [
        f"{package_name}/v*",  # package/v1.2.3
        f"{package_name}-*",  # package-v1.2.3, package-1.2.3
        f"v*{package_name}*",  # v1.2.3-package
        "v*",  # any v* tag
    ]


def first_matching_tag(
    vcs: GitClient, path: Path, patterns: List[str]
) -> Optional[str]:
    """
    Return the highest-version tag of the first pattern with any match.

    Patterns whose listing fails are skipped.
    """
    for pattern in patterns:
        try:
            tags = vcs.list_tags(path, pattern)
        except GitError as e:
            logger.debug(f"Could not list tags '{pattern}' in {path}: {e}")
            continue
        if tags:
            return tags[0]
    return None


def lookup_repository(vcs: GitClient, path: Path) -> Optional[str]:
    """Normalized host/owner/repo of the origin remote, if any."""
    try:
        url = vcs.get_remote_url(path)
    except GitError as e:
        logger.debug(f"Could not read remote origin for {path}: {e}")
        return None
    return parse_repo_url(url)


def lookup_latest_tag(vcs: GitClient, path: Path, package_name: str) -> Optional[str]:
    return first_matching_tag(vcs, path, latest_tag_patterns(package_name))
