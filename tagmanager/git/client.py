"""
Thin git command wrapper used for tag queries and tag creation.

Every call runs git with the given directory as its working directory, so
it applies to whichever repository contains that directory.
"""

import logging
from pathlib import Path
from typing import List, Optional, Union

from git import Git
from git.exc import GitCommandError, GitCommandNotFound, NoSuchPathError

from .exceptions import GitError, TagCreationError, TagPushError

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

DEFAULT_REMOTE = "origin"


class GitClient:
    """
    Version-control operations needed by tag-manager.

    All methods raise GitError (or a subclass) when git fails or is missing.
    """

    def _git(self, path: PathLike) -> Git:
        return Git(str(path))

    def list_tags(self, path: PathLike, pattern: str) -> List[str]:
        """
        List tags matching a glob pattern, highest version first.

        Args:
            path: Directory inside the repository
            pattern: Glob accepted by `git tag --list`

        Returns:
            Matching tag names sorted by descending version
        """
        try:
            output = self._git(path).tag(
                "--sort=-version:refname", "--list", pattern
            )
        except (GitCommandError, GitCommandNotFound, NoSuchPathError) as e:
            raise GitError(path, str(e)) from e
        return [line.strip() for line in output.splitlines() if line.strip()]

    def get_remote_url(
        self, path: PathLike, remote: str = DEFAULT_REMOTE
    ) -> Optional[str]:
        """
        Read the configured URL of a remote.

        Returns:
            The URL, or None if the remote has no URL configured
        """
        try:
            url = self._git(path).config("--get", f"remote.{remote}.url")
        except GitCommandError as e:
            # `git config --get` exits with 1 when the key is unset
            if e.status == 1:
                return None
            raise GitError(path, str(e)) from e
        except (GitCommandNotFound, NoSuchPathError) as e:
            raise GitError(path, str(e)) from e
        return url.strip() or None

    def create_tag(self, path: PathLike, tag: str, message: str) -> None:
        """Create an annotated tag at HEAD."""
        logger.debug(f"Creating tag {tag} in {path}")
        try:
            self._git(path).tag("-a", tag, "-m", message)
        except (GitCommandError, GitCommandNotFound, NoSuchPathError) as e:
            raise TagCreationError(path, tag, str(e)) from e

    def push_tag(self, path: PathLike, tag: str, remote: str = DEFAULT_REMOTE) -> None:
        """Push a single tag to a remote."""
        logger.debug(f"Pushing tag {tag} to {remote}")
        try:
            self._git(path).push(remote, tag)
        except (GitCommandError, GitCommandNotFound, NoSuchPathError) as e:
            raise TagPushError(path, tag, remote, str(e)) from e
