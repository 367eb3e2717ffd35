"""
Git operations module for tag-manager.

Wraps the three version-control operations the tool relies on: listing tags
by pattern, reading the origin URL, and creating/pushing annotated tags.
"""

from .client import DEFAULT_REMOTE, GitClient
from .exceptions import GitError, TagCreationError, TagPushError
from .remote import parse_repo_url

__all__ = [
    "GitClient",
    "DEFAULT_REMOTE",
    "parse_repo_url",
    "GitError",
    "TagCreationError",
    "TagPushError",
]
