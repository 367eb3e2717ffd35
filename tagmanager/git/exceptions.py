"""
Exception classes for version-control operations.
"""


class GitError(Exception):
    """Base exception for failed git invocations."""

    def __init__(self, path, message: str):
        self.path = path
        super().__init__(f"git failed in {path}: {message}")


class TagCreationError(GitError):
    """Raised when an annotated tag cannot be created."""

    def __init__(self, path, tag: str, message: str):
        self.tag = tag
        super().__init__(path, f"could not create tag {tag}: {message}")


class TagPushError(GitError):
    """Raised when a tag cannot be pushed to the remote."""

    def __init__(self, path, tag: str, remote: str, message: str):
        self.tag = tag
        self.remote = remote
        super().__init__(path, f"could not push tag {tag} to {remote}: {message}")
