import io
import logging
import shutil
from fnmatch import fnmatchcase
from pathlib import Path
from typing import List, Optional

import pytest

from tagmanager.discovery import DiscoveredPackage
from tagmanager.git import GitClient, GitError


@pytest.fixture
def capture_logs():
    """Fixture to capture log output during tests."""
    log_stream = io.StringIO()
    handler = logging.StreamHandler(log_stream)
    logger = logging.getLogger("tagmanager")
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)

    yield log_stream  # Yield the stream to the test function

    # Cleanup after the test
    logger.removeHandler(handler)
    log_stream.close()


class FakeGitClient(GitClient):
    """
    In-memory stand-in for GitClient.

    `tags` must be given highest version first, as `git tag --sort` would
    return them.
    """

    def __init__(
        self,
        tags: Optional[List[str]] = None,
        remote_url: Optional[str] = None,
        fail: bool = False,
    ):
        self.tags = list(tags or [])
        self.remote_url = remote_url
        self.fail = fail
        self.listed: List[str] = []
        self.created: List[tuple] = []
        self.pushed: List[tuple] = []

    def list_tags(self, path, pattern: str) -> List[str]:
        self.listed.append(pattern)
        if self.fail:
            raise GitError(path, "not a git repository")
        return [tag for tag in self.tags if fnmatchcase(tag, pattern)]

    def get_remote_url(self, path, remote: str = "origin") -> Optional[str]:
        if self.fail:
            raise GitError(path, "not a git repository")
        return self.remote_url

    def create_tag(self, path, tag: str, message: str) -> None:
        self.created.append((tag, message))
        self.tags.insert(0, tag)

    def push_tag(self, path, tag: str, remote: str = "origin") -> None:
        self.pushed.append((tag, remote))


@pytest.fixture
def fake_git():
    return FakeGitClient


def write_go_mod(
    directory: Path, module_path: str, go_version: Optional[str] = "1.21"
) -> Path:
    """Create a go.mod file declaring module_path inside directory."""
    directory.mkdir(parents=True, exist_ok=True)
    lines = [f"module {module_path}", ""]
    if go_version:
        lines.append(f"go {go_version}")
    manifest = directory / "go.mod"
    manifest.write_text("\n".join(lines) + "\n")
    return manifest


@pytest.fixture
def go_mod():
    return write_go_mod


@pytest.fixture
def make_package(tmp_path):
    """Factory for DiscoveredPackage values that live in tmp_path."""

    def _make(
        module_path: str = "example.com/mypkg",
        package_name: str = "mypkg",
        **kwargs,
    ) -> DiscoveredPackage:
        return DiscoveredPackage(
            module_path=module_path,
            path=tmp_path,
            package_name=package_name,
            **kwargs,
        )

    return _make


@pytest.fixture
def git_repo(tmp_path):
    """A real git repository with one commit, skipped when git is missing."""
    if shutil.which("git") is None:
        pytest.skip("git executable not available")

    from git import Actor, Repo

    repo_dir = tmp_path / "repo"
    repo_dir.mkdir()
    repo = Repo.init(repo_dir)
    with repo.config_writer() as writer:
        writer.set_value("user", "name", "Test User")
        writer.set_value("user", "email", "test@example.com")
    (repo_dir / "README.md").write_text("test\n")
    repo.index.add(["README.md"])
    author = Actor("Test User", "test@example.com")
    repo.index.commit("Initial commit", author=author, committer=author)
    return repo


@pytest.fixture(autouse=True)
def reset_cli_logging():
    """Drop the stdout handler installed by CLI invocations."""
    yield
    logger = logging.getLogger("tagmanager")
    for handler in list(logger.handlers):
        if handler.get_name() == "tagmanager-cli":
            logger.removeHandler(handler)
