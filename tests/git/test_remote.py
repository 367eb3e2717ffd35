"""Tests for remote URL normalization."""

import pytest

from tagmanager.git import parse_repo_url


@pytest.mark.short
class TestParseRepoUrl:
    """Test URL parsing into host/owner/repo identities."""

    def test_https_github(self):
        url = "https://github.com/user/repo.git"
        assert parse_repo_url(url) == "github.com/user/repo"

    def test_https_github_no_git_suffix(self):
        url = "https://github.com/user/repo"
        assert parse_repo_url(url) == "github.com/user/repo"

    def test_ssh_github(self):
        url = "git@github.com:user/repo.git"
        assert parse_repo_url(url) == "github.com/user/repo"

    def test_ssh_github_no_git_suffix(self):
        url = "git@github.com:user/repo"
        assert parse_repo_url(url) == "github.com/user/repo"

    def test_ssh_and_https_agree(self):
        assert parse_repo_url("git@gitlab.com:group/project.git") == parse_repo_url(
            "https://gitlab.com/group/project.git"
        )

    def test_ssh_scheme_with_port(self):
        url = "ssh://git@github.com:22/user/repo.git"
        assert parse_repo_url(url) == "github.com/user/repo"

    def test_https_with_credentials(self):
        url = "https://token@github.com/user/repo.git"
        assert parse_repo_url(url) == "github.com/user/repo"

    def test_gitlab_nested(self):
        url = "https://gitlab.com/group/subgroup/project.git"
        assert parse_repo_url(url) == "gitlab.com/group/subgroup/project"

    def test_trailing_slash(self):
        url = "https://github.com/user/repo/"
        assert parse_repo_url(url) == "github.com/user/repo"

    def test_surrounding_whitespace(self):
        assert parse_repo_url("  git@github.com:user/repo.git\n") == (
            "github.com/user/repo"
        )

    @pytest.mark.parametrize(
        "url",
        [
            None,
            "",
            "/srv/git/repo.git",
            "../repo",
            "file:///srv/git/repo.git",
            "https://github.com",
        ],
    )
    def test_unrecognized(self, url):
        assert parse_repo_url(url) is None
