import re
from typing import Optional
from urllib.parse import urlparse

_SCP_LIKE_RE = re.compile(r"^(?:[^@/]+@)?([^:/]+):(?!//)(.+)$")


def parse_repo_url(url: Optional[str]) -> Optional[str]:
    """
    Normalize a git remote URL into a host/owner/repo identity.

    Examples:
        https://github.com/user/repo.git -> github.com/user/repo
        git@github.com:user/repo.git -> github.com/user/repo
        ssh://git@github.com:22/user/repo -> github.com/user/repo
        https://gitlab.com/group/subgroup/project -> gitlab.com/group/subgroup/project

    Args:
        url: Remote URL as configured in git

    Returns:
        The normalized identity, or None for URLs without a host and path
        (e.g. local paths)
    """
    if not url:
        return None

    # Remove .git suffix if present
    url = url.strip().rstrip("/")
    if url.endswith(".git"):
        url = url[:-4]

    parsed = urlparse(url)
    if parsed.scheme in ("http", "https", "ssh", "git", "git+ssh"):
        host = parsed.hostname
        path = parsed.path.strip("/")
        if host and path:
            return f"{host}/{path}"
        return None

    # Handle SSH URLs (git@host:path)
    ssh_match = _SCP_LIKE_RE.match(url)
    if ssh_match:
        host, path = ssh_match.groups()
        path = path.strip("/")
        if path:
            return f"{host}/{path}"

    return None
