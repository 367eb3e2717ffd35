"""go.mod parsing and package-name derivation."""

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .exceptions import ManifestParseError

MANIFEST_NAME = "go.mod"

_MAJOR_VERSION_SUFFIX_RE = re.compile(r"v[0-9]+")


@dataclass(frozen=True)
class GoModule:
    module_path: str
    go_version: Optional[str] = None


def _directive_value(line: str, keyword: str) -> Optional[str]:
    """Return the argument of `keyword arg`, or None if line is another directive."""
    if not line.startswith(keyword):
        return None
    rest = line[len(keyword) :]
    if rest and not rest[0].isspace():
        return None
    # trailing comment
    rest = rest.split("//", 1)[0].strip()
    return rest.strip('"`')


def parse_go_mod(path: Path) -> GoModule:
    """
    Extract the module path and go version from a go.mod file.

    Args:
        path: Path to the go.mod file

    Returns:
        The parsed GoModule

    Raises:
        ManifestParseError: If the file cannot be read or declares no module
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ManifestParseError(path, str(e)) from e

    module_path = None
    go_version = None
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if module_path is None:
            value = _directive_value(line, "module")
            if value:
                module_path = value
                continue
        if go_version is None:
            value = _directive_value(line, "go")
            if value:
                go_version = value

    if not module_path:
        raise ManifestParseError(path, "no module declaration found")

    return GoModule(module_path=module_path, go_version=go_version)


def extract_package_name(module_path: str) -> str:
    """
    Derive a short display name from a module path.

    The last path segment is used, unless it is a major-version suffix
    (v2, v3, ...) in which case the segment before it is used:

        example.com/bar    -> bar
        example.com/foo/v2 -> foo
    """
    parts = module_path.strip("/").split("/")
    last = parts[-1]
    if _MAJOR_VERSION_SUFFIX_RE.fullmatch(last) and len(parts) > 1:
        return parts[-2]
    return last
