"""
Version model, tag rendering and version bumping.

A tag is rendered from a user-defined template containing placeholder tokens.
The template is validated once when it is configured (see validation.py);
rendering never fails and leaves unknown tokens untouched.
"""

import re
from dataclasses import dataclass, replace
from enum import Enum
from typing import Union

from .exceptions import InvalidBumpKindError, VersionFormatError

PACKAGE_NAME = "{package-name}"
MAJOR = "{major}"
MINOR = "{minor}"
PATCH = "{patch}"
VERSION = "{version}"

PLACEHOLDERS = (PACKAGE_NAME, MAJOR, MINOR, PATCH, VERSION)

_PLACEHOLDER_RE = re.compile(
    "|".join(re.escape(placeholder) for placeholder in PLACEHOLDERS)
)


class BumpKind(str, Enum):
    MAJOR = "major"
    MINOR = "minor"
    PATCH = "patch"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class VersionInfo:
    """
    A parsed (or synthesized) version of a package.

    The canonical version string is derived from the numeric components,
    so it can never disagree with them.
    """

    package_name: str
    major: int
    minor: int
    patch: int

    def __post_init__(self):
        if min(self.major, self.minor, self.patch) < 0:
            raise VersionFormatError(self.major, self.minor, self.patch)

    @property
    def version(self) -> str:
        """Canonical version string, e.g. v1.2.3."""
        return f"v{self.major}.{self.minor}.{self.patch}"

    @classmethod
    def zero(cls, package_name: str = "") -> "VersionInfo":
        return cls(package_name, 0, 0, 0)

    def __str__(self) -> str:
        if self.package_name:
            return f"{self.package_name} {self.version}"
        return self.version


def render_tag(template: str, version: VersionInfo) -> str:
    """
    Render a tag from a template.

    Every placeholder occurrence is substituted in a single scan of the
    template, so substituted values are never themselves expanded.

    Args:
        template: Tag format, e.g. "{package-name}/v{major}.{minor}.{patch}"
        version: Version to render

    Returns:
        The rendered tag string
    """
    values = {
        PACKAGE_NAME: version.package_name,
        MAJOR: str(version.major),
        MINOR: str(version.minor),
        PATCH: str(version.patch),
        VERSION: version.version,
    }
    return _PLACEHOLDER_RE.sub(lambda match: values[match.group(0)], template)


def bump_version(current: VersionInfo, kind: Union[BumpKind, str]) -> VersionInfo:
    """
    Return a new version bumped by the given kind.

    Args:
        current: Version to bump
        kind: "major", "minor" or "patch"

    Returns:
        A new VersionInfo; the package name is carried through unchanged

    Raises:
        InvalidBumpKindError: If kind is not one of the recognized kinds
    """
    try:
        kind = BumpKind(kind)
    except ValueError as e:
        raise InvalidBumpKindError(kind) from e

    if kind is BumpKind.MAJOR:
        return replace(current, major=current.major + 1, minor=0, patch=0)
    elif kind is BumpKind.MINOR:
        return replace(current, minor=current.minor + 1, patch=0)
    else:
        return replace(current, patch=current.patch + 1)
