"""
Tag parsing.

Tags are matched against an ordered set of recognized shapes; the first
shape matching the whole tag wins. Each shape is an independent matcher
returning a VersionInfo or None.
"""

import re
from typing import Callable, Optional, Pattern, Tuple

from .exceptions import TagParseError
from .version import VersionInfo

Matcher = Callable[[str], Optional[VersionInfo]]

_NUMBERS = r"([0-9]+)\.([0-9]+)\.([0-9]+)"


def _shape(pattern: Pattern[str], named: bool) -> Matcher:
    def match(tag: str) -> Optional[VersionInfo]:
        m = pattern.fullmatch(tag)
        if m is None:
            return None
        groups = m.groups()
        package_name = groups[0] if named else ""
        try:
            major, minor, patch = (int(g) for g in groups[-3:])
        except ValueError:
            return None
        return VersionInfo(package_name, major, minor, patch)

    return match


# package/v1.2.3
match_slash_v = _shape(re.compile(rf"(.+)/v{_NUMBERS}"), named=True)
# v1.2.3
match_bare_v = _shape(re.compile(rf"v{_NUMBERS}"), named=False)
# package-v1.2.3
match_hyphen_v = _shape(re.compile(rf"(.+)-v{_NUMBERS}"), named=True)
# package-1.2.3
match_hyphen = _shape(re.compile(rf"(.+)-{_NUMBERS}"), named=True)

TAG_MATCHERS: Tuple[Matcher, ...] = (
    match_slash_v,
    match_bare_v,
    match_hyphen_v,
    match_hyphen,
)


def parse_tag(tag: str) -> VersionInfo:
    """
    Parse a tag string into a VersionInfo.

    The canonical version is re-derived from the numbers, so leading zeros
    are normalized away (v01.2.3 -> v1.2.3).

    Args:
        tag: Tag string, e.g. "mypkg/v1.2.3"

    Returns:
        The parsed VersionInfo

    Raises:
        TagParseError: If no recognized shape matches the whole tag
    """
    for matcher in TAG_MATCHERS:
        info = matcher(tag)
        if info is not None:
            return info
    raise TagParseError(tag)


def try_parse_tag(tag: Optional[str]) -> Optional[VersionInfo]:
    """Parse a tag, returning None instead of raising."""
    if not tag:
        return None
    try:
        return parse_tag(tag)
    except TagParseError:
        return None
