"""
Versioning module for tag-manager.

All version parsing, bumping, rendering and tag-format validation lives here,
so the CLI and discovery layers never carry their own version handling.

1. **Version model** (version.py):
   - VersionInfo: immutable (package name, major, minor, patch)
   - render_tag: single-pass template substitution
   - bump_version: major / minor / patch increments

2. **Tag parsing** (parser.py):
   - Ordered matchers for the recognized tag shapes

3. **Tag-format validation** (validation.py)

4. **Exception hierarchy** (exceptions.py)
"""

from .exceptions import (
    VersioningError,
    VersionFormatError,
    TagParseError,
    InvalidBumpKindError,
    TagFormatError,
    EmptyTagFormatError,
    MissingPlaceholderError,
    IllegalWhitespaceError,
    TagExistsError,
)
from .parser import TAG_MATCHERS, parse_tag, try_parse_tag
from .validation import is_valid_tag_format, validate_tag_format
from .version import PLACEHOLDERS, BumpKind, VersionInfo, bump_version, render_tag

__all__ = [
    # Core version utilities
    "VersionInfo",
    "BumpKind",
    "PLACEHOLDERS",
    "render_tag",
    "bump_version",
    "parse_tag",
    "try_parse_tag",
    "TAG_MATCHERS",
    "validate_tag_format",
    "is_valid_tag_format",
    # Exception hierarchy
    "VersioningError",
    "VersionFormatError",
    "TagParseError",
    "InvalidBumpKindError",
    "TagFormatError",
    "EmptyTagFormatError",
    "MissingPlaceholderError",
    "IllegalWhitespaceError",
    "TagExistsError",
]
