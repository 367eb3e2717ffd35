"""Tag-format validation."""

from .exceptions import (
    EmptyTagFormatError,
    IllegalWhitespaceError,
    MissingPlaceholderError,
    TagFormatError,
)
from .version import MAJOR, MINOR, PATCH, VERSION

REQUIRED_PLACEHOLDERS = (MAJOR, MINOR, PATCH)
WHITESPACE = (" ", "\t", "\n", "\r")


def validate_tag_format(tag_format: str) -> None:
    """
    Check that a tag format is renderable and unambiguous.

    Rules, in order:
        1. the format is non-empty
        2. {version} on its own satisfies the placeholder requirement
        3. otherwise {major}, {minor} and {patch} must all be present
        4. no whitespace characters

    Raises:
        EmptyTagFormatError: If the format is empty
        MissingPlaceholderError: Naming the first missing placeholder
        IllegalWhitespaceError: If the format contains whitespace
    """
    if not tag_format:
        raise EmptyTagFormatError(tag_format)

    if VERSION not in tag_format:
        for placeholder in REQUIRED_PLACEHOLDERS:
            if placeholder not in tag_format:
                raise MissingPlaceholderError(tag_format, placeholder)

    if any(char in tag_format for char in WHITESPACE):
        raise IllegalWhitespaceError(tag_format)


def is_valid_tag_format(tag_format: str) -> bool:
    try:
        validate_tag_format(tag_format)
    except TagFormatError:
        return False
    return True
