"""
Exception classes for the versioning module.
"""


class VersioningError(Exception):
    """Base exception for all versioning-related errors."""

    pass


class VersionFormatError(VersioningError):
    """Raised when version components are out of range."""

    def __init__(self, major: int, minor: int, patch: int):
        self.major = major
        self.minor = minor
        self.patch = patch
        super().__init__(
            f"Invalid version components: ({major}, {minor}, {patch}). "
            "Components must be non-negative integers"
        )


class TagParseError(VersioningError):
    """Raised when a tag does not match any recognized tag shape."""

    def __init__(self, tag: str):
        self.tag = tag
        super().__init__(f"Unable to parse tag: '{tag}' (no recognized pattern)")


class InvalidBumpKindError(VersioningError):
    """Raised when asked to bump a version by an unknown kind."""

    def __init__(self, kind):
        self.kind = kind
        super().__init__(
            f"Invalid version type: '{kind}'. Expected one of: major, minor, patch"
        )


class TagFormatError(VersioningError):
    """Base exception for rejected tag-format templates."""

    def __init__(self, tag_format: str, message: str):
        self.tag_format = tag_format
        super().__init__(message)


class EmptyTagFormatError(TagFormatError):
    """Raised when a tag format is empty."""

    def __init__(self, tag_format: str = ""):
        super().__init__(tag_format, "Tag format cannot be empty")


class MissingPlaceholderError(TagFormatError):
    """Raised when a tag format lacks a required placeholder."""

    def __init__(self, tag_format: str, placeholder: str):
        self.placeholder = placeholder
        super().__init__(
            tag_format, f"Tag format must contain {placeholder} placeholder"
        )


class IllegalWhitespaceError(TagFormatError):
    """Raised when a tag format contains whitespace characters."""

    def __init__(self, tag_format: str):
        super().__init__(tag_format, "Tag format cannot contain whitespace characters")


class TagExistsError(VersioningError):
    """Raised when attempting to create a tag that already exists."""

    def __init__(self, tag: str):
        self.tag = tag
        super().__init__(f"Tag {tag} already exists")
