"""Tests for tag-format validation."""

import pytest

from tagmanager.versioning import (
    EmptyTagFormatError,
    IllegalWhitespaceError,
    MissingPlaceholderError,
    TagFormatError,
    is_valid_tag_format,
    validate_tag_format,
)


@pytest.mark.short
class TestValidateTagFormat:
    @pytest.mark.parametrize(
        "tag_format",
        [
            "{package-name}/v{major}.{minor}.{patch}",
            "{package-name}-{major}.{minor}.{patch}",
            "v{major}.{minor}.{patch}",
            "{version}",
            "{package-name}@{version}",
            "{version}{major}",
            "release_{major}_{minor}_{patch}+build",
        ],
    )
    def test_valid(self, tag_format):
        validate_tag_format(tag_format)
        assert is_valid_tag_format(tag_format)

    def test_empty(self):
        with pytest.raises(EmptyTagFormatError):
            validate_tag_format("")

    def test_missing_patch(self):
        with pytest.raises(MissingPlaceholderError) as exc_info:
            validate_tag_format("{major}.{minor}")
        assert exc_info.value.placeholder == "{patch}"
        assert "{patch}" in str(exc_info.value)

    def test_reports_first_missing_placeholder(self):
        with pytest.raises(MissingPlaceholderError) as exc_info:
            validate_tag_format("{package-name}/v{patch}")
        assert exc_info.value.placeholder == "{major}"

        with pytest.raises(MissingPlaceholderError) as exc_info:
            validate_tag_format("v{major}.{patch}")
        assert exc_info.value.placeholder == "{minor}"

    def test_no_placeholders(self):
        with pytest.raises(MissingPlaceholderError) as exc_info:
            validate_tag_format("release")
        assert exc_info.value.placeholder == "{major}"

    @pytest.mark.parametrize(
        "tag_format",
        [
            "{package-name} v{major}.{minor}.{patch}",
            "{version}\t",
            "{version}\n",
            "\r{version}",
            " {version}",
        ],
    )
    def test_whitespace(self, tag_format):
        with pytest.raises(IllegalWhitespaceError):
            validate_tag_format(tag_format)
        assert not is_valid_tag_format(tag_format)

    def test_placeholder_checked_before_whitespace(self):
        with pytest.raises(MissingPlaceholderError):
            validate_tag_format("{major} {minor}")

    def test_errors_share_base_class(self):
        for bad in ("", "{major}", "{version} x"):
            with pytest.raises(TagFormatError) as exc_info:
                validate_tag_format(bad)
            assert exc_info.value.tag_format == bad
