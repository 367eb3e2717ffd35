"""Tests for `tag-manager config`."""

import pytest
from click.testing import CliRunner

from tagmanager.cli.main import cli
from tagmanager.config import DEFAULT_TAG_FORMAT, Config, PackageConfig, save_config


@pytest.mark.short
def test_config_not_found(config_file):
    result = CliRunner().invoke(cli, ["--config", str(config_file), "config"])

    assert result.exit_code == 0, result.output
    assert f"Config file: {config_file}" in result.output
    assert "Status: ✗ Not found (will be created on first use)" in result.output
    assert "No configuration file found. Here are the defaults:" in result.output
    assert f"Default Tag Format: {DEFAULT_TAG_FORMAT}" in result.output
    assert "No packages configured yet." in result.output
    # showing the configuration never creates it
    assert not config_file.exists()


@pytest.mark.short
def test_config_with_packages(config_file):
    config = Config()
    config.set_package_config(
        PackageConfig(
            module_path="example.com/foo",
            tag_format="{package-name}-{major}.{minor}.{patch}",
            repository="github.com/acme/foo",
            last_updated="2024-05-01T10:00:00+00:00",
        )
    )
    config.set_package_config(
        PackageConfig(
            module_path="example.com/bar",
            tag_format=DEFAULT_TAG_FORMAT,
            use_default=True,
        )
    )
    save_config(config, config_file)

    result = CliRunner().invoke(cli, ["--config", str(config_file), "config"])

    assert result.exit_code == 0, result.output
    assert "Status: ✓ Found" in result.output
    assert "Here are the defaults" not in result.output
    assert "Configured Packages (2):" in result.output
    assert "Package: example.com/foo" in result.output
    assert "Tag Format: {package-name}-{major}.{minor}.{patch}" in result.output
    assert "Use Default: false" in result.output
    assert "Use Default: true" in result.output
    assert "Repository: github.com/acme/foo" in result.output
    assert "Last Updated: 2024-05-01T10:00:00+00:00" in result.output
    # sorted by module path
    assert result.output.index("example.com/bar") < result.output.index(
        "example.com/foo"
    )


@pytest.mark.short
def test_config_from_environment(config_file):
    save_config(Config(), config_file)

    result = CliRunner().invoke(
        cli, ["config"], env={"TAG_MANAGER_CONFIG": str(config_file)}
    )

    assert result.exit_code == 0, result.output
    assert f"Config file: {config_file}" in result.output
    assert "Status: ✓ Found" in result.output


@pytest.mark.short
def test_config_invalid_file(config_file):
    config_file.parent.mkdir(parents=True)
    config_file.write_text("packages: [unclosed\n")

    result = CliRunner().invoke(cli, ["--config", str(config_file), "config"])

    assert result.exit_code == 1
    assert "Error loading configuration" in result.output
