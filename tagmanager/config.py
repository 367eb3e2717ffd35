"""Per-user configuration: tag formats for each package and the global default."""

import logging
import os
import platform
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, Optional, Union

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

logger = logging.getLogger(__name__)

APP_NAME = "tag-manager"
CONFIG_ENV_VAR = "TAG_MANAGER_CONFIG"

DEFAULT_TAG_FORMAT = "{package-name}/v{major}.{minor}.{patch}"

_home = os.path.expanduser("~")

xdg_config_home = os.environ.get("XDG_CONFIG_HOME") or os.path.join(_home, ".config")

if platform.system() == "Darwin":
    # macOS
    config_dir = Path("~/Library/Application Support/tag-manager").expanduser()
else:
    # Linux or others
    config_dir = Path(os.path.join(xdg_config_home, APP_NAME))


def get_config_file() -> Path:
    """Location of the configuration file, honouring $TAG_MANAGER_CONFIG."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return config_dir / "config.yaml"


class ConfigIOError(Exception):
    """Raised when the configuration file cannot be read or written."""

    def __init__(self, path: Path, message: str):
        self.path = path
        super().__init__(f"Configuration file {path}: {message}")


class PackageConfig(BaseModel):
    """Tag settings for a single package, keyed by its module path."""

    module_path: str
    tag_format: str
    use_default: bool = False
    repository: Optional[str] = None
    last_updated: Optional[str] = None


class DefaultConfig(BaseModel):
    tag_format: str = DEFAULT_TAG_FORMAT

    @field_validator("tag_format", mode="before")
    @classmethod
    def _default_when_empty(cls, v):
        return v or DEFAULT_TAG_FORMAT


class Config(BaseModel):
    """
    The whole configuration record.

    Loaded once per command, passed explicitly to whatever needs it and
    saved back at a single point.
    """

    packages: Dict[str, PackageConfig] = Field(default_factory=dict)
    defaults: DefaultConfig = Field(default_factory=DefaultConfig)

    @field_validator("packages", mode="before")
    @classmethod
    def _empty_packages(cls, v):
        return v or {}

    @field_validator("defaults", mode="before")
    @classmethod
    def _empty_defaults(cls, v):
        return v or {}

    def get_package_config(self, module_path: str) -> PackageConfig:
        """
        Return the configuration of a package.

        Packages without an explicit entry inherit the global default format.
        """
        if module_path in self.packages:
            return self.packages[module_path]
        return PackageConfig(
            module_path=module_path,
            tag_format=self.defaults.tag_format,
            use_default=True,
        )

    def is_configured(self, module_path: str) -> bool:
        return module_path in self.packages

    def set_package_config(self, package_config: PackageConfig) -> None:
        self.packages[package_config.module_path] = package_config


def timestamp() -> str:
    """Current UTC time as used for `last_updated`."""
    return datetime.now(timezone.utc).replace(microsecond=0).isoformat()


def load_config(
    path: Optional[Union[str, Path]] = None, create: bool = True
) -> Config:
    """
    Load the configuration file.

    Args:
        path: Configuration file; defaults to get_config_file()
        create: Write a default configuration if the file does not exist

    Returns:
        The loaded configuration, or the defaults if there is no file yet

    Raises:
        ConfigIOError: If the file cannot be read, parsed or created
    """
    config_path = Path(path) if path is not None else get_config_file()

    if not config_path.exists():
        config = Config()
        if create:
            logger.debug(f"Creating default configuration at {config_path}")
            save_config(config, config_path)
        return config

    try:
        with open(config_path, "r") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigIOError(config_path, f"failed to read: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigIOError(config_path, f"failed to parse: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigIOError(config_path, "expected a mapping at the top level")

    try:
        return Config(**data)
    except ValidationError as e:
        raise ConfigIOError(config_path, f"invalid configuration: {e}") from e


def save_config(config: Config, path: Optional[Union[str, Path]] = None) -> None:
    """
    Write the configuration file, creating its directory as needed.

    Raises:
        ConfigIOError: If the file cannot be written
    """
    config_path = Path(path) if path is not None else get_config_file()
    data = config.model_dump(exclude_none=True)

    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(config_path, "w") as f:
            yaml.safe_dump(data, f, default_flow_style=False, sort_keys=False)
    except OSError as e:
        raise ConfigIOError(config_path, f"failed to write: {e}") from e
