"""Configuration loading for the stabver CLI."""

import logging
import tomllib
from pathlib import Path
from typing import Any, Final, Self

from pydantic import BaseModel, ConfigDict, ValidationError

from ..version import Version

logger = logging.getLogger(__name__)

CONFIG_FILES: Final = ("stabver.toml", "pyproject.toml")


class ConfigError(Exception):
    """Raised when the configuration cannot be loaded or is incomplete."""


class StabverConfig(BaseModel):
    """Settings read from the ``[stabver]`` or ``[tool.stabver]`` table.

    Attributes:
        version: Current version of the project.
        tag_prefix: Text printed in front of produced versions, e.g. "v".
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    version: Version | None = None
    tag_prefix: str = ""

    def format(self: Self, version: Version) -> str:
        """Render a version with the configured tag prefix."""
        return f"{self.tag_prefix}{version}"


def find_config_file(directory: Path | None = None) -> Path | None:
    """Find a config file with a stabver section.

    Looks for ``stabver.toml`` first and then ``pyproject.toml``. A
    pyproject.toml without a ``[tool.stabver]`` table is skipped.

    Args:
        directory: Directory to search, defaults to the working directory.

    Returns:
        Path to the config file, or None if there is none.
    """
    directory = directory or Path.cwd()
    for name in CONFIG_FILES:
        path = directory / name
        if not path.is_file():
            continue
        if name == "pyproject.toml" and _get_section(path, _read_toml(path)) is None:
            continue
        return path
    return None


def load_config(config_path: Path | None = None) -> StabverConfig:
    """Load the configuration.

    Args:
        config_path: Explicit config file. If None, the working directory is
            searched and defaults are used when nothing is found.

    Returns:
        Validated configuration.

    Raises:
        ConfigError: If the file is missing, is not valid TOML or contains
            invalid settings.
    """
    if config_path is None:
        config_path = find_config_file()
        if config_path is None:
            return StabverConfig()
    elif not config_path.is_file():
        raise ConfigError(f"Config file not found: {config_path}")

    logger.debug("Loading configuration from %s", config_path)
    section = _get_section(config_path, _read_toml(config_path)) or {}

    try:
        return StabverConfig.model_validate(section)
    except ValidationError as e:
        details = "; ".join(
            f"{'.'.join(str(loc) for loc in error['loc'])}: {error['msg']}"
            for error in e.errors()
        )
        raise ConfigError(f"Invalid configuration in {config_path}: {details}") from e


def resolve_version(config: StabverConfig, version: str | None) -> Version:
    """Parse the given version or fall back to the configured one.

    Args:
        config: Loaded configuration.
        version: Version string from the command line, if any.

    Returns:
        The version to work with.

    Raises:
        ParseError: If the given version string is invalid.
        ConfigError: If no version is given and none is configured.
    """
    if version is not None:
        return Version.parse(version)
    if config.version is None:
        raise ConfigError(
            "No version given and no version configured. Pass a version or set "
            "'version' in stabver.toml or [tool.stabver] in pyproject.toml"
        )
    return config.version


def _read_toml(path: Path) -> dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e


def _get_section(path: Path, data: dict[str, Any]) -> dict[str, Any] | None:
    if path.name == "pyproject.toml":
        section = data.get("tool", {}).get("stabver")
    else:
        section = data.get("stabver")

    if section is not None and not isinstance(section, dict):
        raise ConfigError(f"Expected a table for stabver settings in {path}")
    return section
