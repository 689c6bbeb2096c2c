"""Tests for CLI configuration loading."""

from pathlib import Path

import pytest

from stabver import Stability, Version
from stabver.cli.config import (
    ConfigError,
    StabverConfig,
    find_config_file,
    load_config,
    resolve_version,
)


def test_defaults_without_config(empty_dir: Path) -> None:
    """Test that defaults are used when no config file exists."""
    config = load_config()

    assert config.version is None
    assert config.tag_prefix == ""


def test_load_stabver_toml(project_dir: Path) -> None:
    """Test loading stabver.toml from the working directory."""
    config = load_config()

    assert config.version == Version(1, 0, 0, Stability.BETA, 1)
    assert config.tag_prefix == "v"


def test_stabver_toml_takes_precedence(project_dir: Path) -> None:
    """Test that stabver.toml wins over pyproject.toml."""
    (project_dir / "pyproject.toml").write_text('[tool.stabver]\nversion = "9.0.0"\n')

    assert find_config_file() == project_dir / "stabver.toml"


def test_pyproject_without_section_is_skipped(empty_dir: Path) -> None:
    """Test that a pyproject.toml without stabver settings is ignored."""
    (empty_dir / "pyproject.toml").write_text('[project]\nname = "demo"\n')

    assert find_config_file() is None
    assert load_config() == StabverConfig()


def test_explicit_config_path(tmp_path: Path) -> None:
    """Test loading an explicit config file."""
    path = tmp_path / "custom.toml"
    path.write_text('[stabver]\nversion = "0.4.0"\n')

    assert str(load_config(path).version) == "0.4.0"


def test_missing_explicit_config(tmp_path: Path) -> None:
    """Test that a missing explicit file raises ConfigError."""
    with pytest.raises(ConfigError, match="Config file not found"):
        load_config(tmp_path / "missing.toml")


def test_invalid_toml(tmp_path: Path) -> None:
    """Test that broken TOML raises ConfigError."""
    path = tmp_path / "stabver.toml"
    path.write_text("[stabver\nversion = ")

    with pytest.raises(ConfigError, match="Invalid TOML"):
        load_config(path)


def test_invalid_version_in_config(tmp_path: Path) -> None:
    """Test that an invalid version raises ConfigError."""
    path = tmp_path / "stabver.toml"
    path.write_text('[stabver]\nversion = "1.0.0+build"\n')

    with pytest.raises(ConfigError, match="Invalid configuration.*version"):
        load_config(path)


def test_unknown_setting(tmp_path: Path) -> None:
    """Test that unknown keys are rejected."""
    path = tmp_path / "stabver.toml"
    path.write_text('[stabver]\nprefix = "v"\n')

    with pytest.raises(ConfigError, match="prefix"):
        load_config(path)


def test_section_must_be_table(tmp_path: Path) -> None:
    """Test that a non-table stabver entry is rejected."""
    path = tmp_path / "stabver.toml"
    path.write_text('stabver = "1.0.0"\n')

    with pytest.raises(ConfigError, match="Expected a table"):
        load_config(path)


def test_resolve_version_prefers_argument() -> None:
    """Test that an explicit version wins over the configured one."""
    config = StabverConfig(version=Version(2, 0, 0))

    assert str(resolve_version(config, "3.1")) == "3.1.0"
    assert resolve_version(config, None) == Version(2, 0, 0)


def test_resolve_version_without_any() -> None:
    """Test that resolving with nothing configured fails."""
    with pytest.raises(ConfigError, match="No version given"):
        resolve_version(StabverConfig(), None)


def test_format_with_prefix() -> None:
    """Test rendering versions with the tag prefix."""
    config = StabverConfig(tag_prefix="v")

    assert config.format(Version(1, 2, 0)) == "v1.2.0"
