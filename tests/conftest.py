"""Shared fixtures."""

from pathlib import Path

import pytest
from pytest import MonkeyPatch

from stabver import Stability, Version


@pytest.fixture
def stable_version() -> Version:
    """A stable 1.0.0 version."""
    return Version(1, 0, 0)


@pytest.fixture
def beta_version() -> Version:
    """The first beta of 1.0.0."""
    return Version(1, 0, 0, Stability.BETA, 1)


@pytest.fixture
def project_dir(tmp_path: Path, monkeypatch: MonkeyPatch) -> Path:
    """Working directory with a stabver.toml."""
    (tmp_path / "stabver.toml").write_text(
        """
[stabver]
version = "1.0.0-beta1"
tag_prefix = "v"
"""
    )
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def empty_dir(tmp_path: Path, monkeypatch: MonkeyPatch) -> Path:
    """Working directory without any config file."""
    monkeypatch.chdir(tmp_path)
    return tmp_path
