"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from collections.abc import Callable
from pathlib import Path

import pytest

PNG_HEADER = b"\x89PNG\r\n\x1a\n"


@pytest.fixture
def make_file() -> Callable[..., Path]:
    """Factory that writes a file (and its parent directories) under a root."""

    def _make(root: Path, relative: str, content: bytes = PNG_HEADER) -> Path:
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content)
        return path

    return _make


@pytest.fixture
def source_dir(tmp_path: Path) -> Path:
    """Empty source tree root."""
    path = tmp_path / "tasks"
    path.mkdir()
    return path


@pytest.fixture
def target_dir(tmp_path: Path) -> Path:
    """Target library path (not created)."""
    return tmp_path / "templates"


@pytest.fixture(autouse=True)
def isolated_config_home(
    tmp_path_factory: pytest.TempPathFactory,
    monkeypatch: pytest.MonkeyPatch,
) -> Path:
    """Point XDG_CONFIG_HOME at an empty directory so no user config leaks in."""
    config_home = tmp_path_factory.mktemp("xdg-config")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    return config_home
