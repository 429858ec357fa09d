"""Configuration file I/O.

This module provides the settings model for tplsync and functions for
loading and saving it as TOML. A missing config file is not an error:
the defaults apply.
"""

import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated, Any

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from tplsync.core.paths import DEFAULT_SOURCE_DIR, DEFAULT_TARGET_DIR, get_config_path
from tplsync.core.theme import ThemeColors


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigParseError(ConfigError):
    """Raised when the config file cannot be parsed."""


class ConfigValidationError(ConfigError):
    """Raised when the config file content is invalid."""


class SyncConfig(BaseModel):
    """Settings for tplsync.

    Attributes:
        source: Default source tree to walk.
        target: Default template library directory.
        wait_for_key: Block on "Press Enter to exit..." after a sync.
        theme: Console color overrides.
    """

    model_config = ConfigDict(extra="forbid")

    source: Annotated[
        Path,
        Field(description="Source tree of task assets"),
    ] = DEFAULT_SOURCE_DIR
    target: Annotated[
        Path,
        Field(description="Flat template library directory"),
    ] = DEFAULT_TARGET_DIR
    wait_for_key: Annotated[
        bool,
        Field(description="Wait for Enter before exiting after a sync"),
    ] = True
    theme: Annotated[
        ThemeColors,
        Field(default_factory=ThemeColors, description="Console color overrides"),
    ]


def load_config(path: Path | None = None) -> SyncConfig:
    """Load and validate the config file.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated SyncConfig. Defaults if the file does not exist.

    Raises:
        ConfigParseError: If the TOML syntax is invalid.
        ConfigValidationError: If the content doesn't match the schema.
        ConfigError: If the file exists but cannot be read.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        return SyncConfig()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax in {config_path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config: {e}") from e

    try:
        return SyncConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigValidationError(f"Invalid config content in {config_path}: {e}") from e


def config_to_dict(config: SyncConfig) -> dict[str, Any]:
    """Convert a SyncConfig to a TOML-serializable dictionary."""
    return config.model_dump(mode="json")


def save_config(config: SyncConfig, path: Path | None = None) -> Path:
    """Save the config to a TOML file.

    The file is written to a temporary file in the same directory and
    moved into place with os.replace().

    Args:
        config: The SyncConfig to save.
        path: Destination path. If None, uses the default config path.

    Returns:
        Path where the config was saved.

    Raises:
        ConfigError: If the file cannot be written.
    """
    config_path = path or get_config_path()
    data = config_to_dict(config)

    tmp_path: Path | None = None
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with NamedTemporaryFile(
            mode="wb",
            dir=config_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(data, f)
        os.replace(tmp_path, config_path)
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ConfigError(f"Failed to write config: {e}") from e

    return config_path
