"""Shared types and utilities for CLI commands.

This module provides common enums and helper functions used across
multiple CLI command modules to avoid code duplication.
"""

from enum import Enum
from pathlib import Path

import typer

from tplsync.core.config import ConfigError, SyncConfig, load_config
from tplsync.utils.formatting import print_error


class OutputFormat(str, Enum):
    """Output format options for listing commands."""

    TABLE = "table"
    JSON = "json"


def get_option(ctx: typer.Context, name: str, default: object = None) -> object:
    """Read a global option stored on the context by the main callback."""
    if not isinstance(ctx.obj, dict):
        return default
    return ctx.obj.get(name, default)


def get_config_path_option(ctx: typer.Context) -> Path | None:
    """Return the --config path given to the main callback, if any."""
    value = get_option(ctx, "config_path")
    return value if isinstance(value, Path) else None


def load_cli_config(ctx: typer.Context) -> SyncConfig:
    """Load the config file selected by the global options.

    Args:
        ctx: Typer context carrying the global options.

    Returns:
        Validated SyncConfig (defaults if no file exists).

    Raises:
        typer.Exit: If the config file is unreadable or invalid.
    """
    try:
        return load_config(get_config_path_option(ctx))
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e
