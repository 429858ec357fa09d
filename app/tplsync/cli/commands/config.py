"""Config command implementation.

Shows the effective configuration and writes a default config file.
"""

from typing import Annotated

import tomli_w
import typer
from rich.markup import escape

from tplsync.cli.types import get_config_path_option, load_cli_config
from tplsync.core.config import ConfigError, SyncConfig, config_to_dict, save_config
from tplsync.core.paths import get_config_path
from tplsync.utils.formatting import console, print_error, print_info, print_success

app = typer.Typer(
    help="Inspect and create the configuration file.",
    no_args_is_help=True,
)


@app.command()
def show(ctx: typer.Context) -> None:
    """Print the effective configuration."""
    path = get_config_path_option(ctx) or get_config_path()
    config = load_cli_config(ctx)

    if path.exists():
        print_info(f"Config file: {path}")
    else:
        print_info(f"Config file: {path} (not found, using defaults)")

    console.print(escape(tomli_w.dumps(config_to_dict(config))), soft_wrap=True)


@app.command()
def init(
    ctx: typer.Context,
    force: Annotated[
        bool,
        typer.Option("--force", help="Overwrite an existing config file."),
    ] = False,
) -> None:
    """Write a config file with the default settings."""
    path = get_config_path_option(ctx) or get_config_path()

    if path.exists() and not force:
        print_error(f"Config already exists: {path} (use --force to overwrite)")
        raise typer.Exit(code=1)

    try:
        saved = save_config(SyncConfig(), path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Config written: {saved}")
