"""Sync command implementation.

Prunes generated preview thumbnails from the task tree and promotes
template images into the flat library directory, then waits for the
user to press Enter.
"""

import logging
from pathlib import Path
from typing import Annotated

import typer

from tplsync.cli.display import print_result, print_run_summary
from tplsync.cli.types import get_option, load_cli_config
from tplsync.sync.models import SyncResult
from tplsync.sync.runner import BootstrapError, run_sync
from tplsync.utils.formatting import console, print_error, print_info

logger = logging.getLogger(__name__)

app = typer.Typer(
    help="Prune generated previews and promote templates.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def sync(
    ctx: typer.Context,
    src: Annotated[
        Path | None,
        typer.Option("--src", "-s", help="Source directory path. [default: tasks]"),
    ] = None,
    tgt: Annotated[
        Path | None,
        typer.Option("--tgt", "-t", help="Target directory path. [default: templates]"),
    ] = None,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", help="Show what would be deleted and copied."),
    ] = False,
    wait: Annotated[
        bool | None,
        typer.Option(
            "--wait/--no-wait",
            help="Wait for Enter before exiting. [default: from config]",
        ),
    ] = None,
) -> None:
    """Delete tpl<13 digits>.png previews and copy other PNGs into the library.

    Existing library files are never overwritten. Per-file failures are
    reported and the run continues.
    """
    config = load_cli_config(ctx)
    source = src if src is not None else config.source
    target = tgt if tgt is not None else config.target
    should_wait = config.wait_for_key if wait is None else wait
    quiet = bool(get_option(ctx, "quiet", False))
    logger.debug("Resolved source=%s target=%s wait=%s", source, target, should_wait)

    try:
        _execute(source, target, dry_run=dry_run, quiet=quiet)
    finally:
        if should_wait:
            wait_for_keypress()


def _execute(source: Path, target: Path, *, dry_run: bool, quiet: bool) -> None:
    """Run the sync and report each event and the final totals."""
    if dry_run and not quiet:
        print_info("Dry-run: no files will be deleted or copied.")

    def _report(result: SyncResult) -> None:
        print_result(result, quiet=quiet)

    try:
        summary = run_sync(source, target, dry_run=dry_run, on_result=_report)
    except BootstrapError as e:
        print_error(f"Failed to create templates directory: {e}")
        return

    print_run_summary(summary)


def wait_for_keypress() -> None:
    """Block until the user presses Enter."""
    try:
        typer.prompt("Press Enter to exit...", default="", show_default=False, prompt_suffix="")
    except typer.Abort:
        # stdin closed or Ctrl+C: nothing left to wait for
        console.print()
