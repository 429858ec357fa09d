"""Sync run orchestration.

Bootstraps the target directory, then drives a single pass of the
scanner and routes each file to the pruner or the sync engine according
to its classification.
"""

import logging
from collections.abc import Callable
from pathlib import Path

from tplsync.sync.classifier import classify
from tplsync.sync.engine import SyncEngine
from tplsync.sync.models import Classification, RunSummary, SyncResult, TraversalError
from tplsync.sync.pruner import Pruner
from tplsync.sync.scanner import PathScanner

logger = logging.getLogger(__name__)

# rwxr-xr-x, before umask
TARGET_DIR_MODE = 0o755

ResultCallback = Callable[[SyncResult], None]


class BootstrapError(RuntimeError):
    """Raised when the target directory cannot be created."""


def ensure_target_dir(path: Path) -> Path:
    """Create the target directory and any missing parents.

    Args:
        path: Target library directory.

    Returns:
        The created/existing directory path.

    Raises:
        BootstrapError: If the directory cannot be created.
    """
    if path.is_dir():
        return path

    try:
        path.mkdir(mode=TARGET_DIR_MODE, parents=True, exist_ok=True)
    except PermissionError as e:
        msg = f"Cannot create target directory {path}: Permission denied"
        raise BootstrapError(msg) from e
    except OSError as e:
        msg = f"Cannot create target directory {path}: {e}"
        raise BootstrapError(msg) from e

    logger.info("Created target directory %s", path)
    return path


def run_sync(
    source: Path,
    target: Path,
    *,
    dry_run: bool = False,
    on_result: ResultCallback | None = None,
) -> RunSummary:
    """Prune generated previews under ``source`` and promote templates to ``target``.

    Files are processed in walk order. Per-file failures are recorded in
    the summary and the run continues. A traversal failure stops the walk;
    files already processed keep their outcomes.

    In dry-run mode nothing is created, deleted, or written, including the
    target directory itself.

    Args:
        source: Root of the task tree to walk.
        target: Flat template library directory.
        dry_run: If True, only report what would change.
        on_result: Called with every prune or promote result as it happens.

    Returns:
        RunSummary for the run.

    Raises:
        BootstrapError: If the target directory cannot be created. Raised
            before any file is visited.
    """
    if not dry_run:
        ensure_target_dir(target)

    summary = RunSummary(dry_run=dry_run)
    pruner = Pruner(dry_run=dry_run)
    engine = SyncEngine(target, dry_run=dry_run)

    logger.info("Syncing %s -> %s%s", source, target, " (dry-run)" if dry_run else "")

    for item in PathScanner(source).scan():
        if isinstance(item, TraversalError):
            logger.warning("Walk aborted at %s", item)
            summary.traversal_error = item
            break

        classification = classify(item.name, item.extension)

        if classification == Classification.IGNORED:
            summary.ignored_count += 1
            continue

        if classification == Classification.EPHEMERAL:
            result: SyncResult = pruner.prune(item)
        else:
            result = engine.promote(item)

        summary.record(result)
        if on_result is not None:
            on_result(result)

    logger.info(
        "Run finished: %d deleted, %d copied, %d skipped, %d failed",
        summary.deleted_count,
        summary.copied_count,
        summary.skipped_count,
        summary.failed_count,
    )
    return summary
