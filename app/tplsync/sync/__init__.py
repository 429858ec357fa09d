"""Template sync engine.

This module provides the source tree scanner, filename classifier,
pruner, sync engine, and the run orchestration that ties them together.
"""

from tplsync.sync.classifier import EPHEMERAL_PATTERN, classify, is_ephemeral_name
from tplsync.sync.engine import SyncEngine
from tplsync.sync.models import (
    Classification,
    CopyOutcome,
    CopyResult,
    DeleteOutcome,
    DeleteResult,
    FileEntry,
    RunSummary,
    SyncResult,
    TraversalError,
)
from tplsync.sync.pruner import Pruner
from tplsync.sync.runner import BootstrapError, ensure_target_dir, run_sync
from tplsync.sync.scanner import PathScanner

__all__ = [
    "EPHEMERAL_PATTERN",
    "BootstrapError",
    "Classification",
    "CopyOutcome",
    "CopyResult",
    "DeleteOutcome",
    "DeleteResult",
    "FileEntry",
    "PathScanner",
    "Pruner",
    "RunSummary",
    "SyncEngine",
    "SyncResult",
    "TraversalError",
    "classify",
    "ensure_target_dir",
    "is_ephemeral_name",
    "run_sync",
]
