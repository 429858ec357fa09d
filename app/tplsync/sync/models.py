"""Sync domain models.

This module defines the data structures passed between the scanner,
classifier, pruner and sync engine, and the RunSummary that collects
their outcomes over a single run.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class Classification(str, Enum):
    """Category assigned to a scanned file.

    Attributes:
        IGNORED: Not a PNG image; never deleted or copied.
        EPHEMERAL: Generated preview thumbnail (``tpl`` + 13 digits); deleted.
        CANDIDATE: Original template asset; promoted into the library.
    """

    IGNORED = "ignored"
    EPHEMERAL = "ephemeral"
    CANDIDATE = "candidate"


class DeleteOutcome(str, Enum):
    """Outcome of pruning one ephemeral file."""

    DELETED = "deleted"
    FAILED = "failed"


class CopyOutcome(str, Enum):
    """Outcome of promoting one candidate file.

    Attributes:
        COPIED: File was copied into the target directory.
        SKIPPED_EXISTING: An entry with the same name already exists in the target.
        FAILED: The copy could not be completed.
    """

    COPIED = "copied"
    SKIPPED_EXISTING = "skipped_existing"
    FAILED = "failed"


def _split_extension(name: str) -> str:
    """Return the suffix starting at the final dot of a filename.

    Unlike ``Path.suffix``, a leading-dot name such as ``.png`` keeps its
    whole text as the extension.
    """
    index = name.rfind(".")
    if index < 0:
        return ""
    return name[index:]


@dataclass(frozen=True, slots=True)
class FileEntry:
    """A non-directory entry discovered under the source tree.

    Attributes:
        path: Full path of the file as reached by the walk.
        name: Base filename.
        extension: Suffix from the final dot of ``name`` (empty if none).
    """

    path: Path
    name: str
    extension: str

    def __post_init__(self) -> None:
        """Validate file entry data after initialization."""
        if not self.name:
            msg = "File name cannot be empty"
            raise ValueError(msg)

    @classmethod
    def from_path(cls, path: Path) -> "FileEntry":
        """Build a FileEntry from a filesystem path."""
        return cls(path=path, name=path.name, extension=_split_extension(path.name))


@dataclass(frozen=True, slots=True)
class TraversalError:
    """Terminal marker yielded by the scanner when the walk cannot continue.

    Attributes:
        path: Directory (or root) that could not be read.
        reason: Error message from the underlying OS call.
    """

    path: Path
    reason: str

    def __str__(self) -> str:
        return f"{self.path}: {self.reason}"


@dataclass(frozen=True, slots=True)
class DeleteResult:
    """Result of a single prune operation.

    Attributes:
        entry: The ephemeral file that was operated on.
        outcome: DELETED or FAILED.
        error: Error message if the operation failed, None otherwise.
        dry_run: Whether this was a dry-run (nothing was deleted).
    """

    entry: FileEntry
    outcome: DeleteOutcome
    error: str | None = None
    dry_run: bool = False

    @property
    def success(self) -> bool:
        """Check if the file was (or would have been) deleted."""
        return self.outcome == DeleteOutcome.DELETED


@dataclass(frozen=True, slots=True)
class CopyResult:
    """Result of a single promote operation.

    Attributes:
        entry: The candidate file that was operated on.
        destination: Flattened path inside the target directory.
        outcome: COPIED, SKIPPED_EXISTING, or FAILED.
        error: Error message if the operation failed, None otherwise.
        dry_run: Whether this was a dry-run (nothing was written).
    """

    entry: FileEntry
    destination: Path
    outcome: CopyOutcome
    error: str | None = None
    dry_run: bool = False

    @property
    def success(self) -> bool:
        """Check if the operation did not fail."""
        return self.outcome != CopyOutcome.FAILED


SyncResult = DeleteResult | CopyResult


@dataclass(slots=True)
class RunSummary:
    """Counts and failures accumulated over one sync run.

    A RunSummary is owned by a single run. It is mutated through
    ``record`` as each file is processed and handed back to the caller
    once the walk completes or aborts.

    Attributes:
        deleted_count: Ephemeral files removed from the source tree.
        copied_count: Candidate files copied into the target directory.
        skipped_count: Candidates whose name already existed in the target.
        ignored_count: Non-PNG files seen during the walk.
        failures: Ordered (path, reason) pairs for per-file failures.
        traversal_error: Terminal walk error, None if the walk completed.
        dry_run: Whether the run only simulated changes.
    """

    deleted_count: int = 0
    copied_count: int = 0
    skipped_count: int = 0
    ignored_count: int = 0
    failures: list[tuple[str, str]] = field(default_factory=list)
    traversal_error: TraversalError | None = None
    dry_run: bool = False

    @property
    def completed(self) -> bool:
        """Check if the walk visited the whole source tree."""
        return self.traversal_error is None

    @property
    def failed_count(self) -> int:
        """Number of per-file failures."""
        return len(self.failures)

    def record(self, result: SyncResult) -> None:
        """Fold a single prune or promote result into the summary."""
        if isinstance(result, DeleteResult):
            if result.success:
                self.deleted_count += 1
            else:
                self.failures.append((str(result.entry.path), result.error or "unknown error"))
            return

        if result.outcome == CopyOutcome.COPIED:
            self.copied_count += 1
        elif result.outcome == CopyOutcome.SKIPPED_EXISTING:
            self.skipped_count += 1
        else:
            self.failures.append((str(result.entry.path), result.error or "unknown error"))
