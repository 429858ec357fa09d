"""Promotion of template assets into the flat library directory.

The SyncEngine copies a candidate into ``target / name`` only when
nothing with that name exists there yet. It never overwrites and never
compares contents.

The existence check and the copy are separate steps. Two runs sharing
one target directory can race between them; a single run per target is
assumed.
"""

import errno
import logging
import os
import shutil
from pathlib import Path

from tplsync.sync.models import CopyOutcome, CopyResult, FileEntry

logger = logging.getLogger(__name__)

_COPY_BUFFER_SIZE = 1024 * 1024


class SyncEngine:
    """Copies candidate files into a flat target directory.

    Attributes:
        _target_dir: Library directory receiving promoted files.
        _dry_run: If True, report what would be copied without writing.
    """

    def __init__(self, target_dir: Path, dry_run: bool = False) -> None:
        """Initialize the SyncEngine.

        Args:
            target_dir: Library directory. Must exist unless dry_run is set.
            dry_run: If True, report what would be copied without writing.
        """
        self._target_dir = target_dir
        self._dry_run = dry_run

    @property
    def target_dir(self) -> Path:
        """Library directory receiving promoted files."""
        return self._target_dir

    def destination_for(self, entry: FileEntry) -> Path:
        """Compute the flattened destination path for a candidate."""
        return self._target_dir / entry.name

    def promote(self, entry: FileEntry) -> CopyResult:
        """Copy a candidate into the target directory unless its name is taken.

        Any existing entry at the destination (file, directory, or even a
        dangling symlink) is enough to skip.

        Args:
            entry: Candidate file to promote.

        Returns:
            CopyResult with COPIED, SKIPPED_EXISTING, or FAILED outcome.
        """
        destination = self.destination_for(entry)

        try:
            exists = _entry_exists(destination)
        except OSError as e:
            logger.warning("Cannot inspect %s: %s", destination, e)
            return CopyResult(
                entry=entry,
                destination=destination,
                outcome=CopyOutcome.FAILED,
                error=str(e),
            )

        if exists:
            logger.debug("Skipping %s: %s already exists", entry.path, destination)
            return CopyResult(
                entry=entry,
                destination=destination,
                outcome=CopyOutcome.SKIPPED_EXISTING,
            )

        if self._dry_run:
            logger.info("Dry-run: would copy %s to %s", entry.path, destination)
            return CopyResult(
                entry=entry,
                destination=destination,
                outcome=CopyOutcome.COPIED,
                dry_run=True,
            )

        try:
            copy_file_durable(entry.path, destination)
        except OSError as e:
            logger.warning("Failed to copy %s to %s: %s", entry.path, destination, e)
            return CopyResult(
                entry=entry,
                destination=destination,
                outcome=CopyOutcome.FAILED,
                error=str(e),
            )

        logger.debug("Copied %s to %s", entry.path, destination)
        return CopyResult(entry=entry, destination=destination, outcome=CopyOutcome.COPIED)


def _entry_exists(path: Path) -> bool:
    """Check for any directory entry at ``path`` without following symlinks.

    Raises:
        OSError: If the path cannot be inspected for a reason other than
            it not existing.
    """
    try:
        os.lstat(path)
    except FileNotFoundError:
        return False
    except NotADirectoryError:
        return False
    return True


def copy_file_durable(src: Path, dst: Path) -> None:
    """Copy the bytes of ``src`` to a new file at ``dst`` and fsync it.

    The destination is opened with truncation, matching a plain create.
    If anything fails after the destination was created, the partial
    file is removed before the error propagates.

    Args:
        src: Source file to read.
        dst: Destination file to create.

    Raises:
        OSError: If the source cannot be read or the destination cannot
            be written or flushed.
    """
    with open(src, "rb") as source_file:
        created = False
        try:
            with open(dst, "wb") as dest_file:
                created = True
                shutil.copyfileobj(source_file, dest_file, _COPY_BUFFER_SIZE)
                dest_file.flush()
                os.fsync(dest_file.fileno())
        except OSError:
            if created:
                _remove_partial(dst)
            raise


def _remove_partial(path: Path) -> None:
    try:
        path.unlink()
    except OSError as e:
        if e.errno != errno.ENOENT:
            logger.warning("Could not remove partial copy %s: %s", path, e)
