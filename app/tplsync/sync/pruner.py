"""Deletion of generated preview thumbnails.

Removes ephemeral files in place with dry-run support. Failures are
returned as results, never raised, so one bad file does not stop a run.
"""

import logging

from tplsync.sync.models import DeleteOutcome, DeleteResult, FileEntry

logger = logging.getLogger(__name__)


class Pruner:
    """Deletes ephemeral files from the source tree.

    Attributes:
        _dry_run: If True, report what would be deleted without deleting.
    """

    def __init__(self, dry_run: bool = False) -> None:
        """Initialize the Pruner.

        Args:
            dry_run: If True, report what would be deleted without deleting.
        """
        self._dry_run = dry_run

    def prune(self, entry: FileEntry) -> DeleteResult:
        """Delete a single ephemeral file.

        The path is unlinked directly; a symlink is removed, never its
        target.

        Args:
            entry: Ephemeral file to delete.

        Returns:
            DeleteResult with DELETED or FAILED outcome.
        """
        if self._dry_run:
            logger.info("Dry-run: would delete %s", entry.path)
            return DeleteResult(entry=entry, outcome=DeleteOutcome.DELETED, dry_run=True)

        try:
            entry.path.unlink()
        except OSError as e:
            logger.warning("Failed to delete %s: %s", entry.path, e)
            return DeleteResult(entry=entry, outcome=DeleteOutcome.FAILED, error=str(e))

        logger.debug("Deleted %s", entry.path)
        return DeleteResult(entry=entry, outcome=DeleteOutcome.DELETED)
