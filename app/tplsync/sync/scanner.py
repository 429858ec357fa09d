"""Recursive source tree scanner.

Walks a source directory depth-first and yields every non-directory
entry as a FileEntry. Read errors end the walk with a single
TraversalError marker instead of an exception.
"""

import logging
import os
import stat
from collections.abc import Generator, Iterator
from pathlib import Path

from tplsync.sync.models import FileEntry, TraversalError

logger = logging.getLogger(__name__)


class PathScanner:
    """Enumerates files under a source root.

    Entries of each directory are visited in lexical order, and
    subdirectories are descended into as they are met. Symbolic links are
    never followed into; they are yielded like regular files, as are
    sockets, FIFOs and other special files.

    Args:
        root: Source directory to walk.
    """

    def __init__(self, root: Path) -> None:
        self._root = root

    @property
    def root(self) -> Path:
        """Source directory this scanner walks."""
        return self._root

    def scan(self) -> Iterator[FileEntry | TraversalError]:
        """Walk the source tree and yield its files.

        The walk is lazy and stops at the first read error. In that case a
        single TraversalError is yielded as the last item; no further
        directories are read. A root that is not a directory is yielded as
        the only entry.

        Yields:
            FileEntry for each file, then at most one TraversalError.
        """
        try:
            root_stat = self._root.stat()
        except OSError as e:
            logger.warning("Cannot read source root %s: %s", self._root, e)
            yield TraversalError(path=self._root, reason=_describe(e))
            return

        if not stat.S_ISDIR(root_stat.st_mode):
            logger.debug("Source root %s is a single file", self._root)
            yield FileEntry.from_path(self._root)
            return

        failure = yield from self._walk(self._root)
        if failure is not None:
            yield failure

    def _walk(self, directory: Path) -> Generator[FileEntry, None, TraversalError | None]:
        """Yield files below ``directory``, returning a TraversalError on failure.

        The error is passed back through the generator's return value so
        nested calls unwind without reading any more directories.
        """
        try:
            with os.scandir(directory) as it:
                entries = sorted(it, key=lambda e: e.name)
        except OSError as e:
            logger.warning("Cannot read directory %s: %s", directory, e)
            return TraversalError(path=directory, reason=_describe(e))

        for entry in entries:
            path = directory / entry.name
            try:
                is_dir = entry.is_dir(follow_symlinks=False)
            except OSError as e:
                logger.warning("Cannot stat %s: %s", path, e)
                return TraversalError(path=path, reason=_describe(e))

            if is_dir:
                failure = yield from self._walk(path)
                if failure is not None:
                    return failure
                continue

            logger.debug("Found file %s", path)
            yield FileEntry.from_path(path)

        return None


def _describe(error: OSError) -> str:
    """Format an OSError without repeating its filename."""
    return error.strerror or str(error)
