"""Tests for PathScanner tree traversal."""

import os
from collections.abc import Callable
from pathlib import Path
from unittest.mock import patch

import pytest
from tplsync.sync.models import FileEntry, TraversalError
from tplsync.sync.scanner import PathScanner

_real_scandir = os.scandir


def _scandir_failing_at(failing: Path) -> Callable[[Path], object]:
    """Build an os.scandir replacement that raises for one directory."""

    def _scandir(path: Path) -> object:
        if Path(path) == failing:
            raise PermissionError(13, "Permission denied", str(path))
        return _real_scandir(path)

    return _scandir


class TestScanFiles:
    """Tests for enumerating files."""

    def test_empty_directory(self, source_dir: Path) -> None:
        """An empty source tree yields nothing."""
        assert list(PathScanner(source_dir).scan()) == []

    def test_yields_files_recursively(self, source_dir: Path, make_file: Callable) -> None:
        """Files at every depth are yielded; directories are not."""
        make_file(source_dir, "top.png")
        make_file(source_dir, "a/mid.png")
        make_file(source_dir, "a/b/c/deep.txt")
        (source_dir / "empty").mkdir()

        results = list(PathScanner(source_dir).scan())

        assert all(isinstance(r, FileEntry) for r in results)
        names = sorted(r.name for r in results if isinstance(r, FileEntry))
        assert names == ["deep.txt", "mid.png", "top.png"]

    def test_depth_first_lexical_order(self, source_dir: Path, make_file: Callable) -> None:
        """Entries are visited in name order, descending as directories are met."""
        make_file(source_dir, "b.png")
        make_file(source_dir, "a/z.png")
        make_file(source_dir, "a/y/x.png")
        make_file(source_dir, "c/w.png")

        paths = [r.path for r in PathScanner(source_dir).scan() if isinstance(r, FileEntry)]

        assert paths == [
            source_dir / "a" / "y" / "x.png",
            source_dir / "a" / "z.png",
            source_dir / "b.png",
            source_dir / "c" / "w.png",
        ]

    def test_entry_fields(self, source_dir: Path, make_file: Callable) -> None:
        """Yielded entries carry path, name and extension."""
        make_file(source_dir, "sub/logo.PNG")

        (entry,) = list(PathScanner(source_dir).scan())

        assert isinstance(entry, FileEntry)
        assert entry.path == source_dir / "sub" / "logo.PNG"
        assert entry.name == "logo.PNG"
        assert entry.extension == ".PNG"

    def test_scan_is_lazy(self, source_dir: Path) -> None:
        """Nothing is read until the iterator is consumed."""
        with patch("tplsync.sync.scanner.os.scandir") as mock_scandir:
            iterator = PathScanner(source_dir).scan()
            mock_scandir.assert_not_called()
            del iterator

    def test_symlink_to_file_is_yielded(self, source_dir: Path, make_file: Callable) -> None:
        """Symlinks to files are yielded like files."""
        real = make_file(source_dir, "real.png")
        (source_dir / "link.png").symlink_to(real)

        names = [r.name for r in PathScanner(source_dir).scan() if isinstance(r, FileEntry)]

        assert names == ["link.png", "real.png"]

    def test_symlink_to_directory_not_followed(
        self, tmp_path: Path, source_dir: Path, make_file: Callable
    ) -> None:
        """A symlinked directory is yielded as an entry, not descended into."""
        outside = tmp_path / "outside"
        make_file(outside, "hidden.png")
        (source_dir / "linked").symlink_to(outside, target_is_directory=True)

        results = list(PathScanner(source_dir).scan())

        assert [r.name for r in results if isinstance(r, FileEntry)] == ["linked"]

    def test_root_property(self, source_dir: Path) -> None:
        """The scanner exposes its root."""
        assert PathScanner(source_dir).root == source_dir

    def test_root_is_a_file(self, tmp_path: Path) -> None:
        """A regular file as root is yielded as the only entry."""
        root = tmp_path / "logo.png"
        root.write_bytes(b"x")

        results = list(PathScanner(root).scan())

        assert results == [FileEntry.from_path(root)]


class TestScanErrors:
    """Tests for fail-fast traversal errors."""

    def test_missing_root(self, tmp_path: Path) -> None:
        """A missing root yields a single TraversalError."""
        missing = tmp_path / "does-not-exist"

        results = list(PathScanner(missing).scan())

        assert len(results) == 1
        assert isinstance(results[0], TraversalError)
        assert results[0].path == missing

    def test_unreadable_root(self, source_dir: Path) -> None:
        """A root that cannot be listed yields a TraversalError."""
        with patch("tplsync.sync.scanner.os.scandir", side_effect=_scandir_failing_at(source_dir)):
            results = list(PathScanner(source_dir).scan())

        assert len(results) == 1
        assert isinstance(results[0], TraversalError)
        assert results[0].reason == "Permission denied"

    def test_unreadable_subdirectory_aborts_walk(
        self, source_dir: Path, make_file: Callable
    ) -> None:
        """The walk stops at the failing directory; later entries are never visited."""
        make_file(source_dir, "a/first.png")
        make_file(source_dir, "b/locked.png")
        make_file(source_dir, "c/never.png")
        make_file(source_dir, "z.png")

        failing = source_dir / "b"
        with patch("tplsync.sync.scanner.os.scandir", side_effect=_scandir_failing_at(failing)):
            results = list(PathScanner(source_dir).scan())

        assert len(results) == 2
        assert isinstance(results[0], FileEntry)
        assert results[0].name == "first.png"
        assert isinstance(results[1], TraversalError)
        assert results[1].path == failing

    def test_error_is_last_item(self, source_dir: Path, make_file: Callable) -> None:
        """Nothing follows a TraversalError."""
        make_file(source_dir, "a/b/c.png")
        failing = source_dir / "a" / "b"

        with patch("tplsync.sync.scanner.os.scandir", side_effect=_scandir_failing_at(failing)):
            results = list(PathScanner(source_dir).scan())

        assert isinstance(results[-1], TraversalError)
        assert sum(isinstance(r, TraversalError) for r in results) == 1

    @pytest.mark.skipif(os.geteuid() == 0, reason="root ignores directory permissions")
    def test_real_permission_error(self, source_dir: Path, make_file: Callable) -> None:
        """A chmod 000 directory aborts the walk."""
        make_file(source_dir, "locked/inner.png")
        locked = source_dir / "locked"
        locked.chmod(0)
        try:
            results = list(PathScanner(source_dir).scan())
        finally:
            locked.chmod(0o755)

        assert len(results) == 1
        assert isinstance(results[0], TraversalError)
