"""Tests for the directory loader."""

import pytest

from robo_archiver.exceptions import ArchiveIOError
from robo_archiver.files.loader import load_directory


class TestLoadDirectory:
    """Tests for load_directory."""

    def test_lists_candidate_files(self, issue_dir):
        """Issue files are listed, sorted, without system files or build files."""
        files = load_directory(issue_dir)

        assert [f.name for f in files] == [
            "A_Gazette_1930-01.pdf",
            "A_Gazette_1930-12.pdf",
            "The_Cattlelog_1945-01.tif",
            "The_Cattlelog_1945-02.PDF",
        ]

    def test_not_recursive_by_default(self, issue_dir):
        """Subdirectories are ignored unless recursive."""
        nested = issue_dir / "1931"
        nested.mkdir()
        (nested / "A_Gazette_1931-01.pdf").write_bytes(b"")

        files = load_directory(issue_dir)

        assert "A_Gazette_1931-01.pdf" not in [f.name for f in files]

    def test_recursive(self, issue_dir):
        """Recursive listing includes nested files but skips __MACOSX."""
        nested = issue_dir / "1931"
        nested.mkdir()
        (nested / "A_Gazette_1931-01.pdf").write_bytes(b"")

        files = load_directory(issue_dir, recursive=True)
        names = [f.name for f in files]

        assert "A_Gazette_1931-01.pdf" in names
        assert names.count("A_Gazette_1930-01.pdf") == 1

    def test_skips_target_directory(self, issue_dir):
        """Build output directories are never searched."""
        target = issue_dir / "target"
        target.mkdir()
        (target / "A_Gazette_1999.pdf").write_bytes(b"")

        files = load_directory(issue_dir, recursive=True)

        assert "A_Gazette_1999.pdf" not in [f.name for f in files]

    def test_extension_filter(self, issue_dir):
        """An extension allowlist is applied case-insensitively."""
        files = load_directory(issue_dir, file_exts=["pdf"])

        assert [f.name for f in files] == [
            "A_Gazette_1930-01.pdf",
            "A_Gazette_1930-12.pdf",
            "The_Cattlelog_1945-02.PDF",
        ]

    def test_extension_filter_accepts_leading_dot(self, issue_dir):
        """Extensions may be given with a leading dot."""
        files = load_directory(issue_dir, file_exts=[".TIF"])

        assert [f.name for f in files] == ["The_Cattlelog_1945-01.tif"]

    def test_empty_directory_warns(self, tmp_path, caplog):
        """An empty directory returns nothing and logs a warning."""
        files = load_directory(tmp_path)

        assert files == []
        assert "No files found" in caplog.text

    def test_missing_directory_raises(self, tmp_path):
        """A missing directory raises ArchiveIOError."""
        with pytest.raises(ArchiveIOError):
            load_directory(tmp_path / "nonexistent")

    def test_file_path_raises(self, issue_dir):
        """A file path instead of a directory raises ArchiveIOError."""
        with pytest.raises(ArchiveIOError):
            load_directory(issue_dir / "A_Gazette_1930-01.pdf")
