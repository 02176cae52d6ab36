"""Directory listing for scanned issue files."""

import logging
from pathlib import Path

from robo_archiver.exceptions import ArchiveIOError

logger = logging.getLogger(__name__)

SKIP_DIRS = frozenset({"target", "__MACOSX"})
SKIP_EXTS = frozenset({"rs", "toml"})
SKIP_FILES = frozenset({".DS_Store"})


def _is_candidate(path: Path, file_exts: set[str] | None) -> bool:
    if path.name in SKIP_FILES:
        return False
    ext = path.suffix[1:]
    if ext in SKIP_EXTS:
        return False
    if file_exts is not None and ext.lower() not in file_exts:
        return False
    return True


def load_directory(
    path: Path | str,
    recursive: bool = False,
    file_exts: list[str] | None = None,
) -> list[Path]:
    """List candidate issue files in a directory.

    Build artifacts, archive debris and hidden system files are skipped.

    Args:
        path: Directory to search
        recursive: Whether to descend into subdirectories
        file_exts: Only keep files with these extensions (case-insensitive)

    Returns:
        Sorted list of file paths

    Raises:
        ArchiveIOError: If path is not a readable directory
    """
    path = Path(path)
    if not path.is_dir():
        raise ArchiveIOError(f"Not a directory: {path}")

    allowed = {ext.lower().lstrip(".") for ext in file_exts} if file_exts else None
    files = _collect(path, recursive, allowed)

    if not files:
        logger.warning(f"No files found in {path}")
    return sorted(files)


def _collect(path: Path, recursive: bool, allowed: set[str] | None) -> list[Path]:
    try:
        entries = list(path.iterdir())
    except OSError as e:
        raise ArchiveIOError(f"Failed to read directory {path}: {e}") from e

    files: list[Path] = []
    for entry in entries:
        if entry.is_dir():
            if entry.name in SKIP_DIRS:
                logger.debug(f"Skipping directory {entry}")
                continue
            if recursive:
                files.extend(_collect(entry, recursive, allowed))
        elif _is_candidate(entry, allowed):
            files.append(entry)
    return files
