"""Scanner module for listing candidate files."""
import os
from pathlib import Path

from .errors import ScanError
from .report import Reporter


def _list_flat(directory: Path, reporter: Reporter) -> list[Path]:
    try:
        entries = list(directory.iterdir())
    except OSError as e:
        raise ScanError(f"Could not read directory {directory}: {e}") from e

    files = []
    for item in entries:
        try:
            if item.is_file() and not item.is_symlink():
                files.append(item)
        except OSError as e:
            reporter.scan_warning(f"Could not access {item}: {e}")
    return files


def _list_recursive(directory: Path, reporter: Reporter) -> list[Path]:
    root_error: list[OSError] = []

    def on_error(error: OSError) -> None:
        if Path(error.filename) == directory:
            root_error.append(error)
        else:
            reporter.scan_warning(f"Could not access {error.filename}: {error.strerror}")

    files = []
    for dirpath, _dirnames, filenames in os.walk(directory, onerror=on_error):
        for name in filenames:
            item = Path(dirpath) / name
            try:
                if item.is_file() and not item.is_symlink():
                    files.append(item)
            except OSError as e:
                reporter.scan_warning(f"Could not access {item}: {e}")

    if root_error:
        raise ScanError(f"Could not read directory {directory}: {root_error[0]}")
    return files


def find_files(directory: Path, recursive: bool, reporter: Reporter) -> list[Path]:
    """
    Find all regular files in a directory. Symlinks are not followed.

    Args:
        directory: Directory to scan
        recursive: Whether to descend into subdirectories
        reporter: Output for per-entry access problems

    Returns:
        Sorted list of file paths

    Raises:
        ScanError: If the directory itself cannot be listed.
    """
    if recursive:
        files = _list_recursive(directory, reporter)
    else:
        files = _list_flat(directory, reporter)
    return sorted(files)
