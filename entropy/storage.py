"""Centralized file I/O operations.

Provides consistent text file handling with proper error management.
Only the outer layers (API, CLI, audit log) touch the filesystem; the
scoring core never does.
"""

import os
import sys
from typing import Optional


class StorageError(Exception):
    """Base exception for storage operations."""
    pass


def ensure_directory(directory: str) -> None:
    """Create a directory if it doesn't exist.

    On Unix systems, directories are created with mode 0700 (owner only).
    """
    if not directory:
        return
    if sys.platform != "win32":
        os.makedirs(directory, mode=0o700, exist_ok=True)
    else:
        os.makedirs(directory, exist_ok=True)


def append_line(filepath: str, line: str) -> None:
    """Append a line to a text file.

    Args:
        filepath: Path to text file
        line: Line to append (newline added automatically)

    Raises:
        StorageError: If write operation fails
    """
    ensure_directory(os.path.dirname(filepath))
    try:
        with open(filepath, "a", encoding="utf-8") as f:
            f.write(line + "\n")
    except OSError as e:
        raise StorageError(f"Failed to append to {filepath}: {e}")


def load_lines(filepath: str) -> Optional[list[str]]:
    """Load the non-blank lines of a text file.

    Only line endings are removed, so entries may begin or end with spaces.

    Args:
        filepath: Path to text file

    Returns:
        List of lines, or None if file doesn't exist

    Raises:
        StorageError: If file exists but cannot be read
    """
    if not os.path.exists(filepath):
        return None

    try:
        with open(filepath, "r", encoding="utf-8") as f:
            lines = [line.rstrip("\r\n") for line in f]
    except (OSError, UnicodeDecodeError) as e:
        raise StorageError(f"Failed to read {filepath}: {e}")

    return [line for line in lines if line.strip()]


def file_exists(filepath: str) -> bool:
    """Check if file exists."""
    return os.path.exists(filepath)


def file_size(filepath: str) -> int:
    """Return file size in bytes, or 0 if it can't be determined."""
    try:
        return os.path.getsize(filepath)
    except OSError:
        return 0
