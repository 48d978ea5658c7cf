from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides the path and tree primitives used by the walker and the pipeline:
existence checks, recursive directory creation, path decomposition and
single-file copy. Has no knowledge of source code.
"""

import logging
import os
import shutil
from typing import List, Optional

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a directory path string into an absolute filesystem path.

    Handles environment variable expansion ($VAR/%VAR%) and user home
    shortcuts (~/). Reverts to fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is empty.

    Returns:
        str: Normalized absolute path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    p = os.path.expandvars(os.path.expanduser(p))
    return os.path.abspath(p)


def split_path_segments(path: str) -> List[str]:
    """
    Decompose a path into its components, root-first.

    Decomposition stops at a filesystem root or at the current-directory
    marker, neither of which is returned as a segment.

    Args:
        path: Relative or absolute path.

    Returns:
        List[str]: Ordered path segments.
    """
    segments: List[str] = []
    head = path
    while head and head != os.curdir:
        parent, tail = os.path.split(head)
        if parent == head:
            # Filesystem root ('/' or 'C:\\')
            break
        if tail:
            segments.append(tail)
        head = parent
    segments.reverse()
    return segments


def is_same_path(a: str, b: str) -> bool:
    """Compare two paths after normalization, resolving symlinks when both exist."""
    if os.path.exists(a) and os.path.exists(b):
        try:
            return os.path.samefile(a, b)
        except OSError:
            pass
    return os.path.normcase(os.path.abspath(a)) == os.path.normcase(os.path.abspath(b))

# -----------------------------------------------------------------------------
# DIRECTORY API
# -----------------------------------------------------------------------------

def directory_exists(path: str) -> bool:
    """Return True when the path exists and is a directory."""
    return os.path.isdir(path)


def ensure_directory(path: str) -> bool:
    """
    Create a directory and all of its missing ancestors ("mkdirp").

    Idempotent: an existing directory is a success.

    Args:
        path: Target directory path.

    Returns:
        bool: True if the directory exists or was created, False otherwise
              (e.g. a path component exists as a regular file).
    """
    if os.path.isdir(path):
        return True
    try:
        os.makedirs(path, exist_ok=True)
    except OSError as e:
        logger.debug(f"Directory creation failed for '{path}': {e}")
        return False
    return os.path.isdir(path)

# -----------------------------------------------------------------------------
# FILE API
# -----------------------------------------------------------------------------

def copy_file(src: str, dst: str) -> bool:
    """
    Copy a file byte-for-byte.

    Args:
        src: Source file path.
        dst: Destination file path.

    Returns:
        bool: True on success. False when src and dst are the same file
              (no-op) or when the copy failed; failures are logged.
    """
    if is_same_path(src, dst):
        logger.debug(f"Copy skipped, source and destination are identical: {src}")
        return False
    try:
        shutil.copyfile(src, dst)
        return True
    except OSError as e:
        logger.error(f"Failed to copy '{src}' to '{dst}': {e}")
        return False


def read_text(path: str) -> str:
    """
    Read a UTF-8 text file without newline translation.

    Raises:
        OSError: If the file cannot be opened.
        UnicodeDecodeError: If the content is not valid UTF-8.
    """
    with open(path, "r", encoding="utf-8", newline="") as f:
        return f.read()


def write_text(path: str, text: str) -> None:
    """
    Write a UTF-8 text file without newline translation.

    Raises:
        OSError: If filesystem write permissions are denied.
    """
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(text)
