from __future__ import annotations

"""
Directory Walker Service.

Depth-first, pre-order traversal of an input directory. Each visited
directory is reported with its subdirectory and file names before the
walker descends into it. Excluded directory names are pruned together with
everything below them; file names are reported unfiltered.
"""

import logging
import os
from typing import Callable, Collection, Iterator, List, Optional

from funcnamer.domain.pipeline_models import DirectoryEntry

logger = logging.getLogger(__name__)

DirectoryCallback = Callable[[str, List[str], List[str]], None]


# ==============================================================================
# PUBLIC API
# ==============================================================================

def iter_directories(
        root: str,
        exclude: Collection[str] = (),
        skip: Optional[Callable[[str], bool]] = None,
) -> Iterator[DirectoryEntry]:
    """
    Yield every directory reachable from root, root first.

    Sibling directories and files are sorted so the order is stable across
    runs.

    Args:
        root: Directory to walk. Nothing is yielded if it does not exist.
        exclude: Literal directory names to prune.
        skip: Optional predicate on absolute directory paths; matching
              directories are pruned as well.

    Yields:
        DirectoryEntry: Relative path ('.' for root), subdirectories that
                        will be descended into, and file names.
    """
    if not os.path.isdir(root):
        logger.debug(f"Walk root does not exist: {root}")
        return

    root_abs = os.path.abspath(root)
    excluded = frozenset(exclude)

    for dirpath, dirs, files in os.walk(root_abs, topdown=True):
        # In-place pruning keeps os.walk from descending into excluded trees
        kept = []
        for d in sorted(dirs):
            if d in excluded:
                continue
            if skip is not None and skip(os.path.join(dirpath, d)):
                logger.debug(f"Pruned directory: {os.path.join(dirpath, d)}")
                continue
            kept.append(d)
        dirs[:] = kept

        yield DirectoryEntry(
            rel_path=os.path.relpath(dirpath, root_abs),
            dirs=list(kept),
            files=sorted(files),
        )


def walk(root: str, exclude: Collection[str], on_directory: DirectoryCallback) -> None:
    """
    Callback form of iter_directories.

    Args:
        root: Directory to walk; a missing root emits nothing.
        exclude: Literal directory names to prune.
        on_directory: Called as on_directory(rel_path, dir_names, file_names)
                      before the walker descends into the directory.
    """
    for entry in iter_directories(root, exclude):
        on_directory(entry.rel_path, entry.dirs, entry.files)
