from __future__ import annotations

"""
Unit tests for the Directory Walker Service.

Verifies pre-order visiting, deterministic ordering, exclusion pruning
and the silent handling of missing roots.
"""

from pathlib import Path
from typing import List, Tuple

import pytest

from funcnamer.core.services.walker import iter_directories, walk


@pytest.fixture
def tree(tmp_path: Path) -> Path:
    root = tmp_path / "root"
    (root / "b" / "deep").mkdir(parents=True)
    (root / "a").mkdir()
    (root / ".git" / "objects").mkdir(parents=True)
    (root / "z.js").write_text("", encoding="utf-8")
    (root / "m.txt").write_text("", encoding="utf-8")
    (root / "b" / "deep" / "x.js").write_text("", encoding="utf-8")
    (root / ".git" / "HEAD").write_text("", encoding="utf-8")
    return root


def _collect(root: Path, exclude=()) -> List[Tuple[str, List[str], List[str]]]:
    calls: List[Tuple[str, List[str], List[str]]] = []
    walk(str(root), exclude, lambda rel, dirs, files: calls.append((rel, dirs, files)))
    return calls


def test_walk_is_preorder_and_sorted(tree: Path):
    calls = _collect(tree)

    assert [c[0] for c in calls] == [".", ".git", ".git/objects", "a", "b", "b/deep"]
    assert calls[0] == (".", [".git", "a", "b"], ["m.txt", "z.js"])


def test_walk_prunes_excluded_directories(tree: Path):
    calls = _collect(tree, exclude={".git"})

    visited = [c[0] for c in calls]
    assert ".git" not in visited
    assert ".git/objects" not in visited
    assert calls[0][1] == ["a", "b"]


def test_walk_does_not_filter_files(tree: Path):
    calls = _collect(tree, exclude={"z.js"})
    assert calls[0][2] == ["m.txt", "z.js"]


def test_walk_missing_root_emits_nothing(tmp_path: Path):
    assert _collect(tmp_path / "missing") == []


def test_iter_directories_skip_predicate(tree: Path):
    skipped = str(tree / "b")
    entries = list(iter_directories(str(tree), skip=lambda p: p == skipped))

    assert [e.rel_path for e in entries] == [".", ".git", ".git/objects", "a"]
