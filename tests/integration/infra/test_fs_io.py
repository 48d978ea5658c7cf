from __future__ import annotations

"""
Integration tests for FileSystem Infrastructure.

Validates path decomposition, idempotent directory creation and the
copy semantics used for pass-through files.
"""

import os
from pathlib import Path
from unittest.mock import patch

from funcnamer.infra.fs import (
    copy_file,
    directory_exists,
    ensure_directory,
    is_same_path,
    normalize_path,
    read_text,
    split_path_segments,
    write_text,
)

# -----------------------------------------------------------------------------
# PATH DECOMPOSITION TESTS
# -----------------------------------------------------------------------------

def test_split_path_segments_relative() -> None:
    assert split_path_segments(os.path.join("a", "b", "c")) == ["a", "b", "c"]


def test_split_path_segments_stops_at_markers() -> None:
    assert split_path_segments(".") == []
    assert split_path_segments("") == []
    assert split_path_segments(os.path.join(".", "lib", "x")) == ["lib", "x"]
    assert split_path_segments(os.path.join("a", "b") + os.sep) == ["a", "b"]


def test_split_path_segments_absolute() -> None:
    root = os.path.abspath(os.sep)
    assert split_path_segments(os.path.join(root, "usr", "lib")) == ["usr", "lib"]
    assert split_path_segments(root) == []


def test_normalize_path_expansion() -> None:
    with patch.dict(os.environ, {"TEST_VAR": "my_folder"}):
        path = normalize_path("$TEST_VAR/sub", fallback=".")
        assert path.endswith(os.path.join("my_folder", "sub"))

    assert normalize_path("  ", fallback="fallback_dir") == os.path.abspath("fallback_dir")

# -----------------------------------------------------------------------------
# DIRECTORY OPERATIONS TESTS
# -----------------------------------------------------------------------------

def test_ensure_directory_is_idempotent(tmp_path: Path) -> None:
    target = tmp_path / "deep" / "nested" / "dir"

    assert ensure_directory(str(target)) is True
    assert ensure_directory(str(target)) is True
    assert directory_exists(str(target))


def test_ensure_directory_blocked_by_file(tmp_path: Path) -> None:
    blocker = tmp_path / "file"
    blocker.write_text("x", encoding="utf-8")

    assert ensure_directory(str(blocker / "child")) is False
    assert ensure_directory(str(blocker)) is False


def test_directory_exists(tmp_path: Path) -> None:
    f = tmp_path / "f.txt"
    f.write_text("x", encoding="utf-8")

    assert directory_exists(str(tmp_path)) is True
    assert directory_exists(str(f)) is False
    assert directory_exists(str(tmp_path / "missing")) is False

# -----------------------------------------------------------------------------
# FILE OPERATIONS TESTS
# -----------------------------------------------------------------------------

def test_copy_file_is_byte_exact(tmp_path: Path) -> None:
    src = tmp_path / "src.bin"
    dst = tmp_path / "dst.bin"
    src.write_bytes(bytes(range(256)))

    assert copy_file(str(src), str(dst)) is True
    assert dst.read_bytes() == src.read_bytes()


def test_copy_file_same_path_is_noop(tmp_path: Path) -> None:
    src = tmp_path / "same.txt"
    src.write_text("keep", encoding="utf-8")

    assert copy_file(str(src), str(tmp_path / "." / "same.txt")) is False
    assert src.read_text(encoding="utf-8") == "keep"


def test_copy_file_failure_returns_false(tmp_path: Path) -> None:
    assert copy_file(str(tmp_path / "missing"), str(tmp_path / "dst")) is False


def test_is_same_path_for_missing_files(tmp_path: Path) -> None:
    assert is_same_path(str(tmp_path / "x" / ".." / "y"), str(tmp_path / "y"))
    assert not is_same_path(str(tmp_path / "a"), str(tmp_path / "b"))


def test_text_round_trip_keeps_newlines(tmp_path: Path) -> None:
    f = tmp_path / "t.js"
    write_text(str(f), "a\r\nb\n")

    assert f.read_bytes() == b"a\r\nb\n"
    assert read_text(str(f)) == "a\r\nb\n"
