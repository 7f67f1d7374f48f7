from __future__ import annotations

"""
Integration tests for FileSystem Infrastructure.

Validates path normalization, data directory resolution and the fail-safe
copy/move/mkdir operations.
"""

import os
from pathlib import Path
from unittest.mock import patch

from dirscout.infra.fs import (
    copy_path,
    get_user_data_dir,
    make_directory,
    move_path,
    normalize_path,
)

# -----------------------------------------------------------------------------
# PATH RESOLUTION TESTS
# -----------------------------------------------------------------------------

def test_get_user_data_dir_unix() -> None:
    """TC-01: Verify resolution of ~/.dirscout on Unix-like systems."""
    mock_home = "/home/testuser"
    with patch("os.name", "posix"):
        with patch("os.path.expanduser", return_value=mock_home):
            with patch("os.makedirs"):
                path = get_user_data_dir()
                normalized_path = path.replace("\\", "/")
                assert normalized_path.endswith("/home/testuser/.dirscout")


def test_normalize_path_expansion() -> None:
    """TC-02: Verify expansion of environment variables and user shortcuts."""
    with patch.dict(os.environ, {"TEST_VAR": "my_folder"}):
        path = normalize_path("$TEST_VAR/sub", fallback=".")
        assert path.lower().endswith(os.path.join("my_folder", "sub").lower())

        with patch("os.path.expanduser", side_effect=lambda p: p.replace("~", "/home/user")):
            path = normalize_path("~/code", fallback=".")
            assert "code" in Path(path).parts


def test_normalize_path_fallback() -> None:
    """TC-03: Empty input resolves to the fallback."""
    assert normalize_path("", fallback=".") == os.path.abspath(".")
    assert normalize_path(None, fallback="/tmp") == os.path.abspath("/tmp")

# -----------------------------------------------------------------------------
# FILE OPERATION TESTS
# -----------------------------------------------------------------------------

def test_make_directory_with_parents(tmp_path: Path) -> None:
    target = tmp_path / "a" / "b" / "c"
    ok, err = make_directory(str(target))
    assert ok is True and err is None
    assert target.is_dir()

    # Existing target is tolerated when creating parents
    assert make_directory(str(target))[0] is True


def test_make_directory_without_parents_fails_on_missing_parent(tmp_path: Path) -> None:
    ok, err = make_directory(str(tmp_path / "x" / "y"), parents=False)
    assert ok is False
    assert err


def test_copy_file(tmp_path: Path) -> None:
    src = tmp_path / "src.txt"
    src.write_text("payload", encoding="utf-8")
    dst = tmp_path / "dst.txt"

    ok, err = copy_path(str(src), str(dst))
    assert ok is True and err is None
    assert dst.read_text(encoding="utf-8") == "payload"
    assert src.exists()


def test_copy_directory_into_existing_directory(sample_tree: Path, tmp_path: Path) -> None:
    dest = tmp_path / "backup"
    dest.mkdir()

    ok, _ = copy_path(str(sample_tree), str(dest))
    assert ok is True
    assert (dest / "root" / "alpha" / "nested" / "deep.txt").read_text(encoding="utf-8") == "deep"


def test_copy_directory_to_new_path(sample_tree: Path, tmp_path: Path) -> None:
    dest = tmp_path / "clone"
    ok, _ = copy_path(str(sample_tree), str(dest))
    assert ok is True
    assert (dest / "x.txt").exists()


def test_copy_missing_source(tmp_path: Path) -> None:
    ok, err = copy_path(str(tmp_path / "ghost"), str(tmp_path / "dst"))
    assert ok is False
    assert "Source does not exist" in err


def test_move_file(tmp_path: Path) -> None:
    src = tmp_path / "a.txt"
    src.write_text("m", encoding="utf-8")
    dst = tmp_path / "b.txt"

    ok, err = move_path(str(src), str(dst))
    assert ok is True and err is None
    assert not src.exists()
    assert dst.read_text(encoding="utf-8") == "m"


def test_move_missing_source(tmp_path: Path) -> None:
    ok, err = move_path(str(tmp_path / "ghost"), str(tmp_path / "dst"))
    assert ok is False
    assert "Source does not exist" in err


def test_move_os_failure_is_reported(tmp_path: Path) -> None:
    src = tmp_path / "a.txt"
    src.write_text("m", encoding="utf-8")
    with patch("shutil.move", side_effect=PermissionError("denied")):
        ok, err = move_path(str(src), str(tmp_path / "b.txt"))
    assert ok is False
    assert "denied" in err
