from __future__ import annotations

"""
Unit tests for the positional file comparator.
"""

from pathlib import Path
from unittest.mock import patch

import pytest

from dirscout.core.analysis.comparator import compare_files, first_difference
from dirscout.domain.models import DiffStatus

FIVE_LINES = "one\ntwo\nthree\nfour\nfive\n"


@pytest.fixture
def base_file(tmp_path: Path) -> Path:
    path = tmp_path / "a.txt"
    path.write_text(FIVE_LINES, encoding="utf-8")
    return path


def test_file_compared_with_itself_is_identical(base_file: Path) -> None:
    result = compare_files(str(base_file), str(base_file))
    assert result.status is DiffStatus.IDENTICAL
    assert result.identical is True
    assert result.line is None
    assert result.message == "Files are identical"


def test_identical_copies(base_file: Path, tmp_path: Path) -> None:
    other = tmp_path / "b.txt"
    other.write_text(FIVE_LINES, encoding="utf-8")
    assert compare_files(str(base_file), str(other)).identical is True


def test_change_on_line_three_is_reported(base_file: Path, tmp_path: Path) -> None:
    other = tmp_path / "b.txt"
    other.write_text("one\ntwo\nTHREE\nfour\nfive\n", encoding="utf-8")

    result = compare_files(str(base_file), str(other))

    assert result.status is DiffStatus.DIFFERENT
    assert result.line == 3
    assert result.message == "Files differ at line: 3"


def test_shorter_file_differs_after_last_common_line(base_file: Path, tmp_path: Path) -> None:
    other = tmp_path / "b.txt"
    other.write_text("one\ntwo\n", encoding="utf-8")

    assert compare_files(str(base_file), str(other)).line == 3
    assert compare_files(str(other), str(base_file)).line == 3


def test_line_terminators_are_significant(tmp_path: Path) -> None:
    unix = tmp_path / "unix.txt"
    dos = tmp_path / "dos.txt"
    unix.write_bytes(b"a\nb\n")
    dos.write_bytes(b"a\r\nb\r\n")

    assert compare_files(str(unix), str(dos)).line == 1


def test_missing_final_newline_differs(tmp_path: Path) -> None:
    a = tmp_path / "a"
    b = tmp_path / "b"
    a.write_bytes(b"x\ny\n")
    b.write_bytes(b"x\ny")

    assert compare_files(str(a), str(b)).line == 2


def test_empty_files_are_identical(tmp_path: Path) -> None:
    a = tmp_path / "a"
    b = tmp_path / "b"
    a.write_bytes(b"")
    b.write_bytes(b"")
    assert compare_files(str(a), str(b)).identical is True


def test_missing_file_is_not_found(base_file: Path, tmp_path: Path) -> None:
    result = compare_files(str(base_file), str(tmp_path / "ghost.txt"))

    assert result.status is DiffStatus.NOT_FOUND
    assert result.message == "One or both files don't exist"
    assert "ghost.txt" in result.error


def test_unreadable_file_is_reported(base_file: Path) -> None:
    with patch("builtins.open", side_effect=PermissionError(13, "Permission denied")):
        result = compare_files(str(base_file), str(base_file))

    assert result.status is DiffStatus.UNREADABLE
    assert result.message.startswith("Files could not be read")


def test_directory_operand_is_unreadable(base_file: Path, tmp_path: Path) -> None:
    result = compare_files(str(base_file), str(tmp_path))
    assert result.status is DiffStatus.UNREADABLE


def test_first_difference_on_sequences() -> None:
    assert first_difference([b"a", b"b"], [b"a", b"b"]) is None
    assert first_difference([b"a", b"b"], [b"a", b"c"]) == 2
    assert first_difference([], [b"a"]) == 1
