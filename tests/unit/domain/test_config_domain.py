from __future__ import annotations

"""
Unit tests for configuration persistence.

Verifies default generation, load/save round behavior and recovery from
corrupted files.
"""

import json
from pathlib import Path
from typing import Any, Generator
from unittest.mock import patch

import pytest

from dirscout.domain.config import get_config_path, get_default_config, load_config, save_config


@pytest.fixture(autouse=True)
def isolated_data_dir(tmp_path: Path) -> Generator[Path, None, None]:
    """Redirect the application data directory into a temporary folder."""
    with patch("dirscout.domain.config.get_user_data_dir", return_value=str(tmp_path)):
        yield tmp_path


def test_default_config_values() -> None:
    cfg = get_default_config()

    assert cfg["roots"] == []
    assert cfg["capacity"] == 10_000
    assert cfg["max_depth"] == 1
    assert cfg["dirs_only"] is True
    assert cfg["show_hidden"] is False
    assert cfg["hash_algorithm"] == "md5"


def test_default_config_is_a_fresh_copy() -> None:
    a = get_default_config()
    a["roots"].append("/x")
    assert get_default_config()["roots"] == []


def test_config_path_lives_in_data_dir(isolated_data_dir: Path) -> None:
    assert get_config_path() == str(isolated_data_dir / "config.json")


def test_load_without_file_returns_defaults() -> None:
    assert load_config() == get_default_config()


def test_save_then_load(isolated_data_dir: Path) -> None:
    cfg = get_default_config()
    cfg["capacity"] = 42
    cfg["roots"] = ["/srv"]

    assert save_config(cfg) is True

    on_disk = json.loads((isolated_data_dir / "config.json").read_text(encoding="utf-8"))
    assert on_disk["version"] == "1.0.0"

    loaded = load_config()
    assert loaded["capacity"] == 42
    assert loaded["roots"] == ["/srv"]
    assert "version" not in loaded


def test_load_ignores_unknown_keys(isolated_data_dir: Path) -> None:
    (isolated_data_dir / "config.json").write_text(
        json.dumps({"max_depth": 4, "theme": "dark"}), encoding="utf-8"
    )
    loaded = load_config()
    assert loaded["max_depth"] == 4
    assert "theme" not in loaded


@pytest.mark.parametrize("content", ["{not json", "[1, 2, 3]"])
def test_corrupted_file_falls_back_to_defaults(isolated_data_dir: Path, content: Any) -> None:
    (isolated_data_dir / "config.json").write_text(content, encoding="utf-8")
    assert load_config() == get_default_config()


def test_save_failure_returns_false() -> None:
    with patch("builtins.open", side_effect=PermissionError("denied")):
        assert save_config(get_default_config()) is False
