from __future__ import annotations

"""
Unit tests for the message catalog.
"""

import json
from pathlib import Path

from dirscout.utils.i18n import I18n, i18n


def test_bundled_locale_is_loaded() -> None:
    assert i18n.is_loaded is True
    assert i18n.t("app.name") == "dirscout"


def test_interpolation() -> None:
    assert i18n.t("cli.errors.path_not_exist", path="/x") == "Path does not exist: /x"


def test_missing_key_falls_back_to_key() -> None:
    assert i18n.t("cli.nope.missing") == "cli.nope.missing"
    assert i18n.t("app.name.deeper") == "app.name.deeper"


def test_non_leaf_key_falls_back_to_key() -> None:
    assert i18n.t("cli.errors") == "cli.errors"


def test_bad_format_arguments_return_template() -> None:
    assert i18n.t("cli.errors.path_not_exist", wrong="x") == "Path does not exist: {path}"


def test_missing_locale_file() -> None:
    manager = I18n("zz")
    assert manager.is_loaded is False
    assert manager.t("app.name") == "app.name"


def test_corrupted_locale_file(tmp_path: Path) -> None:
    manager = I18n("zz")
    manager._locales_path = str(tmp_path)
    (tmp_path / "broken.json").write_text("{oops", encoding="utf-8")

    manager.load_locale("broken")
    assert manager.is_loaded is False

    (tmp_path / "ok.json").write_text(json.dumps({"a": {"b": "c"}}), encoding="utf-8")
    manager.load_locale("ok")
    assert manager.is_loaded is True
    assert manager.locale == "ok"
    assert manager.t("a.b") == "c"
