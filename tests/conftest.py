from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared fixtures for configuration dictionaries and sample directory trees.
"""

import os
import sys
from pathlib import Path
from typing import Any, Dict

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def mock_config_dict() -> Dict[str, Any]:
    """
    Return a valid, complete configuration dictionary for testing.

    Reflects the structure defined in 'dirscout.domain.config'.
    """
    return {
        # Directory cache
        "roots": ["/tmp/scan_root"],
        "capacity": 500,

        # Tree rendering
        "max_depth": 2,
        "show_hidden": False,
        "dirs_only": True,
        "icons": False,

        # Checksums
        "hash_algorithm": "sha256",

        # Diagnostics
        "log_file": "",
    }


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """
    Create a small mixed directory structure.

    Structure:
    /root
      /alpha
        /nested
          deep.txt
        a.txt
      /beta
      /.hidden
        secret.txt
      .env
      x.txt
    """
    root = tmp_path / "root"
    root.mkdir()

    nested = root / "alpha" / "nested"
    nested.mkdir(parents=True)
    (nested / "deep.txt").write_text("deep", encoding="utf-8")
    (root / "alpha" / "a.txt").write_text("a", encoding="utf-8")

    (root / "beta").mkdir()

    hidden = root / ".hidden"
    hidden.mkdir()
    (hidden / "secret.txt").write_text("s", encoding="utf-8")

    (root / ".env").write_text("KEY=1", encoding="utf-8")
    (root / "x.txt").write_text("x", encoding="utf-8")

    return root
