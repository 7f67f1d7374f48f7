from __future__ import annotations

"""
Domain Constants.

Provides centralized access to scanning limits, well-known root prefixes,
tree rendering glyphs and the supported checksum algorithms.
"""

from typing import List, Tuple

CURRENT_CONFIG_VERSION = "1.0.0"

# -----------------------------------------------------------------------------
# DIRECTORY CACHE
# -----------------------------------------------------------------------------

DEFAULT_CACHE_CAPACITY = 10_000

# System prefixes scanned alongside the user home and the working directory
SYSTEM_ROOT_PREFIXES: Tuple[str, ...] = ("/usr/local", "/opt")

# -----------------------------------------------------------------------------
# TREE RENDERING
# -----------------------------------------------------------------------------

DEFAULT_TREE_DEPTH = 1

BRANCH_CONNECTOR = "├── "
LAST_CONNECTOR = "└── "
CONTINUATION_PREFIX = "│   "
BLANK_PREFIX = "    "

DIR_ICON = "[DIR] "
FILE_ICON = "[FILE] "

# -----------------------------------------------------------------------------
# CHECKSUMS
# -----------------------------------------------------------------------------

DEFAULT_HASH_ALGORITHM = "md5"
HASH_ALGORITHMS: List[str] = ["md5", "sha1", "sha256"]
