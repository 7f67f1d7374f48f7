from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides cross-platform path resolution, the application data directory and
fail-safe file operations (copy, move, mkdir). Operations report failures as
(success, error message) tuples instead of raising.
"""

import os
import shutil
from typing import Optional, Tuple

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

APP_DIR_NAME = "dirscout"
UNIX_APP_DIR_NAME = ".dirscout"

OpResult = Tuple[bool, Optional[str]]

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_user_data_dir() -> str:
    """
    Resolve the standard OS-specific directory for persistent application data.

    Automatically creates the hierarchy if it does not exist.
    Standards:
    - Windows: %LOCALAPPDATA%/dirscout
    - Linux/Mac: ~/.dirscout

    Returns:
        str: Absolute path to the application data directory.
    """
    path: str = ""

    if os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            path = os.path.join(base, APP_DIR_NAME)

    if not path:
        home = os.path.expanduser("~")
        path = os.path.join(home, UNIX_APP_DIR_NAME)

    try:
        os.makedirs(path, exist_ok=True)
    except OSError:
        pass

    return os.path.abspath(path)


def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a path string into an absolute filesystem path.

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

# -----------------------------------------------------------------------------
# FILE OPERATIONS API
# -----------------------------------------------------------------------------

def make_directory(path: str, parents: bool = True) -> OpResult:
    """
    Create a directory, optionally with its missing parents.

    Args:
        path: Target directory path.
        parents: Create intermediate directories and tolerate an existing target.

    Returns:
        OpResult: (Success flag, Error message if applicable).
    """
    try:
        if parents:
            os.makedirs(path, exist_ok=True)
        else:
            os.mkdir(path)
        return True, None
    except OSError as e:
        return False, str(e)


def copy_path(source: str, destination: str) -> OpResult:
    """
    Copy a file, or a directory recursively.

    A directory copied onto an existing directory is placed inside it,
    mirroring the behavior of ``cp -r``.

    Args:
        source: File or directory to copy.
        destination: Target path or existing directory.

    Returns:
        OpResult: (Success flag, Error message if applicable).
    """
    if not os.path.lexists(source):
        return False, f"Source does not exist: {source}"

    try:
        if os.path.isdir(source):
            target = destination
            if os.path.isdir(destination):
                target = os.path.join(destination, os.path.basename(os.path.normpath(source)))
            shutil.copytree(source, target, symlinks=True)
        else:
            shutil.copy2(source, destination)
        return True, None
    except (OSError, shutil.Error) as e:
        return False, str(e)


def move_path(source: str, destination: str) -> OpResult:
    """
    Move or rename a file or directory.

    Args:
        source: Path to move.
        destination: Target path or existing directory.

    Returns:
        OpResult: (Success flag, Error message if applicable).
    """
    if not os.path.lexists(source):
        return False, f"Source does not exist: {source}"

    try:
        shutil.move(source, destination)
        return True, None
    except (OSError, shutil.Error) as e:
        return False, str(e)
