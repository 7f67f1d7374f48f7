from __future__ import annotations

"""
Flat Directory Listing.

Lists a single directory with per-entry access flags and sizes, and formats
the result either as a compact name row or as detailed lines.
"""

import logging
import os
from typing import List

from dirscout.core.safety import log_skip
from dirscout.domain.models import ListingEntry

logger = logging.getLogger(__name__)


def list_directory(path: str = ".", hidden: bool = False) -> List[ListingEntry]:
    """
    Return the entries of ``path`` sorted by name.

    Args:
        path: Directory to list.
        hidden: Include dot-named entries.

    Returns:
        List[ListingEntry]: Entries, or an empty list if the directory is
                            missing or cannot be read.
    """
    base = os.path.abspath(path)
    try:
        with os.scandir(base) as it:
            names = sorted(e.name for e in it)
    except OSError as e:
        log_skip(base, e)
        return []

    out: List[ListingEntry] = []
    for name in names:
        if not hidden and name.startswith("."):
            continue
        out.append(_describe(os.path.join(base, name), name))
    return out


def format_listing(entries: List[ListingEntry], detailed: bool = False) -> List[str]:
    """
    Render listing entries as text lines.

    Plain mode joins all names on one line separated by two spaces. Detailed
    mode prints one ``<type><x><r><w> <size> <name>`` line per entry.
    """
    if not detailed:
        return ["  ".join(e.name for e in entries)] if entries else []

    lines: List[str] = []
    for e in entries:
        flags = (
            ("d" if e.is_dir else "f")
            + ("x" if e.executable else "-")
            + ("r" if e.readable else "-")
            + ("w" if e.writable else "-")
        )
        lines.append(f"{flags} {e.size:>8} {e.name}")
    return lines


def _describe(full_path: str, name: str) -> ListingEntry:
    try:
        size = os.stat(full_path).st_size
    except OSError:
        # Broken symlinks still have a size of their own
        try:
            size = os.lstat(full_path).st_size
        except OSError:
            size = 0

    return ListingEntry(
        name=name,
        path=full_path,
        is_dir=os.path.isdir(full_path),
        readable=os.access(full_path, os.R_OK),
        writable=os.access(full_path, os.W_OK),
        executable=os.access(full_path, os.X_OK),
        size=size,
    )
