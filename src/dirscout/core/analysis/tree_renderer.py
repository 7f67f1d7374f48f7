from __future__ import annotations

"""
Directory Tree Renderer.

Walks a directory depth-first, straight from the live filesystem, and
renders it with box-drawing connectors (├──, └──). Ordering is
lexicographic by name at every level so output is deterministic. No tree
model is materialized: the walk state is only (path, prefix, depth).
"""

import logging
import os
from typing import FrozenSet, List, Tuple

from dirscout.core.safety import log_skip
from dirscout.domain.constants import (
    BLANK_PREFIX,
    BRANCH_CONNECTOR,
    CONTINUATION_PREFIX,
    DEFAULT_TREE_DEPTH,
    DIR_ICON,
    FILE_ICON,
    LAST_CONNECTOR,
)
from dirscout.domain.models import ErrorKind, TreeResult, create_tree_error, create_tree_result

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_tree(
        root: str = ".",
        max_depth: int = DEFAULT_TREE_DEPTH,
        show_hidden: bool = False,
        dirs_only: bool = True,
        icons: bool = False,
        save_path: str = "",
) -> TreeResult:
    """
    Render the structure below ``root`` as text lines.

    The first line is the absolute root path. Entries of the root are at
    depth 0, and a directory at depth ``d`` is expanded only when
    ``d < max_depth``; ``max_depth=0`` therefore lists the root's immediate
    children without descending.

    Args:
        root: Directory to render.
        max_depth: Deepest level to expand (must be >= 0).
        show_hidden: Include dot-named entries.
        dirs_only: Omit non-directory entries at every level.
        icons: Prefix entries with [DIR]/[FILE] markers.
        save_path: Optional file path to persist the rendered lines.

    Returns:
        TreeResult: Rendered lines, or a failed result for invalid input or
                    a missing root. Unlistable directories are reported in
                    ``skipped`` and never abort the render.
    """
    root_abs = os.path.abspath(root)

    if isinstance(max_depth, bool) or not isinstance(max_depth, int) or max_depth < 0:
        msg = f"max_depth must be a non-negative integer, got {max_depth!r}"
        logger.warning(f"Tree render rejected: {msg}")
        return create_tree_error(root_abs, msg, ErrorKind.INVALID_ARGUMENT)

    if not os.path.exists(root_abs):
        return create_tree_error(root_abs, f"Path does not exist: {root_abs}", ErrorKind.NOT_FOUND)
    if not os.path.isdir(root_abs):
        return create_tree_error(root_abs, f"Not a directory: {root_abs}", ErrorKind.NOT_A_DIRECTORY)

    logger.debug(f"Rendering tree for: {root_abs} (max_depth={max_depth})")

    lines: List[str] = [f"{DIR_ICON if icons else ''}{root_abs}"]
    skipped: List[str] = []
    _render_level(
        root_abs,
        prefix="",
        depth=0,
        max_depth=max_depth,
        show_hidden=show_hidden,
        dirs_only=dirs_only,
        icons=icons,
        ancestors=frozenset({os.path.realpath(root_abs)}),
        lines=lines,
        skipped=skipped,
    )

    if save_path:
        _save_tree_to_disk(save_path, lines)

    return create_tree_result(root_abs, lines, skipped)

# -----------------------------------------------------------------------------
# INTERNAL HELPERS (RENDERING)
# -----------------------------------------------------------------------------

def _render_level(
        path: str,
        prefix: str,
        depth: int,
        max_depth: int,
        show_hidden: bool,
        dirs_only: bool,
        icons: bool,
        ancestors: FrozenSet[str],
        lines: List[str],
        skipped: List[str],
) -> None:
    """Append the lines for one directory level and recurse into subdirectories."""
    try:
        entries = _list_entries(path, show_hidden, dirs_only)
    except OSError as e:
        log_skip(path, e)
        skipped.append(path)
        return

    total = len(entries)
    for i, (name, is_dir) in enumerate(entries):
        is_last = (i == total - 1)
        connector = LAST_CONNECTOR if is_last else BRANCH_CONNECTOR
        icon = (DIR_ICON if is_dir else FILE_ICON) if icons else ""
        lines.append(f"{prefix}{connector}{icon}{name}")

        if not is_dir or depth >= max_depth:
            continue

        full_path = os.path.join(path, name)
        real = os.path.realpath(full_path)
        if real in ancestors:
            # Symlink back into its own ancestry
            logger.debug(f"Not descending into cyclic link: {full_path}")
            continue

        _render_level(
            full_path,
            prefix=prefix + (BLANK_PREFIX if is_last else CONTINUATION_PREFIX),
            depth=depth + 1,
            max_depth=max_depth,
            show_hidden=show_hidden,
            dirs_only=dirs_only,
            icons=icons,
            ancestors=ancestors | {real},
            lines=lines,
            skipped=skipped,
        )


def _list_entries(path: str, show_hidden: bool, dirs_only: bool) -> List[Tuple[str, bool]]:
    """Return (name, is_dir) pairs of a directory after filtering, sorted by name."""
    out: List[Tuple[str, bool]] = []
    with os.scandir(path) as it:
        for entry in it:
            if not show_hidden and entry.name.startswith("."):
                continue
            try:
                is_dir = entry.is_dir()
            except OSError:
                is_dir = False
            if dirs_only and not is_dir:
                continue
            out.append((entry.name, is_dir))
    out.sort(key=lambda item: item[0])
    return out

# -----------------------------------------------------------------------------
# INTERNAL HELPERS (STORAGE)
# -----------------------------------------------------------------------------

def _save_tree_to_disk(save_path: str, lines: List[str]) -> None:
    """Persist tree lines to the filesystem, logging failures."""
    try:
        out_dir = os.path.dirname(os.path.abspath(save_path))
        os.makedirs(out_dir, exist_ok=True)
        with open(save_path, "w", encoding="utf-8") as f:
            f.write("\n".join(lines) + "\n")
        logger.info(f"Tree saved to file: {save_path}")
    except OSError as e:
        logger.error(f"Failed to save tree to '{save_path}': {e}")
