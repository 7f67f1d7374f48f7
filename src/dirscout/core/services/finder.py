from __future__ import annotations

"""
Live Pattern Finder.

Recursive glob-style search below an arbitrary root, always reflecting the
current filesystem state and independent of the directory cache. Semantics
follow ``glob('<root>/**/<pattern>')``: a pattern is one or more wildcard
segments (``*.py``, ``alpha/*.txt``) matched against the trailing path
components of every entry at any depth. Dot-named components are only
matched by segments that start with a dot, unless hidden entries are
requested.
"""

import fnmatch
import logging
import os
from typing import Iterator, List, Optional, Sequence, Tuple

from dirscout.core.safety import log_skip
from dirscout.domain.models import SearchResult, create_search_error, create_search_result

logger = logging.getLogger(__name__)

_SEPARATORS = tuple({"/", os.sep} | ({os.altsep} if os.altsep else set()))


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def find(pattern: str, root: str = ".", include_hidden: bool = False) -> SearchResult:
    """
    Collect every entry under ``root`` whose trailing path matches ``pattern``.

    Args:
        pattern: Shell-style wildcard for a name (``*.py``, ``test_?.txt``) or a
                 relative path of wildcards (``alpha/*.txt``).
        root: Directory to search from. Relative roots resolve against the
              current working directory once, at call time.
        include_hidden: Descend into and match dot-named entries.

    Returns:
        SearchResult: Absolute matching paths in depth-first, name-sorted
                      order; empty when nothing matches or the root is missing.
    """
    error = validate_pattern(pattern)
    root_abs = os.path.abspath(root)
    if error:
        logger.warning(f"Pattern search rejected: {error}")
        return create_search_error(str(pattern), error, root=root_abs)

    matches = list(iter_matches(pattern, root_abs, include_hidden=include_hidden))
    logger.debug(f"Pattern '{pattern}' under '{root_abs}' matched {len(matches)} entries")
    return create_search_result(pattern, matches, root=root_abs)


def iter_matches(pattern: str, root: str, include_hidden: bool = False) -> Iterator[str]:
    """
    Lazily yield absolute paths below ``root`` that match ``pattern``.

    The pattern must already be valid (see ``validate_pattern``). A directory's
    own matches are yielded before those of its subdirectories. Unreadable
    directories are skipped. Symlinked directories can match but are not
    descended, which keeps the walk finite.
    """
    root_abs = os.path.abspath(root)
    if not os.path.isdir(root_abs):
        return

    segments = split_pattern(pattern)
    stack: List[Tuple[str, Tuple[str, ...]]] = [(root_abs, ())]

    while stack:
        current, parts = stack.pop()
        try:
            with os.scandir(current) as it:
                entries = sorted(it, key=lambda e: e.name)
        except OSError as e:
            log_skip(current, e)
            continue

        subdirs: List[Tuple[str, Tuple[str, ...]]] = []
        for entry in entries:
            entry_parts = parts + (entry.name,)
            if _matches(entry_parts, segments, include_hidden):
                yield entry.path

            if not _may_descend(entry.name, segments, include_hidden):
                continue
            try:
                if entry.is_dir(follow_symlinks=False):
                    subdirs.append((entry.path, entry_parts))
            except OSError:
                continue

        stack.extend(reversed(subdirs))


def split_pattern(pattern: str) -> List[str]:
    """Split a pattern into its wildcard segments, ignoring empty and '.' parts."""
    normalized = pattern
    for sep in _SEPARATORS:
        normalized = normalized.replace(sep, "/")
    return [seg for seg in normalized.split("/") if seg and seg != "."]


def validate_pattern(pattern: object) -> Optional[str]:
    """
    Check a search pattern before any traversal.

    Returns:
        Optional[str]: Error description, or None if the pattern is usable.
    """
    if not isinstance(pattern, str) or not pattern.strip():
        return "Pattern must be a non-empty string."
    if "\x00" in pattern:
        return "Pattern must not contain NUL characters."
    if os.path.isabs(pattern) or pattern.startswith(_SEPARATORS):
        return f"Pattern must be relative to the search root, got absolute path '{pattern}'."
    if not split_pattern(pattern):
        return f"Pattern contains no name to match: '{pattern}'."
    return None

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _matches(parts: Tuple[str, ...], segments: Sequence[str], include_hidden: bool) -> bool:
    """Match the trailing components of ``parts`` against ``segments``."""
    n = len(segments)
    if len(parts) < n:
        return False

    lead, tail = parts[:-n], parts[-n:]
    # The implicit '**' prefix never crosses hidden directories
    if not include_hidden and any(p.startswith(".") for p in lead):
        return False

    for part, seg in zip(tail, segments):
        if not fnmatch.fnmatch(part, seg):
            return False
        if part.startswith(".") and not include_hidden and not seg.startswith("."):
            return False
    return True


def _may_descend(name: str, segments: Sequence[str], include_hidden: bool) -> bool:
    if include_hidden or not name.startswith("."):
        return True
    # Hidden directories are entered only when a dotted segment names them
    return any(seg.startswith(".") and fnmatch.fnmatch(name, seg) for seg in segments[:-1])
