from __future__ import annotations

"""
Cache-Backed Fast Lookup.

Answers "where is a file with this name?" by probing only the directories of
a DirectoryCache snapshot. Existence is checked at call time; cache membership
of a directory is not re-verified, so a directory removed since the last build
simply produces no match.
"""

import logging
import os
from typing import Iterable, Optional

from dirscout.domain.models import SearchResult, create_search_error, create_search_result

logger = logging.getLogger(__name__)


def find_by_name(directories: Iterable[str], filename: str) -> SearchResult:
    """
    Return every ``directory/filename`` that exists, in snapshot order.

    Args:
        directories: Cached directory snapshot (already sorted).
        filename: Entry name to look for; files and directories both match.

    Returns:
        SearchResult: Matches, or a rejected result for an invalid filename.
    """
    error = _validate_filename(filename)
    if error:
        logger.warning(f"Fast lookup rejected: {error}")
        return create_search_error(str(filename), error)

    matches = []
    for directory in directories:
        candidate = os.path.join(directory, filename)
        if os.path.exists(candidate):
            matches.append(candidate)

    logger.debug(f"Fast lookup for '{filename}' returned {len(matches)} matches")
    return create_search_result(filename, matches)


def _validate_filename(filename: object) -> Optional[str]:
    if not isinstance(filename, str) or not filename.strip():
        return "Filename must be a non-empty string."
    if "\x00" in filename:
        return "Filename must not contain NUL characters."
    if os.path.isabs(filename):
        return f"Filename must be relative, got absolute path '{filename}'."
    return None
