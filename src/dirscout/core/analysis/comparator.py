from __future__ import annotations

"""
Positional File Comparator.

Line-oriented equality check between two files. Lines are compared pairwise
by position as raw bytes (terminators included); there is no alignment or
common-subsequence search. Files are streamed, so comparison stops reading at
the first mismatch.
"""

import logging
import os
from itertools import zip_longest
from typing import Iterable, Optional

from dirscout.core.safety import classify_os_error
from dirscout.domain.models import DiffResult, DiffStatus

logger = logging.getLogger(__name__)


def compare_files(path_a: str, path_b: str) -> DiffResult:
    """
    Compare two files line by line.

    Args:
        path_a: First file.
        path_b: Second file.

    Returns:
        DiffResult: ``identical``; ``different`` with the 1-based index of the
                    first mismatching line; ``not_found`` if either path is
                    missing; ``unreadable`` if either cannot be read.
    """
    missing = [p for p in (path_a, path_b) if not os.path.exists(p)]
    if missing:
        return DiffResult(
            status=DiffStatus.NOT_FOUND,
            path_a=path_a,
            path_b=path_b,
            error=f"Missing: {', '.join(missing)}",
        )

    try:
        with open(path_a, "rb") as fa, open(path_b, "rb") as fb:
            line = first_difference(fa, fb)
    except OSError as e:
        kind = classify_os_error(e)
        logger.warning(f"Cannot compare '{path_a}' and '{path_b}' ({kind.value}): {e}")
        return DiffResult(status=DiffStatus.UNREADABLE, path_a=path_a, path_b=path_b, error=str(e))

    if line is None:
        return DiffResult(status=DiffStatus.IDENTICAL, path_a=path_a, path_b=path_b)
    return DiffResult(status=DiffStatus.DIFFERENT, path_a=path_a, path_b=path_b, line=line)


def first_difference(lines_a: Iterable[bytes], lines_b: Iterable[bytes]) -> Optional[int]:
    """
    Return the 1-based position of the first differing line, or None if equal.

    The shorter sequence is padded with a sentinel, so running out of lines
    counts as a mismatch at that position.
    """
    for index, (a, b) in enumerate(zip_longest(lines_a, lines_b), start=1):
        if a != b:
            return index
    return None
