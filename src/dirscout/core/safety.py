from __future__ import annotations

"""
Path Safety Classification.

Maps OSError instances onto the exploration error taxonomy so every walker
decides the same way whether a failure is skipped locally or reported.
"""

import errno
import logging
from typing import FrozenSet

from dirscout.domain.models import ErrorKind

logger = logging.getLogger(__name__)

# Kinds a traversal recovers from by skipping the affected subtree
SKIPPABLE_KINDS: FrozenSet[ErrorKind] = frozenset({
    ErrorKind.ACCESS_DENIED,
    ErrorKind.SYMLINK_LOOP,
    ErrorKind.NOT_FOUND,
    ErrorKind.NOT_A_DIRECTORY,
})

_ERRNO_MAP = {
    errno.EACCES: ErrorKind.ACCESS_DENIED,
    errno.EPERM: ErrorKind.ACCESS_DENIED,
    errno.ELOOP: ErrorKind.SYMLINK_LOOP,
    errno.ENOENT: ErrorKind.NOT_FOUND,
    errno.ENOTDIR: ErrorKind.NOT_A_DIRECTORY,
}


def classify_os_error(exc: OSError) -> ErrorKind:
    """
    Classify a filesystem error.

    Subclass checks come first; the errno table covers plain OSError
    instances raised by lower-level calls.

    Args:
        exc: The error raised by a filesystem call.

    Returns:
        ErrorKind: Taxonomy entry for the error.
    """
    if isinstance(exc, PermissionError):
        return ErrorKind.ACCESS_DENIED
    if isinstance(exc, FileNotFoundError):
        return ErrorKind.NOT_FOUND
    if isinstance(exc, NotADirectoryError):
        return ErrorKind.NOT_A_DIRECTORY
    return _ERRNO_MAP.get(exc.errno, ErrorKind.OTHER)


def is_skippable(exc: OSError) -> bool:
    """Return True if a walk should skip the subtree that raised ``exc``."""
    return classify_os_error(exc) in SKIPPABLE_KINDS


def log_skip(path: str, exc: OSError) -> ErrorKind:
    """Record a skipped path at DEBUG level and return its classification."""
    kind = classify_os_error(exc)
    logger.debug(f"Skipping '{path}' ({kind.value}): {exc}")
    return kind
