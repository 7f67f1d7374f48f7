from __future__ import annotations

"""
Directory Index Service.

Builds a bounded, deduplicated, in-memory index of every directory found
under a fixed set of roots. The index lives only as long as its owner and is
replaced wholesale on refresh, so readers always observe one complete
snapshot.
"""

import logging
import os
import threading
import time
from typing import Iterable, List, Optional, Sequence, Set, Tuple

from dirscout.core.safety import SKIPPABLE_KINDS, classify_os_error, log_skip
from dirscout.domain.constants import DEFAULT_CACHE_CAPACITY, SYSTEM_ROOT_PREFIXES
from dirscout.domain.models import CacheStats

logger = logging.getLogger(__name__)


def default_roots() -> List[str]:
    """
    Return the standard scan roots: user home, system prefixes, working directory.

    Roots are not filtered here; missing ones are dropped at build time.
    """
    return [os.path.expanduser("~"), *SYSTEM_ROOT_PREFIXES, os.getcwd()]


class DirectoryCache:
    """
    Sorted, unique snapshot of directory paths under a set of roots.

    The snapshot is an immutable tuple. ``build`` computes a complete new
    snapshot before assigning it under a lock; nothing mutates a snapshot
    in place.
    """

    def __init__(
            self,
            roots: Optional[Sequence[str]] = None,
            capacity: int = DEFAULT_CACHE_CAPACITY,
    ) -> None:
        """
        Args:
            roots: Directories to index. Defaults to ``default_roots()``.
            capacity: Soft cap on directories collected per build.

        Raises:
            ValueError: If capacity is not a positive integer.
        """
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity < 1:
            raise ValueError(f"Cache capacity must be a positive integer, got {capacity!r}")

        self._roots: Tuple[str, ...] = tuple(roots) if roots is not None else tuple(default_roots())
        self._capacity = capacity
        self._lock = threading.Lock()
        self._entries: Tuple[str, ...] = ()
        self._stats = CacheStats(capacity=capacity)

    # -------------------------------------------------------------------------
    # Read access
    # -------------------------------------------------------------------------

    @property
    def roots(self) -> Tuple[str, ...]:
        return self._roots

    @property
    def capacity(self) -> int:
        return self._capacity

    def entries(self) -> Tuple[str, ...]:
        """Return the current snapshot of cached directory paths."""
        with self._lock:
            return self._entries

    def stats(self) -> CacheStats:
        """Return metrics of the build that produced the current snapshot."""
        with self._lock:
            return self._stats

    def __len__(self) -> int:
        return len(self.entries())

    # -------------------------------------------------------------------------
    # Build lifecycle
    # -------------------------------------------------------------------------

    def build(self) -> Tuple[str, ...]:
        """
        Scan every existing root and replace the stored snapshot.

        Never raises for filesystem problems: unreadable or looping subtrees
        are skipped, and a build that skips everything yields an empty index.

        Returns:
            Tuple[str, ...]: The new snapshot.
        """
        logger.info("Scanning directory structure...")
        entries, stats = self._scan()

        with self._lock:
            self._entries = entries
            self._stats = stats

        logger.info(
            f"Cached {stats.entries} directories from {len(stats.roots)} roots "
            f"in {stats.elapsed:.2f}s"
            + (" (capacity reached)" if stats.truncated else "")
        )
        return entries

    def refresh(self) -> Tuple[str, ...]:
        """Rebuild the index from scratch and swap it in."""
        logger.debug("Refreshing directory cache")
        return self.build()

    # -------------------------------------------------------------------------
    # Internal scanning
    # -------------------------------------------------------------------------

    def _existing_roots(self) -> List[str]:
        """Absolute, order-preserving, de-duplicated roots that are directories now."""
        out: List[str] = []
        for root in self._roots:
            path = os.path.abspath(os.path.expanduser(root))
            if path not in out and os.path.isdir(path):
                out.append(path)
        return out

    def _scan(self) -> Tuple[Tuple[str, ...], CacheStats]:
        started = time.monotonic()
        roots = self._existing_roots()

        collected: List[str] = []
        visited: Set[str] = set()
        skipped: List[str] = []
        truncated = False

        for root in roots:
            if self._walk_root(root, collected, visited, skipped):
                truncated = True
                break

        entries = tuple(sorted(set(collected)))
        stats = CacheStats(
            roots=roots,
            entries=len(entries),
            capacity=self._capacity,
            truncated=truncated,
            skipped=skipped,
            elapsed=time.monotonic() - started,
        )
        return entries, stats

    def _walk_root(
            self,
            root: str,
            collected: List[str],
            visited: Set[str],
            skipped: List[str],
    ) -> bool:
        """
        Depth-first walk of one root using an explicit stack.

        Directories are keyed by real path in ``visited`` so symlink cycles and
        overlapping roots are entered once. The capacity check runs after each
        directory's batch of children, so the total may overshoot by one batch.

        Returns:
            bool: True if the capacity was exceeded and scanning must stop.
        """
        real_root = os.path.realpath(root)
        if real_root in visited:
            logger.debug(f"Root already indexed through another path: {root}")
            return False
        visited.add(real_root)
        collected.append(root)

        stack: List[str] = [root]
        while stack:
            current = stack.pop()
            try:
                children = list(_child_directories(current))
            except OSError as e:
                kind = classify_os_error(e)
                if kind not in SKIPPABLE_KINDS:
                    logger.warning(f"Unexpected error scanning '{current}': {e}")
                else:
                    log_skip(current, e)
                skipped.append(current)
                continue

            batch: List[str] = []
            for child in children:
                real = os.path.realpath(child)
                if real in visited:
                    continue
                visited.add(real)
                batch.append(child)

            collected.extend(batch)
            stack.extend(reversed(batch))

            if len(collected) > self._capacity:
                return True

        return False


def _child_directories(path: str) -> Iterable[str]:
    """
    List the immediate subdirectories of ``path``, including dot-named ones.

    Symlinks to directories count as directories; entries whose type cannot be
    determined (broken or looping links) are ignored.
    """
    with os.scandir(path) as it:
        names = []
        for entry in it:
            try:
                if entry.is_dir():
                    names.append(entry.name)
            except OSError:
                continue
    for name in sorted(names):
        yield os.path.join(path, name)
