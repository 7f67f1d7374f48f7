from __future__ import annotations

"""
Explorer Toolkit.

Owning facade over the exploration services. Holds the single
DirectoryCache instance, builds it on construction and routes every read
operation: cache-backed lookups go through the snapshot, while pattern
search, tree rendering, listing and comparison act on the live filesystem.
"""

import logging
from typing import Any, Dict, List, Optional, Sequence, Tuple

from dirscout.core.analysis.comparator import compare_files
from dirscout.core.analysis.tree_renderer import render_tree
from dirscout.core.services.cache import DirectoryCache
from dirscout.core.services.finder import find as pattern_find
from dirscout.core.services.listing import list_directory
from dirscout.core.services.lookup import find_by_name
from dirscout.domain.constants import DEFAULT_CACHE_CAPACITY, DEFAULT_TREE_DEPTH
from dirscout.domain.models import CacheStats, DiffResult, ListingEntry, SearchResult, TreeResult

logger = logging.getLogger(__name__)


class ExplorerToolkit:
    """
    Entry point of the exploration API.

    Example:
        >>> kit = ExplorerToolkit(roots=["/srv/data"])
        >>> kit.fast_find("report.txt").matches
    """

    def __init__(
            self,
            roots: Optional[Sequence[str]] = None,
            capacity: int = DEFAULT_CACHE_CAPACITY,
            build_cache: bool = True,
    ) -> None:
        """
        Args:
            roots: Cache roots. None selects the standard root set.
            capacity: Soft cap on cached directories.
            build_cache: Build the index immediately. Disable to defer the
                         scan until ``refresh()``.
        """
        self._cache = DirectoryCache(roots=roots, capacity=capacity)
        if build_cache:
            self._cache.build()

    @classmethod
    def from_config(cls, config: Dict[str, Any], build_cache: bool = True) -> "ExplorerToolkit":
        """Create a toolkit from a validated configuration dictionary."""
        roots = config.get("roots") or None
        return cls(
            roots=roots,
            capacity=config.get("capacity", DEFAULT_CACHE_CAPACITY),
            build_cache=build_cache,
        )

    # -------------------------------------------------------------------------
    # Cache lifecycle
    # -------------------------------------------------------------------------

    @property
    def cache(self) -> DirectoryCache:
        return self._cache

    def entries(self) -> Tuple[str, ...]:
        """Current snapshot of cached directory paths."""
        return self._cache.entries()

    def refresh(self) -> CacheStats:
        """Rebuild the directory index and return the new build metrics."""
        self._cache.refresh()
        return self._cache.stats()

    def stats(self) -> CacheStats:
        return self._cache.stats()

    # -------------------------------------------------------------------------
    # Read paths
    # -------------------------------------------------------------------------

    def fast_find(self, filename: str) -> SearchResult:
        """Locate ``filename`` in every cached directory."""
        return find_by_name(self._cache.entries(), filename)

    def find(self, pattern: str, root: str = ".", include_hidden: bool = False) -> SearchResult:
        """Live recursive pattern search, independent of the cache."""
        return pattern_find(pattern, root=root, include_hidden=include_hidden)

    def tree(
            self,
            root: str = ".",
            max_depth: int = DEFAULT_TREE_DEPTH,
            show_hidden: bool = False,
            dirs_only: bool = True,
            icons: bool = False,
            save_path: str = "",
    ) -> TreeResult:
        return render_tree(
            root,
            max_depth=max_depth,
            show_hidden=show_hidden,
            dirs_only=dirs_only,
            icons=icons,
            save_path=save_path,
        )

    def diff(self, path_a: str, path_b: str) -> DiffResult:
        return compare_files(path_a, path_b)

    def ls(self, path: str = ".", hidden: bool = False) -> List[ListingEntry]:
        return list_directory(path, hidden=hidden)
