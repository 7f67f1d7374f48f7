from __future__ import annotations

"""
dirscout: local filesystem exploration toolkit.

Directory indexing with cache-backed name lookup, live pattern search,
tree rendering, flat listings and positional file comparison.
"""

from dirscout.core.toolkit import ExplorerToolkit
from dirscout.domain.models import (
    CacheStats,
    DiffResult,
    DiffStatus,
    ErrorKind,
    ListingEntry,
    SearchResult,
    TreeResult,
)

__version__ = "1.0.0"

__all__ = [
    "ExplorerToolkit",
    "CacheStats",
    "DiffResult",
    "DiffStatus",
    "ErrorKind",
    "ListingEntry",
    "SearchResult",
    "TreeResult",
    "__version__",
]
