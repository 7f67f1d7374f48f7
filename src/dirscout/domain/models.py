from __future__ import annotations

"""
Exploration Domain Data Models.

Defines the result objects returned by every public exploration operation
(lookups, pattern searches, tree rendering, file comparison, listings) and
the error taxonomy shared across them. Public operations never raise for
filesystem problems: they return one of these models instead.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

# -----------------------------------------------------------------------------
# ERROR TAXONOMY
# -----------------------------------------------------------------------------

class ErrorKind(str, Enum):
    """Classification of filesystem and input failures."""
    ACCESS_DENIED = "access_denied"
    SYMLINK_LOOP = "symlink_loop"
    NOT_FOUND = "not_found"
    NOT_A_DIRECTORY = "not_a_directory"
    INVALID_ARGUMENT = "invalid_argument"
    OTHER = "other"


class DiffStatus(str, Enum):
    """Outcome of a positional file comparison."""
    IDENTICAL = "identical"
    DIFFERENT = "different"
    NOT_FOUND = "not_found"
    UNREADABLE = "unreadable"

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class SearchResult:
    """
    Result of a name lookup or pattern search.

    Attributes:
        ok: False when the input was rejected before any traversal.
        error: Descriptive message in case of rejection.
        query: Filename or pattern that was searched for.
        root: Search root (empty for cache-backed lookups).
        matches: Absolute paths of matching entries.
        error_kind: Classification of the rejection, if any.
    """
    ok: bool
    error: str
    query: str
    root: str = ""
    matches: List[str] = field(default_factory=list)
    error_kind: Optional[ErrorKind] = None


@dataclass(frozen=True)
class TreeResult:
    """
    Result of a tree rendering.

    Attributes:
        ok: Flag indicating whether the tree could be rendered.
        error: Descriptive message in case of failure.
        root: Absolute path of the rendered root.
        lines: Rendered text lines, starting with the root line.
        skipped: Directories shown as entries whose contents could not be listed.
        error_kind: Classification of the failure, if any.
    """
    ok: bool
    error: str
    root: str
    lines: List[str] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)
    error_kind: Optional[ErrorKind] = None


@dataclass(frozen=True)
class DiffResult:
    """
    Result of a positional line comparison between two files.

    Attributes:
        status: Comparison outcome.
        path_a: First compared path.
        path_b: Second compared path.
        line: 1-based index of the first mismatching line, when different.
        error: Detail for not-found/unreadable outcomes.
    """
    status: DiffStatus
    path_a: str
    path_b: str
    line: Optional[int] = None
    error: str = ""

    @property
    def identical(self) -> bool:
        return self.status is DiffStatus.IDENTICAL

    @property
    def message(self) -> str:
        """Human-readable one-line summary."""
        if self.status is DiffStatus.IDENTICAL:
            return "Files are identical"
        if self.status is DiffStatus.DIFFERENT:
            return f"Files differ at line: {self.line}"
        if self.status is DiffStatus.NOT_FOUND:
            return "One or both files don't exist"
        return f"Files could not be read: {self.error}"


@dataclass(frozen=True)
class ListingEntry:
    """
    Single entry of a flat directory listing.

    Attributes:
        name: Entry basename.
        path: Absolute entry path.
        is_dir: Whether the entry is a directory.
        readable: Read permission for the current user.
        writable: Write permission for the current user.
        executable: Execute permission for the current user.
        size: Size in bytes (0 when it cannot be determined).
    """
    name: str
    path: str
    is_dir: bool
    readable: bool
    writable: bool
    executable: bool
    size: int


@dataclass(frozen=True)
class CacheStats:
    """
    Metrics of the most recent directory cache build.

    Attributes:
        roots: Roots that existed and were scanned.
        entries: Number of unique directories collected.
        capacity: Soft cap in effect during the build.
        truncated: Whether the build stopped because the cap was exceeded.
        skipped: Subtrees skipped because of access or symlink errors.
        elapsed: Build duration in seconds.
    """
    roots: List[str] = field(default_factory=list)
    entries: int = 0
    capacity: int = 0
    truncated: bool = False
    skipped: List[str] = field(default_factory=list)
    elapsed: float = 0.0

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_search_result(query: str, matches: List[str], root: str = "") -> SearchResult:
    """Create a successful search result."""
    return SearchResult(ok=True, error="", query=query, root=root, matches=list(matches))


def create_search_error(
        query: str,
        error: str,
        kind: ErrorKind = ErrorKind.INVALID_ARGUMENT,
        root: str = "",
) -> SearchResult:
    """Create a rejected search result carrying no matches."""
    return SearchResult(ok=False, error=error, query=query, root=root, error_kind=kind)


def create_tree_result(root: str, lines: List[str], skipped: Optional[List[str]] = None) -> TreeResult:
    """Create a successful tree rendering result."""
    return TreeResult(ok=True, error="", root=root, lines=list(lines), skipped=list(skipped or []))


def create_tree_error(root: str, error: str, kind: ErrorKind) -> TreeResult:
    """Create a failed tree rendering result with no lines."""
    return TreeResult(ok=False, error=error, root=root, error_kind=kind)
