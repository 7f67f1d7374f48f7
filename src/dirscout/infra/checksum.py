from __future__ import annotations

"""
File Checksum Utility.

Thin streaming wrapper around hashlib for whole-file digests.
"""

import hashlib
import os
from typing import Optional

from dirscout.domain.constants import DEFAULT_HASH_ALGORITHM, HASH_ALGORITHMS

_CHUNK_SIZE = 64 * 1024


def file_checksum(file_path: str, algorithm: str = DEFAULT_HASH_ALGORITHM) -> Optional[str]:
    """
    Compute the hex digest of a file's bytes.

    Args:
        file_path: File to hash.
        algorithm: One of 'md5', 'sha1', 'sha256'.

    Returns:
        Optional[str]: Hex digest, or None if the file does not exist.

    Raises:
        ValueError: If the algorithm is not supported.
    """
    algo = (algorithm or "").strip().lower()
    if algo not in HASH_ALGORITHMS:
        raise ValueError(f"Unsupported algorithm: {algorithm}")

    if not os.path.isfile(file_path):
        return None

    digest = hashlib.new(algo)
    with open(file_path, "rb") as f:
        for chunk in iter(lambda: f.read(_CHUNK_SIZE), b""):
            digest.update(chunk)
    return digest.hexdigest()
