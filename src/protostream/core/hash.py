"""Digests for cache keys and export fingerprints.

xxhash64 keys the prototype cache. SHA256 is used where a digest leaves the
process (ETags, export file names) and must stay stable across xxhash
releases.
"""

from collections.abc import Callable
from enum import Enum
import hashlib

import xxhash

Digest = Callable[[bytes], str]


class Algorithm(str, Enum):
    """Supported hash algorithms."""

    XXHASH64 = "xxhash64"  # Cache keys
    SHA256 = "sha256"      # Externally visible digests


_DIGESTS: dict[Algorithm, Digest] = {
    Algorithm.XXHASH64: lambda data: xxhash.xxh64(data).hexdigest(),
    Algorithm.SHA256: lambda data: hashlib.sha256(data).hexdigest(),
}


def create_hasher(algorithm: Algorithm | str = Algorithm.XXHASH64) -> Digest:
    """
    Hex digest function for an algorithm.

    Raises:
        ValueError: If the algorithm is unknown
    """
    try:
        return _DIGESTS[Algorithm(algorithm)]
    except ValueError:
        raise ValueError(f"Unknown algorithm: {algorithm}") from None


def hash_string(
    text: str,
    algorithm: Algorithm = Algorithm.XXHASH64,
    truncate: int | None = None,
) -> str:
    """
    Hex digest of a string, optionally truncated.

    Examples:
        >>> len(hash_string("screen-home"))
        16
    """
    digest = create_hasher(algorithm)(text.encode("utf-8"))
    return digest[:truncate] if truncate else digest


def hash_fields(*fields: str, algorithm: Algorithm = Algorithm.XXHASH64) -> str:
    """
    Digest of several fields; order-sensitive and boundary-sensitive.

    Examples:
        >>> hash_fields("Home", "<div>Hi</div>") != hash_fields("<div>Hi</div>", "Home")
        True
    """
    return hash_string("\x00".join(fields), algorithm)


def content_hash(document: str, length: int = 16) -> str:
    """Stable fingerprint of an assembled document."""
    return hash_string(document, Algorithm.SHA256, truncate=length)


__all__ = [
    "Algorithm",
    "Digest",
    "create_hasher",
    "hash_string",
    "hash_fields",
    "content_hash",
]
