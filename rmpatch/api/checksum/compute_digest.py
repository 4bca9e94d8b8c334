"""Compute the hex digest of a byte buffer."""

import hashlib

SUPPORTED_ALGORITHMS = ("md5", "sha256")


def compute_digest(data: bytes, algorithm: str = "md5") -> str:
    """Compute the lowercase hex digest of ``data``.

    Raises:
        ValueError: If the algorithm is not supported
    """
    if algorithm not in SUPPORTED_ALGORITHMS:
        raise ValueError(f"Unsupported digest algorithm: {algorithm!r} (supported: {list(SUPPORTED_ALGORITHMS)})")
    return hashlib.new(algorithm, data).hexdigest()
