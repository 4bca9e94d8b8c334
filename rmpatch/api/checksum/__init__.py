"""Checksum module - content digests of binary images."""

from .BinaryImage import BinaryImage
from .compute_digest import SUPPORTED_ALGORITHMS, compute_digest
from .ExpectedDigest import ExpectedDigest
from .verify_digest import verify_digest

__all__ = [
    "SUPPORTED_ALGORITHMS",
    "BinaryImage",
    "ExpectedDigest",
    "compute_digest",
    "verify_digest",
]
