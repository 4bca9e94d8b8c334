"""Compare a binary image against an expected digest."""

from .BinaryImage import BinaryImage
from .ExpectedDigest import ExpectedDigest


def verify_digest(image: BinaryImage, expected: ExpectedDigest) -> bool:
    """Return True if the image digest equals the expected value.

    A mismatch is not an error here; the caller decides whether it is fatal.
    """
    return expected.matches(image.digest(expected.algorithm))
