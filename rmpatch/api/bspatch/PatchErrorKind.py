"""Patch error categories."""

from enum import Enum


class PatchErrorKind(str, Enum):
    MALFORMED_PAYLOAD = "MalformedPayload"
    LENGTH_MISMATCH = "LengthMismatch"
