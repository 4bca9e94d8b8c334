"""Apply a BSDIFF40 payload to a binary image."""

import bsdiff4

from ..checksum.BinaryImage import BinaryImage
from .PatchErrorKind import PatchErrorKind
from .PatchPayload import PatchPayload
from .PatchResult import PatchResult


def apply_patch(image: BinaryImage, payload: PatchPayload | bytes) -> PatchResult:
    """Reconstruct the patched image from ``image`` and ``payload``.

    The header is validated before any transformation. Deterministic: the same
    input and payload always yield byte-identical output. Knows nothing about
    expected digests; the caller verifies the result.
    """
    if not isinstance(payload, PatchPayload):
        try:
            payload = PatchPayload.parse(payload)
        except ValueError as exc:
            return PatchResult.failure(PatchErrorKind.MALFORMED_PAYLOAD, str(exc))

    try:
        output = bsdiff4.patch(image.data, payload.raw)
    except Exception as exc:
        return PatchResult.failure(PatchErrorKind.MALFORMED_PAYLOAD, f"bsdiff4 could not apply payload: {exc}")

    if len(output) != payload.output_length:
        return PatchResult.failure(
            PatchErrorKind.LENGTH_MISMATCH,
            f"patched output is {len(output)} bytes, payload declares {payload.output_length} bytes",
        )

    return PatchResult.ok(BinaryImage(output))
